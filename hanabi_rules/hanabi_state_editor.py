"""
Direct state edits for resampling and determinization.

Everything here bypasses move legality. Callers own the consistency of the
result: for example ``set_hand`` does not touch the deck, so a caller that
wants card conservation must follow it with ``set_deck``.
"""
from typing import Iterable, Sequence

from hanabi_rules.hanabi_card import HanabiCard
from hanabi_rules.hanabi_hand import CardKnowledge
from hanabi_rules.hanabi_state import CHANCE_PLAYER, HanabiState
from hanabi_rules.util import require


class HanabiStateEditor:
    def __init__(self, state: HanabiState):
        self.state = state
        self.game = state.parent_game

    def _fresh_knowledge(self) -> CardKnowledge:
        return CardKnowledge(self.game.num_colors, self.game.num_ranks)

    def _require_player(self, player: int):
        require(0 <= player < self.game.num_players, f"Invalid player {player}")

    def _require_card(self, card: HanabiCard):
        require(card.is_valid() and card.color < self.game.num_colors and card.rank < self.game.num_ranks,
                f"Card {card!r} is not on the board")

    def set_life_tokens(self, life_tokens: int):
        require(0 <= life_tokens <= self.game.max_life_tokens, f"Life tokens out of range: {life_tokens}")
        self.state._life_tokens = life_tokens

    def set_information_tokens(self, information_tokens: int):
        require(0 <= information_tokens <= self.game.max_information_tokens,
                f"Information tokens out of range: {information_tokens}")
        self.state._information_tokens = information_tokens

    def set_fireworks(self, fireworks: Sequence[int]):
        require(len(fireworks) == self.game.num_colors, "One firework height per color is required")
        require(all(0 <= height <= self.game.num_ranks for height in fireworks), "Firework height out of range")
        self.state._fireworks[:] = fireworks

    def set_discard_pile(self, discard_pile: Iterable[HanabiCard]):
        cards = list(discard_pile)
        for card in cards:
            self._require_card(card)
        self.state._discard_pile = cards

    def set_hand(self, player: int, cards: Iterable[HanabiCard]):
        """Replaces a whole hand. Every card starts with no hint knowledge."""
        self._require_player(player)
        cards = list(cards)
        require(len(cards) <= self.game.hand_size, f"More than {self.game.hand_size} cards in hand")
        for card in cards:
            self._require_card(card)
        hand = self.state._hands[player]
        hand.clear()
        for card in cards:
            hand.add_card(card, self._fresh_knowledge())

    def set_deck(self, cards: Iterable[HanabiCard]):
        self.state._deck.set_content(cards)

    def set_cur_player(self, player):
        require(player is CHANCE_PLAYER or 0 <= player < self.game.num_players, f"Invalid player {player}")
        self.state._cur_player = player

    def set_hand_card(self, player: int, card_index: int, card: HanabiCard) -> HanabiCard:
        """
        Swaps one hand card for another through the deck: the old card goes
        back into the deck and the new one is drawn from it. Rejected without
        any change when the deck cannot supply the new card. Returns the card
        that was replaced.
        """
        self._require_player(player)
        hand = self.state._hands[player]
        require(0 <= card_index < len(hand.cards), f"Card index {card_index} out of range")
        self._require_card(card)

        deck = self.state._deck
        old_card = hand.cards[card_index]
        available = deck.card_count(card.color, card.rank) + (1 if old_card == card else 0)
        require(available > 0, f"Card {card} is not available in the deck")

        deck.add_card(old_card.color, old_card.rank)
        dealt = deck.deal_card(card.color, card.rank)
        assert dealt == card
        hand.set_card(card_index, dealt, self._fresh_knowledge())
        return old_card
