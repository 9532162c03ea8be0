import copy
import enum
import logging
from typing import List, Tuple, Union

import numpy as np

from hanabi_rules.hanabi_card import HanabiCard
from hanabi_rules.hanabi_deck import HanabiDeck
from hanabi_rules.hanabi_game import HanabiGame
from hanabi_rules.hanabi_hand import CardKnowledge, HanabiHand
from hanabi_rules.hanabi_history_item import HanabiHistoryItem
from hanabi_rules.hanabi_move import HanabiMove
from hanabi_rules.util import HanabiRequirementError, color_index_to_char, require

logger = logging.getLogger(__name__)


class ChancePlayer(enum.Enum):
    """Actor that deals a card. Never equal to a real player index."""
    CHANCE = -1

    def __str__(self):
        return "Chance"


CHANCE_PLAYER = ChancePlayer.CHANCE

Actor = Union[int, ChancePlayer]


class EndOfGameType:
    NOT_FINISHED = 0
    OUT_OF_LIFE_TOKENS = 1
    OUT_OF_CARDS = 2
    COMPLETED_FIREWORKS = 3


class HanabiState:
    """
    Complete mutable state of one Hanabi game.

    The acting player alternates between the chance player, who deals
    whenever a hand is short and the deck is not empty, and the real
    players in fixed rotation. Not thread safe; give every simulation its
    own state and its own seed.
    """

    def __init__(self, parent_game: HanabiGame, start_player: int = -1, seed=None):
        self.parent_game = parent_game
        self._rng = np.random.default_rng(parent_game.seed if seed is None else seed)
        self._deck = HanabiDeck(parent_game)
        self._hands = [HanabiHand() for _ in range(parent_game.num_players)]
        self._discard_pile: List[HanabiCard] = []
        self._move_history: List[HanabiHistoryItem] = []
        self._cur_player: Actor = CHANCE_PLAYER
        if 0 <= start_player < parent_game.num_players:
            self._next_non_chance_player = start_player
        else:
            self._next_non_chance_player = parent_game.get_sampled_start_player(self._rng)
        self._information_tokens = parent_game.max_information_tokens
        self._life_tokens = parent_game.max_life_tokens
        self._fireworks = np.zeros(parent_game.num_colors, dtype=np.int64)
        self._turns_to_play = parent_game.num_players

    # Accessors

    @property
    def cur_player(self) -> Actor:
        return self._cur_player

    @property
    def life_tokens(self) -> int:
        return self._life_tokens

    @property
    def information_tokens(self) -> int:
        return self._information_tokens

    @property
    def fireworks(self) -> List[int]:
        return [int(height) for height in self._fireworks]

    @property
    def discard_pile(self) -> List[HanabiCard]:
        return list(self._discard_pile)

    @property
    def hands(self) -> Tuple[HanabiHand, ...]:
        return tuple(self._hands)

    @property
    def deck(self) -> HanabiDeck:
        return self._deck

    @property
    def move_history(self) -> List[HanabiHistoryItem]:
        return list(self._move_history)

    @property
    def turns_to_play(self) -> int:
        return self._turns_to_play

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    def num_players(self):
        return self.parent_game.num_players

    def hand_by_offset(self, offset: int) -> HanabiHand:
        return self._hands[(self._cur_player + offset) % len(self._hands)]

    # Turn order and tokens

    def player_to_deal(self) -> int:
        for i, hand in enumerate(self._hands):
            if len(hand.cards) < self.parent_game.hand_size:
                return i
        return -1

    def advance_to_next_player(self):
        if not self._deck.empty() and self.player_to_deal() >= 0:
            self._cur_player = CHANCE_PLAYER
        else:
            self._cur_player = self._next_non_chance_player
            self._next_non_chance_player = (self._cur_player + 1) % len(self._hands)

    def increment_information_tokens(self) -> bool:
        if self._information_tokens < self.parent_game.max_information_tokens:
            self._information_tokens += 1
            return True
        return False

    def decrement_information_tokens(self):
        require(self._information_tokens > 0, "No information tokens left")
        self._information_tokens -= 1

    def decrement_life_tokens(self):
        require(self._life_tokens > 0, "No life tokens left")
        self._life_tokens -= 1

    def card_playable_on_fireworks(self, color: int, rank: int) -> bool:
        if color < 0 or color >= self.parent_game.num_colors:
            return False
        return bool(rank == self._fireworks[color])

    def add_to_fireworks(self, card: HanabiCard) -> Tuple[bool, bool]:
        """Plays a card. Returns (scored, gained an information token)."""
        if self.card_playable_on_fireworks(card.color, card.rank):
            self._fireworks[card.color] += 1
            # Completed stack.
            if self._fireworks[card.color] == self.parent_game.num_ranks:
                return True, self.increment_information_tokens()
            return True, False
        else:
            self.decrement_life_tokens()
            return False, False

    # Legality

    def hinting_is_legal(self, move: HanabiMove) -> bool:
        if self._information_tokens <= 0:
            return False
        if not (1 <= move.target_offset < self.parent_game.num_players):
            return False
        return True

    def move_is_legal(self, move: HanabiMove) -> bool:
        game = self.parent_game
        move_type = move.move_type
        if move_type == HanabiMove.Type.DEAL:
            if self._cur_player is not CHANCE_PLAYER:
                return False
            if not (0 <= move.color < game.num_colors and 0 <= move.rank < game.num_ranks):
                return False
            if self.player_to_deal() < 0:
                return False
            return self._deck.card_count(move.color, move.rank) > 0

        if self._cur_player is CHANCE_PLAYER:
            return False
        if move_type == HanabiMove.Type.DISCARD:
            if self._information_tokens >= game.max_information_tokens:
                return False
            return 0 <= move.card_index < len(self._hands[self._cur_player].cards)
        if move_type == HanabiMove.Type.PLAY:
            return 0 <= move.card_index < len(self._hands[self._cur_player].cards)
        if move_type == HanabiMove.Type.REVEAL_COLOR:
            if not self.hinting_is_legal(move) or not 0 <= move.color < game.num_colors:
                return False
            return any(card.color == move.color for card in self.hand_by_offset(move.target_offset).cards)
        if move_type == HanabiMove.Type.REVEAL_RANK:
            if not self.hinting_is_legal(move) or not 0 <= move.rank < game.num_ranks:
                return False
            return any(card.rank == move.rank for card in self.hand_by_offset(move.target_offset).cards)
        return False

    # Transitions

    def apply_move(self, move: HanabiMove):
        if not self.move_is_legal(move):
            raise HanabiRequirementError(f"Illegal move {move} for player {self._cur_player}")
        if self._deck.empty():
            self._turns_to_play -= 1
        history = HanabiHistoryItem(move, self._cur_player)
        move_type = move.move_type
        if move_type == HanabiMove.Type.DEAL:
            history.deal_to_player = self.player_to_deal()
            card_knowledge = CardKnowledge(self.parent_game.num_colors, self.parent_game.num_ranks)
            if self.parent_game.observation_type == HanabiGame.AgentObservationType.SEER:
                card_knowledge.apply_is_color_hint(move.color)
                card_knowledge.apply_is_rank_hint(move.rank)
            self._hands[history.deal_to_player].add_card(
                self._deck.deal_card(move.color, move.rank), card_knowledge)
        elif move_type == HanabiMove.Type.DISCARD:
            hand = self._hands[self._cur_player]
            card = hand.cards[move.card_index]
            history.information_token = self.increment_information_tokens()
            history.color = card.color
            history.rank = card.rank
            hand.remove_from_hand(move.card_index, self._discard_pile)
        elif move_type == HanabiMove.Type.PLAY:
            hand = self._hands[self._cur_player]
            card = hand.cards[move.card_index]
            history.color = card.color
            history.rank = card.rank
            history.scored, history.information_token = self.add_to_fireworks(card)
            hand.remove_from_hand(move.card_index, None if history.scored else self._discard_pile)
        elif move_type == HanabiMove.Type.REVEAL_COLOR:
            self.decrement_information_tokens()
            hand = self.hand_by_offset(move.target_offset)
            history.reveal_bitmask = hand.color_bitmask(move.color)
            history.newly_revealed_bitmask = hand.reveal_color(move.color)
        elif move_type == HanabiMove.Type.REVEAL_RANK:
            self.decrement_information_tokens()
            hand = self.hand_by_offset(move.target_offset)
            history.reveal_bitmask = hand.rank_bitmask(move.rank)
            history.newly_revealed_bitmask = hand.reveal_rank(move.rank)
        else:
            raise ValueError(f"Unexpected move type {move_type}")
        self._move_history.append(history)
        logger.debug("Applied %s", history)
        self.advance_to_next_player()

    def chance_outcome_prob(self, move: HanabiMove) -> float:
        return self._deck.card_count(move.color, move.rank) / self._deck.size()

    def chance_outcomes(self) -> Tuple[List[HanabiMove], List[float]]:
        moves, probs = [], []
        for move in self.parent_game.all_chance_outcomes():
            if self.move_is_legal(move):
                moves.append(move)
                probs.append(self.chance_outcome_prob(move))
        return moves, probs

    def apply_random_chance(self):
        chance_outcomes = self.chance_outcomes()
        require(len(chance_outcomes[1]) > 0, "No chance outcome available")
        self.apply_move(self.parent_game.pick_random_chance(chance_outcomes, self._rng))

    def legal_moves(self, player: int) -> List[HanabiMove]:
        # The chance player is served by chance_outcomes().
        require(isinstance(player, (int, np.integer)) and 0 <= player < self.parent_game.num_players,
                f"Invalid player {player}")
        if player != self._cur_player:
            return []
        return [move for move in self.parent_game.all_moves() if self.move_is_legal(move)]

    # Scoring and termination

    def score(self) -> int:
        if self._life_tokens <= 0:
            return 0
        return int(self._fireworks.sum())

    def end_of_game_status(self) -> int:
        if self._life_tokens < 1:
            return EndOfGameType.OUT_OF_LIFE_TOKENS
        if self.score() >= self.parent_game.max_score():
            return EndOfGameType.COMPLETED_FIREWORKS
        if self._turns_to_play <= 0:
            return EndOfGameType.OUT_OF_CARDS
        return EndOfGameType.NOT_FINISHED

    def is_terminal(self) -> bool:
        return self.end_of_game_status() != EndOfGameType.NOT_FINISHED

    # Snapshots and rendering

    def copy(self, seed=None) -> "HanabiState":
        """
        Returns an independent copy sharing the (immutable) game. The copy
        continues this state's random stream unless a new seed is given.
        """
        clone = copy.deepcopy(self, {id(self.parent_game): self.parent_game})
        if seed is not None:
            clone._rng = np.random.default_rng(seed)
        return clone

    def to_string(self) -> str:
        result = f"Life tokens: {self._life_tokens}\n"
        result += f"Info tokens: {self._information_tokens}\n"
        result += "Fireworks: "
        for i, firework in enumerate(self._fireworks):
            result += f"{color_index_to_char(i)}{firework} "
        result += "\nHands:\n"
        for i, hand in enumerate(self._hands):
            if i > 0:
                result += "-----\n"
            if i == self._cur_player:
                result += "Cur player\n"
            result += str(hand)
        result += f"Deck size: {self._deck.size()}\n"
        result += "Discards:"
        for card in self._discard_pile:
            result += f" {card}"
        return result

    def __str__(self):
        return self.to_string()
