from typing import List, Optional

from hanabi_rules.hanabi_card import HanabiCard
from hanabi_rules.util import (MAX_HAND_SIZE, HanabiRequirementError, color_index_to_char,
                               rank_index_to_char, require)


class ValueKnowledge:
    """
    Represents knowledge about an unknown integer in the range [0, value_range - 1].
    Tracks hints that either reveal the exact value or eliminate possibilities.
    """
    __slots__ = ("value", "value_plausible")

    def __init__(self, value_range: int):
        assert value_range > 0, "Value range must be greater than zero."
        self.value = -1  # -1 indicates the value is not directly hinted
        self.value_plausible = [True] * value_range  # All values are plausible initially

    def range(self) -> int:
        """Returns the range of possible values."""
        return len(self.value_plausible)

    def value_hinted(self) -> bool:
        """Returns True if the exact value was directly hinted."""
        return self.value >= 0

    def is_plausible(self, value: int) -> bool:
        """Returns True if the value is still plausible."""
        return self.value_plausible[value]

    def apply_is_value_hint(self, value: int):
        """Records a hint that the value is exactly this."""
        assert 0 <= value < len(self.value_plausible)
        assert self.value < 0 or self.value == value
        assert self.value_plausible[value]
        self.value = value
        for i in range(len(self.value_plausible)):
            if i != value:
                self.value_plausible[i] = False

    def apply_is_not_value_hint(self, value: int):
        """Records a hint that the value is not this."""
        assert 0 <= value < len(self.value_plausible)
        assert self.value < 0 or self.value != value
        self.value_plausible[value] = False


class CardKnowledge:
    """
    Tracks hinted knowledge about the color and rank of a card.
    """
    __slots__ = ("color", "rank")

    def __init__(self, num_colors: int, num_ranks: int):
        self.color = ValueKnowledge(num_colors)
        self.rank = ValueKnowledge(num_ranks)

    def num_colors(self) -> int:
        return self.color.range()

    def color_hinted(self) -> bool:
        return self.color.value_hinted()

    def hinted_color(self) -> int:
        return self.color.value

    def color_plausible(self, color: int) -> bool:
        return self.color.is_plausible(color)

    def apply_is_color_hint(self, color: int):
        self.color.apply_is_value_hint(color)

    def apply_is_not_color_hint(self, color: int):
        self.color.apply_is_not_value_hint(color)

    def num_ranks(self) -> int:
        return self.rank.range()

    def rank_hinted(self) -> bool:
        return self.rank.value_hinted()

    def hinted_rank(self) -> int:
        return self.rank.value

    def rank_plausible(self, rank: int) -> bool:
        return self.rank.is_plausible(rank)

    def apply_is_rank_hint(self, rank: int):
        self.rank.apply_is_value_hint(rank)

    def apply_is_not_rank_hint(self, rank: int):
        self.rank.apply_is_not_value_hint(rank)

    def __str__(self) -> str:
        color_str = color_index_to_char(self.hinted_color()) if self.color_hinted() else "X"
        rank_str = rank_index_to_char(self.hinted_rank()) if self.rank_hinted() else "X"
        plausible_colors = "".join(color_index_to_char(i) for i in range(self.num_colors()) if self.color_plausible(i))
        plausible_ranks = "".join(rank_index_to_char(i) for i in range(self.num_ranks()) if self.rank_plausible(i))
        return f"{color_str}{rank_str}|{plausible_colors}{plausible_ranks}"


class HanabiHand:
    """
    Represents a player's hand in Hanabi and tracks knowledge about cards.
    """
    def __init__(self):
        self.cards: List[HanabiCard] = []
        self.card_knowledge: List[CardKnowledge] = []

    def _require_index(self, card_index: int):
        if not 0 <= card_index < len(self.cards):
            raise HanabiRequirementError(
                f"Card index {card_index} out of range for hand of {len(self.cards)}")

    def add_card(self, card: HanabiCard, initial_knowledge: CardKnowledge):
        require(card.is_valid(), "Card must be valid.")
        require(len(self.cards) < MAX_HAND_SIZE, f"More than {MAX_HAND_SIZE} cards is not supported.")
        self.cards.append(card)
        self.card_knowledge.append(initial_knowledge)

    def remove_from_hand(self, card_index: int, discard_pile: Optional[List[HanabiCard]] = None):
        self._require_index(card_index)
        if discard_pile is not None:
            discard_pile.append(self.cards[card_index])
        del self.cards[card_index]
        del self.card_knowledge[card_index]

    def set_card(self, card_index: int, card: HanabiCard, knowledge: CardKnowledge):
        self._require_index(card_index)
        require(card.is_valid(), "Card must be valid.")
        self.cards[card_index] = card
        self.card_knowledge[card_index] = knowledge

    def clear(self):
        self.cards = []
        self.card_knowledge = []

    def color_bitmask(self, color: int) -> int:
        """Returns the bitmask of positions holding a card of this color."""
        mask = 0
        for i, card in enumerate(self.cards):
            if card.color == color:
                mask |= (1 << i)
        return mask

    def rank_bitmask(self, rank: int) -> int:
        """Returns the bitmask of positions holding a card of this rank."""
        mask = 0
        for i, card in enumerate(self.cards):
            if card.rank == rank:
                mask |= (1 << i)
        return mask

    def reveal_color(self, color: int) -> int:
        """
        Applies a color hint to every card in the hand. Returns the bitmask of
        matching positions whose color had not already been hinted.
        """
        mask = 0
        for i, card in enumerate(self.cards):
            if card.color == color:
                if not self.card_knowledge[i].color_hinted():
                    mask |= (1 << i)
                self.card_knowledge[i].apply_is_color_hint(color)
            else:
                self.card_knowledge[i].apply_is_not_color_hint(color)
        return mask

    def reveal_rank(self, rank: int) -> int:
        """Rank counterpart of reveal_color."""
        mask = 0
        for i, card in enumerate(self.cards):
            if card.rank == rank:
                if not self.card_knowledge[i].rank_hinted():
                    mask |= (1 << i)
                self.card_knowledge[i].apply_is_rank_hint(rank)
            else:
                self.card_knowledge[i].apply_is_not_rank_hint(rank)
        return mask

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        assert len(self.cards) == len(self.card_knowledge)
        return "".join(f"{card} || {knowledge}\n" for card, knowledge in zip(self.cards, self.card_knowledge))
