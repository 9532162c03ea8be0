from typing import Iterable

import numpy as np

from hanabi_rules.hanabi_card import HanabiCard


class HanabiDeck:
    """
    The multiset of undrawn cards, stored as one count per (color, rank).

    Cards are drawn by identity rather than by position, so the deck has no
    order: a random draw is a draw weighted by the remaining counts.
    """

    def __init__(self, game):
        self.num_colors = game.num_colors
        self.num_ranks = game.num_ranks
        self.counts = np.zeros(game.num_colors * game.num_ranks, dtype=np.int64)
        self.total_count = 0
        for color in range(game.num_colors):
            for rank in range(game.num_ranks):
                count = game.number_card_instances(color, rank)
                self.counts[self.card_to_index(color, rank)] = count
                self.total_count += count

    def card_to_index(self, color: int, rank: int) -> int:
        return color * self.num_ranks + rank

    def index_to_color(self, index: int) -> int:
        return index // self.num_ranks

    def index_to_rank(self, index: int) -> int:
        return index % self.num_ranks

    def card_count(self, color: int, rank: int) -> int:
        return int(self.counts[self.card_to_index(color, rank)])

    def size(self) -> int:
        return self.total_count

    def empty(self) -> bool:
        return self.total_count == 0

    def deal_random_card(self, rng: np.random.Generator) -> HanabiCard:
        """Draws a card with probability proportional to its remaining count."""
        if self.empty():
            return HanabiCard()
        dist = self.counts / self.total_count
        index = int(rng.choice(len(dist), p=dist))
        assert self.counts[index] > 0
        self.counts[index] -= 1
        self.total_count -= 1
        return HanabiCard(self.index_to_color(index), self.index_to_rank(index))

    def deal_card(self, color: int, rank: int) -> HanabiCard:
        """Draws the given card, or returns an invalid card if none is left."""
        index = self.card_to_index(color, rank)
        if self.counts[index] <= 0:
            return HanabiCard()
        self.counts[index] -= 1
        self.total_count -= 1
        return HanabiCard(color, rank)

    def add_card(self, color: int, rank: int):
        index = self.card_to_index(color, rank)
        self.counts[index] += 1
        self.total_count += 1

    def set_content(self, cards: Iterable[HanabiCard]):
        self.counts[:] = 0
        self.total_count = 0
        for card in cards:
            if card.is_valid():
                self.counts[self.card_to_index(card.color, card.rank)] += 1
                self.total_count += 1

    def __str__(self):
        return f"Deck size: {self.total_count}"
