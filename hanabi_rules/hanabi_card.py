from hanabi_rules.util import color_index_to_char, rank_index_to_char


class HanabiCard:
    __slots__ = ("_color", "_rank")

    def __init__(self, color=-1, rank=-1):
        """
        Initializes a HanabiCard instance.
        :param color: The color of the card (0-indexed). Defaults to -1 (invalid).
        :param rank: The rank of the card (0-indexed). Defaults to -1 (invalid).
        """
        self._color = color
        self._rank = rank

    @property
    def color(self):
        return self._color

    @property
    def rank(self):
        return self._rank

    def __eq__(self, other_card):
        """
        Compares two HanabiCard objects for equality.
        :param other_card: The other HanabiCard to compare.
        :return: True if both cards have the same color and rank, False otherwise.
        """
        if not isinstance(other_card, HanabiCard):
            return NotImplemented
        return self._color == other_card._color and self._rank == other_card._rank

    def __hash__(self):
        return hash((self._color, self._rank))

    def is_valid(self):
        """
        Checks if the card is valid.
        :return: True if the card has a valid color and rank, False otherwise.
        """
        return self._color >= 0 and self._rank >= 0

    def to_string(self):
        """
        Returns a string representation of the card.
        :return: "XX" if the card is invalid, otherwise a string containing the
                 card's color and rank.
        """
        if not self.is_valid():
            return "XX"

        return f"{color_index_to_char(self._color)}{rank_index_to_char(self._rank)}"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"HanabiCard({self._color}, {self._rank})"
