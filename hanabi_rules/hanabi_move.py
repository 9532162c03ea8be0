from hanabi_rules.util import color_index_to_char, rank_index_to_char


class HanabiMove:
    class Type:
        INVALID = "Invalid"
        PLAY = "Play"
        DISCARD = "Discard"
        REVEAL_COLOR = "RevealColor"
        REVEAL_RANK = "RevealRank"
        DEAL = "Deal"

    __slots__ = ("_move_type", "_card_index", "_target_offset", "_color", "_rank")

    def __init__(self, move_type: str, card_index: int = -1, target_offset: int = -1,
                 color: int = -1, rank: int = -1):
        self._move_type = move_type
        self._card_index = card_index
        self._target_offset = target_offset
        self._color = color
        self._rank = rank

    @classmethod
    def deal(cls, color: int, rank: int) -> "HanabiMove":
        return cls(cls.Type.DEAL, color=color, rank=rank)

    @classmethod
    def discard(cls, card_index: int) -> "HanabiMove":
        return cls(cls.Type.DISCARD, card_index=card_index)

    @classmethod
    def play(cls, card_index: int) -> "HanabiMove":
        return cls(cls.Type.PLAY, card_index=card_index)

    @classmethod
    def reveal_color(cls, target_offset: int, color: int) -> "HanabiMove":
        return cls(cls.Type.REVEAL_COLOR, target_offset=target_offset, color=color)

    @classmethod
    def reveal_rank(cls, target_offset: int, rank: int) -> "HanabiMove":
        return cls(cls.Type.REVEAL_RANK, target_offset=target_offset, rank=rank)

    @classmethod
    def invalid(cls) -> "HanabiMove":
        return cls(cls.Type.INVALID)

    def _key(self):
        # Only the fields that carry meaning for the move type take part.
        if self._move_type in (self.Type.PLAY, self.Type.DISCARD):
            return self._move_type, self._card_index
        if self._move_type == self.Type.REVEAL_COLOR:
            return self._move_type, self._target_offset, self._color
        if self._move_type == self.Type.REVEAL_RANK:
            return self._move_type, self._target_offset, self._rank
        if self._move_type == self.Type.DEAL:
            return self._move_type, self._color, self._rank
        return (self._move_type,)

    def __eq__(self, other):
        if not isinstance(other, HanabiMove):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def is_valid(self):
        return self._move_type != self.Type.INVALID

    def is_hint(self):
        return self._move_type in (self.Type.REVEAL_COLOR, self.Type.REVEAL_RANK)

    def __str__(self):
        if self._move_type == self.Type.PLAY:
            return f"(Play {self._card_index})"
        if self._move_type == self.Type.DISCARD:
            return f"(Discard {self._card_index})"
        if self._move_type == self.Type.REVEAL_COLOR:
            return f"(Reveal player +{self._target_offset} color {color_index_to_char(self._color)})"
        if self._move_type == self.Type.REVEAL_RANK:
            return f"(Reveal player +{self._target_offset} rank {rank_index_to_char(self._rank)})"
        if self._move_type == self.Type.DEAL:
            if self._color >= 0:
                return f"(Deal {color_index_to_char(self._color)}{rank_index_to_char(self._rank)})"
            else:
                return "(Deal XX)"
        return "(INVALID)"

    def __repr__(self):
        return f"HanabiMove{self}"

    @property
    def move_type(self):
        return self._move_type

    @property
    def card_index(self):
        return self._card_index

    @property
    def target_offset(self):
        return self._target_offset

    @property
    def color(self):
        return self._color

    @property
    def rank(self):
        return self._rank
