from hanabi_rules.util import MAX_HAND_SIZE, color_index_to_char, rank_index_to_char


class HanabiHistoryItem:
    """
    Record of one applied move and what it did to the state.

    Only the fields relevant to the move type are filled in; the rest keep
    their defaults (-1, False or 0). The state never reads these back.
    """

    def __init__(self, move_made, player=-1):
        self.move = move_made
        # Acting player, CHANCE_PLAYER for deals.
        self.player = player
        self.scored = False
        self.information_token = False
        self.color = -1
        self.rank = -1
        self.reveal_bitmask = 0
        self.newly_revealed_bitmask = 0
        self.deal_to_player = -1

    def __str__(self):
        result = f"<{self.move}"
        if isinstance(self.player, int) and self.player >= 0:
            result += f" by player {self.player}"
        if self.deal_to_player >= 0:
            result += f" to player {self.deal_to_player}"
        if self.scored:
            result += " scored"
        if self.information_token:
            result += " info_token"
        if self.color >= 0:
            assert self.rank >= 0
            result += f" {color_index_to_char(self.color)}{rank_index_to_char(self.rank)}"
        if self.reveal_bitmask:
            positions = [str(i) for i in range(MAX_HAND_SIZE) if self.reveal_bitmask & (1 << i)]
            result += " reveal " + ",".join(positions)
        result += ">"
        return result

    def __repr__(self):
        return str(self)
