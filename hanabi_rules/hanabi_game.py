import logging
import random
from typing import Dict, List, Optional, Tuple

import numpy as np

from hanabi_rules.hanabi_move import HanabiMove
from hanabi_rules.util import MAX_HAND_SIZE, MAX_NUM_COLORS, MAX_NUM_RANKS, parameter_value, require

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 5


class HanabiGame:
    """
    Immutable game configuration plus the move-UID tables.

    One instance can be shared by any number of states; it holds no random
    generator and is never mutated after construction.
    """

    class AgentObservationType:
        MINIMAL = 0
        CARD_KNOWLEDGE = 1
        SEER = 2

    def __init__(self, params: Optional[Dict[str, str]] = None):
        self.params = dict(params or {})
        self.num_players = parameter_value(self.params, "players", MIN_PLAYERS)
        require(MIN_PLAYERS <= self.num_players <= MAX_PLAYERS,
                f"players must be in [{MIN_PLAYERS}, {MAX_PLAYERS}]")
        self.num_colors = parameter_value(self.params, "colors", MAX_NUM_COLORS)
        require(0 < self.num_colors <= MAX_NUM_COLORS, f"colors must be in [1, {MAX_NUM_COLORS}]")
        self.num_ranks = parameter_value(self.params, "ranks", MAX_NUM_RANKS)
        require(0 < self.num_ranks <= MAX_NUM_RANKS, f"ranks must be in [1, {MAX_NUM_RANKS}]")
        self.hand_size = parameter_value(self.params, "hand_size", self.hand_size_from_rules())
        require(0 < self.hand_size <= MAX_HAND_SIZE, f"hand_size must be in [1, {MAX_HAND_SIZE}]")
        self.max_information_tokens = parameter_value(self.params, "max_information_tokens", 8)
        require(self.max_information_tokens > 0, "max_information_tokens must be positive")
        self.max_life_tokens = parameter_value(self.params, "max_life_tokens", 3)
        require(self.max_life_tokens > 0, "max_life_tokens must be positive")
        self.seed = parameter_value(self.params, "seed", -1)
        self.random_start_player = parameter_value(self.params, "random_start_player", False)
        self.observation_type = parameter_value(
            self.params, "observation_type", self.AgentObservationType.CARD_KNOWLEDGE)
        require(self.observation_type in (self.AgentObservationType.MINIMAL,
                                          self.AgentObservationType.CARD_KNOWLEDGE,
                                          self.AgentObservationType.SEER),
                f"Unknown observation_type {self.observation_type}")

        if self.seed == -1:
            self.seed = random.randint(0, 2**32 - 1)

        self._moves = tuple(self.construct_move(uid) for uid in range(self.max_moves()))
        self._chance_outcomes = tuple(
            self.construct_chance_outcome(uid) for uid in range(self.max_chance_outcomes()))
        self._move_uids = {move: uid for uid, move in enumerate(self._moves)}
        self._chance_outcome_uids = {move: uid for uid, move in enumerate(self._chance_outcomes)}

        logger.debug("Created hanabi game %s", self.parameters())

    def parameters(self) -> Dict[str, str]:
        """Returns the effective parameters, defaults filled in."""
        return {
            "players": str(self.num_players),
            "colors": str(self.num_colors),
            "ranks": str(self.num_ranks),
            "hand_size": str(self.hand_size),
            "max_information_tokens": str(self.max_information_tokens),
            "max_life_tokens": str(self.max_life_tokens),
            "seed": str(self.seed),
            "random_start_player": str(self.random_start_player).lower(),
            "observation_type": str(self.observation_type),
        }

    def max_moves(self):
        return self.max_discard_moves() + self.max_play_moves() + self.max_reveal_color_moves() + self.max_reveal_rank_moves()

    def max_chance_outcomes(self):
        return self.num_colors * self.num_ranks

    def max_discard_moves(self):
        return self.hand_size

    def max_play_moves(self):
        return self.hand_size

    def max_reveal_color_moves(self):
        return (self.num_players - 1) * self.num_colors

    def max_reveal_rank_moves(self):
        return (self.num_players - 1) * self.num_ranks

    def hand_size_from_rules(self):
        return 5 if self.num_players < 4 else 4

    def cards_per_color(self):
        return sum(self.number_card_instances(0, rank) for rank in range(self.num_ranks))

    def max_deck_size(self):
        return self.cards_per_color() * self.num_colors

    def max_score(self):
        return self.num_colors * self.num_ranks

    def number_card_instances(self, color, rank):
        if color < 0 or color >= self.num_colors or rank < 0 or rank >= self.num_ranks:
            return 0
        if rank == 0:
            return 3
        elif rank == self.num_ranks - 1:
            return 1
        return 2

    def construct_move(self, uid):
        if uid < 0 or uid >= self.max_moves():
            return HanabiMove.invalid()

        if uid < self.max_discard_moves():
            return HanabiMove.discard(uid)
        uid -= self.max_discard_moves()

        if uid < self.max_play_moves():
            return HanabiMove.play(uid)
        uid -= self.max_play_moves()

        if uid < self.max_reveal_color_moves():
            return HanabiMove.reveal_color(1 + uid // self.num_colors, uid % self.num_colors)
        uid -= self.max_reveal_color_moves()

        return HanabiMove.reveal_rank(1 + uid // self.num_ranks, uid % self.num_ranks)

    def construct_chance_outcome(self, uid):
        if uid < 0 or uid >= self.max_chance_outcomes():
            return HanabiMove.invalid()

        return HanabiMove.deal((uid // self.num_ranks) % self.num_colors, uid % self.num_ranks)

    def get_move(self, uid) -> HanabiMove:
        if 0 <= uid < len(self._moves):
            return self._moves[uid]
        return HanabiMove.invalid()

    def get_move_uid(self, move: HanabiMove) -> int:
        """Returns the UID of a non-chance move, -1 when it has none."""
        return self._move_uids.get(move, -1)

    def get_chance_outcome(self, uid) -> HanabiMove:
        if 0 <= uid < len(self._chance_outcomes):
            return self._chance_outcomes[uid]
        return HanabiMove.invalid()

    def get_chance_outcome_uid(self, move: HanabiMove) -> int:
        return self._chance_outcome_uids.get(move, -1)

    def all_moves(self) -> Tuple[HanabiMove, ...]:
        return self._moves

    def all_chance_outcomes(self) -> Tuple[HanabiMove, ...]:
        return self._chance_outcomes

    def get_sampled_start_player(self, rng: np.random.Generator):
        if self.random_start_player:
            return int(rng.integers(0, self.num_players))
        return 0

    def pick_random_chance(self, chance_outcomes: Tuple[List[HanabiMove], List[float]],
                           rng: np.random.Generator) -> HanabiMove:
        choices, distribution = chance_outcomes
        require(len(choices) > 0, "No chance outcomes to pick from")
        index = rng.choice(len(choices), p=np.asarray(distribution, dtype=float))
        return choices[int(index)]

    def new_initial_state(self, seed=None):
        from hanabi_rules.hanabi_state import HanabiState
        return HanabiState(self, seed=seed)
