import logging

import numpy as np

from hanabi_rules.common_utils import MultiCounter
from hanabi_rules.hanabi_game import HanabiGame
from hanabi_rules.hanabi_state import CHANCE_PLAYER, EndOfGameType, HanabiState
from hanabi_rules.util import require

logger = logging.getLogger(__name__)

END_OF_GAME_NAMES = {
    EndOfGameType.NOT_FINISHED: "not_finished",
    EndOfGameType.OUT_OF_LIFE_TOKENS: "out_of_life_tokens",
    EndOfGameType.OUT_OF_CARDS: "out_of_cards",
    EndOfGameType.COMPLETED_FIREWORKS: "completed_fireworks",
}


def random_rollout(state: HanabiState, rng: np.random.Generator) -> int:
    """Plays uniformly random legal moves until the game ends. Returns the score."""
    while not state.is_terminal():
        if state.cur_player is CHANCE_PLAYER:
            state.apply_random_chance()
            continue
        legal_moves = state.legal_moves(state.cur_player)
        require(len(legal_moves) > 0, f"Player {state.cur_player} has no legal move")
        state.apply_move(legal_moves[int(rng.integers(len(legal_moves)))])
    return state.score()


def evaluate_random_play(game_params, num_game, seed):
    """
    Runs num_game independent random games and collects their outcomes.

    Game i owns its state (seeded with seed + i) and its own policy
    generator, so the games could be spread over workers without sharing
    anything but the read-only game.
    """
    game = HanabiGame(game_params)
    stats = MultiCounter()
    for i in range(num_game):
        state = HanabiState(game, seed=seed + i)
        policy_rng = np.random.default_rng([seed + i, 1])
        score = random_rollout(state, policy_rng)
        stats.feed("score", score)
        stats.feed("num_moves", len(state.move_history))
        stats.inc(END_OF_GAME_NAMES[state.end_of_game_status()])
    stats.summary(num_game)
    return stats
