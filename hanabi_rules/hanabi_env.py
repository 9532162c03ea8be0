import logging

import numpy as np

from hanabi_rules.hanabi_game import HanabiGame
from hanabi_rules.hanabi_state import CHANCE_PLAYER, HanabiState

logger = logging.getLogger(__name__)


class HanabiEnv:
    """
    Step-by-step driver over one game at a time.

    Chance moves are resolved inside reset() and step(), so callers only
    ever see real players to act. Actions are move UIDs from the game's
    move table.
    """

    def __init__(self, game_params, max_len=-1, verbose=False):
        self.game = HanabiGame(game_params)
        self.state = None
        self.max_len = max_len
        self.num_step = 0
        self.num_episode = 0
        self.verbose = verbose

        if self.verbose:
            logger.info("Hanabi game created, with parameters:")
            for key, value in self.game.parameters().items():
                logger.info("  %s=%s", key, value)

    def num_action(self):
        return self.game.max_moves() + 1

    def no_op_uid(self):
        return self.num_action() - 1

    def _resolve_chance(self):
        while self.state.cur_player is CHANCE_PLAYER and not self.state.is_terminal():
            self.state.apply_random_chance()

    def reset(self):
        assert self.terminated()
        # Episodes get distinct but reproducible streams.
        self.state = HanabiState(self.game, seed=(self.game.seed, self.num_episode))
        self.num_episode += 1
        self._resolve_chance()
        self.num_step = 0
        return self.state

    def step(self, action_uid):
        assert not self.terminated()
        self.num_step += 1

        prev_score = self.state.score()

        move = self.game.get_move(action_uid)
        if not self.state.move_is_legal(move):
            raise ValueError(f"Error: move {move} is not legal")

        self.state.apply_move(move)
        if self.verbose:
            logger.info("Step %d: %s", self.num_step, self.state.move_history[-1])

        terminal = self.state.is_terminal()
        reward = self.state.score() - prev_score

        # Forced termination, lose all points
        if self.max_len > 0 and self.num_step == self.max_len:
            terminal = True
            reward = -prev_score

        if not terminal:
            self._resolve_chance()

        return reward, terminal

    def terminated(self):
        if self.state is None:
            return True
        if self.max_len <= 0:
            return self.state.is_terminal()
        else:
            return self.state.is_terminal() or self.num_step >= self.max_len

    def get_episode_reward(self):
        assert self.state is not None
        return self.state.score()

    def legal_move_mask(self, player):
        """0/1 vector over move UIDs; only the no-op is set for idle players."""
        mask = np.zeros(self.num_action(), dtype=np.float32)
        legal_moves = self.state.legal_moves(player)
        for move in legal_moves:
            uid = self.game.get_move_uid(move)
            if uid < 0 or uid >= self.no_op_uid():
                raise ValueError(f"Error: legal move id should be < {self.no_op_uid()}")
            mask[uid] = 1
        if len(legal_moves) == 0:
            mask[self.no_op_uid()] = 1
        return mask
