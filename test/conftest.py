import pytest

from hanabi_rules import HanabiGame, HanabiMove, HanabiState

# Two players, five cards each. Player 0 is dealt first.
PLAYER0_CARDS = [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]  # R1 Y1 G1 W1 B1
PLAYER1_CARDS = [(0, 1), (0, 2), (1, 1), (4, 4), (2, 0)]  # R2 R3 Y2 B5 G1


def deal(state, cards):
    for color, rank in cards:
        state.apply_move(HanabiMove.deal(color, rank))


@pytest.fixture
def game():
    return HanabiGame({"players": "2", "seed": "1"})


@pytest.fixture
def state(game):
    return HanabiState(game, start_player=0, seed=1)


@pytest.fixture
def dealt_state(state):
    deal(state, PLAYER0_CARDS + PLAYER1_CARDS)
    return state
