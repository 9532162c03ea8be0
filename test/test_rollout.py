import numpy as np
import pytest

from hanabi_rules import HanabiGame, HanabiState
from hanabi_rules.common_utils import MultiCounter, ValueStats
from hanabi_rules.rollout import END_OF_GAME_NAMES, evaluate_random_play, random_rollout


def test_random_rollout_reaches_the_end():
    game = HanabiGame({"players": "3", "seed": "12"})
    state = HanabiState(game)
    score = random_rollout(state, np.random.default_rng(0))
    assert state.is_terminal()
    assert score == state.score()
    assert 0 <= score <= game.max_score()


def test_evaluate_random_play_is_reproducible():
    first = evaluate_random_play({"players": "2"}, 6, seed=11)
    second = evaluate_random_play({"players": "2"}, 6, seed=11)
    assert first["score"].counter == 6
    assert first["score"].mean() == second["score"].mean()
    assert first.counts == second.counts
    assert sum(first.counts.values()) == 6
    assert END_OF_GAME_NAMES[0] not in first.counts


def test_value_stats():
    stats = ValueStats("score")
    for v in [3, 1, 5]:
        stats.feed(v)
    assert stats.mean() == 3
    assert (stats.min_value, stats.min_idx) == (1, 1)
    assert (stats.max_value, stats.max_idx) == (5, 2)
    assert stats.summary().startswith("score[   3]: avg:   3.0000")


def test_multi_counter_summary_logs(caplog):
    counter = MultiCounter()
    counter.inc("out_of_cards")
    counter.feed("score", 4)
    with caplog.at_level("INFO"):
        counter.summary(1)
    assert "out_of_cards: 1/1" in caplog.text
    assert "score[   1]" in caplog.text


def test_evaluate_zero_games(caplog):
    with caplog.at_level("INFO"):
        stats = evaluate_random_play({"players": "2"}, 0, seed=1)
    assert stats.total_count == 0
    assert stats.stats == {}
    assert "Time spent" in caplog.text


def test_multi_counter_unknown_key():
    counter = MultiCounter()
    counter.feed("score", 2)
    with pytest.raises(KeyError):
        counter["missing"]
    assert list(counter.stats) == ["score"]
    assert counter["score"].counter == 1
