"""
test_session_stats.py
---------------------
Unit tests for score and high score tracking.
"""

import pytest

from car_shoot.core.runtime.session_stats import SessionStats


def test_kills_raise_score_and_high_score():
    stats = SessionStats()
    stats.add_kill()
    stats.add_kill()

    assert stats.score == 2
    assert stats.high_score == 2


def test_reset_keeps_high_score():
    stats = SessionStats()
    for _ in range(5):
        stats.add_kill()

    stats.reset()
    stats.add_kill()

    assert stats.score == 1
    assert stats.high_score == 5


def test_score_never_decreases():
    stats = SessionStats()
    with pytest.raises(ValueError):
        stats.add_score(-1)
    assert stats.score == 0
