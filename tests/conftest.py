import numpy as np
import pytest

from pascal_snake.config import RIGHT, Difficulty
from pascal_snake.game import GameState, Segment
from pascal_snake.scheduler import VirtualClock
from pascal_snake.storage import ScoreStore


class ScriptedRng:
    """Returns queued values first, then falls back to a seeded numpy generator."""

    def __init__(self, ints=(), letters=(), seed=0):
        self.ints = list(ints)
        self.letters = list(letters)
        self.fallback = np.random.default_rng(seed)
        self.integer_calls = 0

    def integers(self, low, high):
        self.integer_calls += 1
        if self.ints:
            return self.ints.pop(0)
        return self.fallback.integers(low, high)

    def choice(self, seq):
        if self.letters:
            return self.letters.pop(0)
        return seq[0]


def make_state(cells, letters=None, direction=RIGHT, cursor=1,
               difficulty=Difficulty.EASY, spawns=()):
    """GameState with the given body (head first) and no random spawns."""
    letters = letters or "P" * len(cells)
    return GameState(
        snake=[Segment(cell, letter) for cell, letter in zip(cells, letters)],
        direction=direction,
        pending=direction,
        difficulty=difficulty,
        cursor=cursor,
        spawns=list(spawns),
    )


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def clock():
    return VirtualClock()


@pytest.fixture
def store(tmp_path):
    return ScoreStore(tmp_path / "scores.json")
