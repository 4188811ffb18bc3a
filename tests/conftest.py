import os
import random
from unittest.mock import MagicMock

# pygame-backed tests run without a real display or sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from gridsnake.board import BoardGeometry
from gridsnake.scoreboard import ScoreBoard
from gridsnake.session import GameSession


class FakeTicker:
    """Records timer lifecycle; refuses to start a second timer on top of a live one."""

    def __init__(self):
        self.active = False
        self.starts = 0
        self.interval_ms = None

    def start(self, interval_ms):
        assert not self.active, "a tick timer is already running"
        self.active = True
        self.starts += 1
        self.interval_ms = interval_ms

    def cancel(self):
        self.active = False


@pytest.fixture
def ticker():
    return FakeTicker()


@pytest.fixture
def store():
    mock_store = MagicMock()
    mock_store.load.return_value = 0
    return mock_store


@pytest.fixture
def scoreboard():
    return ScoreBoard()


@pytest.fixture
def session(ticker, store, scoreboard):
    # 400 px board -> 20x20 tiles, snake starts at (10, 10)
    return GameSession(
        geometry=BoardGeometry(400),
        display=scoreboard,
        store=store,
        ticker=ticker,
        rng=random.Random(7),
        tick_ms=100,
        render=MagicMock(),
    )
