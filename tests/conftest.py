import logging

import pytest

from guessing_game.engine import GameEngine
from guessing_game.history import GameHistory
from helpers import FixedRandom


@pytest.fixture
def history():
    return GameHistory()


@pytest.fixture
def engine_for(history):
    """Engine factory with the secret pinned to a given number"""
    def build(secret):
        return GameEngine(history, FixedRandom(secret))
    return build


@pytest.fixture
def restore_logging():
    """Put the root logger back the way pytest configured it"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
