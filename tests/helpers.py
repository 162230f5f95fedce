import random
from datetime import datetime, timedelta

from guessing_game.difficulty import Difficulty
from guessing_game.evaluator import Outcome
from guessing_game.models import Attempt, Session


class FixedRandom(random.Random):
    """Random source whose randint always lands on one number"""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def randint(self, a, b):
        assert a <= self.value <= b
        return self.value


def make_session(difficulty=Difficulty.EASY, won=True, attempts=1, minute=0):
    """Build a finished session without running the engine"""
    at = datetime(2024, 5, 1, 12, 0) + timedelta(minutes=minute)
    log = [Attempt(2, Outcome.TOO_HIGH, at) for _ in range(attempts - 1)]
    log.append(Attempt(1, Outcome.CORRECT, at) if won else Attempt(2, Outcome.TOO_HIGH, at))
    return Session(secret_number=1, attempts=tuple(log), won=won, difficulty=difficulty, completed_at=at)


def scripted(guesses):
    """Guess provider that replays a fixed list"""
    remaining = list(guesses)

    def provide(attempt_number, attempts_left):
        return remaining.pop(0)

    return provide
