"""
Game records: attempts and completed sessions
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from guessing_game.difficulty import Difficulty
from guessing_game.evaluator import Outcome


@dataclass(frozen=True)
class Attempt:
    """One guess and how it compared to the secret"""
    guess: int
    outcome: Outcome
    timestamp: datetime


@dataclass(frozen=True)
class Session:
    """A finished play-through"""
    secret_number: int
    attempts: Tuple[Attempt, ...]
    won: bool
    difficulty: Difficulty
    completed_at: datetime
    points: int = 0

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)

    @property
    def last_attempt(self) -> Optional[Attempt]:
        return self.attempts[-1] if self.attempts else None
