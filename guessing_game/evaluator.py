"""
Attempt evaluation: classify a guess against the secret
"""

from enum import Enum
from typing import Optional


class Outcome(Enum):
    """Result of a single guess"""
    CORRECT = "correct"
    TOO_LOW = "too low"
    TOO_HIGH = "too high"


def evaluate(guess: int, secret: int) -> Outcome:
    if guess == secret:
        return Outcome.CORRECT
    if guess < secret:
        return Outcome.TOO_LOW
    return Outcome.TOO_HIGH


def hint(outcome: Outcome) -> Optional[str]:
    """Direction the secret lies in relative to the guess"""
    if outcome is Outcome.TOO_LOW:
        return "higher"
    if outcome is Outcome.TOO_HIGH:
        return "lower"
    return None
