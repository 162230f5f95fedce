"""
Difficulty tiers for the number guessing game
"""

from enum import Enum


class Difficulty(Enum):
    """Difficulty tier: (max_range, max_attempts, base_points)"""
    EASY = (10, 5, 10)
    MEDIUM = (50, 7, 25)
    HARD = (100, 10, 50)

    def __init__(self, max_range: int, max_attempts: int, base_points: int):
        self.max_range = max_range
        self.max_attempts = max_attempts
        self.base_points = base_points

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """Look up a tier by name, case-insensitive"""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown difficulty: {name}. Must be one of: {[d.name.lower() for d in cls]}"
            ) from None
