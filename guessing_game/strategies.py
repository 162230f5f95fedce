"""
Guessing strategies used to play games unattended
"""

import random
from enum import Enum
from typing import List, Optional, Tuple

from guessing_game.evaluator import Outcome


class StrategyType(Enum):
    """Guessing strategy enumeration"""
    BINARY = "binary"
    PROBABILITY = "probability"
    HYBRID = "hybrid"
    RANDOM = "random"


class GuessingStrategy:
    """Base class for guessing strategies"""

    def __init__(self, min_val: int, max_val: int, rng: Optional[random.Random] = None):
        self.min_val = min_val
        self.max_val = max_val
        self.rng = rng or random.Random()
        self.history: List[Tuple[int, Outcome]] = []

    def make_guess(self) -> int:
        """Make a guess - must be implemented by subclass"""
        raise NotImplementedError

    def update(self, guess: int, outcome: Outcome):
        """Update strategy with feedback"""
        self.history.append((guess, outcome))


class BinarySearchStrategy(GuessingStrategy):
    """Binary search guessing strategy"""

    def __init__(self, min_val: int, max_val: int, rng: Optional[random.Random] = None):
        super().__init__(min_val, max_val, rng)
        self.low = min_val
        self.high = max_val

    def make_guess(self) -> int:
        # inconsistent feedback can cross the bounds; stay in range
        if self.low > self.high:
            return min(max(self.low, self.min_val), self.max_val)
        return (self.low + self.high) // 2

    def update(self, guess: int, outcome: Outcome):
        super().update(guess, outcome)
        if outcome is Outcome.TOO_LOW:
            self.low = guess + 1
        elif outcome is Outcome.TOO_HIGH:
            self.high = guess - 1


class ProbabilityGuidedStrategy(GuessingStrategy):
    """Weighted draw over the numbers still possible"""

    def __init__(self, min_val: int, max_val: int, rng: Optional[random.Random] = None):
        super().__init__(min_val, max_val, rng)
        self.probabilities = [1.0] * (max_val - min_val + 1)

    def make_guess(self) -> int:
        total = sum(self.probabilities)
        if total <= 0:
            return self.rng.randint(self.min_val, self.max_val)

        r = self.rng.random()
        cumulative = 0.0
        for i, p in enumerate(self.probabilities):
            cumulative += p / total
            if p > 0 and r <= cumulative:
                return self.min_val + i

        # float rounding left r above the final cumulative sum
        return max(i for i, p in enumerate(self.probabilities) if p > 0) + self.min_val

    def update(self, guess: int, outcome: Outcome):
        super().update(guess, outcome)
        idx = guess - self.min_val
        if not (0 <= idx < len(self.probabilities)):
            return
        if outcome is Outcome.TOO_LOW:
            for i in range(idx + 1):
                self.probabilities[i] = 0.0
        elif outcome is Outcome.TOO_HIGH:
            for i in range(idx, len(self.probabilities)):
                self.probabilities[i] = 0.0


class HybridStrategy(GuessingStrategy):
    """Binary search most of the time, a probability draw otherwise"""

    def __init__(self, min_val: int, max_val: int, rng: Optional[random.Random] = None):
        super().__init__(min_val, max_val, rng)
        self.binary = BinarySearchStrategy(min_val, max_val, self.rng)
        self.probability = ProbabilityGuidedStrategy(min_val, max_val, self.rng)
        self.use_probability_chance = 0.3

    def make_guess(self) -> int:
        if self.rng.random() < self.use_probability_chance:
            return self.probability.make_guess()
        return self.binary.make_guess()

    def update(self, guess: int, outcome: Outcome):
        super().update(guess, outcome)
        self.binary.update(guess, outcome)
        self.probability.update(guess, outcome)


class RandomStrategy(GuessingStrategy):
    """Uniform choice among the remaining candidates"""

    def __init__(self, min_val: int, max_val: int, rng: Optional[random.Random] = None):
        super().__init__(min_val, max_val, rng)
        self.remaining = set(range(min_val, max_val + 1))

    def make_guess(self) -> int:
        if not self.remaining:
            return self.rng.randint(self.min_val, self.max_val)
        return self.rng.choice(sorted(self.remaining))

    def update(self, guess: int, outcome: Outcome):
        super().update(guess, outcome)
        self.remaining.discard(guess)
        if outcome is Outcome.TOO_LOW:
            self.remaining = {n for n in self.remaining if n > guess}
        elif outcome is Outcome.TOO_HIGH:
            self.remaining = {n for n in self.remaining if n < guess}


STRATEGIES = {
    StrategyType.BINARY.value: BinarySearchStrategy,
    StrategyType.PROBABILITY.value: ProbabilityGuidedStrategy,
    StrategyType.HYBRID.value: HybridStrategy,
    StrategyType.RANDOM.value: RandomStrategy,
}


def create_strategy(name: str, min_val: int, max_val: int,
                    rng: Optional[random.Random] = None) -> GuessingStrategy:
    """Factory method for creating strategies"""
    strategy_class = STRATEGIES.get(name)
    if not strategy_class:
        raise ValueError(f"Unknown strategy: {name}")
    return strategy_class(min_val, max_val, rng)
