"""
Game session engine: secret draw, attempt loop, scoring
"""

import logging
import random
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from guessing_game.difficulty import Difficulty
from guessing_game.evaluator import Outcome, evaluate, hint
from guessing_game.history import GameHistory
from guessing_game.models import Attempt, Session

POINTS_LOST_PER_ATTEMPT = 2

GuessProvider = Callable[[int, int], int]
ResultCallback = Callable[[Dict[str, Any]], None]


def calculate_points(base_points: int, attempt_number: int) -> int:
    """Points for a win on the given (1-based) attempt, never below 1"""
    return max(1, base_points - (attempt_number - 1) * POINTS_LOST_PER_ATTEMPT)


class GameEngine:
    """Core game logic"""

    def __init__(self, history: GameHistory, rng: Optional[random.Random] = None):
        self.history = history
        self.rng = rng or random.Random()
        self.difficulty: Optional[Difficulty] = None
        self.secret: Optional[int] = None
        self.attempts: List[Attempt] = []

    @property
    def in_progress(self) -> bool:
        return self.secret is not None

    def start_game(self, difficulty: Difficulty) -> int:
        """Start a new game and return the number of attempts allowed"""
        if self.in_progress:
            raise RuntimeError("A game is already in progress.")

        self.difficulty = difficulty
        self.secret = self.rng.randint(1, difficulty.max_range)
        self.attempts = []

        logging.info(f"Game started: difficulty={difficulty.name}")
        logging.debug(f"Secret for current game: {self.secret}")
        return difficulty.max_attempts

    def make_guess(self, guess: int) -> Dict[str, Any]:
        """Evaluate one guess against the secret"""
        if not self.in_progress:
            raise RuntimeError("No active game. Call start_game() first.")

        # bool is an int subclass but never a legal guess
        if not isinstance(guess, int) or isinstance(guess, bool):
            raise ValueError(f"Guess must be an integer, got {type(guess)}")
        if guess < 1 or guess > self.difficulty.max_range:
            raise ValueError(f"Guess must be between 1 and {self.difficulty.max_range}")

        outcome = evaluate(guess, self.secret)
        self.attempts.append(Attempt(guess, outcome, datetime.now()))

        attempt_number = len(self.attempts)
        attempts_left = self.difficulty.max_attempts - attempt_number
        won = outcome is Outcome.CORRECT
        game_over = won or attempts_left == 0

        points = 0
        if won:
            points = calculate_points(self.difficulty.base_points, attempt_number)
            self.history.add_points(points)

        logging.debug(f"Guess #{attempt_number}: {guess} -> {outcome.value}")

        response = {
            "guess": guess,
            "outcome": outcome,
            "attempt_number": attempt_number,
            "attempts_left": attempts_left,
            "won": won,
            "game_over": game_over,
            "points": points,
            "hint": None if game_over else hint(outcome),
            "secret": self.secret if game_over else None,
            "session": None,
        }

        if game_over:
            response["session"] = self._finish_game(won, points)

        return response

    def _finish_game(self, won: bool, points: int) -> Session:
        """Build the session record and hand it to the history"""
        session = Session(
            secret_number=self.secret,
            attempts=tuple(self.attempts),
            won=won,
            difficulty=self.difficulty,
            completed_at=datetime.now(),
            points=points,
        )
        self.history.append(session)

        logging.info(
            f"Game finished: difficulty={session.difficulty.name}, won={won}, "
            f"attempts={session.attempt_count}, points={points}"
        )

        self.difficulty = None
        self.secret = None
        self.attempts = []
        return session

    def play(
        self,
        difficulty: Difficulty,
        guess_provider: GuessProvider,
        on_result: Optional[ResultCallback] = None,
    ) -> Session:
        """Play a whole game, asking guess_provider(attempt_number, attempts_left) for guesses"""
        self.start_game(difficulty)

        try:
            while True:
                attempt_number = len(self.attempts) + 1
                attempts_left = difficulty.max_attempts - attempt_number + 1
                result = self.make_guess(guess_provider(attempt_number, attempts_left))

                if on_result is not None:
                    on_result(result)

                if result["game_over"]:
                    return result["session"]
        except BaseException:
            if self.in_progress:
                self.abandon_game()
            raise

    def abandon_game(self):
        """Drop the game in progress without recording it"""
        logging.info(
            f"Game abandoned: difficulty={self.difficulty.name if self.difficulty else None}, "
            f"attempts={len(self.attempts)}"
        )
        self.difficulty = None
        self.secret = None
        self.attempts = []
