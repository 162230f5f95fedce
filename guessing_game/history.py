"""
In-memory history of completed games and the running score
"""

import logging
from typing import List, Tuple

from guessing_game.models import Session


class GameHistory:
    """Ordered log of finished sessions plus the running score.

    Lives for one program run; nothing is written to disk.
    """

    def __init__(self):
        self._sessions: List[Session] = []
        self._total_score = 0

    def append(self, session: Session):
        """Record a finished session at the end of the log"""
        self._sessions.append(session)
        logging.debug(
            f"Session recorded: #{len(self._sessions)} {session.difficulty.name} "
            f"won={session.won} attempts={session.attempt_count}"
        )

    def all(self) -> Tuple[Session, ...]:
        """Read-only chronological view"""
        return tuple(self._sessions)

    def add_points(self, points: int):
        if points < 0:
            raise ValueError(f"points must be >= 0, got {points}")
        self._total_score += points

    @property
    def total_score(self) -> int:
        return self._total_score

    def __len__(self) -> int:
        return len(self._sessions)
