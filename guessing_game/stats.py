"""
Statistics over the game history.

Everything here is read-only: the functions take sessions (or the history)
and compute summaries without touching the underlying log.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from guessing_game.difficulty import Difficulty
from guessing_game.history import GameHistory
from guessing_game.models import Session

RECENT_GAMES_LIMIT = 5


@dataclass(frozen=True)
class DifficultyStats:
    """Results for one difficulty tier"""
    difficulty: Difficulty
    games: int
    wins: int
    win_rate: float


@dataclass(frozen=True)
class Statistics:
    """Aggregate view of all finished games"""
    total_games: int
    games_won: int
    win_rate: float
    avg_attempts: float
    total_score: int
    best_streak: int
    by_difficulty: List[DifficultyStats]
    recent: Tuple[Session, ...]

    @property
    def games_lost(self) -> int:
        return self.total_games - self.games_won


def win_rate(wins: int, games: int) -> float:
    """Percentage of games won; caller guarantees games > 0"""
    return 100 * wins / games


def average_attempts(sessions: Sequence[Session]) -> float:
    if not sessions:
        return 0.0
    return sum(s.attempt_count for s in sessions) / len(sessions)


def difficulty_breakdown(sessions: Sequence[Session]) -> List[DifficultyStats]:
    """Per-tier results in catalog order; tiers with no games are left out"""
    breakdown = []
    for difficulty in Difficulty:
        games = [s for s in sessions if s.difficulty is difficulty]
        if not games:
            continue
        wins = sum(1 for s in games if s.won)
        breakdown.append(DifficultyStats(difficulty, len(games), wins, win_rate(wins, len(games))))
    return breakdown


def recent_games(sessions: Sequence[Session], limit: int = RECENT_GAMES_LIMIT) -> Tuple[Session, ...]:
    """The last `limit` sessions, oldest first"""
    if limit <= 0:
        return ()
    return tuple(sessions[-limit:])


def best_streak(sessions: Sequence[Session]) -> int:
    """Longest run of consecutive wins"""
    current = longest = 0
    for session in sessions:
        if session.won:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def summarize(history: GameHistory) -> Optional[Statistics]:
    """Compute statistics, or None when no games have been played"""
    sessions = history.all()
    total = len(sessions)
    if total == 0:
        return None

    wins = sum(1 for s in sessions if s.won)

    return Statistics(
        total_games=total,
        games_won=wins,
        win_rate=win_rate(wins, total),
        avg_attempts=average_attempts(sessions),
        total_score=history.total_score,
        best_streak=best_streak(sessions),
        by_difficulty=difficulty_breakdown(sessions),
        recent=recent_games(sessions),
    )
