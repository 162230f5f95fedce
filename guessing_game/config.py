"""
Runtime configuration and logging setup
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from guessing_game.difficulty import Difficulty
from guessing_game.strategies import StrategyType

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


@dataclass
class Configuration:
    """Application configuration with validation"""
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    seed: Optional[int] = None
    auto_strategy: Optional[str] = None
    auto_difficulty: str = "easy"
    auto_games: int = 10

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log_level}. Must be one of: {list(LOG_LEVELS)}")

        if self.auto_strategy is not None and self.auto_strategy not in [s.value for s in StrategyType]:
            errors.append(
                f"Invalid strategy: {self.auto_strategy}. Must be one of: {[s.value for s in StrategyType]}"
            )

        try:
            Difficulty.from_name(self.auto_difficulty)
        except ValueError as e:
            errors.append(str(e))

        if self.auto_games < 1 or self.auto_games > 10000:
            errors.append(f"auto_games must be between 1 and 10000, got {self.auto_games}")

        return errors

    @property
    def auto_play(self) -> bool:
        return self.auto_strategy is not None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Configuration":
        config = cls(
            log_level=args.log_level,
            log_file=args.log_file,
            seed=args.seed,
            auto_strategy=args.auto,
        )
        if args.difficulty is not None:
            config.auto_difficulty = args.difficulty
        if args.games is not None:
            config.auto_games = args.games
        return config


def setup_logging(config: Configuration):
    """Configure logging"""
    handlers = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
