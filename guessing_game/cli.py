#!/usr/bin/env python3
"""
Number Guessing Game
Interactive terminal front end and command-line entry point
"""

import argparse
import logging
import random
import sys
from typing import Any, Callable, Dict, List, Optional

from guessing_game import __version__
from guessing_game.config import LOG_LEVELS, Configuration, setup_logging
from guessing_game.difficulty import Difficulty
from guessing_game.engine import GameEngine
from guessing_game.evaluator import Outcome
from guessing_game.history import GameHistory
from guessing_game.models import Session
from guessing_game.prompts import read_int
from guessing_game.stats import RECENT_GAMES_LIMIT, summarize
from guessing_game.strategies import StrategyType, create_strategy


# ============================================================================
# PRESENTATION HELPERS
# ============================================================================

DIFFICULTY_ICONS = {
    Difficulty.EASY: "🟢",
    Difficulty.MEDIUM: "🟡",
    Difficulty.HARD: "🔴",
}

OUTCOME_ICONS = {
    Outcome.CORRECT: "✅",
    Outcome.TOO_LOW: "📈",
    Outcome.TOO_HIGH: "📉",
}

MENU_EXIT = 5
MENU_STATISTICS = 4
MENU_HISTORY = 6
MENU_DIFFICULTIES = {1: Difficulty.EASY, 2: Difficulty.MEDIUM, 3: Difficulty.HARD}


def describe_difficulty(difficulty: Difficulty) -> str:
    return (f"{difficulty.label} (1-{difficulty.max_range}, {difficulty.max_attempts} attempts, "
            f"{difficulty.base_points} points)")


# ============================================================================
# CLI INTERFACE
# ============================================================================

class CLI:
    """Command-line interface"""

    def __init__(
        self,
        config: Optional[Configuration] = None,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.config = config or Configuration()
        self.input = input_func
        self.output = output
        self.rng = random.Random(self.config.seed)
        self.history = GameHistory()
        self.engine = GameEngine(self.history, self.rng)

    def run(self) -> int:
        """Main menu loop; returns the final score"""
        self.output("🎯 Welcome to the Number Guessing Game! 🎯")
        self.output("=" * 50)

        while True:
            self._show_menu()

            try:
                choice = read_int(f"Choose an option (1-{MENU_HISTORY}): ", 1, MENU_HISTORY,
                                  self.input, self.output)
                if choice == MENU_EXIT:
                    break
                if choice == MENU_HISTORY:
                    self._view_history()
                elif choice == MENU_STATISTICS:
                    self._view_statistics()
                else:
                    self._play_game(MENU_DIFFICULTIES[choice])
            except EOFError:
                break
            except KeyboardInterrupt:
                self.output("\n\n⚠ Operation cancelled by user")

        self.output(f"\nThanks for playing! Final Score: {self.history.total_score}")
        return self.history.total_score

    def _show_menu(self):
        self.output("\n🎮 MAIN MENU")
        self.output(f"Current Score: {self.history.total_score}")
        self.output("-" * 30)
        for number, difficulty in MENU_DIFFICULTIES.items():
            self.output(f"{number}. {DIFFICULTY_ICONS[difficulty]} {describe_difficulty(difficulty)}")
        self.output(f"{MENU_STATISTICS}. 📊 View Statistics")
        self.output(f"{MENU_EXIT}. 🚪 Exit")
        self.output(f"{MENU_HISTORY}. 📜 View History")

    def _play_game(self, difficulty: Difficulty):
        """Play one interactive game"""
        self.output(f"\n🎯 Starting {difficulty.name} Game!")
        self.output(f"Range: 1-{difficulty.max_range}")
        self.output(f"Attempts: {difficulty.max_attempts}")
        self.output(f"Potential Points: {difficulty.base_points}")
        self.output("-" * 40)

        def ask(attempt_number: int, attempts_left: int) -> int:
            self.output(f"\n📍 Attempt {attempt_number}/{difficulty.max_attempts} "
                        f"(Attempts left: {attempts_left})")
            return read_int(f"Enter your guess (1-{difficulty.max_range}): ",
                            1, difficulty.max_range, self.input, self.output)

        session = self.engine.play(difficulty, ask, self._show_result)
        self._show_summary(session)
        self.input("\nPress Enter to continue...")

    def _show_result(self, result: Dict[str, Any]):
        outcome = result["outcome"]
        self.output(f"{OUTCOME_ICONS[outcome]} {outcome.value.upper()}!")

        if result["won"]:
            self.output("\n🏆 CONGRATULATIONS! You won!")
            self.output(f"✨ Points earned: {result['points']}")
            self.output(f"🎯 Total score: {self.history.total_score}")
        elif result["game_over"]:
            self.output("\n💔 Game Over!")
            self.output(f"🎯 The secret number was: {result['secret']}")
            self.output(f"📊 Total score: {self.history.total_score}")
        else:
            self.output(f"💡 Hint: The number is {result['hint']} than {result['guess']}")

    def _show_summary(self, session: Session):
        self.output("\n📋 GAME SUMMARY")
        self.output("-" * 30)
        self.output(f"🎯 Secret Number: {session.secret_number}")
        self.output(f"🔢 Total Attempts: {session.attempt_count}")
        self.output(f"🏆 Result: {'WON' if session.won else 'LOST'}")
        if session.last_attempt is not None:
            self.output(f"🏁 Final Guess: {session.last_attempt.guess}")

        self.output("\n📝 Attempt History:")
        self._show_attempts(session, indent="  ")

    def _show_attempts(self, session: Session, indent: str):
        for i, attempt in enumerate(session.attempts, start=1):
            self.output(f"{indent}{i}. {OUTCOME_ICONS[attempt.outcome]} {attempt.guess} - "
                        f"{attempt.outcome.value.upper()}")

    def _view_statistics(self, pause: bool = True):
        """View performance statistics"""
        self.output("\n📊 GAME STATISTICS")
        self.output("=" * 40)

        stats = summarize(self.history)
        if stats is None:
            self.output("No games played yet. Start playing to see statistics!")
            return

        self.output(f"🏆 Total Score: {stats.total_score}")
        self.output(f"🎮 Games Played: {stats.total_games}")
        self.output(f"✅ Games Won: {stats.games_won}")
        self.output(f"❌ Games Lost: {stats.games_lost}")
        self.output(f"📈 Win Rate: {stats.win_rate:.1f}%")
        self.output(f"⚡ Average Attempts: {stats.avg_attempts:.1f}")
        self.output(f"🔥 Best Streak: {stats.best_streak}")

        self.output("\n📊 Performance by Difficulty:")
        for tier in stats.by_difficulty:
            self.output(f"  {DIFFICULTY_ICONS[tier.difficulty]} {tier.difficulty.name}: "
                        f"{tier.wins}/{tier.games} ({tier.win_rate:.1f}%)")

        self.output(f"\n🕒 Recent Games (Last {RECENT_GAMES_LIMIT}):")
        for game in stats.recent:
            result_icon = "🏆" if game.won else "💔"
            self.output(f"  {result_icon} {DIFFICULTY_ICONS[game.difficulty]} {game.difficulty.name} - "
                        f"{game.attempt_count} attempts ({game.completed_at.strftime('%b %d %H:%M')})")

        if pause:
            self.input("\nPress Enter to continue...")

    def _view_history(self):
        """View every game played this run, oldest first"""
        self.output("\n📜 GAME HISTORY")
        self.output("=" * 40)

        sessions = self.history.all()
        if not sessions:
            self.output("No games in history. Start playing to build one!")
            return

        for number, game in enumerate(sessions, start=1):
            status = "🏆 WON" if game.won else "💔 LOST"
            self.output(f"\n#{number} {DIFFICULTY_ICONS[game.difficulty]} {game.difficulty.name} - {status} "
                        f"({game.completed_at.strftime('%b %d %H:%M')})")
            self.output(f"    Secret: {game.secret_number} | Attempts: {game.attempt_count} | "
                        f"Points: {game.points}")
            self._show_attempts(game, indent="    ")

        self.input("\nPress Enter to continue...")

    def auto_play(self) -> int:
        """Play configured number of games with a strategy instead of the keyboard"""
        difficulty = Difficulty.from_name(self.config.auto_difficulty)
        count = self.config.auto_games

        self.output(f"⏳ Running {count} {difficulty.name} games with "
                    f"{self.config.auto_strategy} strategy...")
        logging.info(f"Auto-play: strategy={self.config.auto_strategy}, "
                     f"difficulty={difficulty.name}, games={count}")

        for _ in range(count):
            strategy = create_strategy(self.config.auto_strategy, 1, difficulty.max_range, self.rng)

            def feedback(result: Dict[str, Any]):
                strategy.update(result["guess"], result["outcome"])

            self.engine.play(difficulty, lambda attempt_number, attempts_left: strategy.make_guess(),
                             feedback)

        self._view_statistics(pause=False)
        return self.history.total_score


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guessing-game",
        description="Terminal number guessing game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  guessing-game                                    # Interactive mode
  guessing-game --auto binary --difficulty hard    # Let a strategy play
        """
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--seed', type=int, default=None,
                        help="Seed for the secret number generator")
    parser.add_argument('--log-level', default="WARNING", type=str.upper, choices=LOG_LEVELS)
    parser.add_argument('--log-file', default=None, help="Also write logs to this file")
    parser.add_argument('--auto', choices=[s.value for s in StrategyType], default=None,
                        help="Play unattended with the given guessing strategy")
    parser.add_argument('--difficulty', default=None,
                        choices=[d.name.lower() for d in Difficulty],
                        help="Difficulty for --auto games (default: easy; requires --auto)")
    parser.add_argument('--games', type=int, default=None,
                        help="Number of --auto games (default: 10; requires --auto)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.auto is None and (args.difficulty is not None or args.games is not None):
        parser.error("--difficulty and --games require --auto")

    config = Configuration.from_args(args)

    errors = config.validate()
    if errors:
        print("Configuration errors:", file=sys.stderr)
        for error in errors:
            print(f"  • {error}", file=sys.stderr)
        return 2

    try:
        setup_logging(config)
        cli = CLI(config)
        if config.auto_play:
            cli.auto_play()
        else:
            cli.run()
    except KeyboardInterrupt:
        print("\n\n👋 Interrupted by user. Goodbye!")
        return 0
    except Exception as e:
        print(f"\n❌ Fatal error: {e}")
        logging.exception("Fatal error in main")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
