import logging

from guessing_game.cli import build_parser
from guessing_game.config import Configuration, setup_logging


def test_defaults_are_valid():
    config = Configuration()
    assert config.validate() == []
    assert config.auto_play is False


def test_validate_reports_every_problem():
    config = Configuration(log_level="LOUD", auto_strategy="psychic",
                           auto_difficulty="nightmare", auto_games=0)

    errors = config.validate()

    assert len(errors) == 4
    assert any("log level" in e for e in errors)
    assert any("strategy" in e for e in errors)
    assert any("difficulty" in e.lower() for e in errors)
    assert any("auto_games" in e for e in errors)


def test_from_args():
    args = build_parser().parse_args(
        ["--seed", "5", "--log-level", "debug", "--auto", "binary", "--difficulty", "hard", "--games", "3"]
    )

    config = Configuration.from_args(args)

    assert config == Configuration(log_level="DEBUG", log_file=None, seed=5,
                                   auto_strategy="binary", auto_difficulty="hard", auto_games=3)
    assert config.auto_play is True


def test_setup_logging_with_file(tmp_path, restore_logging):
    log_file = tmp_path / "game.log"

    setup_logging(Configuration(log_level="INFO", log_file=str(log_file)))
    logging.info("hello from the test")
    for handler in restore_logging.handlers:
        handler.flush()

    assert restore_logging.level == logging.INFO
    assert len(restore_logging.handlers) == 2
    assert "INFO - hello from the test" in log_file.read_text(encoding="utf-8")


def test_from_args_keeps_auto_defaults():
    config = Configuration.from_args(build_parser().parse_args([]))

    assert config == Configuration()
