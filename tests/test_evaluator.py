from guessing_game.difficulty import Difficulty
from guessing_game.evaluator import Outcome, evaluate, hint


def test_evaluate_every_secret_in_every_tier():
    for difficulty in Difficulty:
        for secret in range(1, difficulty.max_range + 1):
            assert evaluate(secret, secret) is Outcome.CORRECT
            for guess in range(1, secret):
                assert evaluate(guess, secret) is Outcome.TOO_LOW
            for guess in range(secret + 1, difficulty.max_range + 1):
                assert evaluate(guess, secret) is Outcome.TOO_HIGH


def test_evaluate_places_no_range_constraint():
    assert evaluate(-5, 3) is Outcome.TOO_LOW
    assert evaluate(10**9, 3) is Outcome.TOO_HIGH
    assert evaluate(0, 0) is Outcome.CORRECT


def test_hint_direction():
    assert hint(Outcome.TOO_LOW) == "higher"
    assert hint(Outcome.TOO_HIGH) == "lower"
    assert hint(Outcome.CORRECT) is None
