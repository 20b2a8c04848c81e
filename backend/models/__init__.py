from .game import SECRET_MAX, SECRET_MIN, GuessingGame, GuessOutcome, Ordering

__all__ = [
    "GuessingGame",
    "GuessOutcome",
    "Ordering",
    "SECRET_MIN",
    "SECRET_MAX",
]
