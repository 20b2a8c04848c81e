import logging
from enum import StrEnum
from typing import NamedTuple

logger = logging.getLogger(__name__)

SECRET_MIN = 1
SECRET_MAX = 100


class Ordering(StrEnum):
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


class GuessOutcome(NamedTuple):
    ordering: Ordering   # guess relative to the secret
    attempt: int         # guess_count after this submit


class GuessingGame:
    """
    State for a single guessing game.

    Once the secret has been found the game is completed; further submits are
    observed but not scored and keep reporting the winning attempt.
    """

    def __init__(self, secret: int) -> None:
        if not SECRET_MIN <= secret <= SECRET_MAX:
            raise ValueError(f"secret must be between {SECRET_MIN} and {SECRET_MAX}, got {secret}")
        self._secret = secret
        self.guess_count = 0
        self.completed = False
        logger.info("[game] New guessing game created")

    @property
    def secret(self) -> int:
        return self._secret

    def submit(self, guess: int) -> GuessOutcome:
        if self.completed:
            logger.warning("[game] Guess %s on completed game (after %d guesses)", guess, self.guess_count)
            return GuessOutcome(Ordering.EQUAL, self.guess_count)

        self.guess_count += 1
        if guess < self._secret:
            ordering = Ordering.LESS
        elif guess > self._secret:
            ordering = Ordering.GREATER
        else:
            ordering = Ordering.EQUAL
            self.completed = True
        logger.info("[game] Guess #%d: %s -> %s", self.guess_count, guess, ordering)
        if self.completed:
            logger.info("[game] Game completed in %d guesses", self.guess_count)
        return GuessOutcome(ordering, self.guess_count)
