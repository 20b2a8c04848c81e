from .protocol import GuessingProtocol, MessageResult, TooLarge
from .registry import SessionNotFoundError, SessionRegistry

__all__ = [
    "GuessingProtocol",
    "MessageResult",
    "SessionNotFoundError",
    "SessionRegistry",
    "TooLarge",
]
