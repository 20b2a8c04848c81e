from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from models import GuessingGame
from services.secret import SecretSource, time_derived_secret

logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    """A message arrived for a connection that has no open session."""


class SessionRegistry:
    """
    Thread-safe mapping from connection id to its GuessingGame.

    - Every operation holds a single lock for its full duration.
    - The lock must never be held across network I/O: callers leave the
      session() block before sending anything on the wire.
    """

    def __init__(self, secret_factory: SecretSource = time_derived_secret) -> None:
        self._lock = threading.Lock()
        self._games: dict[int, GuessingGame] = {}
        self._secret_factory = secret_factory

    def create_or_get(self, connection_id: int) -> GuessingGame:
        with self._lock:
            game = self._games.get(connection_id)
            if game is not None:
                logger.warning("[registry] Session %s already open; reusing it", connection_id)
                return game
            game = GuessingGame(self._secret_factory())
            self._games[connection_id] = game
            logger.info("[registry] New session %s (%d open)", connection_id, len(self._games))
            return game

    def remove(self, connection_id: int) -> bool:
        with self._lock:
            removed = self._games.pop(connection_id, None) is not None
            logger.info("[registry] Closed session %s (%d open)", connection_id, len(self._games))
            return removed

    @contextmanager
    def session(self, connection_id: int) -> Iterator[GuessingGame]:
        """Hold the registry lock and yield the game for connection_id."""
        with self._lock:
            game = self._games.get(connection_id)
            if game is None:
                raise SessionNotFoundError(connection_id)
            yield game

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def __contains__(self, connection_id: object) -> bool:
        with self._lock:
            return connection_id in self._games
