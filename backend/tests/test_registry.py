from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from services.registry import SessionNotFoundError, SessionRegistry


def test_create_or_get_uses_secret_factory() -> None:
    registry = SessionRegistry(secret_factory=lambda: 50)
    game = registry.create_or_get(1)
    assert game.secret == 50
    assert len(registry) == 1
    assert 1 in registry


def test_create_or_get_returns_existing_entry() -> None:
    secrets = iter([10, 20])
    registry = SessionRegistry(secret_factory=lambda: next(secrets))
    first = registry.create_or_get(1)
    first.submit(5)
    again = registry.create_or_get(1)
    assert again is first
    assert again.secret == 10
    assert again.guess_count == 1
    assert len(registry) == 1


def test_remove_is_noop_for_unknown_id() -> None:
    registry = SessionRegistry(secret_factory=lambda: 50)
    registry.create_or_get(1)
    assert registry.remove(2) is False
    assert registry.remove(1) is True
    assert registry.remove(1) is False
    assert len(registry) == 0


def test_session_yields_game_for_open_connection() -> None:
    registry = SessionRegistry(secret_factory=lambda: 50)
    registry.create_or_get(7)
    with registry.session(7) as game:
        game.submit(60)
    with registry.session(7) as game:
        assert game.guess_count == 1


def test_session_for_removed_connection_raises() -> None:
    registry = SessionRegistry(secret_factory=lambda: 50)
    registry.create_or_get(3)
    registry.remove(3)
    with pytest.raises(SessionNotFoundError):
        with registry.session(3):
            pass


def test_lock_released_after_missing_session() -> None:
    registry = SessionRegistry(secret_factory=lambda: 50)
    with pytest.raises(SessionNotFoundError):
        with registry.session(99):
            pass
    registry.create_or_get(99)
    assert 99 in registry


def test_concurrent_open_guess_close_leaves_registry_empty() -> None:
    registry = SessionRegistry(secret_factory=lambda: 50)

    def lifecycle(connection_id: int) -> int:
        registry.create_or_get(connection_id)
        for guess in (25, 75, 50):
            with registry.session(connection_id) as game:
                outcome = game.submit(guess)
        registry.remove(connection_id)
        return outcome.attempt

    with ThreadPoolExecutor(max_workers=16) as pool:
        attempts = list(pool.map(lifecycle, range(500)))

    assert attempts == [3] * 500
    assert len(registry) == 0


def test_concurrent_creates_keep_one_entry_per_id() -> None:
    registry = SessionRegistry(secret_factory=lambda: 50)

    with ThreadPoolExecutor(max_workers=16) as pool:
        games = list(pool.map(lambda i: registry.create_or_get(i % 10), range(400)))

    assert len(registry) == 10
    assert len({id(g) for g in games}) == 10
