"""Secret number sources for new games."""

from __future__ import annotations

import logging
import random
import time
from typing import Callable

from models import SECRET_MAX, SECRET_MIN

logger = logging.getLogger(__name__)

SecretSource = Callable[[], int]

_NANOS_PER_SECOND = 1_000_000_000
_NANOS_DIVISOR = 65537


def time_derived_secret(now_ns: int | None = None) -> int:
    """
    Draw a secret from the sub-second part of the wall clock.

    Known weakness: this is neither uniform nor unpredictable, and connections
    opened within the same ~65us window get the same secret. Good enough for
    a casual game; use seeded_secret_source() when that matters.
    """
    nanos = (time.time_ns() if now_ns is None else now_ns) % _NANOS_PER_SECOND
    value = nanos // _NANOS_DIVISOR
    secret = value % SECRET_MAX + SECRET_MIN
    logger.debug("[secret] Generated %d (from nanos: %d)", secret, nanos)
    return secret


def seeded_secret_source(seed: int | None = None) -> SecretSource:
    """Uniform secrets from a PRNG seeded once."""
    rng = random.Random(seed)

    def draw() -> int:
        return rng.randint(SECRET_MIN, SECRET_MAX)

    return draw


def secret_source_from_name(name: str, *, seed: int | None = None) -> SecretSource:
    if name == "time":
        return time_derived_secret
    if name == "random":
        return seeded_secret_source(seed)
    raise ValueError(f"unknown secret source {name!r}; expected 'time' or 'random'")
