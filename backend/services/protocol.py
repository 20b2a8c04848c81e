"""
Per-connection guessing game protocol, independent of the WebSocket library.

Message flow for one frame:
  receive_payload (size probe + read) -> decode_payload -> parse_guess
  -> registry.session(...).submit -> text reply (+ close frame on win)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from models import Ordering
from services.guess_parser import PayloadDecodeError, decode_payload, parse_guess
from services.ordinal import nth
from services.registry import SessionRegistry

logger = logging.getLogger(__name__)

MAX_PAYLOAD_LEN = 8

WELCOME_MESSAGE = "Welcome to the guessing game! Enter a number between 1 and 100"
TOO_BIG_MESSAGE = "Request too big"
RANGE_HINT_MESSAGE = "Please enter a number between 1 and 100"


@dataclass(frozen=True)
class TooLarge:
    length: int


class FrameTransport(Protocol):
    connection_id: int

    async def receive_payload(self, max_len: int) -> bytes | TooLarge:
        """Probe the pending frame size; return TooLarge without reading if it exceeds max_len."""
        ...

    async def send_text(self, text: str) -> None: ...

    async def send_close(self) -> None: ...


class MessageResult(StrEnum):
    TOO_BIG = "too_big"
    DECODE_ERROR = "decode_error"
    INVALID = "invalid"
    TOO_HIGH = "too_high"
    TOO_LOW = "too_low"
    WON = "won"


class GuessingProtocol:
    def __init__(self, registry: SessionRegistry, *, max_payload_len: int = MAX_PAYLOAD_LEN) -> None:
        self._registry = registry
        self._max_payload_len = max_payload_len

    @property
    def registry(self) -> SessionRegistry:
        return self._registry

    async def on_open(self, transport: FrameTransport) -> None:
        self._registry.create_or_get(transport.connection_id)
        await transport.send_text(WELCOME_MESSAGE)

    async def on_message(self, transport: FrameTransport) -> MessageResult:
        """
        Handle one inbound frame and send the reply.

        Raises SessionNotFoundError if the connection has no session; that
        only fails this call.
        """
        connection_id = transport.connection_id
        payload = await transport.receive_payload(self._max_payload_len)
        if isinstance(payload, TooLarge):
            logger.warning(
                "[protocol] Request too big on %s: %d bytes (max: %d)",
                connection_id,
                payload.length,
                self._max_payload_len,
            )
            await transport.send_text(TOO_BIG_MESSAGE)
            await transport.send_close()
            return MessageResult.TOO_BIG

        try:
            text = decode_payload(payload)
        except PayloadDecodeError as exc:
            await transport.send_text(exc.reply)
            return MessageResult.DECODE_ERROR

        guess = parse_guess(text)
        if guess is None:
            logger.info("[protocol] Invalid guess from %s: %r", connection_id, text)
            await transport.send_text(RANGE_HINT_MESSAGE)
            return MessageResult.INVALID

        with self._registry.session(connection_id) as game:
            outcome = game.submit(guess)
            secret = game.secret

        attempt = nth(outcome.attempt)
        if outcome.ordering is Ordering.GREATER:
            reply, result = f"Your {attempt} guess was too high", MessageResult.TOO_HIGH
        elif outcome.ordering is Ordering.LESS:
            reply, result = f"Your {attempt} guess was too low", MessageResult.TOO_LOW
        else:
            reply = f"You guessed {secret} on your {attempt} try! Refresh to play again"
            result = MessageResult.WON

        logger.info("[protocol] Sending reply to %s: %s", connection_id, reply)
        await transport.send_text(reply)
        if result is MessageResult.WON:
            await transport.send_close()
        return result

    def on_close(self, transport: FrameTransport) -> None:
        self._registry.remove(transport.connection_id)
