"""Decoding of raw guess payloads into validated guess values."""

from __future__ import annotations

import logging
import re

from models import SECRET_MAX, SECRET_MIN

logger = logging.getLogger(__name__)

_UNSIGNED = re.compile(r"\+?([0-9]+)")
_U32_MAX = 2**32 - 1
_U32_MAX_DIGITS = len(str(_U32_MAX))


class PayloadDecodeError(ValueError):
    """Payload bytes could not be turned into text. `reply` is sent to the client."""

    reply = "[Decode Error]"


class TerminatorMissingError(PayloadDecodeError):
    reply = "[CStr decode Error]"


class TextEncodingError(PayloadDecodeError):
    reply = "[UTF-8 Error]"


def decode_payload(payload: bytes) -> str:
    """
    Decode a received payload as a NUL-terminated UTF-8 string.

    Bytes after the first NUL are ignored. A payload without any NUL raises
    TerminatorMissingError; invalid UTF-8 before the NUL raises TextEncodingError.
    """
    end = payload.find(b"\0")
    if end < 0:
        logger.warning("[guess_parser] No terminator in %d-byte payload", len(payload))
        raise TerminatorMissingError(payload)
    try:
        return payload[:end].decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("[guess_parser] Payload is not valid UTF-8: %r", payload[:end])
        raise TextEncodingError(payload) from exc


def _is_padding(ch: str) -> bool:
    return ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F


def parse_guess(raw_text: str) -> int | None:
    """Return the guess in raw_text if it is a whole number from 1 to 100, else None."""
    start, end = 0, len(raw_text)
    while start < end and _is_padding(raw_text[start]):
        start += 1
    while end > start and _is_padding(raw_text[end - 1]):
        end -= 1
    text = raw_text[start:end]

    match = _UNSIGNED.fullmatch(text)
    digits = match.group(1).lstrip("0") if match else ""
    if not match or len(digits) > _U32_MAX_DIGITS or int(digits or "0") > _U32_MAX:
        logger.warning("[guess_parser] Not a number: %.40r (length %d)", raw_text, len(raw_text))
        return None

    number = int(digits or "0")
    if not SECRET_MIN <= number <= SECRET_MAX:
        logger.warning("[guess_parser] Not in range (%d)", number)
        return None

    logger.info("[guess_parser] Parsed guess: %d", number)
    return number
