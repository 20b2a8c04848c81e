from __future__ import annotations

import itertools
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from services.protocol import GuessingProtocol, TooLarge
from services.registry import SessionNotFoundError

router = APIRouter(tags=["guess"])
logger = logging.getLogger(__name__)

_connection_ids = itertools.count(1)


class WebSocketTransport:
    """
    FrameTransport over a Starlette WebSocket.

    Text frames are NUL-terminated on receipt, so their length counts one
    extra byte. Binary frames are taken verbatim and must carry their own NUL.
    """

    def __init__(self, websocket: WebSocket, connection_id: int) -> None:
        self._websocket = websocket
        self.connection_id = connection_id
        self.closed = False
        self._pending: bytes | None = None

    async def _probe(self) -> int:
        message = await self._websocket.receive()
        if message["type"] == "websocket.disconnect":
            raise WebSocketDisconnect(message.get("code", status.WS_1000_NORMAL_CLOSURE))
        if message.get("text") is not None:
            self._pending = message["text"].encode("utf-8") + b"\0"
        else:
            self._pending = message.get("bytes") or b""
        logger.debug("[guess_ws] Received frame of length %d on %s", len(self._pending), self.connection_id)
        return len(self._pending)

    def _read_into(self, buf: bytearray) -> int:
        if self._pending is None:
            raise RuntimeError("read without a pending frame; call _probe() first")
        length = len(self._pending)
        buf[:length] = self._pending
        self._pending = None
        return length

    async def receive_payload(self, max_len: int) -> bytes | TooLarge:
        length = await self._probe()
        if length > max_len:
            self._pending = None
            return TooLarge(length)
        buf = bytearray(max_len)
        read = self._read_into(buf)
        return bytes(buf[:read])

    async def send_text(self, text: str) -> None:
        await self._websocket.send_text(text)

    async def send_close(self) -> None:
        self.closed = True
        await self._websocket.close()


def get_protocol(websocket: WebSocket) -> GuessingProtocol:
    return websocket.app.state.guessing_protocol


@router.websocket("/ws/guess")
async def ws_guess(websocket: WebSocket) -> None:
    """
    Play one guessing game over this connection.

    The game ends (and the socket is closed by the server) on a correct
    guess or on a frame larger than the payload limit.
    """
    protocol = get_protocol(websocket)
    await websocket.accept()
    transport = WebSocketTransport(websocket, next(_connection_ids))
    logger.info("[guess_ws] Client connected as session %s", transport.connection_id)
    try:
        await protocol.on_open(transport)
        while not transport.closed:
            await protocol.on_message(transport)
    except WebSocketDisconnect:
        logger.info("[guess_ws] Client disconnected from session %s", transport.connection_id)
    except SessionNotFoundError:
        logger.error("[guess_ws] Message for unknown session %s", transport.connection_id, exc_info=True)
        await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
    finally:
        protocol.on_close(transport)
