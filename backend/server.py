"""Run the guessing game server: python server.py"""

import logging

import uvicorn

from app.config import load_settings


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    logging.getLogger(__name__).info(
        "[server] Starting guessing game on %s:%d (secret source: %s)",
        settings.host,
        settings.port,
        settings.secret_source,
    )
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
