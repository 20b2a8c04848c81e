import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, PlainTextResponse

from app.config import Settings, load_settings
from app.models import RssiReading
from routes.guess_ws import router as guess_router
from services.protocol import GuessingProtocol
from services.registry import SessionRegistry
from services.rssi import calculate_distance_from_rssi, get_station_rssi
from services.secret import secret_source_from_name

logger = logging.getLogger(__name__)

INDEX_HTML = (Path(__file__).parent / "static" / "index.html").read_text(encoding="utf-8")
NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def create_app(settings: Settings | None = None, registry: SessionRegistry | None = None) -> FastAPI:
    settings = settings or Settings()
    if registry is None:
        registry = SessionRegistry(
            secret_factory=secret_source_from_name(settings.secret_source, seed=settings.secret_seed),
        )

    app = FastAPI(title="Guessing Game", version="0.1.0")
    app.state.settings = settings
    app.state.guessing_protocol = GuessingProtocol(registry)
    app.include_router(guess_router)

    @app.get("/", response_class=HTMLResponse)
    def index() -> HTMLResponse:
        logger.info("[main] Serving index page")
        return HTMLResponse(INDEX_HTML, headers=NO_CACHE_HEADERS)

    @app.get("/health", response_class=PlainTextResponse)
    def health() -> str:
        return "OK"

    @app.get("/rssi", response_model=RssiReading, response_model_exclude_unset=True)
    def rssi() -> RssiReading:
        value = get_station_rssi()
        if value is None:
            return RssiReading(rssi=None, distance=None, error="No connected station")
        distance = calculate_distance_from_rssi(value)
        return RssiReading(
            rssi=value,
            distance=round(distance, 2),
            unit="meters",
            raw_distance=round(distance, 4),
        )

    return app


app = create_app(load_settings())
