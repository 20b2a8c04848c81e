import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

BACKEND_DIR = Path(__file__).resolve().parent.parent
SECRET_SOURCES = ("time", "random")


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    secret_source: str = "time"     # "time" | "random"
    secret_seed: int | None = None  # only used by "random"


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(env_file: str | os.PathLike[str] | None = None) -> Settings:
    """Build Settings from the environment, after loading backend/.env if present."""
    load_dotenv(env_file or BACKEND_DIR / ".env")

    secret_source = os.environ.get("SECRET_SOURCE", "").strip().lower() or "time"
    if secret_source not in SECRET_SOURCES:
        raise RuntimeError(f"SECRET_SOURCE must be one of {list(SECRET_SOURCES)}, got {secret_source!r}")

    return Settings(
        host=os.environ.get("GAME_HOST", "").strip() or "0.0.0.0",
        port=_int_env("GAME_PORT", 8000),
        log_level=os.environ.get("LOG_LEVEL", "").strip().upper() or "INFO",
        secret_source=secret_source,
        secret_seed=_int_env("SECRET_SEED", None),
    )
