from __future__ import annotations

import logging
import os

DEFAULT_CORS_ORIGINS = "http://localhost:3000"
DEFAULT_PAGE_LIMIT = 10
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def cors_origins() -> list[str]:
    """Origins allowed to call the API from a browser (the showcase frontend)."""
    raw = os.getenv("VEHICLE_SHOWCASE_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def default_page_limit() -> int:
    raw = os.getenv("VEHICLE_SHOWCASE_DEFAULT_LIMIT")

    if not raw:
        return DEFAULT_PAGE_LIMIT

    try:
        limit = int(raw)
    except ValueError:
        raise RuntimeError(f"VEHICLE_SHOWCASE_DEFAULT_LIMIT must be an integer, got {raw!r}") from None

    if limit < 1:
        raise RuntimeError("VEHICLE_SHOWCASE_DEFAULT_LIMIT must be >= 1")

    return limit


def log_level() -> str:
    return os.getenv("VEHICLE_SHOWCASE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def configure_logging() -> None:
    """Configure root logging once; later calls are no-ops."""
    logging.basicConfig(level=log_level(), format=LOG_FORMAT)
