"""App-wide configuration, overridable from the environment."""

from __future__ import annotations

import os
from typing import List

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def _origins_from_env(raw: str | None) -> List[str]:
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    """Loaded with ``app.config.from_object``; env vars are read at import."""

    CORS_ORIGINS = _origins_from_env(os.environ.get("COMPOUND_CORS_ORIGINS"))
    LOG_LEVEL = os.environ.get("COMPOUND_LOG_LEVEL", "INFO").upper()
