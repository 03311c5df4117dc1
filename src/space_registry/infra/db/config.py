from __future__ import annotations

import os
from dataclasses import dataclass


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


@dataclass(frozen=True, slots=True)
class PoolSettings:
    size: int = 10
    max_overflow: int = 20
    recycle_seconds: int = 3600


def pool_settings() -> PoolSettings:
    """Connection pool sizing, overridable through SHIP_DB_POOL_* variables."""
    defaults = PoolSettings()
    return PoolSettings(
        size=int(os.getenv("SHIP_DB_POOL_SIZE", defaults.size)),
        max_overflow=int(os.getenv("SHIP_DB_POOL_MAX_OVERFLOW", defaults.max_overflow)),
        recycle_seconds=int(os.getenv("SHIP_DB_POOL_RECYCLE", defaults.recycle_seconds)),
    )
