"""
Environment-driven settings.

Values are read on every call so tests can override them with monkeypatch.setenv.
"""

from __future__ import annotations

import os


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def database_url() -> str:
    return _env_str("DATABASE_URL")


def pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN_SIZE", 1))


def pool_max_size() -> int:
    return max(pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def command_timeout_s() -> float:
    return _env_float("DB_COMMAND_TIMEOUT_S", 30.0)


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "").strip()
    if not raw:
        return []
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()
