"""
Environment-driven settings.

Every value is read on call so tests can monkeypatch the environment.
Blank or unparsable values fall back to the default.
"""

from __future__ import annotations

import os


def env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip()


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def db_host() -> str:
    return env_str("DB_HOST", "localhost") or "localhost"


def db_user() -> str:
    return env_str("DB_USER", "root") or "root"


def db_password() -> str:
    # Empty password is a valid setting.
    return env_str("DB_PASS", "")


def db_name() -> str:
    return env_str("DB_NAME", "test") or "test"


def db_port() -> int:
    return env_int("DB_PORT", 3306)


def db_pool_max() -> int:
    return max(1, env_int("DB_POOL_MAX", 10))


def legacy_password() -> str:
    return env_str("NEXT_PUBLIC_PASSWORD", "")


def cors_origins() -> list[str]:
    raw = env_str("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return (env_str("LOG_LEVEL", "INFO") or "INFO").upper()
