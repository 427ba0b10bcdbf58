from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "http://localhost:5000"
DEFAULT_SESSION_TTL_MS = 3_600_000


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    api_base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 15.0
    verify_ssl: bool = True
    session_ttl_ms: int = DEFAULT_SESSION_TTL_MS
    session_dir: str | None = None


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _read_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected an integer, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override."""
    load_dotenv(env_file)

    api_base_url = (os.getenv("POS_API_BASE_URL") or "").strip() or DEFAULT_BASE_URL
    _validate(
        api_base_url.startswith(("http://", "https://")),
        f"Invalid POS_API_BASE_URL: expected an http(s) URL, got {api_base_url!r}",
    )

    timeout_seconds = _read_float("POS_TIMEOUT_SECONDS", "15")
    _validate(timeout_seconds > 0, f"Invalid POS_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}")

    session_ttl_ms = _read_int("POS_SESSION_TTL_MS", str(DEFAULT_SESSION_TTL_MS))
    _validate(session_ttl_ms > 0, f"Invalid POS_SESSION_TTL_MS: expected > 0, got {session_ttl_ms}")

    verify_ssl = _coerce_bool(os.getenv("POS_VERIFY_SSL"), True)
    session_dir = (os.getenv("POS_SESSION_DIR") or "").strip() or None

    return ClientConfig(
        api_base_url=api_base_url.rstrip("/"),
        timeout_seconds=timeout_seconds,
        verify_ssl=verify_ssl,
        session_ttl_ms=session_ttl_ms,
        session_dir=session_dir,
    )
