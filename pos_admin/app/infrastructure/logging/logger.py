import json
import logging
from datetime import datetime, timezone
from typing import Any

REDACTED_KEYS = {"token", "password", "authorization"}
PACKAGE_LOGGER = "pos_admin"

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(message)s"))


def get_logger(name: str, level: str | int | None = None) -> logging.Logger:
    """Return ``name``'s logger; the console handler is attached once on the package logger."""
    package = logging.getLogger(PACKAGE_LOGGER)
    if _handler not in package.handlers:
        package.addHandler(_handler)
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


def _redact(detail: dict[str, Any] | None) -> dict[str, Any] | None:
    if detail is None:
        return None
    return {key: ("***" if key.lower() in REDACTED_KEYS else value) for key, value in detail.items()}


def log_action(
    logger: logging.Logger,
    module: str,
    action: str,
    outcome: str,
    detail: dict[str, Any] | None = None,
) -> None:
    logger.info(
        json.dumps(
            {
                "ts": datetime.now(timezone.utc).isoformat(),
                "level": "INFO",
                "module": module,
                "action": action,
                "outcome": outcome,
                "detail": _redact(detail),
            },
            default=str,
        )
    )
