from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_data_dir

from .models import Session

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
EXPIRES_KEY = "token_expires"


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class SessionStore:
    """Durable holder of the auth token and its expiry.

    Every reader and writer goes through these accessors so the expiry check
    stays in one place. Values are persisted as ``token`` and ``token_expires``
    (epoch milliseconds, stored as a string).
    """

    app_name: str = "pos-admin"
    filename: str = "session.json"
    directory: str | Path | None = None
    clock: Callable[[], int] = field(default=_now_ms)

    def _path(self) -> Path:
        base = Path(self.directory) if self.directory else Path(user_data_dir(self.app_name, "POS"))
        base.mkdir(parents=True, exist_ok=True)
        return base / self.filename

    def get_session(self) -> Session | None:
        path = self._path()
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            self.clear_session()
            return None
        if not isinstance(data, dict):
            self.clear_session()
            return None
        token = data.get(TOKEN_KEY)
        raw_expires = data.get(EXPIRES_KEY)
        try:
            expires_at = int(str(raw_expires))
        except (TypeError, ValueError):
            self.clear_session()
            return None
        if not isinstance(token, str) or not token:
            self.clear_session()
            return None
        return Session(token=token, expires_at_epoch_ms=expires_at)

    def set_session(self, token: str, ttl_ms: int) -> Session:
        session = Session(token=token, expires_at_epoch_ms=self.clock() + ttl_ms)
        path = self._path()
        payload = {TOKEN_KEY: session.token, EXPIRES_KEY: str(session.expires_at_epoch_ms)}
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        try:
            path.chmod(0o600)
        except OSError:
            pass
        logger.debug("session stored, expires_at=%s", session.expires_at_epoch_ms)
        return session

    def clear_session(self) -> None:
        path = self._path()
        if path.exists():
            path.unlink()

    def is_valid(self, session: Session | None) -> bool:
        return session is not None and self.clock() < session.expires_at_epoch_ms

    def current_session(self) -> Session | None:
        session = self.get_session()
        if session is None:
            return None
        if not self.is_valid(session):
            logger.info("session expired, clearing")
            self.clear_session()
            return None
        return session
