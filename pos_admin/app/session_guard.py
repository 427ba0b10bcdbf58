from __future__ import annotations

from dataclasses import dataclass

from pos_admin.app.navigation import Navigator, Route
from pos_admin.clients.pos_sdk.session_store import SessionStore


@dataclass(frozen=True)
class SessionValidation:
    valid: bool
    reason: str | None = None


def validate_session(store: SessionStore) -> SessionValidation:
    session = store.get_session()
    if session is None:
        return SessionValidation(valid=False, reason="missing_session")
    if not store.is_valid(session):
        store.clear_session()
        return SessionValidation(valid=False, reason="expired_session")
    return SessionValidation(valid=True)


class SessionGuard:
    def __init__(self, store: SessionStore, navigator: Navigator) -> None:
        self._store = store
        self._navigator = navigator

    def require_session(self, route: Route) -> bool:
        validation = validate_session(self._store)
        if validation.valid:
            return True

        self._navigator.redirect_to_login(f"{validation.reason or 'invalid_session'} ({route.value})")
        return False

    def logout(self) -> None:
        self._store.clear_session()
        self._navigator.go(Route.LOGIN)
