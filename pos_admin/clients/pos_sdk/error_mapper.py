from __future__ import annotations

from typing import Mapping

from .exceptions import ApiError, RequestFailedError, UnauthenticatedError


def map_error(status_code: int, payload: Mapping[str, object] | None, *, authenticated: bool = True) -> ApiError:
    payload = payload or {}
    message = str(payload.get("message") or payload.get("title") or "Request failed")
    details = payload.get("errors") or payload.get("details")
    if status_code == 401 and authenticated:
        return UnauthenticatedError(
            code="UNAUTHENTICATED",
            message="Session is no longer valid",
            status_code=status_code,
            details=details,
        )
    return RequestFailedError(
        code=f"HTTP_{status_code}",
        message=message,
        status_code=status_code,
        details=details,
    )
