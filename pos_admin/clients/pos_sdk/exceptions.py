from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ApiError(Exception):
    code: str
    message: str
    status_code: int | None = None
    details: object | None = None

    def __str__(self) -> str:
        status = self.status_code if self.status_code is not None else "-"
        return f"[{status}] {self.code}: {self.message}"


class UnauthenticatedError(ApiError):
    """Session missing, expired, or rejected by the API with a 401."""


class RequestFailedError(ApiError):
    """Transport-level failure: any non-2xx other than an authenticated 401."""


class TransportError(RequestFailedError):
    """Network/transport failure before an HTTP response was returned."""


class ApplicationError(ApiError):
    """The envelope reported isSuccess=false on a successful HTTP status."""
