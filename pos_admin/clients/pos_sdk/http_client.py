from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from .config import ClientConfig
from .envelope import Envelope
from .error_mapper import map_error
from .exceptions import ApplicationError, RequestFailedError, TransportError, UnauthenticatedError
from .session_store import SessionStore

logger = logging.getLogger(__name__)

FileSpec = tuple[str, bytes, str]


@dataclass
class LastOperation:
    method: str
    path: str
    status_code: int | None
    duration_ms: int
    result: str


@dataclass
class HttpClient:
    config: ClientConfig
    session_store: SessionStore
    client: httpx.AsyncClient | None = None
    last_operation: LastOperation | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.client is None:
            self.client = httpx.AsyncClient(
                base_url=self.config.api_base_url,
                timeout=self.config.timeout_seconds,
                verify=self.config.verify_ssl,
            )

    async def aclose(self) -> None:
        if self.client is not None:
            await self.client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        form_fields: dict[str, str] | None = None,
        files: dict[str, FileSpec] | None = None,
        authenticated: bool = True,
    ) -> Envelope:
        if self.client is None:
            raise RuntimeError("HTTP client not initialized")
        normalized_method = method.upper()
        normalized_path = path if path.startswith("/") else f"/{path}"
        headers = {"Accept": "application/json"}
        if authenticated:
            session = self.session_store.current_session()
            if session is None:
                self._record(normalized_method, normalized_path, None, time.monotonic(), "unauthenticated")
                raise UnauthenticatedError(code="SESSION_MISSING", message="No active session")
            headers["Authorization"] = f"Bearer {session.token}"

        started = time.monotonic()
        try:
            response = await self.client.request(
                normalized_method,
                normalized_path,
                params=params,
                json=json_body,
                data=form_fields,
                files=files,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            self._record(normalized_method, normalized_path, None, started, "transport_error")
            raise TransportError(
                code="TRANSPORT_ERROR",
                message=str(exc) or type(exc).__name__,
                details={"type": type(exc).__name__},
            ) from exc

        if not response.is_success:
            payload = _safe_json(response)
            error = map_error(response.status_code, payload, authenticated=authenticated)
            if isinstance(error, UnauthenticatedError):
                self.session_store.clear_session()
            self._record(normalized_method, normalized_path, response.status_code, started, "error")
            raise error

        try:
            envelope = self._parse_envelope(response)
        except RequestFailedError:
            self._record(normalized_method, normalized_path, response.status_code, started, "invalid_response")
            raise
        if not envelope.is_success:
            self._record(normalized_method, normalized_path, response.status_code, started, "application_error")
            raise ApplicationError(
                code="APPLICATION_ERROR",
                message=envelope.message or "Request was not successful",
                status_code=response.status_code,
                details=envelope.data,
            )
        self._record(normalized_method, normalized_path, response.status_code, started, "success")
        return envelope

    @staticmethod
    def _parse_envelope(response: httpx.Response) -> Envelope:
        try:
            payload = response.json()
        except ValueError as exc:
            raise RequestFailedError(
                code="INVALID_RESPONSE",
                message="Response body is not valid JSON",
                status_code=response.status_code,
            ) from exc
        try:
            return Envelope.model_validate(payload)
        except PydanticValidationError as exc:
            raise RequestFailedError(
                code="INVALID_RESPONSE",
                message="Response body is not a valid envelope",
                status_code=response.status_code,
                details=exc.errors(include_url=False),
            ) from exc

    def _record(self, method: str, path: str, status_code: int | None, started: float, result: str) -> None:
        self.last_operation = LastOperation(
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
        )
        logger.info(
            "%s %s -> %s (%s, %sms)",
            method,
            path,
            status_code if status_code is not None else "-",
            result,
            self.last_operation.duration_ms,
        )


def _safe_json(response: httpx.Response) -> dict[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        return {"message": response.text}
    return payload if isinstance(payload, dict) else {"details": payload}
