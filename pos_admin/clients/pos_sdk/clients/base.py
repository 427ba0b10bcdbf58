from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError as PydanticValidationError

from ..envelope import Envelope
from ..exceptions import RequestFailedError
from ..http_client import HttpClient
from ..models import PageRequest


@dataclass
class BaseClient:
    http: HttpClient

    async def _request(self, method: str, path: str, **kwargs: Any) -> Envelope:
        return await self.http.request(method, path, **kwargs)

    @staticmethod
    def _page_params(page_number: int, page_size: int) -> dict[str, int]:
        return PageRequest(page_number=page_number, page_size=page_size).to_params()


def parse_list(envelope: Envelope, key: str, model_type: type[BaseModel]) -> list[Any]:
    """Pull ``data[key]`` out of an envelope as a list of ``model_type``."""
    raw = envelope.data_field(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise RequestFailedError(
            code="INVALID_RESPONSE",
            message=f"Expected data.{key} to be a list",
        )
    try:
        return [model_type.model_validate(row) for row in raw]
    except PydanticValidationError as exc:
        raise RequestFailedError(
            code="INVALID_RESPONSE",
            message=f"Malformed entry in data.{key}",
            details=exc.errors(include_url=False),
        ) from exc


def parse_object(payload: Any, model_type: type[BaseModel]) -> Any:
    try:
        return model_type.model_validate(payload)
    except PydanticValidationError as exc:
        raise RequestFailedError(
            code="INVALID_RESPONSE",
            message=f"Malformed {model_type.__name__} payload",
            details=exc.errors(include_url=False),
        ) from exc
