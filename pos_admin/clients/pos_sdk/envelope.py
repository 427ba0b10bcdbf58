from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Envelope(BaseModel):
    """Response wrapper shared by every endpoint: ``{isSuccess, message, data}``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    is_success: bool = Field(alias="isSuccess")
    message: str | None = None
    data: Any = None

    def data_field(self, key: str) -> Any:
        if isinstance(self.data, dict):
            return self.data.get(key)
        return None
