from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass
class ResourcePage(Generic[T]):
    """Per-page collection state; exactly one of loading/items/error is rendered."""

    items: list[T] = field(default_factory=list)
    status: LoadState = LoadState.IDLE
    error: str | None = None
    page_number: int = 1
    page_size: int = 10

    @property
    def render_state(self) -> str:
        if self.status == LoadState.LOADING:
            return "loading"
        if self.status == LoadState.FAILED:
            return "error"
        return "items"

    def start_loading(self) -> None:
        self.status = LoadState.LOADING
        self.error = None

    def apply_items(self, items: list[T], page_number: int | None = None, page_size: int | None = None) -> None:
        self.items = list(items)
        if page_number is not None:
            self.page_number = page_number
        if page_size is not None:
            self.page_size = page_size
        self.status = LoadState.LOADED
        self.error = None

    def apply_error(self, message: str) -> None:
        self.status = LoadState.FAILED
        self.error = message

    def reset(self) -> None:
        self.status = LoadState.IDLE
        self.error = None
