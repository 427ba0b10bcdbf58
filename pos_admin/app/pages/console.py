from __future__ import annotations

import asyncio
from dataclasses import dataclass

from pos_admin.app.navigation import Navigator
from pos_admin.app.notifications import NotificationCenter
from pos_admin.app.session_guard import SessionGuard
from pos_admin.clients.pos_sdk.session import ApiSession


class Console:
    """Line-oriented terminal I/O. Input runs off the event loop thread."""

    async def ask(self, prompt: str) -> str:
        return (await asyncio.to_thread(input, prompt)).strip()

    def say(self, message: str = "") -> None:
        print(message)


@dataclass
class PageContext:
    api: ApiSession
    navigator: Navigator
    notifications: NotificationCenter
    guard: SessionGuard
    console: Console
    page_size: int = 10

    @property
    def base_url(self) -> str:
        return self.api.config.api_base_url


def print_field_errors(console: Console, field_errors: dict[str, str]) -> None:
    for key, message in field_errors.items():
        console.say(f"[invalid] {key}: {message}")
