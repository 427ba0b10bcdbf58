from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    title: str
    description: str


def print_notification(notification: Notification) -> None:
    print(f"[{notification.kind.value}] {notification.title}: {notification.description}")


@dataclass
class NotificationCenter:
    """Toast-style feedback for mutations. Keeps a history and forwards to a sink."""

    sink: Callable[[Notification], None] | None = print_notification
    history: list[Notification] = field(default_factory=list)

    def success(self, description: str, title: str = "Success") -> Notification:
        return self._publish(Notification(NotificationKind.SUCCESS, title, description))

    def error(self, description: str, title: str = "Uh oh! an error occurred") -> Notification:
        return self._publish(Notification(NotificationKind.ERROR, title, description))

    def _publish(self, notification: Notification) -> Notification:
        self.history.append(notification)
        if self.sink is not None:
            self.sink(notification)
        return notification

    @property
    def last(self) -> Notification | None:
        return self.history[-1] if self.history else None
