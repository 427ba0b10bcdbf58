from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Route(str, Enum):
    LOGIN = "login"
    REGISTER = "register"
    DASHBOARD = "dashboard"
    ITEMS = "items"
    POS = "pos"
    POS_REPORT = "reports.pos"
    STOCK_REPORT = "reports.stock"
    EXIT = "exit"


@dataclass(frozen=True)
class NavRoute:
    route: Route
    option: str
    label: str


SIDEBAR: list[NavRoute] = [
    NavRoute(Route.ITEMS, "1", "Items"),
    NavRoute(Route.POS, "2", "POS"),
    NavRoute(Route.POS_REPORT, "3", "POS Report"),
    NavRoute(Route.STOCK_REPORT, "4", "Stock Report"),
]
LOGOUT_OPTION = "5"
EXIT_OPTION = "0"


def resolve_option(option: str) -> NavRoute | None:
    return next((item for item in SIDEBAR if item.option == option.strip()), None)


@dataclass
class Navigator:
    current: Route = Route.LOGIN
    history: list[Route] = field(default_factory=list)
    login_redirects: int = 0
    last_redirect_reason: str | None = None

    def go(self, route: Route) -> None:
        self.history.append(self.current)
        self.current = route

    def redirect_to_login(self, reason: str) -> None:
        self.login_redirects += 1
        self.last_redirect_reason = reason
        self.go(Route.LOGIN)
