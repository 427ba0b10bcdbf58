from __future__ import annotations

import asyncio

from pos_admin import __version__
from pos_admin.app.config import AppConfig
from pos_admin.app.infrastructure.logging.logger import get_logger
from pos_admin.app.navigation import Navigator, Route
from pos_admin.app.notifications import NotificationCenter
from pos_admin.app.pages.auth_pages import LoginPage, RegisterPage
from pos_admin.app.pages.console import Console, PageContext
from pos_admin.app.pages.dashboard import DashboardPage
from pos_admin.app.pages.items_page import ItemsPage
from pos_admin.app.pages.pos_page import PosPage
from pos_admin.app.pages.reports_page import PosReportPage, StockReportPage
from pos_admin.app.session_guard import SessionGuard
from pos_admin.clients.pos_sdk.config import ClientConfig, ConfigError, load_config
from pos_admin.clients.pos_sdk.session import ApiSession

PAGES = {
    Route.LOGIN: LoginPage,
    Route.REGISTER: RegisterPage,
    Route.DASHBOARD: DashboardPage,
    Route.ITEMS: ItemsPage,
    Route.POS: PosPage,
    Route.POS_REPORT: PosReportPage,
    Route.STOCK_REPORT: StockReportPage,
}


def _print_runtime_config(config: ClientConfig, app_config: AppConfig) -> None:
    print(f"POS Admin {__version__}")
    print(f"Base URL: {config.api_base_url}")
    print(f"Timeout: {config.timeout_seconds}s")
    print(f"Verify SSL: {config.verify_ssl}")
    print(f"Page size: {app_config.page_size}")
    print(f"Environment: {app_config.env_name}")


class PosAdminApp:
    def __init__(
        self,
        *,
        api: ApiSession,
        app_config: AppConfig | None = None,
        console: Console | None = None,
        navigator: Navigator | None = None,
        notifications: NotificationCenter | None = None,
    ) -> None:
        self.api = api
        self.app_config = app_config or AppConfig()
        self.navigator = navigator or Navigator()
        self.context = PageContext(
            api=api,
            navigator=self.navigator,
            notifications=notifications or NotificationCenter(),
            guard=SessionGuard(api.session_store, self.navigator),
            console=console or Console(),
            page_size=self.app_config.page_size,
        )

    async def run(self) -> None:
        if self.api.current() is not None:
            self.navigator.go(Route.DASHBOARD)
        try:
            while self.navigator.current != Route.EXIT:
                page = PAGES[self.navigator.current](self.context)
                await page.run()
        finally:
            await self.api.aclose()


def main() -> None:
    try:
        app_config = AppConfig.from_env()
        config = load_config()
    except (ConfigError, ValueError) as error:
        print(f"[config-error] {error}")
        raise SystemExit(2) from error

    get_logger("pos_admin", app_config.log_level)
    _print_runtime_config(config, app_config)
    app = PosAdminApp(api=ApiSession(config=config), app_config=app_config)
    try:
        asyncio.run(app.run())
    except (KeyboardInterrupt, EOFError):
        print("\nBye.")


if __name__ == "__main__":
    main()
