from __future__ import annotations

from typing import Any

from pos_admin.app.gateways import build_pos_report_controller, build_stock_report_controller
from pos_admin.app.navigation import Route
from pos_admin.app.pages.console import PageContext
from pos_admin.app.resource_controller import ResourceListController
from pos_admin.app.state import LoadState
from pos_admin.app.table_printer import (
    STOCK_REPORT_COLUMNS,
    TRANSACTION_COLUMNS,
    ColumnDef,
    print_table,
    stock_row,
    transaction_row,
)

MENU = "[n]ext [p]rev [r]efresh [b]ack: "


class ReportPage:
    """Read-only paged listing used by both reports."""

    route: Route
    title: str
    columns: list[ColumnDef]

    def __init__(self, context: PageContext) -> None:
        self.context = context

    def build_controller(self) -> ResourceListController[Any, None]:
        raise NotImplementedError

    def to_row(self, entity: Any) -> dict[str, Any]:
        raise NotImplementedError

    async def run(self) -> None:
        context = self.context
        if not context.guard.require_session(self.route):
            return
        controller = self.build_controller()
        await controller.mount()
        try:
            while context.navigator.current == self.route:
                page = controller.page
                if page.status == LoadState.FAILED:
                    context.console.say(f"[error] {page.error}")
                else:
                    print_table(f"{self.title} (page {page.page_number})", [self.to_row(row) for row in page.items], self.columns)
                choice = (await context.console.ask(MENU)).lower()
                if choice == "b":
                    context.navigator.go(Route.DASHBOARD)
                elif choice == "r":
                    await controller.refresh()
                elif choice == "n":
                    await controller.load(page_number=page.page_number + 1)
                elif choice == "p":
                    await controller.load(page_number=page.page_number - 1)
                else:
                    context.console.say("[error] Invalid option.")
        finally:
            controller.unmount()


class PosReportPage(ReportPage):
    route = Route.POS_REPORT
    title = "POS Report"
    columns = TRANSACTION_COLUMNS

    def build_controller(self) -> ResourceListController[Any, None]:
        context = self.context
        return build_pos_report_controller(context.api, context.navigator, context.notifications, context.page_size)

    def to_row(self, entity: Any) -> dict[str, Any]:
        return transaction_row(entity)


class StockReportPage(ReportPage):
    route = Route.STOCK_REPORT
    title = "Stock Report"
    columns = STOCK_REPORT_COLUMNS

    def build_controller(self) -> ResourceListController[Any, None]:
        context = self.context
        return build_stock_report_controller(context.api, context.navigator, context.notifications, context.page_size)

    def to_row(self, entity: Any) -> dict[str, Any]:
        return stock_row(entity)
