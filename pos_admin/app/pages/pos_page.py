from __future__ import annotations

from pos_admin.app.error_presenter import build_error_payload, print_error_banner
from pos_admin.app.formatting import format_currency, format_datetime
from pos_admin.app.forms import TransactionDraft, TransactionLineDraft, estimate_total
from pos_admin.app.gateways import TransactionsGateway, build_items_controller, build_transactions_controller
from pos_admin.app.navigation import Route
from pos_admin.app.pages.console import Console, PageContext
from pos_admin.app.pages.items_page import report_mutation
from pos_admin.app.state import LoadState
from pos_admin.app.table_printer import (
    TRANSACTION_COLUMNS,
    TRANSACTION_LINE_COLUMNS,
    print_table,
    transaction_line_row,
    transaction_row,
)
from pos_admin.clients.pos_sdk.exceptions import ApiError, UnauthenticatedError
from pos_admin.clients.pos_sdk.models import Item, Transaction

MENU = "[t]ransaction [v]iew detail [n]ext [p]rev [r]efresh [b]ack: "


def render_transaction_detail(console: Console, transaction: Transaction) -> None:
    console.say(f"\nTransaction {transaction.id}")
    console.say(f"Date: {format_datetime(transaction.date)}")
    print_table("Items", [transaction_line_row(line) for line in transaction.items], TRANSACTION_LINE_COLUMNS)
    console.say(f"Total: {format_currency(transaction.total_price)}")


async def read_transaction_draft(console: Console, catalog: list[Item]) -> TransactionDraft:
    for item in catalog:
        console.say(f"  {item.id}. {item.name} ({format_currency(item.price)}, stock {item.stock})")
    draft = TransactionDraft(lines=[])
    while True:
        item_id = await console.ask("Item ID (empty to finish): ")
        if not item_id:
            break
        quantity = await console.ask("Quantity [1]: ") or "1"
        draft.lines.append(TransactionLineDraft(item_id=item_id, quantity=quantity))
    total = estimate_total(draft, catalog)
    if total is not None:
        console.say(f"Estimated total: {format_currency(total)}")
    return draft


class PosPage:
    def __init__(self, context: PageContext) -> None:
        self.context = context

    async def run(self) -> None:
        context = self.context
        if not context.guard.require_session(Route.POS):
            return
        console = context.console
        controller = build_transactions_controller(
            context.api, context.navigator, context.notifications, context.page_size
        )
        await controller.mount()
        try:
            while context.navigator.current == Route.POS:
                page = controller.page
                if page.status == LoadState.FAILED:
                    console.say(f"[error] {page.error}")
                else:
                    print_table(
                        f"Transactions (page {page.page_number})",
                        [transaction_row(transaction) for transaction in page.items],
                        TRANSACTION_COLUMNS,
                        empty_text="(no transactions yet)",
                    )
                choice = (await console.ask(MENU)).lower()
                if choice == "b":
                    context.navigator.go(Route.DASHBOARD)
                elif choice == "r":
                    await controller.refresh()
                elif choice == "n":
                    await controller.load(page_number=page.page_number + 1)
                elif choice == "p":
                    await controller.load(page_number=page.page_number - 1)
                elif choice == "t":
                    catalog = await self._catalog()
                    if catalog is None:
                        continue
                    draft = await read_transaction_draft(console, catalog)
                    report_mutation(console, await controller.create(draft))
                elif choice == "v":
                    await self._detail(controller.gateway)
                else:
                    console.say("[error] Invalid option.")
        finally:
            controller.unmount()

    async def _catalog(self) -> list[Item] | None:
        context = self.context
        items = build_items_controller(context.api, context.navigator, context.notifications, 100)
        await items.mount()
        items.unmount()
        if context.navigator.current != Route.POS:
            return None
        if items.page.status == LoadState.FAILED:
            context.console.say(f"[error] {items.page.error}")
            return None
        return list(items.page.items)

    async def _detail(self, gateway: TransactionsGateway) -> None:
        console = self.context.console
        transaction_id = await console.ask("Transaction ID: ")
        if not transaction_id:
            return
        try:
            transaction = await gateway.detail(transaction_id)
        except UnauthenticatedError:
            self.context.navigator.redirect_to_login("transactions.detail")
            return
        except ApiError as error:
            print_error_banner(build_error_payload(error))
            return
        render_transaction_detail(console, transaction)
