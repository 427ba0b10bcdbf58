from __future__ import annotations

from typing import Any

from pos_admin.app.forms import ItemDraft, TransactionDraft, validate_item_draft, validate_transaction_draft
from pos_admin.app.navigation import Navigator
from pos_admin.app.notifications import NotificationCenter
from pos_admin.app.resource_controller import ResourceGateway, ResourceListController, ResourceMessages
from pos_admin.clients.pos_sdk.clients.items_client import ItemsClient
from pos_admin.clients.pos_sdk.clients.reports_client import ReportsClient
from pos_admin.clients.pos_sdk.clients.transactions_client import TransactionsClient
from pos_admin.clients.pos_sdk.models import Item, StockReportRow, Transaction
from pos_admin.clients.pos_sdk.session import ApiSession

ITEM_MESSAGES = ResourceMessages(
    plural="items",
    create_success="Item added successfully",
    create_failed="Failed to add new item",
    update_success="Item updated successfully",
    update_failed="Failed to update item",
    delete_success="Item deleted successfully",
    delete_failed="Failed to delete item",
)
TRANSACTION_MESSAGES = ResourceMessages(
    plural="transactions",
    create_success="Transaction submitted successfully",
    create_failed="Failed to submit transaction",
)
POS_REPORT_MESSAGES = ResourceMessages(plural="POS report")
STOCK_REPORT_MESSAGES = ResourceMessages(plural="stock report")


class ItemsGateway(ResourceGateway[Item, ItemDraft]):
    def __init__(self, client: ItemsClient) -> None:
        self.client = client

    async def fetch(self, page_number: int, page_size: int) -> list[Item]:
        return await self.client.list_items(page_number, page_size)

    async def create(self, values: Any, draft: ItemDraft) -> None:
        await self.client.create_item(values, draft.image)

    async def update(self, entity_id: str, values: Any, draft: ItemDraft) -> None:
        await self.client.update_item(entity_id, values, draft.image)

    async def delete(self, entity_id: str) -> None:
        await self.client.delete_item(entity_id)

    def to_draft(self, entity: Item) -> ItemDraft:
        return ItemDraft.from_item(entity)


class TransactionsGateway(ResourceGateway[Transaction, TransactionDraft]):
    def __init__(self, client: TransactionsClient) -> None:
        self.client = client

    async def fetch(self, page_number: int, page_size: int) -> list[Transaction]:
        return await self.client.list_transactions(page_number, page_size)

    async def create(self, values: Any, draft: TransactionDraft) -> None:
        await self.client.create_transaction(values)

    async def detail(self, transaction_id: str) -> Transaction:
        return await self.client.get_transaction(transaction_id)


class PosReportGateway(ResourceGateway[Transaction, None]):
    def __init__(self, client: ReportsClient) -> None:
        self.client = client

    async def fetch(self, page_number: int, page_size: int) -> list[Transaction]:
        return await self.client.pos_report(page_number, page_size)


class StockReportGateway(ResourceGateway[StockReportRow, None]):
    def __init__(self, client: ReportsClient) -> None:
        self.client = client

    async def fetch(self, page_number: int, page_size: int) -> list[StockReportRow]:
        return await self.client.stock_report(page_number, page_size)


def build_items_controller(
    api: ApiSession, navigator: Navigator, notifications: NotificationCenter, page_size: int = 10
) -> ResourceListController[Item, ItemDraft]:
    return ResourceListController(
        gateway=ItemsGateway(api.items_client()),
        navigator=navigator,
        notifications=notifications,
        messages=ITEM_MESSAGES,
        validator=validate_item_draft,
        page_size=page_size,
    )


def build_transactions_controller(
    api: ApiSession, navigator: Navigator, notifications: NotificationCenter, page_size: int = 10
) -> ResourceListController[Transaction, TransactionDraft]:
    return ResourceListController(
        gateway=TransactionsGateway(api.transactions_client()),
        navigator=navigator,
        notifications=notifications,
        messages=TRANSACTION_MESSAGES,
        validator=validate_transaction_draft,
        page_size=page_size,
    )


def build_pos_report_controller(
    api: ApiSession, navigator: Navigator, notifications: NotificationCenter, page_size: int = 10
) -> ResourceListController[Transaction, None]:
    return ResourceListController(
        gateway=PosReportGateway(api.reports_client()),
        navigator=navigator,
        notifications=notifications,
        messages=POS_REPORT_MESSAGES,
        page_size=page_size,
    )


def build_stock_report_controller(
    api: ApiSession, navigator: Navigator, notifications: NotificationCenter, page_size: int = 10
) -> ResourceListController[StockReportRow, None]:
    return ResourceListController(
        gateway=StockReportGateway(api.reports_client()),
        navigator=navigator,
        notifications=notifications,
        messages=STOCK_REPORT_MESSAGES,
        page_size=page_size,
    )
