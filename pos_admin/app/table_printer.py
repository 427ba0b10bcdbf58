from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pos_admin.app.formatting import EMPTY_VALUE, format_currency, format_datetime, resolve_image_url
from pos_admin.clients.pos_sdk.models import Item, StockReportRow, Transaction, TransactionLine


@dataclass(frozen=True)
class ColumnDef:
    key: str
    label: str
    numeric: bool = False

    def cell(self, row: dict[str, Any]) -> str:
        return normalize_value(row.get(self.key))

    def pad(self, text: str, width: int) -> str:
        return text.rjust(width) if self.numeric else text.ljust(width)

    def fit(self, rows: list[dict[str, Any]]) -> int:
        return max([len(self.label), *(len(self.cell(row)) for row in rows)])


ITEM_COLUMNS = [
    ColumnDef("id", "ID"),
    ColumnDef("name", "Name"),
    ColumnDef("price", "Price", numeric=True),
    ColumnDef("stock", "Stock", numeric=True),
    ColumnDef("category", "Category"),
    ColumnDef("image", "Image"),
]
TRANSACTION_COLUMNS = [
    ColumnDef("id", "Transaction"),
    ColumnDef("date", "Date"),
    ColumnDef("total", "Total", numeric=True),
    ColumnDef("lines", "Items", numeric=True),
]
TRANSACTION_LINE_COLUMNS = [
    ColumnDef("item", "Item"),
    ColumnDef("quantity", "Qty", numeric=True),
    ColumnDef("price", "Price", numeric=True),
    ColumnDef("subtotal", "Subtotal", numeric=True),
]
STOCK_REPORT_COLUMNS = [
    ColumnDef("id", "ID"),
    ColumnDef("name", "Name"),
    ColumnDef("category", "Category"),
    ColumnDef("stock", "Stock", numeric=True),
    ColumnDef("price", "Price", numeric=True),
]


def item_row(item: Item, base_url: str | None = None) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "price": format_currency(item.price),
        "stock": item.stock,
        "category": item.category,
        "image": resolve_image_url(base_url, item.image_url) if base_url else item.image_url,
    }


def transaction_row(transaction: Transaction) -> dict[str, Any]:
    return {
        "id": transaction.id,
        "date": format_datetime(transaction.date),
        "total": format_currency(transaction.total_price),
        "lines": len(transaction.items),
    }


def transaction_line_row(line: TransactionLine) -> dict[str, Any]:
    return {
        "item": line.item_name,
        "quantity": line.quantity,
        "price": format_currency(line.price),
        "subtotal": format_currency(line.subtotal),
    }


def stock_row(row: StockReportRow) -> dict[str, Any]:
    return {
        "id": row.id,
        "name": row.display_name,
        "category": row.category,
        "stock": row.stock,
        "price": format_currency(row.price),
    }


def normalize_value(value: Any) -> str:
    if value is None or value == "":
        return EMPTY_VALUE
    if isinstance(value, datetime):
        return format_datetime(value)
    return str(value)


def render_table(rows: list[dict[str, Any]], columns: list[ColumnDef], empty_text: str = "(no results)") -> list[str]:
    if not rows:
        return [empty_text]
    widths = [column.fit(rows) for column in columns]
    lines = [
        " | ".join(column.pad(column.label, width) for column, width in zip(columns, widths)).rstrip(),
        "-+-".join("-" * width for width in widths),
    ]
    for row in rows:
        lines.append(" | ".join(column.pad(column.cell(row), width) for column, width in zip(columns, widths)).rstrip())
    return lines


def print_table(title: str, rows: list[dict[str, Any]], columns: list[ColumnDef], empty_text: str = "(no results)") -> None:
    print(f"\n{title}")
    for line in render_table(rows, columns, empty_text):
        print(line)
