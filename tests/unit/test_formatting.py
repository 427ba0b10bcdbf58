from __future__ import annotations

from datetime import datetime, timezone

from pos_admin.app.formatting import format_currency, format_datetime, resolve_image_url
from pos_admin.app.table_printer import (
    ITEM_COLUMNS,
    item_row,
    print_table,
    render_table,
    stock_row,
    transaction_row,
)
from pos_admin.clients.pos_sdk.models import Item, StockReportRow, Transaction


def test_format_currency_idr() -> None:
    assert format_currency(1000) == "Rp1.000"
    assert format_currency(1234567) == "Rp1.234.567"
    assert format_currency(0) == "Rp0"
    assert format_currency(1500.5) == "Rp1.500,50"
    assert format_currency(-2500) == "-Rp2.500"
    assert format_currency(None) == "—"


def test_format_datetime_renders_in_jakarta_time() -> None:
    value = datetime(2024, 5, 1, 20, 30, tzinfo=timezone.utc)

    assert format_datetime(value) == "02 May 2024 03:30 WIB"
    assert format_datetime(datetime(2024, 5, 1, 0, 0)) == "01 May 2024 07:00 WIB"
    assert format_datetime(None) == "—"


def test_resolve_image_url() -> None:
    assert resolve_image_url("http://localhost:5000", "/img/pen.png") == "http://localhost:5000/img/pen.png"
    assert resolve_image_url("http://localhost:5000/", "img/pen.png") == "http://localhost:5000/img/pen.png"
    assert resolve_image_url("http://localhost:5000", "https://cdn.test/a.png") == "https://cdn.test/a.png"
    assert resolve_image_url("http://localhost:5000", None) is None


def test_rows_format_money_and_names() -> None:
    item = Item(id="1", name="Pen", price=1000, stock=3, category="ATK", imageUrl="/img/pen.png")
    transaction = Transaction(transactionId="t-1", totalPrice=3000, items=[])
    stock = StockReportRow(id="4", itemName="Ink", category="ATK", stock=0, price=2500)

    assert item_row(item, "http://localhost:5000")["image"] == "http://localhost:5000/img/pen.png"
    assert item_row(item)["price"] == "Rp1.000"
    assert transaction_row(transaction) == {"id": "t-1", "date": "—", "total": "Rp3.000", "lines": 0}
    assert stock_row(stock)["name"] == "Ink"


def test_render_table_aligns_numeric_columns() -> None:
    item = Item(id="1", name="Pen", price=1000, stock=3, category="ATK")

    lines = render_table([item_row(item)], ITEM_COLUMNS)

    assert lines[0] == "ID | Name |   Price | Stock | Category | Image"
    assert lines[1] == "---+------+---------+-------+----------+------"
    assert lines[2] == "1  | Pen  | Rp1.000 |     3 | ATK      | —"
    assert render_table([], ITEM_COLUMNS, empty_text="(no items)") == ["(no items)"]


def test_print_table_prints_title_and_empty_text(capsys) -> None:
    print_table("Items", [], ITEM_COLUMNS)

    assert capsys.readouterr().out == "\nItems\n(no results)\n"
