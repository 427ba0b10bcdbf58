from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pos_admin.clients.pos_sdk.attachments import ImageAttachment
from pos_admin.clients.pos_sdk.models import Item, ItemPayload, TransactionEntry


class FormStatus(str, Enum):
    IDLE = "idle"
    DIRTY = "dirty"
    VALID = "valid"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class ItemDraft:
    name: str = ""
    price: str = ""
    stock: str = ""
    category: str = ""
    image: ImageAttachment | None = None

    @classmethod
    def from_item(cls, item: Item) -> "ItemDraft":
        # The image is never carried over; it has to be attached again.
        price = int(item.price) if float(item.price).is_integer() else item.price
        return cls(
            name=item.name,
            price=str(price),
            stock=str(item.stock),
            category=item.category,
            image=None,
        )


@dataclass
class TransactionLineDraft:
    item_id: str = ""
    quantity: str = "1"


@dataclass
class TransactionDraft:
    lines: list[TransactionLineDraft] = field(default_factory=lambda: [TransactionLineDraft()])

    def add_line(self) -> TransactionLineDraft:
        line = TransactionLineDraft()
        self.lines.append(line)
        return line

    def remove_line(self, index: int) -> None:
        if 0 <= index < len(self.lines):
            del self.lines[index]


@dataclass
class CredentialsDraft:
    username: str = ""
    password: str = ""


@dataclass
class FormResult:
    values: Any
    field_errors: dict[str, str]
    image_error: str | None = None

    @property
    def first_invalid_field(self) -> str | None:
        if self.field_errors:
            return next(iter(self.field_errors))
        if self.image_error:
            return "image"
        return None

    @property
    def is_valid(self) -> bool:
        return not self.field_errors and self.image_error is None

    @property
    def all_errors(self) -> dict[str, str]:
        errors = dict(self.field_errors)
        if self.image_error:
            errors["image"] = self.image_error
        return errors


@dataclass
class FormState:
    status: FormStatus = FormStatus.IDLE
    submit_enabled: bool = False
    submit_disabled_reason: str = "Fill in the required fields."


def _normalize_required_text(value: str | None) -> str:
    return (value or "").strip()


def _parse_positive_number(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def validate_item_draft(draft: ItemDraft) -> FormResult:
    """Check every item field in one pass and collect all messages.

    Values are coerced to an ``ItemPayload`` only when nothing failed. The image
    check is reported on its own so a form with valid fields but no image still
    tells the user exactly what is missing.
    """
    name = _normalize_required_text(draft.name)
    raw_price = _normalize_required_text(draft.price)
    raw_stock = _normalize_required_text(draft.stock)
    category = _normalize_required_text(draft.category)

    field_errors: dict[str, str] = {}
    if not name:
        field_errors["name"] = "Name is required"

    price: float | None = None
    if not raw_price:
        field_errors["price"] = "Price is required"
    else:
        price = _parse_positive_number(raw_price)
        if price is None:
            field_errors["price"] = "Price must be a positive number"

    stock: int | None = None
    if not raw_stock:
        field_errors["stock"] = "Stock is required"
    else:
        stock = _parse_int(raw_stock)
        if stock is None or stock < 0:
            field_errors["stock"] = "Stock must be a non-negative integer"

    if not category:
        field_errors["category"] = "Category is required"

    image_error = None if draft.image is not None else "Image is required"

    values: ItemPayload | None = None
    if not field_errors:
        values = ItemPayload(name=name, price=price, stock=stock, category=category)
    return FormResult(values=values, field_errors=field_errors, image_error=image_error)


def validate_transaction_draft(draft: TransactionDraft) -> FormResult:
    field_errors: dict[str, str] = {}
    merged: dict[int, int] = {}
    if not draft.lines:
        field_errors["items"] = "Add at least one item"

    for index, line in enumerate(draft.lines):
        item_id = _parse_int(_normalize_required_text(line.item_id))
        quantity = _parse_int(_normalize_required_text(line.quantity))
        if item_id is None:
            field_errors[f"items.{index}.item_id"] = "Item is required"
        if quantity is None or quantity < 1:
            field_errors[f"items.{index}.quantity"] = "Quantity must be at least 1"
        if item_id is not None and quantity is not None and quantity >= 1:
            merged[item_id] = merged.get(item_id, 0) + quantity

    values: list[TransactionEntry] | None = None
    if not field_errors:
        values = [TransactionEntry(item_id=item_id, quantity=quantity) for item_id, quantity in merged.items()]
    return FormResult(values=values, field_errors=field_errors)


def validate_credentials(draft: CredentialsDraft) -> FormResult:
    username = _normalize_required_text(draft.username)
    password = draft.password or ""
    field_errors: dict[str, str] = {}
    if not username:
        field_errors["username"] = "Username is required"
    if not password:
        field_errors["password"] = "Password is required"
    return FormResult(values={"username": username, "password": password}, field_errors=field_errors)


def build_form_state(result: FormResult) -> FormState:
    if result.is_valid:
        return FormState(status=FormStatus.VALID, submit_enabled=True, submit_disabled_reason="")

    first_invalid_field = result.first_invalid_field or "form"
    return FormState(
        status=FormStatus.DIRTY,
        submit_enabled=False,
        submit_disabled_reason=f"Fix '{first_invalid_field}' before submitting.",
    )


def estimate_total(draft: TransactionDraft, catalog: Iterable[Item]) -> float | None:
    """Preview the transaction total from known prices; None if any line is unresolved."""
    prices = {item.id: item.price for item in catalog}
    total = 0.0
    for line in draft.lines:
        item_id = _parse_int(_normalize_required_text(line.item_id))
        quantity = _parse_int(_normalize_required_text(line.quantity))
        if item_id is None or str(item_id) not in prices or quantity is None or quantity < 1:
            return None
        total += prices[str(item_id)] * quantity
    return total
