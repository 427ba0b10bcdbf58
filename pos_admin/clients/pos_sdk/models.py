from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _to_identifier(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(int(value))
    return value


Identifier = Annotated[str, BeforeValidator(_to_identifier)]


class Session(BaseModel):
    token: str
    expires_at_epoch_ms: int


class LoginData(BaseModel):
    model_config = ConfigDict(extra="allow")

    token: str


class PageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page_number: int = Field(default=1, ge=1, alias="pageNumber")
    page_size: int = Field(default=10, ge=1, alias="pageSize")

    def to_params(self) -> dict[str, int]:
        return self.model_dump(by_alias=True)


class Item(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Identifier
    name: str
    price: float
    stock: int
    category: str
    image_url: str | None = Field(default=None, alias="imageUrl")


class ItemPayload(BaseModel):
    """Typed item fields, ready for multipart submission."""

    name: str
    price: float
    stock: int
    category: str

    def to_form_fields(self) -> dict[str, str]:
        price = int(self.price) if float(self.price).is_integer() else self.price
        return {
            "name": self.name,
            "price": str(price),
            "stock": str(self.stock),
            "category": self.category,
        }


class TransactionLine(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Identifier | None = None
    item_name: str | None = Field(default=None, alias="itemName")
    price: float = 0
    quantity: int = 0

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


class Transaction(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    transaction_id: Identifier = Field(alias="transactionId")
    date: datetime | None = None
    total_price: float = Field(default=0, alias="totalPrice")
    items: list[TransactionLine] = Field(default_factory=list)

    @property
    def id(self) -> str:
        return self.transaction_id


class TransactionEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    item_id: int | str = Field(alias="itemId")
    quantity: int = Field(ge=1)


class TransactionRequest(BaseModel):
    items: list[TransactionEntry]

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class StockReportRow(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Identifier | None = None
    name: str | None = None
    item_name: str | None = Field(default=None, alias="itemName")
    category: str | None = None
    stock: int | None = None
    price: float | None = None

    @property
    def display_name(self) -> str | None:
        return self.name or self.item_name
