from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..envelope import Envelope
from ..models import Transaction, TransactionEntry, TransactionRequest
from .base import BaseClient, parse_list, parse_object

TRANSACTIONS_PATH = "/api/POS/transactions"


@dataclass
class TransactionsClient(BaseClient):
    async def list_transactions(self, page_number: int = 1, page_size: int = 10) -> list[Transaction]:
        envelope = await self._request(
            "GET", TRANSACTIONS_PATH, params=self._page_params(page_number, page_size)
        )
        return parse_list(envelope, "transactions", Transaction)

    async def get_transaction(self, transaction_id: str) -> Transaction:
        envelope = await self._request("GET", f"{TRANSACTIONS_PATH}/{transaction_id}")
        return parse_object(envelope.data, Transaction)

    async def create_transaction(self, entries: Iterable[TransactionEntry]) -> Envelope:
        request = TransactionRequest(items=list(entries))
        return await self._request("POST", TRANSACTIONS_PATH, json_body=request.to_json())
