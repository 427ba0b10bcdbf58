from __future__ import annotations

from dataclasses import dataclass

from ..models import StockReportRow, Transaction
from .base import BaseClient, parse_list


@dataclass
class ReportsClient(BaseClient):
    async def pos_report(self, page_number: int = 1, page_size: int = 10) -> list[Transaction]:
        envelope = await self._request(
            "GET", "/api/POS/reports", params=self._page_params(page_number, page_size)
        )
        return parse_list(envelope, "posReport", Transaction)

    async def stock_report(self, page_number: int = 1, page_size: int = 10) -> list[StockReportRow]:
        envelope = await self._request(
            "GET", "/api/Items/stock", params=self._page_params(page_number, page_size)
        )
        return parse_list(envelope, "stockReport", StockReportRow)
