from __future__ import annotations

from dataclasses import dataclass

from ..attachments import ImageAttachment
from ..envelope import Envelope
from ..models import Item, ItemPayload
from .base import BaseClient, parse_list

ITEMS_PATH = "/api/Items"


@dataclass
class ItemsClient(BaseClient):
    async def list_items(self, page_number: int = 1, page_size: int = 10) -> list[Item]:
        envelope = await self._request("GET", ITEMS_PATH, params=self._page_params(page_number, page_size))
        return parse_list(envelope, "items", Item)

    async def create_item(self, payload: ItemPayload, image: ImageAttachment) -> Envelope:
        return await self._request(
            "POST",
            ITEMS_PATH,
            form_fields=payload.to_form_fields(),
            files={"imageFile": image.as_file_spec()},
        )

    async def update_item(self, item_id: str, payload: ItemPayload, image: ImageAttachment) -> Envelope:
        fields = {"id": str(item_id), **payload.to_form_fields()}
        return await self._request(
            "PUT",
            f"{ITEMS_PATH}/{item_id}",
            form_fields=fields,
            files={"imageFile": image.as_file_spec()},
        )

    async def delete_item(self, item_id: str) -> Envelope:
        return await self._request("DELETE", f"{ITEMS_PATH}/{item_id}")
