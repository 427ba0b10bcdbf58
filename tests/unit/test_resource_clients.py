from __future__ import annotations

import asyncio
import json

import httpx

from pos_admin.clients.pos_sdk.attachments import ImageAttachment
from pos_admin.clients.pos_sdk.models import ItemPayload, TransactionEntry


def _envelope(data=None, *, success: bool = True, message: str | None = None) -> dict:
    return {"isSuccess": success, "message": message, "data": data}


class Recorder:
    def __init__(self, responses: dict[tuple[str, str], dict]) -> None:
        self.responses = responses
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = self.responses.get((request.method, request.url.path), _envelope())
        return httpx.Response(200, json=body)


def test_login_and_register_use_auth_paths_without_bearer(make_api) -> None:
    recorder = Recorder(
        {
            ("POST", "/api/Auth/Login"): _envelope({"token": "jwt-1"}),
            ("POST", "/api/Auth/Register"): _envelope(message="Registered"),
        }
    )
    api = make_api(recorder)

    async def scenario():
        login = await api.auth_client().login("alice", "pw")
        message = await api.auth_client().register("bob", "pw")
        return login, message

    login, message = asyncio.run(scenario())

    assert login.token == "jwt-1"
    assert message == "Registered"
    assert json.loads(recorder.requests[0].content) == {"username": "alice", "password": "pw"}
    assert all("Authorization" not in request.headers for request in recorder.requests)


def test_list_items_sends_paging_params_and_normalises_ids(make_api, store) -> None:
    recorder = Recorder(
        {
            ("GET", "/api/Items"): _envelope(
                {"items": [{"id": 1, "name": "Pen", "price": 1000, "stock": 3, "category": "ATK", "imageUrl": "/img/pen.png"}]}
            )
        }
    )
    api = make_api(recorder)
    store.set_session("tkn", 60_000)

    items = asyncio.run(api.items_client().list_items(2, 5))

    request = recorder.requests[0]
    assert request.url.params["pageNumber"] == "2"
    assert request.url.params["pageSize"] == "5"
    assert items[0].id == "1"
    assert items[0].image_url == "/img/pen.png"


def test_create_and_update_item_send_multipart_with_image(make_api, store) -> None:
    recorder = Recorder({})
    api = make_api(recorder)
    store.set_session("tkn", 60_000)
    payload = ItemPayload(name="Pen", price=1000.0, stock=3, category="ATK")
    image = ImageAttachment(filename="pen.png", content=b"\x89PNG", content_type="image/png")

    async def scenario() -> None:
        await api.items_client().create_item(payload, image)
        await api.items_client().update_item("7", payload, image)

    asyncio.run(scenario())

    create, update = recorder.requests
    assert (create.method, create.url.path) == ("POST", "/api/Items")
    assert create.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="imageFile"; filename="pen.png"' in create.content
    assert b'name="price"\r\n\r\n1000\r\n' in create.content
    assert (update.method, update.url.path) == ("PUT", "/api/Items/7")
    assert b'name="id"\r\n\r\n7\r\n' in update.content


def test_delete_item_targets_item_path(make_api, store) -> None:
    recorder = Recorder({})
    api = make_api(recorder)
    store.set_session("tkn", 60_000)

    asyncio.run(api.items_client().delete_item("1"))

    assert (recorder.requests[0].method, recorder.requests[0].url.path) == ("DELETE", "/api/Items/1")


def test_transactions_client_paths_and_body(make_api, store) -> None:
    detail = {
        "transactionId": 9,
        "date": "2024-05-01T03:00:00Z",
        "totalPrice": 3000,
        "items": [{"id": 1, "itemName": "Pen", "price": 1000, "quantity": 3}],
    }
    recorder = Recorder(
        {
            ("GET", "/api/POS/transactions"): _envelope({"transactions": [detail]}),
            ("GET", "/api/POS/transactions/9"): _envelope(detail),
        }
    )
    api = make_api(recorder)
    store.set_session("tkn", 60_000)

    async def scenario():
        client = api.transactions_client()
        listed = await client.list_transactions()
        single = await client.get_transaction("9")
        await client.create_transaction([TransactionEntry(item_id=1, quantity=2)])
        return listed, single

    listed, single = asyncio.run(scenario())

    assert listed[0].id == "9"
    assert single.items[0].subtotal == 3000
    assert json.loads(recorder.requests[2].content) == {"items": [{"itemId": 1, "quantity": 2}]}


def test_reports_client_reads_report_keys(make_api, store) -> None:
    recorder = Recorder(
        {
            ("GET", "/api/POS/reports"): _envelope({"posReport": [{"transactionId": "t-1", "totalPrice": 500}]}),
            ("GET", "/api/Items/stock"): _envelope({"stockReport": [{"id": 4, "itemName": "Ink", "stock": 0}]}),
        }
    )
    api = make_api(recorder)
    store.set_session("tkn", 60_000)

    async def scenario():
        reports = api.reports_client()
        return await reports.pos_report(), await reports.stock_report()

    pos_rows, stock_rows = asyncio.run(scenario())

    assert pos_rows[0].id == "t-1"
    assert stock_rows[0].display_name == "Ink"
    assert stock_rows[0].stock == 0
