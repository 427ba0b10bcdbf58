from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from pos_admin.app.navigation import Navigator
from pos_admin.app.notifications import NotificationCenter
from pos_admin.clients.pos_sdk.config import ClientConfig
from pos_admin.clients.pos_sdk.http_client import HttpClient
from pos_admin.clients.pos_sdk.session import ApiSession
from pos_admin.clients.pos_sdk.session_store import SessionStore

BASE_URL = "http://pos.test"
NOW_MS = 1_700_000_000_000


class FakeClock:
    def __init__(self, now_ms: int = NOW_MS) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, delta_ms: int) -> None:
        self.now_ms += delta_ms


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(tmp_path: Path, clock: FakeClock) -> SessionStore:
    return SessionStore(directory=tmp_path / "session", clock=clock)


@pytest.fixture()
def make_api(store: SessionStore) -> Callable[[Callable[[httpx.Request], httpx.Response]], ApiSession]:
    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> ApiSession:
        config = ClientConfig(api_base_url=BASE_URL)
        http = HttpClient(
            config=config,
            session_store=store,
            client=httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler)),
        )
        return ApiSession(config=config, session_store=store, http=http)

    return _factory


@pytest.fixture()
def navigator() -> Navigator:
    return Navigator()


@pytest.fixture()
def notifications() -> NotificationCenter:
    return NotificationCenter(sink=None)
