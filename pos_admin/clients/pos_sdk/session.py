from __future__ import annotations

from dataclasses import dataclass

from .clients.auth_client import AuthClient
from .clients.items_client import ItemsClient
from .clients.reports_client import ReportsClient
from .clients.transactions_client import TransactionsClient
from .config import ClientConfig
from .http_client import HttpClient
from .models import Session
from .session_store import SessionStore


@dataclass
class ApiSession:
    """Owns the session store and one shared HTTP client; hands out resource clients."""

    config: ClientConfig
    session_store: SessionStore | None = None
    http: HttpClient | None = None

    def __post_init__(self) -> None:
        self.session_store = self.session_store or SessionStore(directory=self.config.session_dir)
        self.http = self.http or HttpClient(config=self.config, session_store=self.session_store)

    def auth_client(self) -> AuthClient:
        return AuthClient(http=self.http)

    def items_client(self) -> ItemsClient:
        return ItemsClient(http=self.http)

    def transactions_client(self) -> TransactionsClient:
        return TransactionsClient(http=self.http)

    def reports_client(self) -> ReportsClient:
        return ReportsClient(http=self.http)

    def current(self) -> Session | None:
        return self.session_store.current_session()

    def establish(self, token: str) -> Session:
        return self.session_store.set_session(token, self.config.session_ttl_ms)

    def clear(self) -> None:
        self.session_store.clear_session()

    async def aclose(self) -> None:
        await self.http.aclose()
