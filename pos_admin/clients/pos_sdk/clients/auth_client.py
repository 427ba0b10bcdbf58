from __future__ import annotations

from dataclasses import dataclass

from ..models import LoginData
from .base import BaseClient, parse_object


@dataclass
class AuthClient(BaseClient):
    async def login(self, username: str, password: str) -> LoginData:
        envelope = await self._request(
            "POST",
            "/api/Auth/Login",
            json_body={"username": username, "password": password},
            authenticated=False,
        )
        return parse_object(envelope.data, LoginData)

    async def register(self, username: str, password: str) -> str:
        envelope = await self._request(
            "POST",
            "/api/Auth/Register",
            json_body={"username": username, "password": password},
            authenticated=False,
        )
        return envelope.message or "Registration successful"
