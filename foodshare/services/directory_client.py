# foodshare/services/directory_client.py
"""
Identity store backed by a remote directory service.

Same contract as InMemoryIdentityStore. Transport failures (connection
refused, timeouts, broken streams) are retried with exponential backoff; any
HTTP answer, including 4xx/5xx, is final for that attempt.
"""
import asyncio
import uuid
from typing import Optional
from urllib.parse import quote

import httpx

from foodshare.core.errors import DuplicateAccount, DirectoryUnavailable
from foodshare.models.account import Account, normalize_email


class HttpIdentityStore:
    def __init__(self, base_url: str, timeout: float = 5.0, retries: int = 3, backoff: float = 0.25,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.retries = max(0, retries)
        self.backoff = backoff
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout, connect=min(timeout, 5.0)),
            transport=transport,
        )

    def new_id(self) -> str:
        return uuid.uuid4().hex

    async def _send(self, method: str, url: str, **kwargs) -> httpx.Response:
        attempts = 0
        while True:
            try:
                return await self._client.request(method, url, **kwargs)
            except httpx.TransportError as ex:
                attempts += 1
                if attempts > self.retries:
                    raise DirectoryUnavailable() from ex
                delay = min(5.0, self.backoff * 2 ** (attempts - 1))
                await asyncio.sleep(delay)

    @staticmethod
    def _check(r: httpx.Response):
        if r.is_error:
            raise DirectoryUnavailable(f"Identity service answered {r.status_code}")

    async def find_by_email(self, email: str) -> Optional[Account]:
        r = await self._send("GET", f"/accounts/{quote(normalize_email(email), safe='')}")
        if r.status_code == 404:
            return None
        self._check(r)
        return Account.model_validate(r.json())

    async def exists(self, email: str) -> bool:
        return await self.find_by_email(email) is not None

    async def insert(self, account: Account) -> Account:
        account = account.model_copy(update={"email": normalize_email(account.email)})
        r = await self._send("POST", "/accounts", json=account.model_dump(mode="json"))
        if r.status_code == 409:
            raise DuplicateAccount()
        self._check(r)
        return account

    async def close(self):
        await self._client.aclose()
