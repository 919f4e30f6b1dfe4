# tests/conftest.py
import os

# settings are read at import time; no simulated latency and no stray .env state
os.environ.setdefault("FOODSHARE_AUTH_LATENCY_SECONDS", "0")
os.environ.setdefault("FOODSHARE_SESSION_BACKEND", "memory")

import pytest
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from foodshare.main import app
from foodshare.core.seed import demo_ledger, seed_identity_store
from foodshare.repos.inmemory import InMemoryIdentityStore
from foodshare.repos.session_store import MemorySessionStore
from foodshare.services.auth import SessionManager
from foodshare.services.lifecycle import PickupLifecycleEngine


@pytest.fixture(scope="session")
def anyio_backend():
    # keep AnyIO on asyncio for the whole test session
    return "asyncio"

@pytest.fixture
async def test_client():
    # fresh lifespan per test so session and ledger state never leak
    async with LifespanManager(app):
        transport = ASGITransport(app=app, raise_app_exceptions=True)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

@pytest.fixture
async def identity_store():
    store = InMemoryIdentityStore()
    await seed_identity_store(store)
    return store

@pytest.fixture
def session_store():
    return MemorySessionStore()

@pytest.fixture
def manager(identity_store, session_store):
    return SessionManager(identity_store, session_store, latency=0)

@pytest.fixture
def ledger():
    return demo_ledger()

@pytest.fixture
def engine(ledger):
    return PickupLifecycleEngine(ledger)
