import pytest

from foodshare.core.errors import DuplicateAccount
from foodshare.core.seed import demo_accounts
from foodshare.repos.inmemory import InMemoryIdentityStore
from foodshare.repos.session_store import FileSessionStore, MemorySessionStore, build_session_store
from foodshare.core.config import Settings

pytestmark = pytest.mark.anyio


async def test_identity_store_normalizes_email():
    store = InMemoryIdentityStore()
    admin = demo_accounts()[0]
    await store.insert(admin.model_copy(update={"email": "Admin@FoodShare.com"}))
    assert await store.exists("admin@foodshare.com")
    assert await store.exists("  ADMIN@foodshare.com ")
    found = await store.find_by_email("admin@FOODSHARE.com")
    assert found.email == "admin@foodshare.com"
    assert await store.find_by_email("nobody@foodshare.com") is None

async def test_identity_store_rejects_duplicates():
    store = InMemoryIdentityStore()
    donor = demo_accounts()[1]
    await store.insert(donor)
    with pytest.raises(DuplicateAccount):
        await store.insert(donor.model_copy(update={"email": "DONOR@test.com", "id": "other"}))
    assert len(store) == 1

async def test_file_session_store_survives_new_instance(tmp_path):
    store = FileSessionStore(tmp_path / "sessions")
    assert await store.get("foodshare_user") is None
    await store.set("foodshare_user", b'{"id": "1"}')

    reopened = FileSessionStore(tmp_path / "sessions")
    assert await reopened.get("foodshare_user") == b'{"id": "1"}'
    await reopened.delete("foodshare_user")
    await reopened.delete("foodshare_user")
    assert await store.get("foodshare_user") is None

async def test_memory_session_store():
    store = MemorySessionStore()
    await store.set("k", b"v")
    assert await store.get("k") == b"v"
    await store.delete("k")
    await store.delete("k")
    assert await store.get("k") is None

async def test_session_store_selection(tmp_path):
    assert isinstance(build_session_store(Settings(session_backend="memory")), MemorySessionStore)
    store = build_session_store(Settings(session_backend="file", session_dir=str(tmp_path)))
    assert isinstance(store, FileSessionStore)
