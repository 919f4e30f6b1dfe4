import asyncio

from foodshare.core.config import settings
from foodshare.core.seed import seed_identity_store
from foodshare.services.directory_client import HttpIdentityStore

async def main():
    if not settings.directory_url:
        print("FOODSHARE_DIRECTORY_URL is not set; the API seeds its in-memory store on startup.")
        return

    store = HttpIdentityStore(
        settings.directory_url,
        timeout=settings.directory_timeout_seconds,
        retries=settings.directory_retries,
        backoff=settings.directory_backoff_seconds,
    )
    try:
        n = await seed_identity_store(store)
    finally:
        await store.close()
    print(f"✅ Demo accounts seeded: {n}")

if __name__ == "__main__":
    asyncio.run(main())
