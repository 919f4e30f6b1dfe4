# foodshare/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from foodshare.core.config import settings
from foodshare.core.errors import FoodShareError, MissingRequiredField
from foodshare.core.log import setup_logging
from foodshare.core.seed import demo_ledger, seed_identity_store
from foodshare.repos.inmemory import InMemoryIdentityStore
from foodshare.repos.ledger import PickupLedger
from foodshare.repos.session_store import build_session_store
from foodshare.routers import auth, pickups, views
from foodshare.services.auth import SessionManager
from foodshare.services.directory_client import HttpIdentityStore
from foodshare.services.lifecycle import PickupLifecycleEngine

setup_logging(settings.log_level)
log = logging.getLogger("foodshare")


def build_identity_store(cfg):
    if cfg.directory_url:
        return HttpIdentityStore(
            cfg.directory_url,
            timeout=cfg.directory_timeout_seconds,
            retries=cfg.directory_retries,
            backoff=cfg.directory_backoff_seconds,
        )
    return InMemoryIdentityStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    identity_store = build_identity_store(settings)
    session_store = build_session_store(settings)

    if settings.seed_demo_data and isinstance(identity_store, InMemoryIdentityStore):
        n = await seed_identity_store(identity_store)
        log.info("seeded %d demo accounts", n)

    manager = SessionManager(
        identity_store,
        session_store,
        session_key=settings.session_key,
        latency=settings.auth_latency_seconds,
    )
    restored = await manager.restore()
    if restored:
        log.info("restored session for %s (%s)", restored.email, restored.role)

    ledger = demo_ledger() if settings.seed_demo_data else PickupLedger()

    app.state.identity_store = identity_store
    app.state.session_store = session_store
    app.state.session_manager = manager
    app.state.engine = PickupLifecycleEngine(ledger)
    log.info("FoodShare API ready (session backend: %s)", settings.session_backend)

    yield

    await session_store.close()
    await identity_store.close()
    log.info("FoodShare API stopped")


# --- Create app FIRST ---
app = FastAPI(lifespan=lifespan, title="FoodShare API")

@app.exception_handler(FoodShareError)
async def foodshare_error_handler(request: Request, exc: FoodShareError):
    log.info("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_result())

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # malformed bodies get the same result shape as domain errors
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(p) for p in first.get("loc", ())[1:]) or "body"
    err = MissingRequiredField(f"Invalid or missing field: {field}")
    return await foodshare_error_handler(request, err)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------- Include routers ----------------
app.include_router(auth.router)          # /auth
app.include_router(views.router)         # /navigate, /admin, /donor, /consumer, /volunteer
app.include_router(pickups.router)       # /volunteer/...
app.include_router(pickups.admin_router) # /admin/pickups

# Health
@app.get("/health")
def health():
    return {"ok": True}
