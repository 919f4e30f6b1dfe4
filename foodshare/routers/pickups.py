from fastapi import APIRouter, Depends

from foodshare.core.security import require_roles
from foodshare.core.states import transition_roles
from foodshare.deps import get_engine, get_ledger
from foodshare.models.pickup import Pickup, PickupIn, OnlineIn, VolunteerDashboard, VolunteerStats
from foodshare.services.stats import build_dashboard, compute_stats

# Everyone allowed to trigger a lifecycle transition may use these routes.
LIFECYCLE_ROLES = sorted(transition_roles())
lifecycle_actor = require_roles(*LIFECYCLE_ROLES)

router = APIRouter(
    prefix="/volunteer",
    tags=["volunteer"],
    dependencies=[Depends(lifecycle_actor)],
)
admin_router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_roles("admin"))],
)

@router.get("/dashboard", response_model=VolunteerDashboard)
async def dashboard(ledger=Depends(get_ledger)):
    return build_dashboard(ledger)

@router.get("/stats", response_model=VolunteerStats)
async def stats(ledger=Depends(get_ledger)):
    return compute_stats(ledger)

@router.post("/pickups/{pickup_id}/accept", response_model=Pickup)
async def accept_pickup(pickup_id: str, engine=Depends(get_engine), user=Depends(lifecycle_actor)):
    return engine.accept(pickup_id, role=user.role)

@router.post("/pickups/{pickup_id}/decline", response_model=Pickup)
async def decline_pickup(pickup_id: str, engine=Depends(get_engine), user=Depends(lifecycle_actor)):
    return engine.decline(pickup_id, role=user.role)

@router.post("/pickups/{pickup_id}/confirm", response_model=Pickup)
async def confirm_pickup(pickup_id: str, engine=Depends(get_engine), user=Depends(lifecycle_actor)):
    return engine.confirm_pickup(pickup_id, role=user.role)

@router.post("/pickups/{pickup_id}/complete", response_model=Pickup)
async def complete_delivery(pickup_id: str, engine=Depends(get_engine), user=Depends(lifecycle_actor)):
    return engine.complete_delivery(pickup_id, role=user.role)

@router.post("/time-slots/{slot_id}/toggle")
async def toggle_time_slot(slot_id: str, engine=Depends(get_engine)):
    slot = engine.toggle_time_slot(slot_id)
    return {"ok": True, "slot": slot}

@router.put("/online")
async def set_online(body: OnlineIn, engine=Depends(get_engine)):
    return {"is_online": engine.set_online(body.is_online)}

# Task origination stand-in: puts a new pickup in the volunteer's pending pool.
@admin_router.post("/pickups", response_model=Pickup, status_code=201)
async def offer_pickup(data: PickupIn, engine=Depends(get_engine)):
    return engine.offer(Pickup(**data.model_dump()))
