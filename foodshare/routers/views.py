from fastapi import APIRouter, Depends, Query

from foodshare.core.guards import GuardDecision, decide
from foodshare.core.security import require_roles
from foodshare.deps import get_session_manager
from foodshare.models.account import Role, SessionUser

router = APIRouter(tags=["views"])

@router.get("/navigate", response_model=GuardDecision)
async def navigate(area: Role = Query(...), manager=Depends(get_session_manager)):
    """Guard decision for entering `area`, without acting on it."""
    return decide(manager.current_session(), {area})

def _view(area: str, user: SessionUser) -> dict:
    return {"view": area, "user": user}

@router.get("/admin")
async def admin_view(user=Depends(require_roles("admin"))):
    return _view("admin", user)

@router.get("/donor")
async def donor_view(user=Depends(require_roles("donor"))):
    return _view("donor", user)

@router.get("/consumer")
async def consumer_view(user=Depends(require_roles("consumer"))):
    return _view("consumer", user)

@router.get("/volunteer")
async def volunteer_view(user=Depends(require_roles("volunteer"))):
    return _view("volunteer", user)
