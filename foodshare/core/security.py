from fastapi import Depends, HTTPException
from passlib.hash import pbkdf2_sha256 as hasher

from foodshare.core.guards import decide
from foodshare.deps import get_session_manager
from foodshare.models.account import SessionUser


def hash_password(password: str) -> str:
    return hasher.hash(password or "")

def verify_password(password: str, hashed: str) -> bool:
    try:
        return hasher.verify(password or "", hashed)
    except ValueError:
        # empty or malformed stored hash
        return False


def require_roles(*roles: str):
    """
    Dependency that re-runs the access guard on every request and turns its
    outcome into the HTTP answer: the handler runs, or a 401/403 carrying
    where the client should navigate instead.
    """
    async def checker(manager=Depends(get_session_manager)) -> SessionUser:
        session = manager.current_session()
        decision = decide(session, roles)
        if decision.decision == "redirect_to_login":
            raise HTTPException(status_code=401, detail=decision.model_dump())
        if decision.decision == "redirect_to_dashboard":
            raise HTTPException(status_code=403, detail=decision.model_dump())
        return session
    return checker
