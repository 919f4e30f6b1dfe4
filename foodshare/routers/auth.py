import logging

from fastapi import APIRouter, Depends

from ..deps import get_session_manager
from ..models.account import RegisterIn, LoginIn, SessionUser

router = APIRouter(prefix="/auth", tags=["auth"])
log = logging.getLogger(__name__)

@router.post("/register", response_model=SessionUser, status_code=201)
async def register(candidate: RegisterIn, manager=Depends(get_session_manager)):
    session = await manager.register(candidate)
    log.info("registered %s as %s", session.email, session.role)
    return session

@router.post("/login", response_model=SessionUser)
async def login(payload: LoginIn, manager=Depends(get_session_manager)):
    session = await manager.login(payload.email, payload.password)
    log.info("login %s (%s)", session.email, session.role)
    return session

@router.post("/logout")
async def logout(manager=Depends(get_session_manager)):
    current = manager.current_session()
    await manager.logout()
    if current:
        log.info("logout %s", current.email)
    return {"success": True}

@router.get("/session")
async def current_session(manager=Depends(get_session_manager)):
    return {
        "is_authenticated": manager.is_authenticated(),
        "user": manager.current_session(),
    }
