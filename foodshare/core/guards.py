from typing import Iterable, Literal, Optional

from pydantic import BaseModel, ConfigDict

from foodshare.core.policy import LOGIN_PATH, dashboard_for
from foodshare.models.account import Role, SessionUser

Outcome = Literal["allow", "redirect_to_login", "redirect_to_dashboard"]


class GuardDecision(BaseModel):
    model_config = ConfigDict(frozen=True)

    decision: Outcome
    redirect_to: Optional[str] = None
    role: Optional[Role] = None

    @property
    def allowed(self) -> bool:
        return self.decision == "allow"


ALLOW = GuardDecision(decision="allow")
REDIRECT_TO_LOGIN = GuardDecision(decision="redirect_to_login", redirect_to=LOGIN_PATH)


def redirect_to_dashboard_of(role: str) -> GuardDecision:
    return GuardDecision(decision="redirect_to_dashboard", redirect_to=dashboard_for(role), role=role)


def decide(session: Optional[SessionUser], required_roles: Iterable[str]) -> GuardDecision:
    """
    Decide whether the actor in `session` may reach a view restricted to
    `required_roles`. Pure: the same session and role set always give the
    same answer, and nothing is remembered between calls.
    """
    if session is None:
        return REDIRECT_TO_LOGIN
    if session.role not in set(required_roles):
        return redirect_to_dashboard_of(session.role)
    return ALLOW
