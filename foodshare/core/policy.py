from typing import get_args

from foodshare.models.account import Role, ROLE_ATTRIBUTES

ROLES = get_args(Role)

DASHBOARD_PATHS = {
    "admin": "/admin",
    "donor": "/donor",
    "consumer": "/consumer",
    "volunteer": "/volunteer",
}

LOGIN_PATH = "/"

SELF_REGISTRATION_ROLES = tuple(r for r in ROLES if r != "admin")


def _check_covers_roles(name: str, table: dict):
    missing = set(ROLES) - set(table)
    extra = set(table) - set(ROLES)
    if missing or extra:
        raise RuntimeError(f"{name} must map exactly {sorted(ROLES)}; missing={sorted(missing)} extra={sorted(extra)}")

_check_covers_roles("DASHBOARD_PATHS", DASHBOARD_PATHS)
_check_covers_roles("ROLE_ATTRIBUTES", ROLE_ATTRIBUTES)


def dashboard_for(role: str) -> str:
    return DASHBOARD_PATHS[role]
