from typing import Optional, Literal
from pydantic import BaseModel, EmailStr, model_validator

# --------------------------
# Roles
# --------------------------
Role = Literal["admin", "donor", "consumer", "volunteer"]

# Role-specific account attributes; anything not listed for a role must be absent.
ROLE_ATTRIBUTES = {
    "admin": (),
    "donor": ("organization_name", "organization_type", "food_safety_license_id", "hygiene_declaration"),
    "consumer": ("organization_name", "organization_type", "daily_intake_capacity", "storage_facility"),
    "volunteer": ("vehicle_type", "availability", "preferred_pickup_radius"),
}


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()

# --------------------------
# Accounts & sessions
# --------------------------
class SessionUser(BaseModel):
    """The current actor: an account without its credential secret."""
    id: str
    email: EmailStr
    full_name: str = ""
    phone: str = ""
    location: str = ""
    role: Role

    # donor / consumer
    organization_name: Optional[str] = None
    organization_type: Optional[str] = None
    # donor
    food_safety_license_id: Optional[str] = None
    hygiene_declaration: Optional[bool] = None
    # consumer
    daily_intake_capacity: Optional[int] = None
    storage_facility: Optional[bool] = None
    # volunteer
    vehicle_type: Optional[str] = None
    availability: Optional[str] = None
    preferred_pickup_radius: Optional[str] = None

    @model_validator(mode="after")
    def _only_own_role_attributes(self):
        allowed = set(ROLE_ATTRIBUTES[self.role])
        foreign = [
            name for attrs in ROLE_ATTRIBUTES.values() for name in attrs
            if name not in allowed and getattr(self, name) is not None
        ]
        if foreign:
            raise ValueError(f"{self.role} accounts cannot carry {sorted(set(foreign))}")
        return self


class Account(SessionUser):
    password_hash: str

    def public(self) -> SessionUser:
        return SessionUser.model_validate(self.model_dump(exclude={"password_hash"}))


class RegisterIn(BaseModel):
    """Registration candidate. Required fields are checked by the session manager."""
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None

    organization_name: Optional[str] = None
    organization_type: Optional[str] = None
    food_safety_license_id: Optional[str] = None
    hygiene_declaration: Optional[bool] = None
    daily_intake_capacity: Optional[int] = None
    storage_facility: Optional[bool] = None
    vehicle_type: Optional[str] = None
    availability: Optional[str] = None
    preferred_pickup_radius: Optional[str] = None


class LoginIn(BaseModel):
    # format is not checked here; an unknown address is AccountNotFound
    email: str
    password: str
