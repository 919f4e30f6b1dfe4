from datetime import date
from typing import Optional, Literal

from pydantic import BaseModel, model_validator

PickupStatus = Literal["pending", "accepted", "in_progress", "completed", "declined"]

class PickupIn(BaseModel):
    id: str
    donor_name: str
    address: str
    area: str = ""
    food_type: str = ""
    quantity: str = ""
    contact: str = ""
    description: str = ""
    pickup_deadline: str = ""
    pickup_instructions: str = ""

class Pickup(PickupIn):
    status: PickupStatus = "pending"
    completed_at: Optional[str] = None    # short wall-clock time, e.g. "2:05 PM"
    completed_on: Optional[date] = None

    @model_validator(mode="after")
    def _completion_stamp_matches_status(self):
        stamped = self.completed_at is not None or self.completed_on is not None
        if self.status == "completed" and (self.completed_at is None or self.completed_on is None):
            raise ValueError("completed pickups need completed_at and completed_on")
        if self.status != "completed" and stamped:
            raise ValueError("only completed pickups carry a completion stamp")
        return self

class TimeSlot(BaseModel):
    id: str
    label: str
    selected: bool = False

class VolunteerStats(BaseModel):
    active_pickup_count: int
    pending_assignments_count: int
    completed_today_count: int
    total_completed_count: int

class OnlineIn(BaseModel):
    is_online: bool

class VolunteerDashboard(BaseModel):
    is_online: bool
    location_preference: str
    active_pickup: Optional[Pickup] = None
    pending_assignments: list[Pickup] = []
    completed_pickups: list[Pickup] = []
    time_slots: list[TimeSlot] = []
    stats: VolunteerStats
