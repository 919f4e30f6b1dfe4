# foodshare/repos/ledger.py
from typing import Optional, List, Set

from foodshare.models.pickup import Pickup, TimeSlot

DEFAULT_LOCATION_PREFERENCE = "Downtown District, City Center (5 km radius)"

class PickupLedger:
    """
    Pickup queues for the volunteer acting in this process: the pending pool,
    the single active slot and the completed history (most recent first).

    The ledger only stores; transitions are validated by the lifecycle engine.
    """

    def __init__(self, pending: Optional[List[Pickup]] = None, active: Optional[Pickup] = None,
                 completed: Optional[List[Pickup]] = None, time_slots: Optional[List[TimeSlot]] = None,
                 location_preference: str = DEFAULT_LOCATION_PREFERENCE, is_online: bool = True):
        self.pending: List[Pickup] = list(pending or [])
        self.active: Optional[Pickup] = active
        self.completed: List[Pickup] = list(completed or [])
        self.declined_ids: Set[str] = set()
        self.time_slots: List[TimeSlot] = list(time_slots or [])
        self.location_preference = location_preference
        self.is_online = is_online

    # Pending pool
    def find_pending(self, pickup_id: str) -> Optional[Pickup]:
        return next((p for p in self.pending if p.id == pickup_id), None)

    def add_pending(self, pickup: Pickup):
        self.pending.append(pickup)

    def remove_pending(self, pickup_id: str):
        self.pending = [p for p in self.pending if p.id != pickup_id]

    def mark_declined(self, pickup_id: str):
        self.declined_ids.add(pickup_id)

    # Active slot
    def set_active(self, pickup: Optional[Pickup]):
        self.active = pickup

    # History
    def prepend_completed(self, pickup: Pickup):
        self.completed.insert(0, pickup)

    # Availability
    def find_time_slot(self, slot_id: str) -> Optional[TimeSlot]:
        return next((s for s in self.time_slots if s.id == slot_id), None)

    # Lookup
    def knows(self, pickup_id: str) -> bool:
        """True for any id this ledger has ever held, declined ones included."""
        if self.active is not None and self.active.id == pickup_id:
            return True
        if pickup_id in self.declined_ids:
            return True
        if any(p.id == pickup_id for p in self.completed):
            return True
        return self.find_pending(pickup_id) is not None
