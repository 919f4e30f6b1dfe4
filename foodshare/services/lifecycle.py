# foodshare/services/lifecycle.py
from datetime import datetime
from typing import Callable, Optional

from foodshare.core.errors import NotFound, InvalidTransition, ActivePickupAlreadyExists
from foodshare.core.states import can_transition, is_valid_transition
from foodshare.models.pickup import Pickup, TimeSlot
from foodshare.repos.ledger import PickupLedger


def short_time(dt: datetime) -> str:
    """12-hour clock without a leading zero, e.g. ``2:05 PM``."""
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d} {'AM' if dt.hour < 12 else 'PM'}"


class PickupLifecycleEngine:
    """
    Moves pickups through pending -> accepted -> in_progress -> completed
    (or pending -> declined) on top of a PickupLedger.

    Every operation either applies fully or raises before touching the ledger.
    """

    def __init__(self, ledger: PickupLedger, clock: Optional[Callable[[], datetime]] = None):
        self.ledger = ledger
        self.clock = clock or datetime.now

    def _move(self, pickup: Pickup, dst: str, role: str, **extra) -> Pickup:
        if not is_valid_transition(pickup.status, dst):
            raise InvalidTransition(f"Cannot move pickup {pickup.id} from {pickup.status} to {dst}")
        if not can_transition(pickup.status, dst, role):
            raise InvalidTransition(f"A {role} cannot move pickups from {pickup.status} to {dst}")
        return pickup.model_copy(update={"status": dst, **extra})

    def _active(self, pickup_id: str) -> Pickup:
        active = self.ledger.active
        if active is None or active.id != pickup_id:
            raise NotFound(f"Pickup {pickup_id} is not your active pickup")
        return active

    def _pending(self, pickup_id: str) -> Pickup:
        pickup = self.ledger.find_pending(pickup_id)
        if pickup is None:
            raise NotFound(f"No pending pickup with id {pickup_id}")
        return pickup

    def offer(self, pickup: Pickup) -> Pickup:
        if pickup.status != "pending":
            raise InvalidTransition(f"Only pending pickups can be offered, got {pickup.status}")
        if self.ledger.knows(pickup.id):
            raise InvalidTransition(f"Pickup {pickup.id} was already offered")
        self.ledger.add_pending(pickup)
        return pickup

    def accept(self, pickup_id: str, role: str = "volunteer") -> Pickup:
        pickup = self._pending(pickup_id)
        if self.ledger.active is not None:
            raise ActivePickupAlreadyExists()
        accepted = self._move(pickup, "accepted", role)
        self.ledger.remove_pending(pickup_id)
        self.ledger.set_active(accepted)
        return accepted

    def decline(self, pickup_id: str, role: str = "volunteer") -> Pickup:
        # no history entry; only the id is kept so it is never offered again
        declined = self._move(self._pending(pickup_id), "declined", role)
        self.ledger.remove_pending(pickup_id)
        self.ledger.mark_declined(pickup_id)
        return declined

    def confirm_pickup(self, pickup_id: str, role: str = "volunteer") -> Pickup:
        picked = self._move(self._active(pickup_id), "in_progress", role)
        self.ledger.set_active(picked)
        return picked

    def complete_delivery(self, pickup_id: str, role: str = "volunteer") -> Pickup:
        active = self._active(pickup_id)
        now = self.clock()
        done = self._move(active, "completed", role, completed_at=short_time(now), completed_on=now.date())
        self.ledger.prepend_completed(done)
        self.ledger.set_active(None)
        return done

    # Availability
    def toggle_time_slot(self, slot_id: str) -> Optional[TimeSlot]:
        slot = self.ledger.find_time_slot(slot_id)
        if slot is None:
            # stale UI references are tolerated
            return None
        slot.selected = not slot.selected
        return slot

    def set_online(self, is_online: bool) -> bool:
        self.ledger.is_online = is_online
        return is_online
