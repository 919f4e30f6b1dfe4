# foodshare/services/stats.py
from datetime import date
from typing import Optional

from foodshare.models.pickup import VolunteerStats, VolunteerDashboard
from foodshare.repos.ledger import PickupLedger

def compute_stats(ledger: PickupLedger, today: Optional[date] = None) -> VolunteerStats:
    """
    Counters shown on the volunteer dashboard. Always derived from the
    ledger on the spot; nothing here is stored.
    """
    today = today or date.today()
    return VolunteerStats(
        active_pickup_count=1 if ledger.active is not None else 0,
        pending_assignments_count=len(ledger.pending),
        completed_today_count=sum(1 for p in ledger.completed if p.completed_on == today),
        total_completed_count=len(ledger.completed),
    )

def build_dashboard(ledger: PickupLedger, today: Optional[date] = None) -> VolunteerDashboard:
    return VolunteerDashboard(
        is_online=ledger.is_online,
        location_preference=ledger.location_preference,
        active_pickup=ledger.active,
        pending_assignments=list(ledger.pending),
        completed_pickups=list(ledger.completed),
        time_slots=[s.model_copy() for s in ledger.time_slots],
        stats=compute_stats(ledger, today),
    )
