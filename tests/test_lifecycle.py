import itertools
from typing import get_args
from datetime import date, datetime

import pytest

from foodshare.core.errors import NotFound, InvalidTransition, ActivePickupAlreadyExists
from foodshare.core.states import PICKUP_STATES, can_transition, is_valid_transition
from foodshare.models.pickup import Pickup, PickupStatus
from foodshare.repos.ledger import PickupLedger
from foodshare.services.lifecycle import PickupLifecycleEngine, short_time
from foodshare.services.stats import compute_stats


def pending_ids(ledger):
    return [p.id for p in ledger.pending]

def make_pickup(pid: str, **kw) -> Pickup:
    return Pickup(id=pid, donor_name=f"Donor {pid}", address=f"{pid} Market St", **kw)

@pytest.fixture
def empty_engine():
    ledger = PickupLedger(pending=[make_pickup("1"), make_pickup("2")])
    return PickupLifecycleEngine(ledger, clock=lambda: datetime(2026, 3, 14, 14, 5))


def test_accept_into_empty_active_slot(empty_engine):
    accepted = empty_engine.accept("1")
    assert accepted.status == "accepted"
    assert empty_engine.ledger.active.id == "1"
    assert empty_engine.ledger.active.status == "accepted"
    assert "1" not in pending_ids(empty_engine.ledger)

def test_accept_with_active_pickup_changes_nothing(engine, ledger):
    # demo ledger already holds pickup "3" as active
    before_pending = list(ledger.pending)
    before_active = ledger.active
    with pytest.raises(ActivePickupAlreadyExists):
        engine.accept("1")
    assert ledger.pending == before_pending
    assert ledger.active == before_active

def test_accept_unknown_pickup(empty_engine):
    with pytest.raises(NotFound):
        empty_engine.accept("99")

def test_decline_is_permanent(empty_engine):
    declined = empty_engine.decline("2")
    assert declined.status == "declined"
    assert "2" not in pending_ids(empty_engine.ledger)

    empty_engine.accept("1")
    empty_engine.confirm_pickup("1")
    empty_engine.complete_delivery("1")
    assert "2" not in pending_ids(empty_engine.ledger)
    assert all(p.id != "2" for p in empty_engine.ledger.completed)
    with pytest.raises(NotFound):
        empty_engine.decline("2")
    with pytest.raises(NotFound):
        empty_engine.accept("2")

def test_full_lifecycle(empty_engine):
    ledger = empty_engine.ledger
    ledger.prepend_completed(make_pickup("old", status="completed", completed_at="9:00 AM",
                                         completed_on=date(2026, 3, 13)))

    empty_engine.accept("1")
    picked = empty_engine.confirm_pickup("1")
    assert picked.status == "in_progress"
    assert ledger.active.status == "in_progress"

    done = empty_engine.complete_delivery("1")
    assert done.status == "completed"
    assert done.completed_at == "2:05 PM"
    assert done.completed_on == date(2026, 3, 14)
    assert ledger.active is None
    assert ledger.completed[0] == done
    assert [p.id for p in ledger.completed] == ["1", "old"]

@pytest.mark.parametrize("order", [o for o in itertools.permutations(["accept", "confirm", "complete"])
                                   if o != ("accept", "confirm", "complete")])
def test_out_of_order_calls_fail(empty_engine, order):
    ops = {
        "accept": empty_engine.accept,
        "confirm": empty_engine.confirm_pickup,
        "complete": empty_engine.complete_delivery,
    }
    failed = False
    for name in order:
        try:
            ops[name]("1")
        except (NotFound, InvalidTransition):
            failed = True
            break
    assert failed

def test_complete_before_confirm_is_invalid(empty_engine):
    empty_engine.accept("1")
    with pytest.raises(InvalidTransition):
        empty_engine.complete_delivery("1")
    assert empty_engine.ledger.active.status == "accepted"

def test_confirm_twice_is_invalid(empty_engine):
    empty_engine.accept("1")
    empty_engine.confirm_pickup("1")
    with pytest.raises(InvalidTransition):
        empty_engine.confirm_pickup("1")

def test_confirm_requires_the_active_pickup(engine):
    with pytest.raises(NotFound):
        engine.confirm_pickup("1")   # pending, not active
    assert engine.confirm_pickup("3").status == "in_progress"

def test_offer(empty_engine):
    empty_engine.offer(make_pickup("7"))
    assert pending_ids(empty_engine.ledger) == ["1", "2", "7"]

    with pytest.raises(InvalidTransition):
        empty_engine.offer(make_pickup("1"))
    with pytest.raises(InvalidTransition):
        empty_engine.offer(make_pickup("8", status="accepted"))
    assert pending_ids(empty_engine.ledger) == ["1", "2", "7"]

def test_offer_refuses_declined_and_completed_ids(empty_engine):
    ledger = empty_engine.ledger
    empty_engine.decline("2")
    with pytest.raises(InvalidTransition):
        empty_engine.offer(make_pickup("2"))

    empty_engine.accept("1")
    with pytest.raises(InvalidTransition):
        empty_engine.offer(make_pickup("1"))   # active
    empty_engine.confirm_pickup("1")
    empty_engine.complete_delivery("1")
    with pytest.raises(InvalidTransition):
        empty_engine.offer(make_pickup("1"))   # completed

    assert pending_ids(ledger) == []
    assert [p.id for p in ledger.completed] == ["1"]

def test_offer_refuses_demo_history(engine, ledger):
    completed_id = ledger.completed[0].id
    with pytest.raises(InvalidTransition):
        engine.offer(make_pickup(completed_id))
    assert completed_id not in pending_ids(ledger)

@pytest.mark.parametrize("role", ["donor", "consumer", "admin"])
def test_other_roles_cannot_move_pickups(empty_engine, role):
    ledger = empty_engine.ledger
    with pytest.raises(InvalidTransition):
        empty_engine.accept("1", role=role)
    with pytest.raises(InvalidTransition):
        empty_engine.decline("2", role=role)
    assert pending_ids(ledger) == ["1", "2"]
    assert ledger.active is None
    assert not ledger.knows("missing")

    empty_engine.accept("1")
    with pytest.raises(InvalidTransition):
        empty_engine.confirm_pickup("1", role=role)
    assert ledger.active.status == "accepted"

def test_stats_are_derived(empty_engine):
    ledger = empty_engine.ledger
    today = date(2026, 3, 14)
    assert compute_stats(ledger, today).model_dump() == {
        "active_pickup_count": 0,
        "pending_assignments_count": 2,
        "completed_today_count": 0,
        "total_completed_count": 0,
    }
    empty_engine.accept("1")
    assert compute_stats(ledger, today).active_pickup_count == 1
    assert compute_stats(ledger, today).pending_assignments_count == 1
    empty_engine.confirm_pickup("1")
    empty_engine.complete_delivery("1")
    stats = compute_stats(ledger, today)
    assert stats.active_pickup_count == 0
    assert stats.completed_today_count == 1
    assert stats.total_completed_count == 1
    assert compute_stats(ledger, date(2026, 3, 15)).completed_today_count == 0

def test_demo_ledger_stats(ledger):
    stats = compute_stats(ledger)
    assert stats.active_pickup_count == 1
    assert stats.pending_assignments_count == 2
    assert stats.total_completed_count == 1
    assert stats.completed_today_count == 1

def test_toggle_time_slot(engine, ledger):
    assert engine.toggle_time_slot("1").selected is True
    assert engine.toggle_time_slot("2").selected is False
    assert [s.selected for s in ledger.time_slots] == [True, False, False, False, False]

def test_toggle_unknown_slot_is_a_no_op(engine, ledger):
    before = [s.model_copy() for s in ledger.time_slots]
    assert engine.toggle_time_slot("nope") is None
    assert ledger.time_slots == before

def test_set_online(engine, ledger):
    engine.set_online(False)
    assert ledger.is_online is False

@pytest.mark.parametrize("src,dst", [
    ("pending", "in_progress"),
    ("pending", "completed"),
    ("accepted", "completed"),
    ("declined", "pending"),
    ("completed", "pending"),
    ("accepted", "declined"),
])
def test_no_skipping_states(src, dst):
    assert not is_valid_transition(src, dst)
    assert not can_transition(src, dst, "volunteer")

def test_only_volunteers_move_pickups():
    assert can_transition("pending", "accepted", "volunteer")
    assert not can_transition("pending", "accepted", "donor")

@pytest.mark.parametrize("hour,minute,expected", [
    (0, 0, "12:00 AM"),
    (9, 7, "9:07 AM"),
    (12, 30, "12:30 PM"),
    (23, 59, "11:59 PM"),
])
def test_short_time(hour, minute, expected):
    assert short_time(datetime(2026, 1, 1, hour, minute)) == expected

def test_completion_stamp_only_on_completed():
    with pytest.raises(ValueError):
        make_pickup("x", status="accepted", completed_at="1:00 PM", completed_on=date(2026, 1, 1))
    with pytest.raises(ValueError):
        make_pickup("x", status="completed")

def test_state_table_matches_status_type():
    assert set(PICKUP_STATES) == set(get_args(PickupStatus))
    for src, dst in [("pending", "accepted"), ("pending", "declined"),
                     ("accepted", "in_progress"), ("in_progress", "completed")]:
        assert is_valid_transition(src, dst)
