"""
Demo data: one account per role and the starting volunteer ledger.

The demo credentials are fixed, publicly known strings for bootstrapping and
tests. They are not a security boundary.
"""
from datetime import date
from typing import Optional

from foodshare.core.security import hash_password
from foodshare.models.account import Account
from foodshare.models.pickup import Pickup, TimeSlot
from foodshare.repos.ledger import PickupLedger

DEMO_ACCOUNTS = [
    {
        "id": "1",
        "email": "admin@foodshare.com",
        "password": "admin123",
        "full_name": "System Administrator",
        "phone": "+1234567890",
        "location": "Central Office",
        "role": "admin",
    },
    {
        "id": "2",
        "email": "donor@test.com",
        "password": "donor123",
        "full_name": "John Donor",
        "phone": "+1234567891",
        "location": "Downtown Restaurant",
        "role": "donor",
        "organization_name": "Fresh Bites Restaurant",
        "organization_type": "Restaurant",
        "food_safety_license_id": "FSL-12345",
        "hygiene_declaration": True,
    },
    {
        "id": "3",
        "email": "consumer@test.com",
        "password": "consumer123",
        "full_name": "Jane Consumer",
        "phone": "+1234567892",
        "location": "East Side Shelter",
        "role": "consumer",
        "organization_name": "Hope Shelter",
        "organization_type": "Shelter",
        "daily_intake_capacity": 150,
        "storage_facility": True,
    },
    {
        "id": "4",
        "email": "volunteer@test.com",
        "password": "volunteer123",
        "full_name": "Bob Volunteer",
        "phone": "+1234567893",
        "location": "City Center",
        "role": "volunteer",
        "vehicle_type": "Van",
        "availability": "Morning",
        "preferred_pickup_radius": "10km",
    },
]


def demo_accounts() -> list[Account]:
    out = []
    for raw in DEMO_ACCOUNTS:
        data = dict(raw)
        data["password_hash"] = hash_password(data.pop("password"))
        out.append(Account(**data))
    return out

async def seed_identity_store(store) -> int:
    n = 0
    for account in demo_accounts():
        if not await store.exists(account.email):
            await store.insert(account)
            n += 1
    return n


def demo_time_slots() -> list[TimeSlot]:
    labels = ["06:00 - 09:00", "09:00 - 12:00", "12:00 - 15:00", "15:00 - 18:00", "18:00 - 21:00"]
    return [TimeSlot(id=str(i), label=label, selected=(i == 2)) for i, label in enumerate(labels, start=1)]

def demo_ledger(today: Optional[date] = None) -> PickupLedger:
    pending = [
        Pickup(
            id="1",
            donor_name="Green Garden Restaurant",
            address="123 Main Street, Downtown District",
            area="Downtown",
            food_type="Prepared Meals",
            quantity="15 portions",
            contact="+1 (555) 234-5678",
            description="Fresh vegetarian meals - pasta, salads, and bread",
            pickup_deadline="2:30 PM Today",
            pickup_instructions="Park in designated volunteer spot. Contact Lisa at the front desk.",
        ),
        Pickup(
            id="2",
            donor_name="Fresh Bakery Co.",
            address="456 Baker Lane, Midtown Plaza",
            area="Midtown",
            food_type="Bakery Items",
            quantity="30 items",
            contact="+1 (555) 345-6789",
            description="Assorted bread, pastries, and muffins from today",
            pickup_deadline="4:00 PM Today",
            pickup_instructions="Use back entrance. Ask for Mike.",
        ),
    ]
    active = Pickup(
        id="3",
        donor_name="Sunrise Cafe",
        address="789 Sunrise Blvd, East District",
        area="East District",
        food_type="Mixed Food",
        quantity="20 portions",
        contact="+1 (555) 456-7890",
        description="Sandwiches, soups, and fruit bowls",
        pickup_deadline="3:00 PM Today",
        pickup_instructions="Park in designated volunteer spot. Contact Lisa at the front desk.",
        status="accepted",
    )
    completed = [
        Pickup(
            id="4",
            donor_name="Community Kitchen",
            address="321 West End Ave",
            area="West End",
            food_type="Hot Meals",
            quantity="25 portions",
            contact="+1 (555) 567-8901",
            description="Cooked lunch meals",
            status="completed",
            completed_at="11:45 AM",
            completed_on=today or date.today(),
        ),
    ]
    return PickupLedger(pending=pending, active=active, completed=completed, time_slots=demo_time_slots())
