PICKUP_STATES = ["pending", "accepted", "in_progress", "completed", "declined"]

TRANSITIONS = {
    ("pending",     "accepted"):    {"roles": ["volunteer"]},
    ("pending",     "declined"):    {"roles": ["volunteer"]},
    ("accepted",    "in_progress"): {"roles": ["volunteer"]},
    ("in_progress", "completed"):   {"roles": ["volunteer"]},
}

def is_valid_transition(src: str, dst: str) -> bool:
    return (src, dst) in TRANSITIONS

def can_transition(src: str, dst: str, role: str) -> bool:
    rule = TRANSITIONS.get((src, dst))
    if not rule:
        return False
    return role in rule["roles"]

def transition_roles() -> set[str]:
    roles: set[str] = set()
    for rule in TRANSITIONS.values():
        roles.update(rule["roles"])
    return roles
