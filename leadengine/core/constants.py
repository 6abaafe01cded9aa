from typing import Dict, FrozenSet, List, Tuple

from leadengine.schemas.common import Channel, LeadStatus, OwnerRole

# Ordered sales funnel, first capture to closed-won
LEAD_FUNNEL: List[LeadStatus] = [
    LeadStatus.NEW,
    LeadStatus.CONTACTED,
    LeadStatus.QUALIFIED,
    LeadStatus.TEST_DRIVE_SCHEDULED,
    LeadStatus.NEGOTIATION,
    LeadStatus.WON,
]

SIDE_STATUSES: FrozenSet[LeadStatus] = frozenset(
    {
        LeadStatus.NOT_INTERESTED,
        LeadStatus.INVALID_DUPLICATE,
        LeadStatus.ON_HOLD,
    }
)

CHANNEL_POINTS: Dict[Channel, int] = {
    Channel.WEBSITE: 20,
    Channel.GOOGLE: 18,
    Channel.FB: 15,
    Channel.TWITTER: 12,
    Channel.OFFLINE: 10,
}

# (minimum budget, points), evaluated highest threshold first
BUDGET_TIERS: List[Tuple[int, int]] = [
    (1_500_000, 25),
    (1_000_000, 20),
    (800_000, 15),
]
BUDGET_FLOOR_POINTS: int = 10

PHONE_PREFIX_LENGTH: int = 3
UNKNOWN_CITY: str = "Other"

PHONE_PREFIX_CITIES: Dict[str, str] = {
    "080": "Bangalore",
    "022": "Mumbai",
    "011": "Delhi",
    "040": "Hyderabad",
    "044": "Chennai",
}

CITY_CALL_WINDOWS: Dict[str, str] = {
    "Bangalore": "10 AM - 12 PM, 3 PM - 6 PM",
    "Mumbai": "10 AM - 12 PM, 3 PM - 6 PM",
    "Delhi": "10 AM - 12 PM, 3 PM - 6 PM",
    "Hyderabad": "10 AM - 12 PM, 3 PM - 6 PM",
    "Chennai": "10 AM - 12 PM, 3 PM - 6 PM",
}
DEFAULT_CALL_WINDOW: str = "10 AM - 6 PM"

# Only these roles take part in automatic assignment
ASSIGNABLE_ROLES: FrozenSet[OwnerRole] = frozenset({OwnerRole.SALES_EXECUTIVE})
