from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class Channel(str, Enum):
    FB = "FB"
    TWITTER = "Twitter"
    GOOGLE = "Google"
    WEBSITE = "Website"
    OFFLINE = "Offline"

    @classmethod
    def from_raw(cls, value: Any) -> "Channel":
        """Map free-form channel input onto a known channel.

        Matching is case-insensitive.  Blank or unrecognised input maps
        to ``Offline``; this is the only place that default is applied.
        """
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        return cls.OFFLINE


class LeadStatus(str, Enum):
    NEW = "New"
    CONTACTED = "Contacted"
    QUALIFIED = "Qualified"
    TEST_DRIVE_SCHEDULED = "Test Drive Scheduled"
    NEGOTIATION = "Negotiation"
    WON = "Won"
    NOT_INTERESTED = "Not Interested"
    INVALID_DUPLICATE = "Invalid/Duplicate"
    ON_HOLD = "On Hold"


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class OwnerRole(str, Enum):
    SALES_EXECUTIVE = "Sales Executive"
    BUSINESS_MANAGER = "Business Manager"


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive timestamps as UTC so they compare with aware ones."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class SuccessResponse(BaseModel):
    """Generic success response base."""

    success: bool = True
