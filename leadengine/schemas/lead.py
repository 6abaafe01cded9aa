"""Lead and owner schemas shared by the services and the HTTP layer."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from leadengine.schemas.common import Channel, LeadStatus, OwnerRole, Priority, as_utc


class Utm(BaseModel):
    """Campaign attribution captured with the lead."""

    model_config = ConfigDict(frozen=True)

    source: Optional[str] = None
    medium: Optional[str] = None
    campaign: Optional[str] = None


class Lead(BaseModel):
    """Point-in-time snapshot of a dealership lead.

    Snapshots are frozen; every change produces a new instance through
    ``model_copy(update=...)`` so callers' collections are never mutated.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    phone: str
    email: Optional[str] = None
    city: str = ""
    preferred_model: Optional[str] = None
    budget_range: Optional[str] = None
    channel: Channel = Channel.OFFLINE
    utm: Optional[Utm] = None
    owner: str = ""
    status: LeadStatus = LeadStatus.NEW
    priority: Priority = Priority.MEDIUM
    score: int = Field(0, ge=0, le=100)
    created_at: datetime
    last_contact_at: Optional[datetime] = None
    next_action_at: Optional[datetime] = None
    timezone: Optional[str] = None
    is_repeat_lead: bool = False
    duplicate_of: Optional[str] = None

    @field_validator("channel", mode="before")
    @classmethod
    def normalise_channel(cls, value):
        return Channel.from_raw(value)

    @field_validator("created_at", "last_contact_at", "next_action_at")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class Owner(BaseModel):
    """A member of the externally supplied sales roster."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    email: Optional[str] = None
    role: OwnerRole
    city: Optional[str] = None
    expertise: List[str] = Field(default_factory=list)


class LeadIngest(BaseModel):
    """Raw lead data as it arrives from manual entry or a mapped CSV row.

    Fields are deliberately loose; ``LeadIngestionService`` decides what
    is usable.
    """

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    city: Optional[str] = None
    preferred_model: Optional[str] = None
    budget_range: Optional[str] = None
    channel: Optional[str] = None
    utm: Optional[Utm] = None
    is_repeat_lead: bool = False
