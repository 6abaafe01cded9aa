"""Request/response schemas for the automation endpoints."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from leadengine.schemas.common import SuccessResponse
from leadengine.schemas.lead import Lead, LeadIngest, Owner


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class EnrichRequest(BaseModel):
    """Body for POST /api/v1/leads/enrich."""

    lead: Lead
    pool: List[Lead] = Field(default_factory=list)
    owners: List[Owner] = Field(default_factory=list)
    auto_assign: bool = False


class ScoreRequest(BaseModel):
    lead: Lead


class SLACheckRequest(BaseModel):
    """Body for POST /api/v1/leads/sla-check.

    ``now`` defaults to the server clock when omitted.
    """

    leads: List[Lead]
    now: Optional[datetime] = None


class DuplicateCheckRequest(BaseModel):
    candidate: Lead
    pool: List[Lead]
    now: Optional[datetime] = None


class AssignmentRequest(BaseModel):
    lead: Lead
    pool: List[Lead] = Field(default_factory=list)
    owners: List[Owner]


class ReassignRequest(BaseModel):
    lead: Lead
    owner_id: str = Field(..., min_length=1)
    owners: List[Owner]


class LeadImportRequest(BaseModel):
    """Body for POST /api/v1/leads/import (already column-mapped rows)."""

    rows: List[LeadIngest]
    pool: List[Lead] = Field(default_factory=list)
    owners: List[Owner] = Field(default_factory=list)
    now: Optional[datetime] = None


class DashboardMetricsRequest(BaseModel):
    """Body for POST /api/v1/leads/metrics."""

    leads: List[Lead]
    owners: List[Owner] = Field(default_factory=list)
    now: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class LeadResponse(SuccessResponse):
    lead: Lead
    call_window: str


class ScoreResponse(SuccessResponse):
    lead_id: str
    score: int = Field(..., ge=0, le=100)


class SLACheckResponse(SuccessResponse):
    breached_ids: List[str]


class DuplicateCheckResponse(SuccessResponse):
    candidate_id: str
    duplicate_ids: List[str]


class AssignmentResponse(SuccessResponse):
    """``owner_id`` is the empty string when no owner is eligible."""

    lead_id: str
    owner_id: str
    assigned: bool


class LeadImportResponse(SuccessResponse):
    accepted: List[Lead]
    duplicates: Dict[int, List[str]]
    skipped_rows: List[int]


class OwnerPerformance(BaseModel):
    owner_id: str
    owner_name: str
    calls: int
    first_contact_rate: int = Field(..., ge=0, le=100)
    qualified_rate: int = Field(..., ge=0, le=100)
    won_count: int


class DashboardMetricsResponse(SuccessResponse):
    leads_today: int
    first_contact_under_15m: int
    first_contact_under_15m_percent: int = Field(..., ge=0, le=100)
    qualified_percent: int = Field(..., ge=0, le=100)
    won_count: int
    sla_breach_count: int
    channel_mix: Dict[str, int]
    status_funnel: Dict[str, int]
    owner_performance: List[OwnerPerformance]


class CityResponse(BaseModel):
    phone: str
    city: str


class CallWindowResponse(BaseModel):
    city: str
    call_window: str
