from fastapi import APIRouter, Depends, Request

from leadengine.api.deps import (
    get_dashboard_service,
    get_lead_automation_service,
    resolve_now,
)
from leadengine.core.config import settings
from leadengine.core.rate_limit import limiter
from leadengine.schemas.automation import (
    AssignmentRequest,
    AssignmentResponse,
    DashboardMetricsRequest,
    DashboardMetricsResponse,
    DuplicateCheckRequest,
    DuplicateCheckResponse,
    EnrichRequest,
    LeadImportRequest,
    LeadImportResponse,
    LeadResponse,
    ReassignRequest,
    ScoreRequest,
    ScoreResponse,
    SLACheckRequest,
    SLACheckResponse,
)
from leadengine.services.dashboard_metrics import LeadDashboardService
from leadengine.services.lead_automation import LeadAutomationService

router = APIRouter(prefix="/leads", tags=["Leads"])


@router.post("/enrich", response_model=LeadResponse)
async def enrich_lead(
    body: EnrichRequest,
    service: LeadAutomationService = Depends(get_lead_automation_service),
) -> LeadResponse:
    """Infer city/timezone, rescore and optionally auto-assign a lead."""
    lead = service.enrich_lead(body.lead)
    if body.auto_assign:
        owner_id = service.assign_lead(lead, body.pool, body.owners)
        lead = lead.model_copy(update={"owner": owner_id})
    return LeadResponse(lead=lead, call_window=service.best_call_window(lead))


@router.post("/score", response_model=ScoreResponse)
async def score_lead(
    body: ScoreRequest,
    service: LeadAutomationService = Depends(get_lead_automation_service),
) -> ScoreResponse:
    return ScoreResponse(lead_id=body.lead.id, score=service.score_lead(body.lead))


@router.post("/sla-check", response_model=SLACheckResponse)
async def check_sla(
    body: SLACheckRequest,
    service: LeadAutomationService = Depends(get_lead_automation_service),
) -> SLACheckResponse:
    breaches = service.sla_breaches(body.leads, resolve_now(body.now))
    return SLACheckResponse(breached_ids=[lead.id for lead in breaches])


@router.post("/duplicates", response_model=DuplicateCheckResponse)
async def find_duplicates(
    body: DuplicateCheckRequest,
    service: LeadAutomationService = Depends(get_lead_automation_service),
) -> DuplicateCheckResponse:
    matches = service.find_duplicates(body.candidate, body.pool, resolve_now(body.now))
    return DuplicateCheckResponse(
        candidate_id=body.candidate.id, duplicate_ids=sorted(matches)
    )


@router.post("/assign", response_model=AssignmentResponse)
async def assign_lead(
    body: AssignmentRequest,
    service: LeadAutomationService = Depends(get_lead_automation_service),
) -> AssignmentResponse:
    owner_id = service.assign_lead(body.lead, body.pool, body.owners)
    return AssignmentResponse(
        lead_id=body.lead.id, owner_id=owner_id, assigned=bool(owner_id)
    )


@router.post("/reassign", response_model=LeadResponse)
async def reassign_lead(
    body: ReassignRequest,
    service: LeadAutomationService = Depends(get_lead_automation_service),
) -> LeadResponse:
    lead = service.reassign_lead(body.lead, body.owner_id, body.owners)
    return LeadResponse(lead=lead, call_window=service.best_call_window(lead))


@router.post("/import", response_model=LeadImportResponse)
@limiter.limit(settings.IMPORT_RATE_LIMIT)
async def import_leads(
    request: Request,
    body: LeadImportRequest,
    service: LeadAutomationService = Depends(get_lead_automation_service),
) -> LeadImportResponse:
    """Import column-mapped CSV rows, excluding probable duplicates.

    Rate-limited per client IP.
    """
    result = service.import_leads(
        body.rows, body.pool, resolve_now(body.now), owners=body.owners
    )
    return LeadImportResponse(**result)


@router.post("/metrics", response_model=DashboardMetricsResponse)
async def dashboard_metrics(
    body: DashboardMetricsRequest,
    service: LeadDashboardService = Depends(get_dashboard_service),
) -> DashboardMetricsResponse:
    """Dashboard aggregates: volumes, first-contact and qualification rates,
    SLA breaches, channel/status breakdowns and per-owner performance."""
    metrics = service.get_metrics(body.leads, body.owners, resolve_now(body.now))
    return DashboardMetricsResponse(**metrics)
