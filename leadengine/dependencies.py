from datetime import datetime, timezone
from typing import Optional

from fastapi import Depends

from leadengine.core.config import Settings, settings
from leadengine.services.dashboard_metrics import LeadDashboardService
from leadengine.services.duplicate_detection import DuplicateDetector
from leadengine.services.lead_assignment import LeadAssignmentManager
from leadengine.services.lead_automation import LeadAutomationService
from leadengine.services.lead_ingestion import LeadIngestionService
from leadengine.services.lead_scoring import LeadScoringEngine
from leadengine.services.sla_monitor import SLAMonitor


def resolve_now(now: Optional[datetime]) -> datetime:
    """Use the caller's reference time, falling back to the server clock."""
    return now if now is not None else datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Service factory functions
# ---------------------------------------------------------------------------


async def get_settings() -> Settings:
    return settings


async def get_scoring_engine(
    app_settings: Settings = Depends(get_settings),
) -> LeadScoringEngine:
    return LeadScoringEngine(app_settings)


async def get_sla_monitor(
    app_settings: Settings = Depends(get_settings),
) -> SLAMonitor:
    return SLAMonitor(app_settings)


async def get_duplicate_detector(
    app_settings: Settings = Depends(get_settings),
) -> DuplicateDetector:
    return DuplicateDetector(app_settings)


async def get_assignment_manager() -> LeadAssignmentManager:
    return LeadAssignmentManager()


async def get_ingestion_service() -> LeadIngestionService:
    return LeadIngestionService()


async def get_lead_automation_service(
    app_settings: Settings = Depends(get_settings),
    scoring_engine: LeadScoringEngine = Depends(get_scoring_engine),
    sla_monitor: SLAMonitor = Depends(get_sla_monitor),
    duplicate_detector: DuplicateDetector = Depends(get_duplicate_detector),
    assignment_manager: LeadAssignmentManager = Depends(get_assignment_manager),
    ingestion: LeadIngestionService = Depends(get_ingestion_service),
) -> LeadAutomationService:
    """Build a :class:`LeadAutomationService` with injected dependencies."""
    return LeadAutomationService(
        settings=app_settings,
        scoring_engine=scoring_engine,
        sla_monitor=sla_monitor,
        duplicate_detector=duplicate_detector,
        assignment_manager=assignment_manager,
        ingestion=ingestion,
    )


async def get_dashboard_service(
    sla_monitor: SLAMonitor = Depends(get_sla_monitor),
) -> LeadDashboardService:
    """Build a :class:`LeadDashboardService` sharing the configured SLA policy."""
    return LeadDashboardService(sla_monitor=sla_monitor)
