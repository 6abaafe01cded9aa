from unittest.mock import MagicMock

import pytest

from leadengine.core.config import Settings
from leadengine.dependencies import (
    get_assignment_manager,
    get_dashboard_service,
    get_duplicate_detector,
    get_ingestion_service,
    get_lead_automation_service,
    get_scoring_engine,
    get_sla_monitor,
)
from leadengine.schemas.lead import LeadIngest
from leadengine.services.dashboard_metrics import LeadDashboardService
from leadengine.services.lead_ingestion import LeadIngestionService


class TestServiceFactories:
    @pytest.mark.asyncio
    async def test_ingestion_factory(self):
        assert isinstance(await get_ingestion_service(), LeadIngestionService)

    @pytest.mark.asyncio
    async def test_automation_service_uses_injected_ingestion(self, now):
        cfg = Settings()
        ingestion = MagicMock(wraps=LeadIngestionService())
        service = await get_lead_automation_service(
            app_settings=cfg,
            scoring_engine=await get_scoring_engine(cfg),
            sla_monitor=await get_sla_monitor(cfg),
            duplicate_detector=await get_duplicate_detector(cfg),
            assignment_manager=await get_assignment_manager(),
            ingestion=ingestion,
        )

        service.create_lead(LeadIngest(name="Karan", phone="08011112222"), now)

        ingestion.build_lead.assert_called_once()

    @pytest.mark.asyncio
    async def test_dashboard_factory(self):
        service = await get_dashboard_service(await get_sla_monitor(Settings()))
        assert isinstance(service, LeadDashboardService)
