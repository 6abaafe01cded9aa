import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Set

from leadengine.core.config import Settings, settings as default_settings
from leadengine.core.constants import UNKNOWN_CITY
from leadengine.core.exceptions import InvalidLeadDataError
from leadengine.schemas.lead import Lead, LeadIngest, Owner
from leadengine.services.duplicate_detection import DuplicateDetector
from leadengine.services.lead_assignment import LeadAssignmentManager
from leadengine.services.lead_ingestion import LeadIngestionService
from leadengine.services.lead_scoring import LeadScoringEngine
from leadengine.services.phone_locale import call_window_for, city_from_phone
from leadengine.services.sla_monitor import SLAMonitor

logger = logging.getLogger(__name__)


class LeadAutomationService:
    """Orchestrates the automation hooks the lead UI calls into.

    Dependencies are injected via the constructor so the class remains
    stateless and easily testable.  Nothing here holds the lead
    collection; callers pass snapshots in and apply the returned values
    themselves.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        scoring_engine: Optional[LeadScoringEngine] = None,
        sla_monitor: Optional[SLAMonitor] = None,
        duplicate_detector: Optional[DuplicateDetector] = None,
        assignment_manager: Optional[LeadAssignmentManager] = None,
        ingestion: Optional[LeadIngestionService] = None,
    ) -> None:
        self._settings = settings or default_settings
        self._scoring_engine = scoring_engine or LeadScoringEngine(self._settings)
        self._sla_monitor = sla_monitor or SLAMonitor(self._settings)
        self._duplicate_detector = duplicate_detector or DuplicateDetector(
            self._settings
        )
        self._assignment_manager = assignment_manager or LeadAssignmentManager()
        self._ingestion = ingestion or LeadIngestionService()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def enrich_lead(self, lead: Lead) -> Lead:
        """Fill in inferred city and timezone, then rescore.

        City is inferred from the phone only when it is blank or the
        ``"Other"`` sentinel.
        """
        updates: Dict[str, Any] = {}
        if not lead.city or lead.city == UNKNOWN_CITY:
            updates["city"] = city_from_phone(lead.phone)
        if not lead.timezone:
            updates["timezone"] = self._settings.DEFAULT_TIMEZONE

        enriched = lead.model_copy(update=updates)
        return self.rescore_lead(enriched)

    def rescore_lead(self, lead: Lead) -> Lead:
        """Return *lead* with its score recomputed from current fields."""
        score = self._scoring_engine.calculate_lead_score(lead)
        return lead.model_copy(update={"score": score})

    def score_lead(self, lead: Lead) -> int:
        return self._scoring_engine.calculate_lead_score(lead)

    def is_sla_breached(self, lead: Lead, now: datetime) -> bool:
        return self._sla_monitor.is_breached(lead, now)

    def sla_breaches(self, leads: Sequence[Lead], now: datetime) -> List[Lead]:
        return self._sla_monitor.find_breaches(leads, now)

    def find_duplicates(
        self, candidate: Lead, pool: Sequence[Lead], now: datetime
    ) -> Set[str]:
        return self._duplicate_detector.find_duplicates(candidate, pool, now)

    def assign_lead(
        self, lead: Lead, pool: Sequence[Lead], owners: Sequence[Owner]
    ) -> str:
        return self._assignment_manager.assign_lead(lead, pool, owners)

    def reassign_lead(self, lead: Lead, owner_id: str, owners: Sequence[Owner]) -> Lead:
        return self._assignment_manager.reassign_lead(lead, owner_id, owners)

    def best_call_window(self, lead: Lead) -> str:
        return call_window_for(lead.city)

    def create_lead(
        self,
        raw: LeadIngest,
        now: datetime,
        pool: Sequence[Lead] = (),
        owners: Sequence[Owner] = (),
        auto_assign: bool = True,
        lead_id: Optional[str] = None,
    ) -> Lead:
        """Build, enrich and optionally assign a brand-new lead.

        Raises:
            InvalidLeadDataError: If the raw data lacks a name or phone.
        """
        lead = self.enrich_lead(self._ingestion.build_lead(raw, now, lead_id))
        if auto_assign:
            owner_id = self.assign_lead(lead, pool, owners)
            lead = lead.model_copy(update={"owner": owner_id})
        return lead

    def import_leads(
        self,
        rows: Sequence[LeadIngest],
        pool: Sequence[Lead],
        now: datetime,
        owners: Sequence[Owner] = (),
    ) -> Dict[str, Any]:
        """Ingest a batch of mapped CSV rows.

        Steps per row:
        1. Build the lead (rows without name or phone are skipped)
        2. Enrich it (city, timezone, score)
        3. Check for duplicates against the pool and rows already accepted
        4. Assign an owner when a roster is supplied

        Duplicate rows are excluded from ``accepted`` and reported by row
        index, like skipped rows.  Returns a dict suitable for building
        ``LeadImportResponse``.
        """
        accepted: List[Lead] = []
        duplicates: Dict[int, List[str]] = {}
        skipped: List[int] = []

        for index, row in enumerate(rows):
            try:
                lead = self.create_lead(row, now, auto_assign=False)
            except InvalidLeadDataError as exc:
                logger.warning("Skipping import row %d: %s", index, exc.detail)
                skipped.append(index)
                continue

            known = [*pool, *accepted]
            matches = self.find_duplicates(lead, known, now)
            if matches:
                duplicates[index] = sorted(matches)
                continue

            if owners:
                lead = lead.model_copy(
                    update={"owner": self.assign_lead(lead, known, owners)}
                )
            accepted.append(lead)

        logger.info(
            "Import finished: %d accepted, %d duplicate(s), %d skipped",
            len(accepted),
            len(duplicates),
            len(skipped),
        )
        return {
            "accepted": accepted,
            "duplicates": duplicates,
            "skipped_rows": skipped,
        }
