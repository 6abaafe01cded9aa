import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from leadengine.core.constants import ASSIGNABLE_ROLES, LEAD_FUNNEL, SIDE_STATUSES
from leadengine.schemas.common import Channel, LeadStatus, as_utc
from leadengine.schemas.lead import Lead, Owner
from leadengine.services.sla_monitor import SLAMonitor

logger = logging.getLogger(__name__)

# Everything from Contacted onwards counts as contacted, Qualified onwards as qualified
CONTACTED_STATUSES = frozenset(LEAD_FUNNEL[LEAD_FUNNEL.index(LeadStatus.CONTACTED):])
QUALIFIED_STATUSES = frozenset(LEAD_FUNNEL[LEAD_FUNNEL.index(LeadStatus.QUALIFIED):])


def _percent(part: int, whole: int) -> int:
    """Whole-number percentage, halves rounded up; 0 when *whole* is empty."""
    if whole <= 0:
        return 0
    return int(part * 100 / whole + 0.5)


class LeadDashboardService:
    """Headline dashboard aggregates over a snapshot of leads.

    Rates are whole percentages.  ``qualified_percent`` and each owner's
    ``qualified_rate`` are both measured against all contacted leads, so
    owner rates show each owner's share of the qualified pipeline.
    """

    def __init__(self, sla_monitor: Optional[SLAMonitor] = None) -> None:
        self._sla_monitor = sla_monitor or SLAMonitor()

    def get_metrics(
        self, leads: Sequence[Lead], owners: Sequence[Owner], now: datetime
    ) -> Dict[str, Any]:
        now = as_utc(now)
        start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)

        leads_today = [lead for lead in leads if lead.created_at >= start_of_day]
        new_today = [lead for lead in leads_today if lead.status == LeadStatus.NEW]
        fast_contacts = [
            lead
            for lead in new_today
            if self._sla_monitor.contacted_within_first_response_sla(lead)
        ]

        contacted = [lead for lead in leads if lead.status in CONTACTED_STATUSES]
        qualified = [lead for lead in leads if lead.status in QUALIFIED_STATUSES]
        won = [lead for lead in leads if lead.status == LeadStatus.WON]
        breaches = self._sla_monitor.find_breaches(leads, now)

        metrics = {
            "leads_today": len(leads_today),
            "first_contact_under_15m": len(fast_contacts),
            "first_contact_under_15m_percent": _percent(
                len(fast_contacts), len(new_today)
            ),
            "qualified_percent": _percent(len(qualified), len(contacted)),
            "won_count": len(won),
            "sla_breach_count": len(breaches),
            "channel_mix": self._channel_mix(leads),
            "status_funnel": self._status_funnel(leads),
            "owner_performance": self._owner_performance(
                leads, owners, len(contacted)
            ),
        }
        logger.info(
            "Dashboard metrics over %d lead(s): %d today, %d breaching SLA",
            len(leads),
            metrics["leads_today"],
            metrics["sla_breach_count"],
        )
        return metrics

    @staticmethod
    def _channel_mix(leads: Sequence[Lead]) -> Dict[str, int]:
        mix = {channel.value: 0 for channel in Channel}
        for lead in leads:
            mix[lead.channel.value] += 1
        return mix

    @staticmethod
    def _status_funnel(leads: Sequence[Lead]) -> Dict[str, int]:
        """Counts per status, funnel stages first, then the side states."""
        ordered = [*LEAD_FUNNEL, *(s for s in LeadStatus if s in SIDE_STATUSES)]
        funnel = {status.value: 0 for status in ordered}
        for lead in leads:
            funnel[lead.status.value] += 1
        return funnel

    @staticmethod
    def _owner_performance(
        leads: Sequence[Lead], owners: Sequence[Owner], contacted_total: int
    ) -> List[Dict[str, Any]]:
        performance = []
        for owner in owners:
            if owner.role not in ASSIGNABLE_ROLES:
                continue
            owned = [lead for lead in leads if lead.owner == owner.id]
            worked = [lead for lead in owned if lead.status != LeadStatus.NEW]
            reached = [lead for lead in worked if lead.last_contact_at is not None]
            qualified = [lead for lead in owned if lead.status in QUALIFIED_STATUSES]
            won = [lead for lead in owned if lead.status == LeadStatus.WON]
            performance.append(
                {
                    "owner_id": owner.id,
                    "owner_name": owner.name,
                    "calls": len(worked),
                    "first_contact_rate": _percent(len(reached), len(owned)),
                    "qualified_rate": _percent(len(qualified), contacted_total),
                    "won_count": len(won),
                }
            )
        return performance
