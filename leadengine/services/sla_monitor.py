import logging
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from leadengine.core.config import Settings, settings as default_settings
from leadengine.schemas.common import LeadStatus, as_utc
from leadengine.schemas.lead import Lead

logger = logging.getLogger(__name__)


class SLAMonitor:
    """Response-time service levels for leads.

    - ``New`` leads must receive a first contact within
      ``FIRST_CONTACT_SLA_MINUTES`` of creation.
    - Every other status must be followed up within
      ``FOLLOW_UP_SLA_HOURS`` of the last contact.  A non-New lead that
      was never contacted is not measured.

    The reference time is always passed in by the caller.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or default_settings

    @property
    def first_contact_window(self) -> timedelta:
        return timedelta(minutes=self._settings.FIRST_CONTACT_SLA_MINUTES)

    @property
    def follow_up_window(self) -> timedelta:
        return timedelta(hours=self._settings.FOLLOW_UP_SLA_HOURS)

    def is_breached(self, lead: Lead, now: datetime) -> bool:
        now = as_utc(now)
        if lead.status == LeadStatus.NEW:
            if lead.last_contact_at is not None:
                return False
            return now - lead.created_at > self.first_contact_window

        if lead.last_contact_at is None:
            return False
        return now - lead.last_contact_at > self.follow_up_window

    def find_breaches(self, leads: Iterable[Lead], now: datetime) -> List[Lead]:
        """Return the leads in *leads* that are currently in breach."""
        breaches = [lead for lead in leads if self.is_breached(lead, now)]
        if breaches:
            logger.info("%d lead(s) breaching SLA", len(breaches))
        return breaches

    def contacted_within_first_response_sla(self, lead: Lead) -> bool:
        """True when the recorded contact happened inside the first-contact window."""
        if lead.last_contact_at is None:
            return False
        return lead.last_contact_at <= lead.created_at + self.first_contact_window
