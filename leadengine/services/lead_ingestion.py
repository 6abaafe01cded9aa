from datetime import datetime
from typing import Optional
from uuid import uuid4

from leadengine.core.exceptions import InvalidLeadDataError
from leadengine.schemas.common import Channel, LeadStatus, Priority, as_utc
from leadengine.schemas.lead import Lead, LeadIngest
from leadengine.services.phone_locale import city_from_phone


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class LeadIngestionService:
    """Turn raw manual-entry or CSV data into a fresh ``Lead``.

    New leads always start as ``New``, unassigned, ``Medium`` priority
    and score 0; scoring happens afterwards during enrichment.
    """

    def build_lead(
        self,
        raw: LeadIngest,
        now: datetime,
        lead_id: Optional[str] = None,
    ) -> Lead:
        """Raises ``InvalidLeadDataError`` when name or phone is missing."""
        name = _clean(raw.name)
        phone = _clean(raw.phone)
        if not name or not phone:
            raise InvalidLeadDataError("Lead requires both a name and a phone number")

        return Lead(
            id=lead_id or str(uuid4()),
            name=name,
            phone=phone,
            email=_clean(raw.email),
            city=_clean(raw.city) or city_from_phone(phone),
            preferred_model=_clean(raw.preferred_model),
            budget_range=_clean(raw.budget_range),
            channel=Channel.from_raw(raw.channel),
            utm=raw.utm,
            owner="",
            status=LeadStatus.NEW,
            priority=Priority.MEDIUM,
            score=0,
            created_at=as_utc(now),
            is_repeat_lead=raw.is_repeat_lead,
        )
