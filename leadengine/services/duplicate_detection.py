import logging
from datetime import datetime, timedelta
from typing import Iterable, Optional, Set

from leadengine.core.config import Settings, settings as default_settings
from leadengine.schemas.common import as_utc
from leadengine.schemas.lead import Lead
from leadengine.services.similarity import similarity

logger = logging.getLogger(__name__)


class DuplicateDetector:
    """Flag existing leads that probably describe the same person.

    A pool lead created inside the recency window matches when any one of
    the following holds:

    1. the phone numbers are identical;
    2. both leads have an email and they are equal ignoring case;
    3. the names are more than ``NAME_SIMILARITY_THRESHOLD`` similar and
       the last ``PHONE_SUFFIX_LENGTH`` phone characters agree (shared
       household number pattern).

    Rule 3 misses similar names on unrelated numbers and can pair people
    with common first names on a shared suffix; both thresholds are
    configurable for that reason.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or default_settings

    def find_duplicates(
        self, candidate: Lead, pool: Iterable[Lead], now: datetime
    ) -> Set[str]:
        cutoff = as_utc(now) - timedelta(days=self._settings.DUPLICATE_WINDOW_DAYS)
        matches: Set[str] = set()

        for existing in pool:
            if existing.id == candidate.id:
                continue
            if existing.created_at < cutoff:
                continue
            if self._is_match(candidate, existing):
                matches.add(existing.id)

        if matches:
            logger.debug(
                "Lead %s matches existing lead(s) %s",
                candidate.id,
                ", ".join(sorted(matches)),
            )
        return matches

    def _is_match(self, candidate: Lead, existing: Lead) -> bool:
        if existing.phone == candidate.phone:
            return True

        if (
            candidate.email
            and existing.email
            and candidate.email.lower() == existing.email.lower()
        ):
            return True

        return self._similar_name_same_suffix(candidate, existing)

    def _similar_name_same_suffix(self, candidate: Lead, existing: Lead) -> bool:
        suffix = self._settings.PHONE_SUFFIX_LENGTH
        # Short numbers compare whatever characters they have
        if candidate.phone[-suffix:] != existing.phone[-suffix:]:
            return False
        score = similarity(candidate.name, existing.name)
        return score > self._settings.NAME_SIMILARITY_THRESHOLD
