import logging
from typing import Dict, List, Sequence

from leadengine.core.constants import ASSIGNABLE_ROLES
from leadengine.core.exceptions import OwnerNotFoundError
from leadengine.schemas.lead import Lead, Owner

logger = logging.getLogger(__name__)

UNASSIGNED = ""


class LeadAssignmentManager:
    """Round-robin-by-city lead assignment.

    Selection strategy:

    1. Only owners whose role is in ``ASSIGNABLE_ROLES`` take part.
    2. Workload is counted over pool leads in the candidate's city.
    3. Owners with the lowest count form the tied group.
    4. Inside the tied group the first owner whose expertise covers the
       lead's preferred model wins; otherwise the first owner wins.

    "First" always means roster order, so repeated calls with the same
    inputs return the same owner.  When nobody is eligible the empty
    string ``UNASSIGNED`` is returned instead of raising.
    """

    def assign_lead(
        self, lead: Lead, pool: Sequence[Lead], owners: Sequence[Owner]
    ) -> str:
        eligible = [owner for owner in owners if owner.role in ASSIGNABLE_ROLES]
        if not eligible:
            logger.warning("No eligible owner for lead %s; leaving unassigned", lead.id)
            return UNASSIGNED

        workload = self._city_workload(lead.city, pool, eligible)
        lowest = min(workload.values())
        tied = [owner for owner in eligible if workload[owner.id] == lowest]

        selected = tied[0]
        if lead.preferred_model:
            experts = [o for o in tied if lead.preferred_model in o.expertise]
            if experts:
                selected = experts[0]

        logger.debug(
            "Lead %s assigned to %s (city=%s, load=%d)",
            lead.id,
            selected.id,
            lead.city,
            lowest,
        )
        return selected.id

    @staticmethod
    def _city_workload(
        city: str, pool: Sequence[Lead], owners: List[Owner]
    ) -> Dict[str, int]:
        counts = {owner.id: 0 for owner in owners}
        for existing in pool:
            if existing.city == city and existing.owner in counts:
                counts[existing.owner] += 1
        return counts

    def reassign_lead(self, lead: Lead, owner_id: str, owners: Sequence[Owner]) -> Lead:
        """Return a copy of *lead* owned by *owner_id*.

        The owner must be part of the supplied roster.
        """
        if not any(owner.id == owner_id for owner in owners):
            raise OwnerNotFoundError(f"Owner {owner_id} is not in the roster")
        return lead.model_copy(update={"owner": owner_id})
