import logging
import re
from typing import Optional

from leadengine.core.config import Settings, settings as default_settings
from leadengine.core.constants import BUDGET_FLOOR_POINTS, BUDGET_TIERS, CHANNEL_POINTS
from leadengine.schemas.lead import Lead

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")


def parse_budget(budget_range: Optional[str]) -> Optional[int]:
    """Extract the numeric part of free-text budget such as ``"15,00,000"``.

    Every non-digit character is dropped and the remainder read as one
    integer.  Returns ``None`` when nothing usable is left.
    """
    if not budget_range:
        return None
    digits = _NON_DIGITS.sub("", budget_range)
    if not digits:
        return None
    try:
        return int(digits)
    except ValueError:
        # Beyond the interpreter's int-from-string digit limit
        logger.debug("Budget text too long to parse (%d digits)", len(digits))
        return None


class LeadScoringEngine:
    """Compute a 0-100 quality score for a lead.

    Additive point model, every factor independent:
        - channel base points (``CHANNEL_POINTS``)
        - budget tier points (``BUDGET_TIERS``, highest threshold first)
        - preferred model present
        - repeat customer
        - premium city

    The sum is capped at ``MAX_LEAD_SCORE`` as the last step.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or default_settings

    def calculate_lead_score(self, lead: Lead) -> int:
        cfg = self._settings
        score = CHANNEL_POINTS.get(lead.channel, cfg.DEFAULT_CHANNEL_POINTS)
        score += self._budget_points(lead.budget_range)

        if lead.preferred_model:
            score += cfg.PREFERRED_MODEL_POINTS
        if lead.is_repeat_lead:
            score += cfg.REPEAT_LEAD_POINTS
        if lead.city in cfg.PREMIUM_CITIES:
            score += cfg.PREMIUM_CITY_POINTS

        final = max(0, min(cfg.MAX_LEAD_SCORE, score))
        logger.debug("Lead %s scored %d (raw %d)", lead.id, final, score)
        return final

    @staticmethod
    def _budget_points(budget_range: Optional[str]) -> int:
        budget = parse_budget(budget_range)
        if budget is None:
            return 0
        for threshold, points in BUDGET_TIERS:
            if budget >= threshold:
                return points
        return BUDGET_FLOOR_POINTS
