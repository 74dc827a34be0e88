from bidleveler.preprocessing.base import BaseCostExtractor
from bidleveler.preprocessing.models import CostFinding, CostItem
from bidleveler.preprocessing.patterns import (
    COST_CONTEXT_RADIUS,
    CURRENCY_PATTERN,
    DURATION_PATTERN,
    PHASE_PATTERN,
    TOTAL_COST_PATTERN,
)


class CostExtractor(BaseCostExtractor):
    """Collects cost and schedule figures verbatim so truncation cannot lose them.

    Matched text is never reparsed or reformatted: "$82,300,000" stays
    exactly that, which is what the downstream prompt explains to the model.
    """

    def __init__(self, context_radius: int = COST_CONTEXT_RADIUS) -> None:
        self._context_radius = context_radius

    def extract_costs(self, text: str) -> CostFinding:
        if not text:
            return CostFinding()

        total_match = TOTAL_COST_PATTERN.search(text)
        total_cost = total_match.group(0) if total_match else None

        breakdown: list[CostItem] = []
        for match in CURRENCY_PATTERN.finditer(text):
            start = max(0, match.start() - self._context_radius)
            end = min(len(text), match.end() + self._context_radius)
            breakdown.append(CostItem(value=match.group(0), context=text[start:end]))

        duration_match = DURATION_PATTERN.search(text)
        phases = [match.group(1).strip() for match in PHASE_PATTERN.finditer(text)]

        return CostFinding(
            total_cost=total_cost,
            cost_breakdown=breakdown,
            project_duration=duration_match.group(0) if duration_match else None,
            timeline_phases=phases,
        )
