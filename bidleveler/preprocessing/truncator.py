"""Budget enforcement that keeps the start and end of a document.

Heads carry titles and executive summaries, tails carry totals and
signatures; the middle is the most expendable part. The removed span is
replaced with a marker stating how many characters are gone, so the model
reading the result is told that information is missing.
"""

from bidleveler.preprocessing.base import BaseTruncator
from bidleveler.preprocessing.models import CostFinding

COST_BLOCK_HEADER = "=== IMPORTANT COST INFORMATION ==="
TIMELINE_HEADER = "Timeline information:"
MAX_COST_REFERENCES = 5
MAX_TIMELINE_PHASES = 10
DEFAULT_MARKER_RESERVE = 120


def elision_marker(removed_chars: int) -> str:
    return (
        f"\n\n[...TRUNCATED... ({removed_chars} characters removed "
        f"to reduce token count)...]\n\n"
    )


def build_cost_block(
    finding: CostFinding | None,
    include_references: bool = True,
    include_timeline: bool = True,
) -> str:
    """Render the cost summary appended after truncated content.

    The header string is part of the contract with the analysis prompt,
    which tells the model to look for it. Returns "" when there is nothing
    to render below the header.
    """
    if finding is None or finding.is_empty:
        return ""
    body: list[str] = []
    if finding.total_cost:
        body.append(finding.total_cost)
    references = finding.cost_breakdown[:MAX_COST_REFERENCES] if include_references else []
    if references:
        body.append("Cost references:")
        body.extend(f"- {' '.join(item.context.split())}" for item in references)
    if include_timeline and (finding.project_duration or finding.timeline_phases):
        body.append(TIMELINE_HEADER)
        if finding.project_duration:
            body.append(finding.project_duration)
        body.extend(f"- {phase}" for phase in finding.timeline_phases[:MAX_TIMELINE_PHASES])
    if not body:
        return ""
    return "\n".join(["", "", COST_BLOCK_HEADER, *body])


def cost_block_variants(finding: CostFinding | None) -> list[str]:
    """Cost blocks from richest to leanest, for fitting into small budgets.

    References go first, then the timeline, leaving the total line alone.
    """
    candidates = [
        build_cost_block(finding),
        build_cost_block(finding, include_references=False),
        build_cost_block(finding, include_references=False, include_timeline=False),
    ]
    if finding is not None and finding.total_cost:
        candidates.append(f"\n\n{finding.total_cost}")
    variants: list[str] = []
    for candidate in candidates:
        if candidate and candidate not in variants:
            variants.append(candidate)
    return variants


class ContextTruncator(BaseTruncator):
    """Keeps a head and a tail fragment around an explicit elision marker.

    Output never exceeds *max_length*: the cost block shrinks to fit, and
    when nothing else fits the text is hard-cut.
    """

    def __init__(
        self,
        head_ratio: float = 0.6,
        tail_ratio: float = 0.35,
        marker_reserve: int = DEFAULT_MARKER_RESERVE,
    ) -> None:
        if head_ratio < 0 or tail_ratio < 0 or head_ratio + tail_ratio > 1:
            raise ValueError(
                f"Invalid head/tail ratios: {head_ratio}/{tail_ratio}"
            )
        self._head_ratio = head_ratio
        self._tail_ratio = tail_ratio
        self._marker_reserve = marker_reserve

    @classmethod
    def cost_aware(cls) -> "ContextTruncator":
        return cls(head_ratio=0.6, tail_ratio=0.35)

    def truncate(
        self,
        text: str,
        max_length: int,
        cost_finding: CostFinding | None = None,
    ) -> str:
        if len(text) <= max_length:
            return text

        variants = cost_block_variants(cost_finding)
        for cost_block in variants:
            available = max_length - self._marker_reserve - len(cost_block)
            if available > 0:
                return self._head_and_tail(text, available) + cost_block

        for cost_block in variants:
            if len(cost_block.strip()) <= max_length:
                return cost_block.strip()

        available = max_length - self._marker_reserve
        if available > 0:
            return self._head_and_tail(text, available)
        return text[:max_length]

    def _head_and_tail(self, text: str, available: int) -> str:
        head_len = int(available * self._head_ratio)
        tail_len = int(available * self._tail_ratio)
        head = text[:head_len]
        tail = text[len(text) - tail_len:] if tail_len else ""
        removed = len(text) - head_len - tail_len
        return f"{head}{elision_marker(removed)}{tail}"
