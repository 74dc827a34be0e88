"""Validates the model's parsed JSON answer and builds a BidAnalysis."""

from typing import Any

from bidleveler.analysis.exceptions import AnalysisValidationError
from bidleveler.analysis.models import (
    AnalysisSummary,
    BidAnalysis,
    BidComparison,
    KeyComponents,
)


def validate_and_build(data: dict[str, Any]) -> BidAnalysis:
    """Check the answer's shape and convert it to domain objects.

    ``summary`` and ``bidComparison`` are required; ``risks`` and
    ``recommendations`` default to empty lists.

    Raises:
        AnalysisValidationError: on any validation failure.
    """
    if "summary" not in data:
        raise AnalysisValidationError("Missing required top-level field: summary")
    if not isinstance(data.get("bidComparison"), list):
        raise AnalysisValidationError("'bidComparison' must be a list")

    return BidAnalysis(
        summary=_build_summary(data["summary"]),
        bid_comparison=[
            _build_comparison(item, i) for i, item in enumerate(data["bidComparison"])
        ],
        risks=_string_list(data.get("risks", []), "risks"),
        recommendations=_string_list(data.get("recommendations", []), "recommendations"),
    )


def _build_summary(raw: Any) -> AnalysisSummary:
    if not isinstance(raw, dict):
        raise AnalysisValidationError("'summary' must be an object")
    recommended = raw.get("recommendedBid")
    if not recommended or not isinstance(recommended, str):
        raise AnalysisValidationError("'summary.recommendedBid' must be a non-empty string")
    reasoning = raw.get("reasoning", "")
    if not isinstance(reasoning, str):
        raise AnalysisValidationError("'summary.reasoning' must be a string")
    return AnalysisSummary(
        recommended_bid=recommended,
        total_cost=_amount(raw.get("totalCost"), "summary.totalCost"),
        reasoning=reasoning,
    )


def _build_comparison(raw: Any, index: int) -> BidComparison:
    if not isinstance(raw, dict):
        raise AnalysisValidationError(f"Bid at index {index} must be an object")
    bidder = raw.get("bidder")
    if not bidder or not isinstance(bidder, str):
        raise AnalysisValidationError(f"Bid at index {index}: 'bidder' must be a non-empty string")

    components = raw.get("keyComponents") or {}
    if not isinstance(components, dict):
        raise AnalysisValidationError(f"Bid at index {index}: 'keyComponents' must be an object")

    return BidComparison(
        bidder=bidder,
        total_cost=_amount(raw.get("totalCost"), f"bidComparison[{index}].totalCost"),
        key_components=KeyComponents(
            materials=_amount(components.get("materials"), f"bidComparison[{index}].materials"),
            labor=_amount(components.get("labor"), f"bidComparison[{index}].labor"),
            overhead=_amount(components.get("overhead"), f"bidComparison[{index}].overhead"),
        ),
        strengths=_string_list(raw.get("strengths", []), f"bidComparison[{index}].strengths"),
        weaknesses=_string_list(raw.get("weaknesses", []), f"bidComparison[{index}].weaknesses"),
    )


def _amount(raw: Any, label: str) -> float | None:
    """Dollar amount from a number or a formatted string like "$82,300,000"."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise AnalysisValidationError(f"'{label}' must be a number")
    if isinstance(raw, (int, float)):
        return float(raw)
    if isinstance(raw, str):
        cleaned = raw.replace("$", "").replace(",", "").strip()
        try:
            return float(cleaned)
        except ValueError:
            raise AnalysisValidationError(
                f"'{label}' must be a number, got {raw!r}"
            ) from None
    raise AnalysisValidationError(f"'{label}' must be a number")


def _string_list(raw: Any, label: str) -> list[str]:
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise AnalysisValidationError(f"'{label}' must be a list of strings")
    return list(raw)
