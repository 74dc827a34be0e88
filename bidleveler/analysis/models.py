from dataclasses import dataclass, field


@dataclass(frozen=True)
class KeyComponents:
    """Cost split of one bid, in dollars; None where the model gave nothing."""

    materials: float | None = None
    labor: float | None = None
    overhead: float | None = None


@dataclass(frozen=True)
class BidComparison:
    bidder: str
    total_cost: float | None = None
    key_components: KeyComponents = field(default_factory=KeyComponents)
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisSummary:
    recommended_bid: str
    total_cost: float | None = None
    reasoning: str = ""


@dataclass(frozen=True)
class BidAnalysis:
    """Output of the bid analyzer."""

    summary: AnalysisSummary
    bid_comparison: list[BidComparison] = field(default_factory=list)
    risks: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
