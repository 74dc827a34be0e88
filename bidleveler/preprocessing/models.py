from dataclasses import dataclass, field

from bidleveler.config.settings import Settings


@dataclass(frozen=True)
class Document:
    """A bid document handed to the preprocessor: a name plus raw text."""

    name: str
    content: str | None = None


@dataclass(frozen=True)
class ProcessingBudget:
    """Per-document character budget and pipeline toggles."""

    max_content_length: int = 10000
    remove_boilerplate: bool = True
    extract_key_info: bool = True
    summarize_long_sections: bool = True
    preserve_costs: bool = True

    def __post_init__(self) -> None:
        if self.max_content_length <= 0:
            raise ValueError(
                f"max_content_length must be positive, got {self.max_content_length}"
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProcessingBudget":
        return cls(
            max_content_length=settings.max_content_length,
            remove_boilerplate=settings.remove_boilerplate,
            extract_key_info=settings.extract_key_info,
            summarize_long_sections=settings.summarize_long_sections,
            preserve_costs=settings.preserve_costs,
        )


@dataclass(frozen=True)
class CostItem:
    """A currency-like token and the text around it."""

    value: str  # verbatim match, e.g. "$82,300,000" or "300 million dollars"
    context: str  # +/- 30 characters around the match


@dataclass(frozen=True)
class CostFinding:
    """Cost and schedule data found in one document; lives only until truncation.

    Every string is verbatim document text.
    """

    total_cost: str | None = None
    cost_breakdown: list[CostItem] = field(default_factory=list)
    project_duration: str | None = None  # e.g. "Project Duration: 18 months"
    timeline_phases: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return (
            self.total_cost is None
            and not self.cost_breakdown
            and self.project_duration is None
            and not self.timeline_phases
        )


@dataclass(frozen=True)
class ProcessingStats:
    original_tokens: int = 0
    processed_tokens: int = 0
    reduction_percent: float = 0.0


@dataclass(frozen=True)
class ProcessingResult:
    """Output of the preprocessor for one document."""

    name: str
    content: str
    original_size: int
    stats: ProcessingStats = field(default_factory=ProcessingStats)
    error: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Serialize to the camelCase shape the request layer returns."""
        payload: dict[str, object] = {
            "name": self.name,
            "content": self.content,
            "originalSize": self.original_size,
            "stats": {
                "originalTokens": self.stats.original_tokens,
                "processedTokens": self.stats.processed_tokens,
                "reductionPercent": self.stats.reduction_percent,
            },
        }
        if self.error is not None:
            payload["error"] = self.error
        return payload
