from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class UsageEvent:
    """One token-consuming request (or preprocessing batch)."""

    endpoint: str
    input_tokens: int
    output_tokens: int
    model: str = ""
    success: bool = True
    timestamp: datetime = field(default_factory=_utcnow)

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


@dataclass(frozen=True)
class UsageStats:
    """Aggregate over a filtered set of usage events."""

    total_input_tokens: int = 0
    total_output_tokens: int = 0
    total_tokens: int = 0
    request_count: int = 0
    average_per_request: float = 0.0
    success_rate: float = 0.0
