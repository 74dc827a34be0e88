from abc import ABC, abstractmethod

from bidleveler.usage.models import UsageEvent


class BaseUsageRecorder(ABC):
    """Contract for token usage sinks injected at the processing boundary."""

    @abstractmethod
    def record(self, event: UsageEvent) -> None:
        """Store or forward one usage event. Must not raise on valid events."""
