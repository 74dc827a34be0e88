import threading
from collections import deque
from datetime import datetime

from bidleveler.logging.logger import Log
from bidleveler.usage.base import BaseUsageRecorder
from bidleveler.usage.models import UsageEvent, UsageStats


class InMemoryUsageRecorder(BaseUsageRecorder):
    """Bounded in-process usage log; the oldest events drop off first.

    Instances are independent, so tests and request scopes each get their
    own log instead of sharing a module-level list.
    """

    def __init__(self, max_entries: int = 1000) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self._events: deque[UsageEvent] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def record(self, event: UsageEvent) -> None:
        with self._lock:
            self._events.append(event)
        Log.info(
            f"Token usage: {event.input_tokens} in + {event.output_tokens} out = "
            f"{event.total_tokens} total tokens ({event.model or 'n/a'})"
        )

    @property
    def events(self) -> list[UsageEvent]:
        with self._lock:
            return list(self._events)

    def stats(
        self,
        start: datetime | None = None,
        end: datetime | None = None,
        model: str | None = None,
        endpoint: str | None = None,
    ) -> UsageStats:
        """Aggregate the events matching every given filter."""
        filtered = [
            e
            for e in self.events
            if (start is None or e.timestamp >= start)
            and (end is None or e.timestamp <= end)
            and (model is None or e.model == model)
            and (endpoint is None or e.endpoint == endpoint)
        ]
        if not filtered:
            return UsageStats()

        total_in = sum(e.input_tokens for e in filtered)
        total_out = sum(e.output_tokens for e in filtered)
        count = len(filtered)
        successes = sum(1 for e in filtered if e.success)
        return UsageStats(
            total_input_tokens=total_in,
            total_output_tokens=total_out,
            total_tokens=total_in + total_out,
            request_count=count,
            average_per_request=(total_in + total_out) / count,
            success_rate=successes / count * 100,
        )


class NullUsageRecorder(BaseUsageRecorder):
    """Discards every event."""

    def record(self, event: UsageEvent) -> None:
        _ = event
