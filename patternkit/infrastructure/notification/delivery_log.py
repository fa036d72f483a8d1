"""In-memory outbox recording every delivery result."""
import threading
from typing import List, Optional

from patternkit.domain.notification.value_objects import DeliveryResult


class DeliveryLog:
    """Append-only record of delivery results, owned by the application."""

    def __init__(self):
        self._results: List[DeliveryResult] = []
        self._lock = threading.Lock()

    def record(self, result: DeliveryResult) -> None:
        with self._lock:
            self._results.append(result)

    def results(self, channel: Optional[str] = None) -> List[DeliveryResult]:
        """Get recorded results, optionally for one channel only."""
        with self._lock:
            if channel is None:
                return list(self._results)
            return [result for result in self._results if result.channel == channel]

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)
