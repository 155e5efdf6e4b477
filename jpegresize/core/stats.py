import threading
from dataclasses import dataclass


@dataclass(frozen=True)
class StatsSnapshot:
    files_processed: int = 0
    source_bytes_total: int = 0
    output_bytes_total: int = 0


class RunStatistics:
    """Run-wide totals shared by all workers.

    ``add`` is the only way to mutate the totals; the three fields change
    together under one lock so a snapshot never sees a half-applied result.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._files_processed = 0
        self._source_bytes_total = 0
        self._output_bytes_total = 0

    def add(self, source_bytes: int, output_bytes: int) -> StatsSnapshot:
        """Record one finished job and return the totals including it."""
        if source_bytes < 0 or output_bytes < 0:
            raise ValueError("byte counts must not be negative")

        with self._lock:
            self._files_processed += 1
            self._source_bytes_total += source_bytes
            self._output_bytes_total += output_bytes
            return self._snapshot_locked()

    def snapshot(self) -> StatsSnapshot:
        with self._lock:
            return self._snapshot_locked()

    def _snapshot_locked(self) -> StatsSnapshot:
        return StatsSnapshot(
            files_processed=self._files_processed,
            source_bytes_total=self._source_bytes_total,
            output_bytes_total=self._output_bytes_total,
        )
