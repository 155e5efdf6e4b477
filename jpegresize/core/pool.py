import logging
import threading
from concurrent.futures import CancelledError, ThreadPoolExecutor, as_completed
from typing import Any, Callable, List, Optional, Sequence

from jpegresize.core.errors import ConfigError

logger = logging.getLogger(__name__)

_SKIPPED = object()


class _RunState:
    """Bookkeeping for a single ``WorkerPool.run`` call."""

    def __init__(self, abort: threading.Event):
        self.abort = abort
        self.active = 0
        self.max_active = 0
        self.first_error: Optional[BaseException] = None
        self.active_lock = threading.Lock()
        self.failure_lock = threading.Lock()


class WorkerPool:
    """Runs one task per job with at most ``quota`` tasks executing at once.

    The first exception raised by any task aborts the batch: tasks that have
    not started yet are cancelled or skipped, tasks already running finish,
    and ``run`` re-raises that first exception. Nothing is retried.

    Each ``run`` call keeps its own state, so one pool can serve several runs
    at the same time. ``max_active`` is the peak concurrency of the most
    recently finished run.
    """

    def __init__(self, quota: int):
        if isinstance(quota, bool) or not isinstance(quota, int) or quota < 1:
            raise ConfigError(f"Quota limit must be a positive integer, got {quota!r}")
        self.quota = quota
        self.max_active = 0

    def run(
        self,
        jobs: Sequence[Any],
        task: Callable[[Any], Any],
        abort: Optional[threading.Event] = None,
    ) -> List[Any]:
        """Blocks until every job finished; returns results in job order."""
        state = _RunState(abort if abort is not None else threading.Event())
        if not jobs:
            self.max_active = 0
            return []

        results = [_SKIPPED] * len(jobs)
        try:
            with ThreadPoolExecutor(max_workers=self.quota, thread_name_prefix="resize") as executor:
                futures = {
                    executor.submit(self._run_one, task, job, state): idx
                    for idx, job in enumerate(jobs)
                }
                for future in as_completed(futures):
                    try:
                        results[futures[future]] = future.result()
                    except CancelledError:
                        continue

                    if state.abort.is_set():
                        for pending in futures:
                            pending.cancel()
        finally:
            self.max_active = state.max_active

        if state.first_error is not None:
            raise state.first_error

        return [r for r in results if r is not _SKIPPED]

    def _run_one(self, task: Callable[[Any], Any], job: Any, state: _RunState):
        if state.abort.is_set():
            return _SKIPPED

        with state.active_lock:
            state.active += 1
            state.max_active = max(state.max_active, state.active)

        try:
            return task(job)
        except Exception as e:
            with state.failure_lock:
                if state.first_error is None:
                    state.first_error = e
                    logger.error(f"❌ Job failed, aborting batch: {e}")
            state.abort.set()
            return _SKIPPED
        finally:
            with state.active_lock:
                state.active -= 1
