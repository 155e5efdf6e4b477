import threading

import pytest

from jpegresize.core.stats import RunStatistics, StatsSnapshot


def test_starts_empty():
    assert RunStatistics().snapshot() == StatsSnapshot(0, 0, 0)


def test_add_returns_totals_including_the_new_result():
    stats = RunStatistics()
    stats.add(1000, 400)
    totals = stats.add(2048, 512)

    assert totals == StatsSnapshot(files_processed=2, source_bytes_total=3048, output_bytes_total=912)
    assert stats.snapshot() == totals


def test_rejects_negative_sizes():
    stats = RunStatistics()
    with pytest.raises(ValueError):
        stats.add(-1, 10)
    assert stats.snapshot().files_processed == 0


def test_concurrent_adds_are_not_lost():
    stats = RunStatistics()
    threads_n, per_thread = 16, 500
    barrier = threading.Barrier(threads_n)

    def worker():
        barrier.wait()
        for _ in range(per_thread):
            stats.add(3, 1)

    threads = [threading.Thread(target=worker) for _ in range(threads_n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    total = threads_n * per_thread
    assert stats.snapshot() == StatsSnapshot(total, total * 3, total)


def test_counts_returned_by_add_are_unique():
    stats = RunStatistics()
    seen = []
    lock = threading.Lock()

    def worker():
        for _ in range(200):
            n = stats.add(1, 1).files_processed
            with lock:
                seen.append(n)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(seen) == list(range(1, 1601))
