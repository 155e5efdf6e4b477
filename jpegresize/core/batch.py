import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from jpegresize.core.codec import PillowCodec
from jpegresize.core.errors import DirectoryAccessError, WriteError
from jpegresize.core.export import ExportConfig
from jpegresize.core.job import Job, RunContext, WorkResult, resize_one
from jpegresize.core.pool import WorkerPool
from jpegresize.core.progress import ProgressReporter
from jpegresize.core.stats import RunStatistics, StatsSnapshot

logger = logging.getLogger(__name__)

PICTURE_EXTENSION = ".jpg"
OUTPUT_DIR_MODE = 0o755


@dataclass(frozen=True)
class BatchReport:
    stats: StatsSnapshot
    total_jobs: int
    elapsed: float
    # one entry per written file, in enumeration order
    results: Tuple[WorkResult, ...] = ()

    def summary_line(self) -> str:
        return (
            f"TOTAL: {self.stats.files_processed} files processed, "
            f"{self.stats.source_bytes_total // 1024 // 1024}M -> "
            f"{self.stats.output_bytes_total // 1024 // 1024}M. "
            f"Took time: {self.elapsed:.3f}s"
        )


def enumerate_jobs(input_dir: Union[str, Path]) -> List[Job]:
    """Every ``*.jpg`` file directly under ``input_dir``, sorted by name.

    The extension match is case-sensitive and subdirectories are not visited.
    """
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise DirectoryAccessError("Failed to find input dir", input_dir)

    try:
        with os.scandir(input_dir) as entries:
            names = [
                entry.name
                for entry in entries
                if entry.name.endswith(PICTURE_EXTENSION) and entry.is_file()
            ]
    except OSError as e:
        raise DirectoryAccessError(f"Can't count files ({e.strerror or e})", input_dir) from e

    return [Job(path=input_dir / name) for name in sorted(names)]


def ensure_output_dir(output_dir: Union[str, Path]) -> bool:
    """Create ``output_dir`` if needed; returns True when it was created."""
    output_dir = Path(output_dir)
    if output_dir.is_dir():
        return False

    logger.info(f"📁 Directory '{output_dir}' not found and will be created.")
    try:
        output_dir.mkdir(mode=OUTPUT_DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(f"Failed to make directory ({e.strerror or e})", output_dir) from e
    return True


class BatchDriver:
    """Enumerates the input dir, runs every job through the pool and reports totals."""

    def __init__(
        self,
        export: ExportConfig,
        quota: Optional[int] = None,
        codec: Any = None,
        show_progress: bool = True,
    ):
        self.export = export
        self.pool = WorkerPool(quota if quota is not None else (os.cpu_count() or 1))
        self.codec = codec if codec is not None else PillowCodec()
        self.show_progress = show_progress

    def run(self, input_dir: Union[str, Path], output_dir: Union[str, Path]) -> BatchReport:
        t0 = time.perf_counter()

        jobs = enumerate_jobs(input_dir)
        output_dir = Path(output_dir)
        ensure_output_dir(output_dir)

        logger.info(
            f"🚀 Resizing {len(jobs)} image(s) from '{input_dir}' to '{output_dir}' "
            f"(width={self.export.max_width}, quality={self.export.quality}, quota={self.pool.quota})"
        )

        progress = ProgressReporter(total=len(jobs), enabled=self.show_progress)
        ctx = RunContext(
            export=self.export,
            output_dir=output_dir,
            codec=self.codec,
            stats=RunStatistics(),
            progress=progress,
        )

        try:
            results = self.pool.run(jobs, lambda job: resize_one(job, ctx), abort=ctx.abort)
        finally:
            progress.close()

        report = BatchReport(
            stats=ctx.stats.snapshot(),
            total_jobs=len(jobs),
            elapsed=time.perf_counter() - t0,
            results=tuple(results),
        )
        logger.info(f"✅ Batch finished: {report.stats.files_processed}/{len(jobs)} files in {report.elapsed:.2f}s")
        return report
