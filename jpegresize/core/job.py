import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from jpegresize.core.errors import StatFileError, WriteError
from jpegresize.core.export import ExportConfig
from jpegresize.core.progress import ProgressReporter
from jpegresize.core.stats import RunStatistics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Job:
    path: Path


@dataclass(frozen=True)
class WorkResult:
    path: Path
    source_bytes: int
    output_bytes: int
    width: int
    height: int


@dataclass
class RunContext:
    """Everything one batch run shares between its workers.

    The export config and output dir are read-only; ``stats`` is the only
    mutable piece and serializes its own updates.
    """
    export: ExportConfig
    output_dir: Path
    codec: Any
    stats: RunStatistics = field(default_factory=RunStatistics)
    progress: Optional[ProgressReporter] = None
    abort: threading.Event = field(default_factory=threading.Event)


def source_file_size(path: Path) -> int:
    try:
        return os.stat(path).st_size
    except OSError as e:
        raise StatFileError(f"Failed to get filesize ({e.strerror or e})", path) from e


def write_output(path: Path, data: bytes):
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise WriteError(f"Failed to write image ({e.strerror or e})", path) from e


def resize_one(job: Job, ctx: RunContext) -> WorkResult:
    """Decode, scale to the target width, re-encode and write one image."""
    image = ctx.codec.decode(job.path)
    source_bytes = source_file_size(job.path)

    # Width alone drives the scale; narrower images are upscaled too
    scale = ctx.export.max_width / image.width
    image.resize(scale, scale, kernel="lanczos")

    data = image.encode(ctx.export.quality)

    out_path = ctx.output_dir / job.path.name
    write_output(out_path, data)

    totals = ctx.stats.add(source_bytes, len(data))
    logger.debug(f"{job.path.name}: {source_bytes} -> {len(data)} bytes ({image.width}x{image.height})")
    if ctx.progress is not None:
        ctx.progress.file_done(totals.files_processed, job.path, source_bytes, len(data))

    return WorkResult(
        path=out_path,
        source_bytes=source_bytes,
        output_bytes=len(data),
        width=image.width,
        height=image.height,
    )
