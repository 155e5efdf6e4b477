from .batch import BatchDriver, BatchReport, enumerate_jobs, ensure_output_dir
from .codec import CodecImage, PillowCodec
from .errors import (
    ConfigError,
    DecodeError,
    DirectoryAccessError,
    EncodeError,
    ResizeBatchError,
    ResizeError,
    StatFileError,
    WriteError,
)
from .export import ExportConfig
from .job import Job, RunContext, WorkResult, resize_one
from .pool import WorkerPool
from .progress import ProgressReporter
from .stats import RunStatistics, StatsSnapshot

__all__ = [
    "BatchDriver",
    "BatchReport",
    "enumerate_jobs",
    "ensure_output_dir",
    "CodecImage",
    "PillowCodec",
    "ConfigError",
    "DecodeError",
    "DirectoryAccessError",
    "EncodeError",
    "ResizeBatchError",
    "ResizeError",
    "StatFileError",
    "WriteError",
    "ExportConfig",
    "Job",
    "RunContext",
    "WorkResult",
    "resize_one",
    "WorkerPool",
    "ProgressReporter",
    "RunStatistics",
    "StatsSnapshot",
]
