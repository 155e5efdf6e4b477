__version__ = "1.0.0"

from jpegresize.core.batch import BatchDriver, BatchReport
from jpegresize.core.export import ExportConfig
from jpegresize.core.errors import ResizeBatchError
from jpegresize.utils.config import Config

__all__ = [
    "BatchDriver",
    "BatchReport",
    "ExportConfig",
    "ResizeBatchError",
    "Config",
]
