from pathlib import Path
from typing import Optional, Union


class ResizeBatchError(Exception):
    """Base class for every error that aborts a batch run"""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self):
        if self.path is not None:
            return f"{self.message}: {self.path}"
        return self.message


class ConfigError(ResizeBatchError):
    """Invalid quality, width or quota, raised before any job starts."""


class DirectoryAccessError(ResizeBatchError):
    """Input directory is missing or unreadable."""


class DecodeError(ResizeBatchError):
    pass


class StatFileError(ResizeBatchError):
    pass


class ResizeError(ResizeBatchError):
    pass


class EncodeError(ResizeBatchError):
    pass


class WriteError(ResizeBatchError):
    pass
