import sys
import threading
from pathlib import Path
from typing import Optional, TextIO

from tqdm import tqdm


class ProgressReporter:
    """Per-file progress lines plus a tqdm bar over the whole batch."""

    def __init__(self, total: int, enabled: bool = True, file: Optional[TextIO] = None):
        self.total = total
        self.enabled = enabled
        self.file = file if file is not None else sys.stdout
        self._lock = threading.Lock()
        # [xxx] before the file name, padded to the width of the job count
        self._counter_width = len(str(total))
        self._bar = tqdm(
            total=total,
            desc="🖼️ resize",
            unit="img",
            file=sys.stderr,
            disable=not enabled or total == 0,
            leave=False,
        )

    def format_line(self, remaining: int, name: str, source_bytes: int, output_bytes: int) -> str:
        return (
            f"[{remaining:>{self._counter_width}}] {name} processed, "
            f"{source_bytes // 1024}k -> {output_bytes // 1024}k."
        )

    def file_done(self, files_processed: int, path: Path, source_bytes: int, output_bytes: int):
        """Emit the line for one finished job; ``files_processed`` includes it."""
        if not self.enabled:
            return
        remaining = self.total - files_processed + 1
        line = self.format_line(remaining, Path(path).name, source_bytes, output_bytes)
        with self._lock:
            tqdm.write(line, file=self.file)
            self._bar.update(1)

    def close(self):
        self._bar.close()
