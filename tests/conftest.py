import threading
import time
from pathlib import Path

import pytest
from PIL import Image

from jpegresize.core.codec import PillowCodec
from jpegresize.core.errors import DecodeError


def write_jpeg(path: Path, width: int, height: int, color=(200, 120, 40), quality: int = 95) -> Path:
    img = Image.new("RGB", (width, height), color)
    # a gradient stripe keeps encoded sizes from being trivially small
    for x in range(0, width, 7):
        for y in range(0, height, 11):
            img.putpixel((x, y), ((x * 3) % 256, (y * 5) % 256, (x + y) % 256))
    img.save(path, format="JPEG", quality=quality)
    return path


@pytest.fixture
def make_jpeg():
    return write_jpeg


@pytest.fixture
def input_dir(tmp_path):
    d = tmp_path / "input"
    d.mkdir()
    return d


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "output"


@pytest.fixture
def sample_images(input_dir):
    """Five small JPEGs of differing sizes."""
    sizes = [(320, 240), (640, 480), (200, 300), (1000, 500), (123, 77)]
    return [
        write_jpeg(input_dir / f"img_{i}.jpg", w, h)
        for i, (w, h) in enumerate(sizes)
    ]


class FailingCodec(PillowCodec):
    """Pillow codec that refuses to decode files whose name is in ``fail_on``."""

    def __init__(self, fail_on):
        self.fail_on = set(fail_on)
        self.calls = []
        self._lock = threading.Lock()

    def decode(self, path):
        with self._lock:
            self.calls.append(Path(path).name)
        if Path(path).name in self.fail_on:
            raise DecodeError("Failed to open image (injected)", path)
        return super().decode(path)


class SlowCodec(PillowCodec):
    """Pillow codec that holds each decode long enough for workers to overlap."""

    def __init__(self, delay: float = 0.05):
        self.delay = delay

    def decode(self, path):
        time.sleep(self.delay)
        return super().decode(path)


@pytest.fixture
def failing_codec():
    return FailingCodec


@pytest.fixture
def slow_codec():
    return SlowCodec
