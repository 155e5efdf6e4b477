import io
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from jpegresize.core.errors import DecodeError, EncodeError, ResizeError

KERNELS = {
    "lanczos": Image.Resampling.LANCZOS,
}

# Modes the JPEG encoder accepts as-is
JPEG_MODES = {"RGB", "L", "CMYK"}


class CodecImage:
    """Decoded image held in memory, resized in place."""

    def __init__(self, image: Image.Image, path: Path):
        self._image = image
        self.path = path
        self.icc_profile = image.info.get("icc_profile")

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def resize(self, scale_x: float, scale_y: float, kernel: str = "lanczos"):
        """Uniform (or per-axis) scale; results are rounded to whole pixels."""
        if kernel not in KERNELS:
            raise ResizeError(f"Unknown resampling kernel '{kernel}'", self.path)

        new_width = max(1, round(self._image.width * scale_x))
        new_height = max(1, round(self._image.height * scale_y))
        try:
            self._image = self._image.resize((new_width, new_height), KERNELS[kernel])
        except (ValueError, OSError, MemoryError) as e:
            raise ResizeError(f"Failed to resize image ({e})", self.path) from e

    def encode(self, quality: int) -> bytes:
        image = self._image
        if image.mode not in JPEG_MODES:
            image = image.convert("RGB")

        save_kwargs = {"format": "JPEG", "quality": quality}
        if self.icc_profile:
            save_kwargs["icc_profile"] = self.icc_profile

        buffer = io.BytesIO()
        try:
            image.save(buffer, **save_kwargs)
        except (ValueError, OSError) as e:
            raise EncodeError(f"Failed to export image ({e})", self.path) from e
        return buffer.getvalue()


class PillowCodec:
    """Image codec backed by Pillow.

    Anything exposing the same ``decode(path)`` method returning an object with
    ``width``, ``height``, ``resize()`` and ``encode()`` can stand in for it.
    """

    def decode(self, path: Union[str, Path]) -> CodecImage:
        path = Path(path)
        try:
            with Image.open(path) as img:
                # load() forces the full decode so truncated files fail here
                img.load()
                image = img.copy()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise DecodeError(f"Failed to open image ({e})", path) from e
        return CodecImage(image, path)
