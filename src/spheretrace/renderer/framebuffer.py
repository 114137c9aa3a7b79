# renderer/framebuffer.py
import os
from typing import Iterable
import numpy as np
from PIL import Image
from spheretrace.core.color import Color
from spheretrace.renderer.tone_mapping import quantize

PPM_MAGIC = b"P6"

# Suffixes written through Pillow; everything else is written as binary PPM.
PILLOW_SUFFIXES = {".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff"}


class OutputError(Exception):
    """Writing the finished image failed. The framebuffer is left intact."""


class Framebuffer:
    """
    Width x height store of final (gamma-space) pixel colors.

    Row 0 is the bottom of the image. Each pixel may be set exactly once per
    render; out-of-range or repeated writes raise immediately.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)
        self._written = np.zeros((height, width), dtype=bool)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Framebuffer pixel ({x}, {y}) out of range ({self.width}, {self.height})")

    def set(self, x: int, y: int, color: Iterable[float]):
        self._check_bounds(x, y)
        if self._written[y, x]:
            raise RuntimeError(f"Framebuffer pixel ({x}, {y}) written twice")
        self.pixels[y, x] = tuple(color)
        self._written[y, x] = True

    def get(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x]
        return Color(r, g, b)

    @property
    def written_count(self) -> int:
        return int(self._written.sum())

    def is_complete(self) -> bool:
        return bool(self._written.all())

    def to_rgb8(self) -> np.ndarray:
        """8-bit pixels in display order: top row (y = height - 1) first."""
        return quantize(self.pixels[::-1])

    def to_ppm_bytes(self) -> bytes:
        header = b"%s\n%d %d\n255\n" % (PPM_MAGIC, self.width, self.height)
        return header + self.to_rgb8().tobytes()

    def write(self, path: str):
        """
        Serialize to `path`. Binary PPM unless the suffix names a format
        Pillow should handle.
        """
        suffix = os.path.splitext(path)[1].lower()
        if suffix in PILLOW_SUFFIXES:
            image = Image.fromarray(self.to_rgb8())
            try:
                image.save(path)
            except OSError as exc:
                raise OutputError(f"could not write {path}: {exc}") from exc
            return

        data = self.to_ppm_bytes()
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as exc:
            raise OutputError(f"could not write {path}: {exc}") from exc
