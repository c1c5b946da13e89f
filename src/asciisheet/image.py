import math
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciisheet.errors import LoadError


class Bitmap:
    """Read-only RGB pixel grid shared by all row workers."""

    def __init__(self, pixels: np.ndarray):
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"expected an (height, width, 3) array, got shape {pixels.shape}")
        pixels = np.array(pixels, dtype=np.uint8)
        pixels.setflags(write=False)
        self.pixels = pixels

    @classmethod
    def from_image(cls, image: Image.Image) -> "Bitmap":
        return cls(np.asarray(image.convert("RGB"), dtype=np.uint8))

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def row(self, y: int) -> np.ndarray:
        return self.pixels[y]


def load_image(path: str | Path) -> Image.Image:
    path = Path(path)
    try:
        with Image.open(path) as image:
            return image.convert("RGB")
    except FileNotFoundError:
        raise LoadError(path, "file not found") from None
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise LoadError(path, str(e)) from e


def scaled_size(width: int, height: int, scale: float) -> tuple[int, int]:
    """Apply one uniform scale factor, rounding half-up and keeping at least one pixel."""
    if not (math.isfinite(scale) and scale > 0):
        raise ValueError(f"scale factor must be positive and finite, got {scale}")
    new_width = max(1, math.floor(width * scale + 0.5))
    new_height = max(1, math.floor(height * scale + 0.5))
    return new_width, new_height


def resize_image(image: Image.Image, scale: float) -> Image.Image:
    size = scaled_size(image.width, image.height, scale)
    if size == image.size:
        return image
    return image.resize(size, Image.LANCZOS)


def open_and_resize(path: str | Path, scale: float) -> Bitmap:
    return Bitmap.from_image(resize_image(load_image(path), scale))
