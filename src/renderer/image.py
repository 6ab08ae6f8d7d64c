# renderer/image.py
"""
Pixel storage and image file output.

Buffers are indexed ``buffer[x, y]`` with x the column and y the row, row 0
at the top of the picture.
"""
import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image

from core.color import Color

logger = logging.getLogger(__name__)

PILLOW_FORMATS = {".png": "PNG", ".jpg": "JPEG", ".jpeg": "JPEG", ".bmp": "BMP"}

class ImageBuffer:
    """
    Linear RGB accumulation buffer backed by a numpy array.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.data = np.zeros((height, width, 3), dtype=np.float64)

    def __getitem__(self, index: Tuple[int, int]) -> Color:
        x, y = index
        r, g, b = self.data[y, x]
        return Color(float(r), float(g), float(b))

    def __setitem__(self, index: Tuple[int, int], color: Color):
        x, y = index
        self.data[y, x] = color.as_tuple()

    def add_sample(self, x: int, y: int, color: Color):
        self.data[y, x] += color.as_tuple()

    def resolve(self, samples_per_pixel: int) -> np.ndarray:
        """Average of the accumulated samples."""
        return self.data / samples_per_pixel

    def clear(self):
        self.data.fill(0.0)

def save_ppm(path: Union[str, Path], pixels: np.ndarray):
    """
    Writes a plain-text (P3) PPM file from a (height, width, 3) uint8 array.
    """
    height, width, _ = pixels.shape
    lines = [f"P3\n{width} {height}\n255\n"]
    for row in pixels:
        for r, g, b in row:
            lines.append(f"{r} {g} {b}\n")
    Path(path).write_text("".join(lines))

def save_image(path: Union[str, Path], pixels: np.ndarray) -> Path:
    """
    Saves pixels using the format implied by the file suffix.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".ppm":
        save_ppm(path, pixels)
    elif suffix in PILLOW_FORMATS:
        Image.fromarray(pixels).save(path, format=PILLOW_FORMATS[suffix])
    else:
        supported = ", ".join([".ppm"] + sorted(PILLOW_FORMATS))
        raise ValueError(f"Unsupported image format '{path.suffix}' (expected one of {supported})")
    logger.info("Wrote %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
    return path
