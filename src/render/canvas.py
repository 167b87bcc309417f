"""
Pixel surfaces and terrain painting.

A surface is anything with ``width``, ``height`` and ``fill_pixel``. The
Pillow-backed ``ImageSurface`` is the default one.
"""

import base64
import io
import numpy as np
from pathlib import Path
from typing import Protocol, Tuple, Union

from PIL import Image, ImageColor

from ..engine import TerrainGrid, CATEGORY_COLORS
from ..engine.categories import color_lookup_table


Color = Union[str, Tuple[int, int, int]]


class PixelSurface(Protocol):
    width: int
    height: int

    def fill_pixel(self, x: int, y: int, color: Color) -> None:
        ...


class ImageSurface:
    """RGB canvas backed by a Pillow image."""
    
    def __init__(self, width: int = 256, height: int = 256, background: Color = "#000000"):
        self.image = Image.new("RGB", (width, height), background)
        self._pixels = self.image.load()
    
    @property
    def width(self) -> int:
        return self.image.width
    
    @property
    def height(self) -> int:
        return self.image.height
    
    def fill_pixel(self, x: int, y: int, color: Color):
        if isinstance(color, str):
            color = ImageColor.getrgb(color)
        self._pixels[x, y] = color
    
    def get_pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        return self._pixels[x, y]
    
    def save(self, path: Union[str, Path]):
        self.image.save(path, format="PNG")
    
    def to_base64(self) -> str:
        return image_to_base64(self.image)


def paint_grid(grid: TerrainGrid, surface: PixelSurface):
    """
    Paint one category color per pixel, column by column.
    
    Only the overlap of the grid and the surface is painted.
    """
    
    width = min(grid.width, surface.width)
    height = min(grid.height, surface.height)
    
    for x in range(width):
        for y in range(height):
            category = grid.cell(x, y).category
            surface.fill_pixel(x, y, CATEGORY_COLORS[category])


def grid_to_array(grid: TerrainGrid) -> np.ndarray:
    """RGB array of shape (height, width, 3), row-major as images expect."""
    lut = np.array(color_lookup_table(), dtype=np.uint8)
    return lut[grid.categories.T]


def grid_to_image(grid: TerrainGrid) -> Image.Image:
    """Vectorized equivalent of ``paint_grid`` onto a fresh image."""
    return Image.fromarray(grid_to_array(grid))


def image_to_base64(image: Image.Image) -> str:
    """Encode an image as a base64 PNG data URL."""
    
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    buffer.seek(0)
    
    image_base64 = base64.b64encode(buffer.getvalue()).decode("utf-8")
    return f"data:image/png;base64,{image_base64}"


def image_to_png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
