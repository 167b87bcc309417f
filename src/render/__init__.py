"""
Rendering of terrain grids onto pixel surfaces.
"""

from .canvas import (
    PixelSurface, ImageSurface, paint_grid,
    grid_to_array, grid_to_image, image_to_base64, image_to_png_bytes
)
from .controller import TerrainController

__all__ = [
    "PixelSurface", "ImageSurface", "paint_grid",
    "grid_to_array", "grid_to_image", "image_to_base64", "image_to_png_bytes",
    "TerrainController",
]
