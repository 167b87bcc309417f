"""
Terrain classification engine.

Turns fractal noise into a grid of terrain categories:
- Category table with display colors
- Threshold classifier
- Full-canvas generator
- Grid statistics
"""

from .categories import TerrainCategory, CATEGORY_COLORS, CATEGORY_RGB, category_by_name
from .classifier import TerrainClassifier
from .grid import Cell, TerrainGrid
from .generator import TerrainGenerator
from .analyzer import TerrainAnalyzer

__all__ = [
    "TerrainCategory", "CATEGORY_COLORS", "CATEGORY_RGB", "category_by_name",
    "TerrainClassifier",
    "Cell", "TerrainGrid",
    "TerrainGenerator",
    "TerrainAnalyzer",
]
