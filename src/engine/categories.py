"""
Terrain category table.

Each category has a fixed display color. The table is static and shared.
"""

from enum import IntEnum
from typing import Dict, List, Tuple

from PIL import ImageColor


class TerrainCategory(IntEnum):
    AIR = 0
    WATER = 1
    SAND = 2
    GRASS = 3
    STONE = 4
    SNOW = 5

    @property
    def color(self) -> str:
        return CATEGORY_COLORS[self]

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return CATEGORY_RGB[self]

    @property
    def label(self) -> str:
        return self.name.lower()


CATEGORY_COLORS: Dict[TerrainCategory, str] = {
    TerrainCategory.AIR: "#ffffff",
    TerrainCategory.GRASS: "#00ff00",
    TerrainCategory.SAND: "#C2B280",
    TerrainCategory.STONE: "#808080",
    TerrainCategory.WATER: "#0000ff",
    TerrainCategory.SNOW: "#fffafa",
}

CATEGORY_RGB: Dict[TerrainCategory, Tuple[int, int, int]] = {
    category: ImageColor.getrgb(color) for category, color in CATEGORY_COLORS.items()
}


def category_by_name(name: str) -> TerrainCategory:
    """Look up a category by its lowercase name, e.g. ``"water"``."""
    try:
        return TerrainCategory[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown terrain category: {name}") from None


def color_lookup_table() -> List[Tuple[int, int, int]]:
    """RGB colors ordered by category code, for vectorized painting."""
    return [CATEGORY_RGB[category] for category in TerrainCategory]
