"""
Terrain grid and cell types.
"""

import numpy as np
from typing import Iterator, NamedTuple, Tuple

from .categories import TerrainCategory


class Cell(NamedTuple):
    x: int
    y: int
    category: TerrainCategory


class TerrainGrid:
    """
    Classified terrain for one canvas, indexed by pixel coordinate.
    
    Arrays have shape (width, height) and are indexed ``[x, y]``:
    - categories: ``TerrainCategory`` codes
    - samples: raw fractal noise sums
    - values: samples normalized from [-1, 1] to [0, 1] (unclamped)
    """
    
    def __init__(self, categories: np.ndarray, samples: np.ndarray, values: np.ndarray):
        if not (categories.shape == samples.shape == values.shape) or categories.ndim != 2:
            raise ValueError("categories, samples and values must share one 2D shape")
        self.categories = categories
        self.samples = samples
        self.values = values
    
    @property
    def width(self) -> int:
        return self.categories.shape[0]
    
    @property
    def height(self) -> int:
        return self.categories.shape[1]
    
    @property
    def shape(self) -> Tuple[int, int]:
        return self.width, self.height
    
    def cell(self, x: int, y: int) -> Cell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        return Cell(x, y, TerrainCategory(int(self.categories[x, y])))
    
    def __getitem__(self, xy: Tuple[int, int]) -> Cell:
        x, y = xy
        return self.cell(x, y)
    
    def __iter__(self) -> Iterator[Cell]:
        """Cells column by column: x outer, y inner."""
        for x in range(self.width):
            for y in range(self.height):
                yield Cell(x, y, TerrainCategory(int(self.categories[x, y])))
    
    def __len__(self) -> int:
        return self.width * self.height
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, TerrainGrid):
            return NotImplemented
        return (
            np.array_equal(self.categories, other.categories)
            and np.array_equal(self.samples, other.samples)
        )
    
    def __repr__(self) -> str:
        return f"TerrainGrid(width={self.width}, height={self.height})"
