"""
Threshold classification of normalized noise values into terrain categories.
"""

import numpy as np
from typing import List, Tuple, Union

from .categories import TerrainCategory


class TerrainClassifier:
    """
    Maps a normalized noise value to a terrain category.
    
    Bands are checked low to high and the first upper bound the value is
    below wins; anything at or above the last bound is snow. Values are not
    clamped, so negatives are water and values above 1 are snow. ``AIR``
    is in the category table but never produced here.
    """
    
    BANDS: List[Tuple[float, TerrainCategory]] = [
        (0.50, TerrainCategory.WATER),
        (0.55, TerrainCategory.SAND),
        (0.70, TerrainCategory.GRASS),
        (0.90, TerrainCategory.STONE),
    ]
    TOP = TerrainCategory.SNOW
    
    def classify(self, value: float) -> TerrainCategory:
        for upper, category in self.BANDS:
            if value < upper:
                return category
        return self.TOP
    
    def classify_array(self, values: Union[np.ndarray, List[float]]) -> np.ndarray:
        """
        Classify every element of ``values``.
        
        Returns:
            Integer array of ``TerrainCategory`` codes with the input's shape
        """
        
        values = np.asarray(values, dtype=np.float64)
        conditions = [values < upper for upper, _ in self.BANDS]
        choices = [int(category) for _, category in self.BANDS]
        return np.select(conditions, choices, default=int(self.TOP)).astype(np.uint8)
    
    def thresholds(self) -> List[Tuple[str, float]]:
        """(category name, upper bound) pairs; the top band has no bound."""
        bands = [(category.label, upper) for upper, category in self.BANDS]
        bands.append((self.TOP.label, float("inf")))
        return bands
