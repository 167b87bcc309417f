"""
Terrain grid analysis.

Summarizes a generated grid for reporting: how much of the canvas each
category covers and how the underlying noise values are distributed.
"""

import numpy as np
from typing import Dict, Any

from .categories import TerrainCategory
from .grid import TerrainGrid


class TerrainAnalyzer:
    """Computes coverage and value statistics for terrain grids."""
    
    def analyze(self, grid: TerrainGrid) -> Dict[str, Any]:
        """
        Analyze a terrain grid.
        
        Args:
            grid: Generated terrain grid
            
        Returns:
            Dictionary containing category coverage and value statistics
        """
        
        return {
            "coverage": self._analyze_coverage(grid),
            "sample_stats": self._value_stats(grid.samples),
            "normalized_stats": self._value_stats(grid.values),
            # Normalization is unclamped; these pixels fell outside [0, 1]
            "out_of_range": int(np.count_nonzero((grid.values < 0.0) | (grid.values > 1.0))),
            "grid_shape": [grid.width, grid.height],
        }
    
    def _analyze_coverage(self, grid: TerrainGrid) -> Dict[str, Dict[str, float]]:
        """Pixel count and fraction per category."""
        
        counts = np.bincount(grid.categories.ravel(), minlength=len(TerrainCategory))
        total = float(grid.categories.size)
        
        return {
            category.label: {
                "pixels": int(counts[category]),
                "fraction": float(counts[category] / total),
            }
            for category in TerrainCategory
        }
    
    def _value_stats(self, values: np.ndarray) -> Dict[str, float]:
        return {
            "min": float(np.min(values)),
            "max": float(np.max(values)),
            "mean": float(np.mean(values)),
            "std": float(np.std(values)),
        }
