"""
Full-canvas terrain generation.

Runs the sample -> normalize -> classify pipeline over every pixel of a
canvas. There is no incremental update: each call builds a new sampler and
a new grid.
"""

import numpy as np
from typing import Optional

from ..procgen import NoiseConfig, NoiseSampler, normalize_value
from .classifier import TerrainClassifier
from .grid import TerrainGrid


# Nominal range of the fractal sum
SAMPLE_MIN = -1.0
SAMPLE_MAX = 1.0


class TerrainGenerator:
    """
    Generates classified terrain grids.
    
    Identical (config, width, height) always yields an identical grid.
    """
    
    def __init__(self, classifier: Optional[TerrainClassifier] = None):
        self.classifier = classifier or TerrainClassifier()
    
    def generate(
        self,
        width: int,
        height: int,
        config: Optional[NoiseConfig] = None,
        sampler: Optional[NoiseSampler] = None
    ) -> TerrainGrid:
        """
        Generate terrain for a width x height canvas.
        
        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            config: Noise configuration (defaults when omitted)
            sampler: Pre-built sampler for ``config``; a new one is built
                when omitted
            
        Returns:
            TerrainGrid of shape (width, height)
        """
        
        _check_extent(width, height)
        
        if sampler is None:
            sampler = NoiseSampler(config or NoiseConfig())
        
        samples = sampler.sample_grid(width, height)
        values = normalize_value(samples, SAMPLE_MIN, SAMPLE_MAX)
        categories = self.classifier.classify_array(values)
        
        return TerrainGrid(categories, samples, values)
    
    def generate_cell_by_cell(
        self,
        width: int,
        height: int,
        config: Optional[NoiseConfig] = None
    ) -> TerrainGrid:
        """Same result as ``generate``, evaluating one pixel at a time."""
        
        _check_extent(width, height)
        sampler = NoiseSampler(config or NoiseConfig())
        
        samples = np.empty((width, height), dtype=np.float64)
        categories = np.empty((width, height), dtype=np.uint8)
        
        for x in range(width):
            for y in range(height):
                sample = sampler.sample(x, y)
                samples[x, y] = sample
                categories[x, y] = self.classifier.classify(
                    normalize_value(sample, SAMPLE_MIN, SAMPLE_MAX)
                )
        
        values = normalize_value(samples, SAMPLE_MIN, SAMPLE_MAX)
        return TerrainGrid(categories, samples, values)


def _check_extent(width: int, height: int):
    if int(width) != width or int(height) != height or width < 1 or height < 1:
        raise ValueError(f"Canvas size must be positive integers, got {width}x{height}")
