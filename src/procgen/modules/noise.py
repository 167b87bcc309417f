"""
Noise functions for terrain generation.

- make_noise2d: seeded OpenSimplex primitive returning values in [-1, 1]
- NoiseSampler: fractal (octave-summed) sampling of that primitive
- normalize_value: linear rescale between ranges
"""

import numpy as np
from typing import Callable, Union
from opensimplex import OpenSimplex

from ..config import NoiseConfig


Noise2D = Callable[[float, float], float]


def make_noise2d(seed: int) -> Noise2D:
    """Create a 2D coherent-noise function seeded once with ``seed``."""
    simplex = OpenSimplex(seed=seed)
    return simplex.noise2


def normalize_value(
    value: Union[float, np.ndarray],
    src_min: float,
    src_max: float,
    dst_min: float = 0.0,
    dst_max: float = 1.0
) -> Union[float, np.ndarray]:
    """
    Linearly rescale ``value`` from [src_min, src_max] to [dst_min, dst_max].
    
    The result is not clamped: inputs outside the source range map outside
    the destination range.
    """
    return (value - src_min) / (src_max - src_min) * (dst_max - dst_min) + dst_min


class NoiseSampler:
    """
    Fractal noise sampler.
    
    Sums ``octaves`` layers of the seeded primitive. Each layer multiplies
    the frequency by ``lacunarity`` and the amplitude by ``persistence``.
    The sum is nominally in [-1, 1] but is not clamped, so large amplitudes
    or many octaves can exceed that range.
    """
    
    def __init__(self, config: NoiseConfig):
        self.config = config
        self._simplex = OpenSimplex(seed=config.seed)
        self.noise2d: Noise2D = self._simplex.noise2
    
    def sample(self, x: float, y: float) -> float:
        """Fractal noise value at a single coordinate."""
        
        value = 0.0
        frequency = self.config.frequency
        amplitude = self.config.amplitude
        
        for _ in range(self.config.octaves):
            value += self.noise2d(x * frequency, y * frequency) * amplitude
            frequency *= self.config.lacunarity
            amplitude *= self.config.persistence
        
        return value
    
    def sample_grid(self, width: int, height: int) -> np.ndarray:
        """
        Fractal noise for every pixel coordinate of a width x height canvas.
        
        Returns:
            Array of shape (width, height) indexed as ``[x, y]``, holding
            the same values ``sample(x, y)`` returns for each pixel
        """
        
        xs = np.arange(width, dtype=np.float64)
        ys = np.arange(height, dtype=np.float64)
        
        total = np.zeros((width, height), dtype=np.float64)
        frequency = self.config.frequency
        amplitude = self.config.amplitude
        
        for _ in range(self.config.octaves):
            # noise2array returns rows indexed by y
            layer = self._simplex.noise2array(xs * frequency, ys * frequency)
            total += layer.T * amplitude
            frequency *= self.config.lacunarity
            amplitude *= self.config.persistence
        
        return total
