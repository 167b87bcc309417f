"""
Terrain noise modules.

- noise: OpenSimplex primitive, fractal sampler and value normalization
"""

from . import noise

__all__ = ["noise"]
