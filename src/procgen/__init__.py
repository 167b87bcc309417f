"""
Procedural noise for terrain maps.

This package provides:
- A seeded 2D coherent-noise primitive (OpenSimplex)
- Fractal octave summation over that primitive
- Value normalization between ranges
- Noise configuration and parameter ranges
"""

from .config import NoiseConfig, ParameterSpec, NOISE_PARAMETERS
from .modules.noise import NoiseSampler, make_noise2d, normalize_value

__all__ = [
    "NoiseConfig",
    "ParameterSpec",
    "NOISE_PARAMETERS",
    "NoiseSampler",
    "make_noise2d",
    "normalize_value",
]
