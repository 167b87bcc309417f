"""
Terrain controller.

Binds a noise configuration to a pixel surface. Every configuration change
regenerates the whole map and repaints the surface.
"""

from typing import Optional

from ..procgen import NoiseConfig, NoiseSampler
from ..engine import TerrainGenerator, TerrainGrid
from .canvas import PixelSurface, paint_grid


class TerrainController:
    """
    Owns one NoiseConfig, one NoiseSampler and one TerrainGrid at a time.
    
    ``apply`` is the only way state changes: it replaces config, sampler and
    grid together before painting begins.
    """
    
    def __init__(
        self,
        surface: Optional[PixelSurface] = None,
        width: int = 256,
        height: int = 256,
        generator: Optional[TerrainGenerator] = None
    ):
        """
        Initialize controller.
        
        Args:
            surface: Surface to paint on; its size overrides width/height
            width: Canvas width when no surface is attached
            height: Canvas height when no surface is attached
            generator: Terrain generator (a default one when omitted)
        """
        
        self.surface = surface
        self.width = surface.width if surface is not None else width
        self.height = surface.height if surface is not None else height
        self.generator = generator or TerrainGenerator()
        
        self.config: Optional[NoiseConfig] = None
        self.sampler: Optional[NoiseSampler] = None
        self.grid: Optional[TerrainGrid] = None
    
    def connect(self, config: Optional[NoiseConfig] = None) -> TerrainGrid:
        """Initial pass with ``config`` or the default configuration."""
        
        grid = self.apply(config or NoiseConfig())
        print(f"TerrainController connected: {self.width}x{self.height}, seed {self.config.seed}")
        return grid
    
    def apply(self, config: NoiseConfig) -> TerrainGrid:
        """Regenerate the full map for ``config`` and paint it."""
        
        sampler = NoiseSampler(config)
        grid = self.generator.generate(self.width, self.height, config, sampler=sampler)
        
        self.config = config
        self.sampler = sampler
        self.grid = grid
        
        if self.surface is not None:
            paint_grid(grid, self.surface)
        
        return grid
    
    def update(self, **changes) -> TerrainGrid:
        """Apply the current configuration with some parameters changed."""
        
        base = self.config or NoiseConfig()
        return self.apply(base.replace(**changes))
