"""
FastAPI server for terrain map generation.

Exposes the noise parameters, the category table and full-map regeneration
over HTTP. Requests carry the whole configuration; nothing is kept between
requests.
"""

import argparse
import time
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel, Field
import uvicorn

from ..procgen import NoiseConfig, NOISE_PARAMETERS
from ..engine import TerrainGenerator, TerrainAnalyzer, TerrainCategory, TerrainClassifier
from ..render import grid_to_image, image_to_base64, image_to_png_bytes


_RANGES = NOISE_PARAMETERS.params
MAX_CANVAS = 2048


# Pydantic models for API
class NoiseParameters(BaseModel):
    seed: int = Field(_RANGES["seed"][2], ge=_RANGES["seed"][0], le=_RANGES["seed"][1], description="Noise seed")
    amplitude: float = Field(_RANGES["amplitude"][2], ge=_RANGES["amplitude"][0], le=_RANGES["amplitude"][1], description="Amplitude of the first octave")
    frequency: float = Field(_RANGES["frequency"][2], ge=_RANGES["frequency"][0], le=_RANGES["frequency"][1], description="Frequency of the first octave")
    octaves: int = Field(_RANGES["octaves"][2], ge=_RANGES["octaves"][0], le=_RANGES["octaves"][1], description="Number of noise layers")
    persistence: float = Field(_RANGES["persistence"][2], ge=_RANGES["persistence"][0], le=_RANGES["persistence"][1], description="Amplitude multiplier per octave")
    lacunarity: float = Field(_RANGES["lacunarity"][2], ge=_RANGES["lacunarity"][0], le=_RANGES["lacunarity"][1], description="Frequency multiplier per octave")

    def to_config(self) -> NoiseConfig:
        return NoiseConfig(
            seed=self.seed,
            amplitude=self.amplitude,
            frequency=self.frequency,
            octaves=self.octaves,
            persistence=self.persistence,
            lacunarity=self.lacunarity,
        )


class TerrainRequest(NoiseParameters):
    width: Optional[int] = Field(None, ge=1, le=MAX_CANVAS, description="Canvas width (server default when omitted)")
    height: Optional[int] = Field(None, ge=1, le=MAX_CANVAS, description="Canvas height (server default when omitted)")
    return_image: bool = Field(False, description="Return base64-encoded PNG image")


class TerrainResponse(BaseModel):
    config: Dict[str, Any]
    width: int
    height: int
    statistics: Dict[str, Any]
    generation_time: float
    terrain_image: Optional[str] = None  # Base64-encoded PNG


class HealthResponse(BaseModel):
    status: str
    width: int
    height: int


class CategoryInfo(BaseModel):
    name: str
    color: str
    upper_bound: Optional[float]


# Global generator instance
generator: Optional[TerrainGenerator] = None


def create_app(
    width: int = 256,
    height: int = 256,
    cors_origins: List[str] = None
) -> FastAPI:
    """Create FastAPI application."""
    
    app = FastAPI(
        title="Terrain Canvas API",
        description="Generate classified procedural terrain maps",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    
    if cors_origins is None:
        cors_origins = ["*"]
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    analyzer = TerrainAnalyzer()
    
    @app.on_event("startup")
    async def startup_event():
        global generator
        generator = TerrainGenerator()
        print(f"✓ Terrain generator ready ({width}x{height} canvas)")
    
    def _require_generator() -> TerrainGenerator:
        if generator is None:
            raise HTTPException(status_code=503, detail="Generator not initialized")
        return generator
    
    @app.get("/health", response_model=HealthResponse)
    async def health():
        """Health check endpoint."""
        
        return HealthResponse(
            status="healthy" if generator is not None else "loading",
            width=width,
            height=height
        )
    
    @app.get("/parameters")
    async def get_parameters():
        """Ranges and defaults of the noise parameters."""
        
        return {
            "parameters": {
                name: {"min": min_val, "max": max_val, "default": default}
                for name, (min_val, max_val, default) in NOISE_PARAMETERS.params.items()
            },
            "canvas": {"width": width, "height": height, "max": MAX_CANVAS}
        }
    
    @app.get("/categories", response_model=List[CategoryInfo])
    async def get_categories():
        """Terrain categories with their colors and classification bounds."""
        
        # Unbounded (snow) and never produced (air) categories have no upper bound
        bounds = {
            name: upper for name, upper in TerrainClassifier().thresholds()
            if upper != float("inf")
        }
        return [
            CategoryInfo(
                name=category.label,
                color=category.color,
                upper_bound=bounds.get(category.label)
            )
            for category in TerrainCategory
        ]
    
    @app.post("/generate", response_model=TerrainResponse)
    async def generate_terrain(request: TerrainRequest):
        """Regenerate the full map for a configuration."""
        
        terrain_generator = _require_generator()
        canvas_width = request.width or width
        canvas_height = request.height or height
        
        try:
            config = request.to_config()
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        
        try:
            start_time = time.time()
            grid = terrain_generator.generate(canvas_width, canvas_height, config)
            generation_time = time.time() - start_time
            
            response = TerrainResponse(
                config=config.to_dict(),
                width=grid.width,
                height=grid.height,
                statistics=analyzer.analyze(grid),
                generation_time=generation_time
            )
            
            if request.return_image:
                response.terrain_image = image_to_base64(grid_to_image(grid))
            
            return response
            
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Generation failed: {str(e)}")
    
    @app.get("/generate/image")
    async def generate_image(
        seed: int = Query(_RANGES["seed"][2], ge=_RANGES["seed"][0], le=_RANGES["seed"][1]),
        amplitude: float = Query(_RANGES["amplitude"][2], ge=_RANGES["amplitude"][0], le=_RANGES["amplitude"][1]),
        frequency: float = Query(_RANGES["frequency"][2], ge=_RANGES["frequency"][0], le=_RANGES["frequency"][1]),
        octaves: int = Query(_RANGES["octaves"][2], ge=_RANGES["octaves"][0], le=_RANGES["octaves"][1]),
        persistence: float = Query(_RANGES["persistence"][2], ge=_RANGES["persistence"][0], le=_RANGES["persistence"][1]),
        lacunarity: float = Query(_RANGES["lacunarity"][2], ge=_RANGES["lacunarity"][0], le=_RANGES["lacunarity"][1]),
        canvas_width: int = Query(width, alias="width", ge=1, le=MAX_CANVAS),
        canvas_height: int = Query(height, alias="height", ge=1, le=MAX_CANVAS),
    ):
        """Regenerate the full map and return it as a PNG."""
        
        terrain_generator = _require_generator()
        
        try:
            config = NoiseConfig(
                seed=seed,
                amplitude=amplitude,
                frequency=frequency,
                octaves=octaves,
                persistence=persistence,
                lacunarity=lacunarity,
            )
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        
        try:
            grid = terrain_generator.generate(canvas_width, canvas_height, config)
            return Response(content=image_to_png_bytes(grid_to_image(grid)), media_type="image/png")
        except Exception as e:
            raise HTTPException(status_code=500, detail=f"Generation failed: {str(e)}")
    
    return app


def main():
    """CLI entry point for API server."""
    
    parser = argparse.ArgumentParser(description="Terrain Canvas API Server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind server")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind server")
    parser.add_argument("--width", type=int, default=256, help="Default canvas width")
    parser.add_argument("--height", type=int, default=256, help="Default canvas height")
    
    args = parser.parse_args()
    
    print(f"Starting Terrain Canvas API server...")
    print(f"Canvas: {args.width}x{args.height}")
    print(f"Server: http://{args.host}:{args.port}")
    print(f"Docs: http://{args.host}:{args.port}/docs")
    
    app = create_app(width=args.width, height=args.height)
    
    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
