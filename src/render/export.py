"""
Command line rendering of terrain maps to PNG images.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from ..procgen import NoiseConfig, NOISE_PARAMETERS
from ..engine import TerrainGenerator, TerrainAnalyzer
from .canvas import grid_to_image


def render_map(
    config: NoiseConfig,
    output_path: str,
    width: int = 256,
    height: int = 256,
    generator: Optional[TerrainGenerator] = None
) -> Path:
    """
    Generate terrain for ``config`` and write it as a PNG.
    
    Returns:
        Path of the written image
    """
    
    generator = generator or TerrainGenerator()
    grid = generator.generate(width, height, config)
    
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    grid_to_image(grid).save(output_path, format="PNG")
    
    return output_path


def render_variations(
    config: NoiseConfig,
    output_path: str,
    count: int,
    width: int = 256,
    height: int = 256
) -> List[Path]:
    """
    Render ``count`` maps with consecutive seeds starting at ``config.seed``.
    
    Files are named ``<stem>_<seed><suffix>`` next to ``output_path``.
    """
    
    output_path = Path(output_path)
    generator = TerrainGenerator()
    paths = []
    
    for i in tqdm(range(count), desc="Rendering terrain"):
        variation = config.replace(seed=config.seed + i)
        path = output_path.with_name(f"{output_path.stem}_{variation.seed}{output_path.suffix or '.png'}")
        paths.append(render_map(variation, path, width, height, generator))
    
    return paths


def build_parser() -> argparse.ArgumentParser:
    defaults = NOISE_PARAMETERS.defaults()
    
    parser = argparse.ArgumentParser(description="Render a procedural terrain map to PNG")
    parser.add_argument("--out", type=str, required=True, help="Output PNG path")
    parser.add_argument("--width", type=int, default=256, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=256, help="Canvas height in pixels")
    parser.add_argument("--seed", type=int, default=defaults["seed"], help="Noise seed")
    parser.add_argument("--amplitude", type=float, default=defaults["amplitude"], help="Amplitude of the first octave")
    parser.add_argument("--frequency", type=float, default=defaults["frequency"], help="Frequency of the first octave")
    parser.add_argument("--octaves", type=int, default=defaults["octaves"], help="Number of layers of noise to sum")
    parser.add_argument("--persistence", type=float, default=defaults["persistence"], help="Amplitude multiplier per octave")
    parser.add_argument("--lacunarity", type=float, default=defaults["lacunarity"], help="Frequency multiplier per octave")
    parser.add_argument("--variations", type=int, default=1, help="Render this many consecutive seeds")
    parser.add_argument("--stats", action="store_true", help="Print category coverage")
    return parser


def main(argv: Optional[List[str]] = None):
    """CLI entry point for map rendering."""
    
    parser = build_parser()
    args = parser.parse_args(argv)
    
    try:
        config = NoiseConfig(
            seed=args.seed,
            amplitude=args.amplitude,
            frequency=args.frequency,
            octaves=args.octaves,
            persistence=args.persistence,
            lacunarity=args.lacunarity,
        )
    except ValueError as e:
        parser.error(str(e))
    
    if args.variations > 1:
        paths = render_variations(config, args.out, args.variations, args.width, args.height)
        print(f"Rendered {len(paths)} maps next to {args.out}")
        return
    
    grid = TerrainGenerator().generate(args.width, args.height, config)
    path = Path(args.out)
    path.parent.mkdir(parents=True, exist_ok=True)
    grid_to_image(grid).save(path, format="PNG")
    print(f"Saved {path}")
    
    if args.stats:
        coverage = TerrainAnalyzer().analyze(grid)["coverage"]
        for name, entry in coverage.items():
            print(f"  {name:<6} {entry['fraction'] * 100:6.2f}%")


if __name__ == "__main__":
    main()
