"""
Tests for full-canvas terrain generation and grid analysis.
"""

import numpy as np
import pytest

from src.procgen import NoiseConfig, NoiseSampler, normalize_value
from src.engine import (
    TerrainGenerator, TerrainAnalyzer, TerrainCategory, TerrainClassifier, TerrainGrid, Cell
)


def test_generation_is_deterministic():
    generator = TerrainGenerator()
    config = NoiseConfig(seed=1337)
    
    first = generator.generate(64, 48, config)
    second = generator.generate(64, 48, config)
    
    assert first == second
    assert list(first) == list(second)


def test_different_seeds_differ():
    generator = TerrainGenerator()
    a = generator.generate(64, 64, NoiseConfig(seed=1))
    b = generator.generate(64, 64, NoiseConfig(seed=2))
    
    assert not np.array_equal(a.samples, b.samples)


def test_grid_shape():
    grid = TerrainGenerator().generate(10, 5, NoiseConfig())
    
    assert grid.shape == (10, 5)
    assert len(grid) == 50
    
    cells = list(grid)
    assert len(cells) == 50
    assert all(isinstance(cell, Cell) for cell in cells)
    assert all(0 <= cell.x < 10 and 0 <= cell.y < 5 for cell in cells)
    assert {(cell.x, cell.y) for cell in cells} == {(x, y) for x in range(10) for y in range(5)}


def test_cells_follow_the_pipeline():
    config = NoiseConfig(seed=21, frequency=0.05)
    grid = TerrainGenerator().generate(12, 7, config)
    sampler = NoiseSampler(config)
    classifier = TerrainClassifier()
    
    for x, y in [(0, 0), (11, 6), (5, 3)]:
        sample = sampler.sample(x, y)
        assert grid.samples[x, y] == pytest.approx(sample, abs=1e-12)
        assert grid.values[x, y] == pytest.approx(normalize_value(sample, -1, 1), abs=1e-12)
        assert grid[x, y].category == classifier.classify(grid.values[x, y])


def test_cell_by_cell_matches_vectorized():
    generator = TerrainGenerator()
    config = NoiseConfig(seed=5)
    
    fast = generator.generate(16, 9, config)
    slow = generator.generate_cell_by_cell(16, 9, config)
    
    np.testing.assert_allclose(fast.samples, slow.samples, rtol=0, atol=1e-12)
    np.testing.assert_array_equal(fast.categories, slow.categories)


def test_categories_are_known_and_never_air():
    grid = TerrainGenerator().generate(128, 128, NoiseConfig())
    codes = set(np.unique(grid.categories).tolist())
    
    assert codes <= {int(c) for c in TerrainCategory}
    assert int(TerrainCategory.AIR) not in codes
    assert len(codes) > 1


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3), (2.5, 3)])
def test_invalid_extent(width, height):
    with pytest.raises(ValueError):
        TerrainGenerator().generate(width, height, NoiseConfig())


def test_grid_indexing():
    grid = TerrainGenerator().generate(4, 3, NoiseConfig())
    
    cell = grid[3, 2]
    assert (cell.x, cell.y) == (3, 2)
    assert isinstance(cell.category, TerrainCategory)
    with pytest.raises(IndexError):
        grid.cell(4, 0)


def test_grid_rejects_mismatched_arrays():
    with pytest.raises(ValueError):
        TerrainGrid(np.zeros((2, 2), dtype=np.uint8), np.zeros((2, 3)), np.zeros((2, 2)))


def test_analyzer_coverage():
    grid = TerrainGenerator().generate(32, 32, NoiseConfig())
    analysis = TerrainAnalyzer().analyze(grid)
    
    coverage = analysis["coverage"]
    assert set(coverage) == {"air", "water", "sand", "grass", "stone", "snow"}
    assert sum(entry["pixels"] for entry in coverage.values()) == 32 * 32
    assert sum(entry["fraction"] for entry in coverage.values()) == pytest.approx(1.0)
    assert coverage["air"]["pixels"] == 0
    assert analysis["grid_shape"] == [32, 32]
    assert analysis["normalized_stats"]["min"] <= analysis["normalized_stats"]["max"]


def test_high_amplitude_leaves_normalized_range():
    config = NoiseConfig(amplitude=10.0, octaves=1)
    grid = TerrainGenerator().generate(64, 64, config)
    analysis = TerrainAnalyzer().analyze(grid)
    
    assert analysis["out_of_range"] > 0
    below = grid.values < 0
    above = grid.values > 1
    assert np.all(grid.categories[below] == int(TerrainCategory.WATER))
    assert np.all(grid.categories[above] == int(TerrainCategory.SNOW))
