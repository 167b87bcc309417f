"""
Tests for terrain classification and the category table.
"""

import numpy as np
import pytest

from src.engine import (
    TerrainCategory, TerrainClassifier, CATEGORY_COLORS, CATEGORY_RGB, category_by_name
)


@pytest.mark.parametrize("value,expected", [
    (0.49999, TerrainCategory.WATER),
    (0.5, TerrainCategory.SAND),
    (0.54999, TerrainCategory.SAND),
    (0.55, TerrainCategory.GRASS),
    (0.69999, TerrainCategory.GRASS),
    (0.7, TerrainCategory.STONE),
    (0.89999, TerrainCategory.STONE),
    (0.9, TerrainCategory.SNOW),
])
def test_threshold_boundaries(value, expected):
    assert TerrainClassifier().classify(value) == expected


def test_out_of_range_values_fall_to_end_bands():
    classifier = TerrainClassifier()
    assert classifier.classify(-0.3) == TerrainCategory.WATER
    assert classifier.classify(1.7) == TerrainCategory.SNOW


def test_classify_array_matches_scalar():
    classifier = TerrainClassifier()
    values = np.linspace(-0.5, 1.5, 400).reshape(20, 20)
    
    codes = classifier.classify_array(values)
    assert codes.shape == (20, 20)
    expected = [[int(classifier.classify(v)) for v in row] for row in values]
    np.testing.assert_array_equal(codes, expected)


def test_air_is_never_produced():
    codes = TerrainClassifier().classify_array(np.linspace(-2.0, 3.0, 1001))
    assert int(TerrainCategory.AIR) not in set(codes.tolist())
    assert set(codes.tolist()) == {
        int(TerrainCategory.WATER), int(TerrainCategory.SAND), int(TerrainCategory.GRASS),
        int(TerrainCategory.STONE), int(TerrainCategory.SNOW)
    }


def test_category_colors():
    assert len(TerrainCategory) == 6
    assert set(CATEGORY_COLORS) == set(TerrainCategory)
    assert TerrainCategory.WATER.color == "#0000ff"
    assert TerrainCategory.SAND.rgb == (0xC2, 0xB2, 0x80)
    assert TerrainCategory.SNOW.rgb == (255, 250, 250)
    assert CATEGORY_RGB[TerrainCategory.AIR] == (255, 255, 255)


def test_category_by_name():
    assert category_by_name("grass") is TerrainCategory.GRASS
    with pytest.raises(ValueError):
        category_by_name("lava")


def test_thresholds_table():
    assert TerrainClassifier().thresholds() == [
        ("water", 0.5), ("sand", 0.55), ("grass", 0.7), ("stone", 0.9), ("snow", float("inf"))
    ]
