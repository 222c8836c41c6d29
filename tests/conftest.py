"""Shared test fixtures."""

import io

import pytest

from banner_width import WidthCalculator

# 5x5 glyphs, '#' is ink
FONT_5X5 = {
    'H': ["#...#",
          "#...#",
          "#####",
          "#...#",
          "#...#"],
    'I': ["#####",
          "..#..",
          "..#..",
          "..#..",
          "#####"],
}


def grid_from_font(text):
    """Concatenate 5x5 glyphs horizontally into a pixel grid."""
    rows = []
    for r in range(5):
        rows.append(tuple(cell == '#' for char in text for cell in FONT_5X5[char][r]))
    return tuple(rows)


@pytest.fixture
def calc():
    """Heuristic calculator independent of environment configuration."""
    return WidthCalculator(strategy='heuristic', cache_size=64, cache_memory_mb=1.0)


@pytest.fixture
def hi_grid():
    """'HI' in the 5x5 test font: 5 rows by 10 columns."""
    return grid_from_font("HI")


@pytest.fixture
def stream():
    """In-memory terminal output."""
    return io.StringIO()
