#!/usr/bin/env python3
"""
🔥 Emoji Banner - Theme Module
==============================
Copyright (c) 2025 PNGN-Tec LLC

Themed glyph sets for banner rendering. A theme with an intensity function
maps every ink cell to a discrete level and every level to a glyph, giving
e.g. a contribution-graph look. Intensity is a deterministic hash of the
cell position and a seed, so the same seed always produces the same banner.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple

logger = logging.getLogger('banner_themes')

IntensityFunction = Callable[[int, int, int], int]

WHITE_SQUARE = '⬜'
GREEN_SQUARE = '🟩'
DEFAULT_BACKGROUND = '  '


def github_intensity(row: int, col: int, seed: int = 0) -> int:
    """
    Contribution level 1-4 for an ink cell.

    Args:
        row: Pixel row
        col: Pixel column
        seed: Pattern seed

    Returns:
        Level between 1 and 4
    """
    value = (row * 31 + col * 17 + seed) % 100

    if value < 20:
        return 1
    if value < 45:
        return 2
    if value < 75:
        return 3
    return 4


@dataclass(frozen=True)
class Theme:
    """Glyph table and background for one theme"""
    name: str
    description: str
    emojis: Tuple[str, ...]
    background: str = DEFAULT_BACKGROUND
    levels: Mapping[int, str] = field(default_factory=dict)
    intensity: Optional[IntensityFunction] = None

    def __post_init__(self):
        # Copies, so registry themes cannot be changed through their tables
        object.__setattr__(self, 'emojis', tuple(self.emojis))
        object.__setattr__(self, 'levels', MappingProxyType(dict(self.levels)))

    @property
    def has_intensity(self) -> bool:
        return self.intensity is not None and bool(self.levels)

    def glyph_for(self, row: int, col: int, seed: int = 0) -> str:
        """Glyph for an ink cell at (row, col)."""
        if not self.has_intensity:
            return self.emojis[0]
        level = self.intensity(row, col, seed)
        return self.levels.get(level, self.emojis[0])


GITHUB_LEVELS = MappingProxyType({
    0: WHITE_SQUARE,  # No contribution
    1: GREEN_SQUARE,
    2: GREEN_SQUARE,
    3: GREEN_SQUARE,
    4: GREEN_SQUARE,
})

THEMES: Dict[str, Theme] = {
    'default': Theme(
        name='default',
        description='Default theme - uses specified emoji',
        emojis=('🔥',),
    ),
    'github': Theme(
        name='github',
        description='GitHub contribution graph style with green squares',
        emojis=tuple(GITHUB_LEVELS[level] for level in sorted(GITHUB_LEVELS)),
        background=WHITE_SQUARE,
        levels=GITHUB_LEVELS,
        intensity=github_intensity,
    ),
}


def is_valid_theme(name: str) -> bool:
    return name in THEMES


def get_theme(name: str) -> Theme:
    """Theme by name, falling back to the default theme."""
    theme = THEMES.get(name)
    if theme is None:
        logger.warning(f"Unknown theme '{name}', using default")
        return THEMES['default']
    return theme


def get_theme_emojis(name: str) -> List[str]:
    return list(get_theme(name).emojis)


def get_theme_background(name: str) -> str:
    """Background glyph for a theme; two spaces for themes without one."""
    theme = THEMES.get(name)
    return theme.background if theme is not None else DEFAULT_BACKGROUND


def get_available_themes() -> List[str]:
    return list(THEMES)


def get_theme_description(name: str) -> str:
    theme = THEMES.get(name)
    return theme.description if theme is not None else 'Unknown theme'
