#!/usr/bin/env python3
"""
🔥 Emoji Banner - Glyph Mapping Module
======================================
Copyright (c) 2025 PNGN-Tec LLC

Bitmap to Emoji Rendering
=========================
Walks a rectangular pixel grid and emits one glyph per cell:

- Ink cells take a foreground glyph chosen by the render mode
    solid  always the first foreground emoji
    cycle  foreground[(row * width + col) % len(foreground)]
    theme  the theme's glyph for the cell's intensity level
- Empty cells take the background glyph, the theme background in theme
  mode, or spaces as wide as the widest foreground emoji when no background
  is configured

Rows are joined with newlines, without a trailing newline, and every row is
padded to the same visual width so the block stays rectangular on screen.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from banner_errors import InvalidInputError
from banner_themes import Theme, get_theme, is_valid_theme
from banner_width import WidthCalculator, get_default_calculator

logger = logging.getLogger('banner_render')

PixelGrid = Tuple[Tuple[bool, ...], ...]


class RenderMode(Enum):
    """How ink cells pick their glyph"""
    SOLID = "solid"
    CYCLE = "cycle"
    THEME = "theme"


@dataclass(frozen=True)
class RenderConfig:
    """
    Immutable glyph selection settings for one render call.

    Attributes:
        foreground_emojis: Glyphs for ink cells, at least one
        background_emoji: Glyph for empty cells, None for blank space
        mode: Glyph selection mode
        theme: Theme name used in theme mode
        seed: Seed for theme intensity patterns
    """
    foreground_emojis: Tuple[str, ...]
    background_emoji: Optional[str] = None
    mode: RenderMode = RenderMode.SOLID
    theme: str = 'default'
    seed: int = 0

    def __post_init__(self):
        if not self.foreground_emojis:
            raise InvalidInputError("At least one foreground emoji is required")
        if any(not emoji for emoji in self.foreground_emojis):
            raise InvalidInputError("Foreground emojis must not be empty strings")


@dataclass(frozen=True)
class BannerResult:
    """Fully assembled multi-line emoji banner"""
    text: str

    @property
    def lines(self):
        return self.text.split('\n') if self.text else []

    @property
    def height(self) -> int:
        return len(self.lines)

    def __str__(self) -> str:
        return self.text


def create_render_config(foreground_emojis: Sequence[str],
                         background_emoji: Optional[str] = None,
                         mode='solid',
                         theme: str = 'default',
                         seed: int = 0) -> RenderConfig:
    """
    Build a RenderConfig, falling back to solid mode when theme mode is
    requested for a theme without intensity levels.

    Args:
        foreground_emojis: Resolved foreground glyphs
        background_emoji: Resolved background glyph or None
        mode: RenderMode or its string value
        theme: Theme name
        seed: Theme pattern seed

    Returns:
        RenderConfig ready for render_bitmap()
    """
    try:
        render_mode = RenderMode(mode)
    except ValueError:
        raise InvalidInputError(
            f"Invalid mode '{mode}', expected one of {[m.value for m in RenderMode]}") from None

    if render_mode is RenderMode.THEME:
        if not is_valid_theme(theme) or not get_theme(theme).has_intensity:
            logger.warning(f"Theme '{theme}' has no intensity levels, using solid mode")
            render_mode = RenderMode.SOLID

    return RenderConfig(
        foreground_emojis=tuple(foreground_emojis),
        background_emoji=background_emoji or None,
        mode=render_mode,
        theme=theme,
        seed=seed,
    )


def _grid_shape(grid: Sequence[Sequence[bool]]) -> Tuple[int, int]:
    """Return (height, width), raising on ragged grids."""
    height = len(grid)
    if height == 0:
        return 0, 0

    width = len(grid[0])
    for index, row in enumerate(grid):
        if len(row) != width:
            raise InvalidInputError(
                f"Pixel grid is not rectangular: row {index} has {len(row)} "
                f"cells, expected {width}")
    return height, width


def render_bitmap(grid: Sequence[Sequence[bool]],
                  config: RenderConfig,
                  width_calculator: Optional[WidthCalculator] = None) -> BannerResult:
    """
    Map a pixel grid to an emoji banner.

    Args:
        grid: Rectangular rows of booleans, True for ink
        config: Glyph selection settings
        width_calculator: Calculator used for padding (default shared one)

    Returns:
        BannerResult with exactly one line per grid row; empty for an empty grid

    Raises:
        InvalidInputError: Ragged grid
    """
    height, width = _grid_shape(grid)
    if height == 0 or width == 0:
        logger.debug("Empty pixel grid, returning empty banner")
        return BannerResult(text='')

    calc = width_calculator or get_default_calculator()
    foreground = config.foreground_emojis
    theme: Optional[Theme] = None

    if config.mode is RenderMode.THEME:
        theme = get_theme(config.theme)
        empty_cell = theme.background
    elif config.background_emoji:
        empty_cell = config.background_emoji
    else:
        empty_cell = ' ' * max(calc.get_width(emoji) for emoji in foreground)

    lines = []
    for r, row in enumerate(grid):
        cells = []
        for c, ink in enumerate(row):
            if not ink:
                cells.append(empty_cell)
            elif theme is not None:
                cells.append(theme.glyph_for(r, c, config.seed))
            elif config.mode is RenderMode.CYCLE:
                cells.append(foreground[(r * width + c) % len(foreground)])
            else:
                cells.append(foreground[0])
        lines.append(''.join(cells))

    max_width = max(calc.get_widths(lines))
    lines = [calc.pad(line, max_width) for line in lines]

    logger.debug(f"Rendered {height}x{width} grid in {config.mode.value} mode, "
                 f"visual width {max_width}")
    return BannerResult(text='\n'.join(lines))
