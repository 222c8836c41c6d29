#!/usr/bin/env python3
"""
🔥 Emoji Banner - Text to Bitmap Module
=======================================
Copyright (c) 2025 PNGN-Tec LLC

Font Rasterization
==================
Converts text to a rectangular grid of booleans, True where a glyph has ink.
Two kinds of font identifier are understood:

- FIGlet font names ('banner', 'standard', 'block', ...), rendered with
  pyfiglet. Any non-space character of the FIGlet output is ink.
- TrueType/OpenType files ('*.ttf', '*.otf'), rasterized with Pillow at a
  fixed pixel height and thresholded into ink with numpy. Bare file names
  are searched in the package fonts directory, then the system font
  directories, then through the fallbacks in fonts/font_config.py.

Blank rows above and below the text are trimmed. Columns are kept so letter
spacing survives.
"""

import logging
from pathlib import Path
from typing import List, Optional

import numpy as np
from PIL import Image, ImageDraw, ImageFont
from pyfiglet import Figlet, FigletFont, FigletError, FontNotFound

from banner_errors import InvalidInputError, RenderFailure, UnknownFontError
from banner_render import PixelGrid
from config import get_render_defaults
from fonts.font_config import FONT_FALLBACKS, SYSTEM_FONT_DIRS

logger = logging.getLogger('banner_bitmap')

LOCAL_FONTS_DIR = Path(__file__).parent / 'fonts'
TRUETYPE_SUFFIXES = ('.ttf', '.otf', '.ttc')

# Grayscale level at which an anti-aliased pixel counts as ink
INK_THRESHOLD = 128

# Wide enough that pyfiglet never wraps a banner onto a second block
FIGLET_RENDER_WIDTH = 10_000


def is_truetype_font(font: str) -> bool:
    return font.lower().endswith(TRUETYPE_SUFFIXES)


def list_fonts() -> List[str]:
    """Available FIGlet font names, sorted."""
    return sorted(FigletFont.getFonts())


def _trim_blank_rows(grid: np.ndarray) -> np.ndarray:
    """Drop rows without ink at the top and bottom of the grid."""
    inked = np.flatnonzero(grid.any(axis=1))
    if inked.size == 0:
        return grid
    return grid[inked[0]:inked[-1] + 1]


def _to_pixel_grid(grid: np.ndarray) -> PixelGrid:
    return tuple(tuple(bool(cell) for cell in row) for row in grid.tolist())


# ============================================================================
# FIGLET FONTS
# ============================================================================

def _figlet_bitmap(text: str, font: str) -> np.ndarray:
    try:
        figlet = Figlet(font=font, width=FIGLET_RENDER_WIDTH)
    except FontNotFound as e:
        raise UnknownFontError(font, str(e)) from e
    except FigletError as e:
        raise UnknownFontError(font, f"could not parse: {e}") from e

    try:
        art = figlet.renderText(text)
    except FigletError as e:
        raise RenderFailure(f"FIGlet rendering failed for font '{font}': {e}") from e

    lines = art.rstrip('\n').split('\n')
    width = max((len(line) for line in lines), default=0)
    if width == 0:
        raise RenderFailure(f"Font '{font}' produced no output for {text!r}")

    return np.array([[char != ' ' for char in line.ljust(width)] for line in lines],
                    dtype=bool)


# ============================================================================
# TRUETYPE FONTS
# ============================================================================

def _candidate_paths(font: str):
    """Yield every location a TrueType identifier might refer to."""
    given = Path(font).expanduser()
    yield given

    if given.is_absolute() or len(given.parts) > 1:
        return

    yield LOCAL_FONTS_DIR / font
    for directory in SYSTEM_FONT_DIRS:
        yield Path(directory) / font

    for fallback in FONT_FALLBACKS.get(font, []):
        yield LOCAL_FONTS_DIR / fallback
        for directory in SYSTEM_FONT_DIRS:
            yield Path(directory) / fallback


def resolve_font_path(font: str) -> Path:
    """
    Locate a TrueType font file.

    Raises:
        UnknownFontError: No candidate exists
    """
    for candidate in _candidate_paths(font):
        if candidate.is_file():
            if candidate.name != Path(font).name:
                logger.info(f"Using fallback font {candidate} for {font}")
            else:
                logger.debug(f"Loaded font from {candidate}")
            return candidate

    raise UnknownFontError(font, "file not found in fonts directory or system paths")


def _truetype_bitmap(text: str, font: str, pixel_height: int) -> np.ndarray:
    path = resolve_font_path(font)

    try:
        face = ImageFont.truetype(str(path), pixel_height)
    except OSError as e:
        raise UnknownFontError(font, f"could not load {path}: {e}") from e

    left, top, right, bottom = face.getbbox(text)
    width, height = right - left, bottom - top
    if width <= 0 or height <= 0:
        raise RenderFailure(f"Font '{font}' produced no output for {text!r}")

    img = Image.new('L', (width, height), 0)
    draw = ImageDraw.Draw(img)
    draw.text((-left, -top), text, font=face, fill=255)

    return np.array(img, dtype=np.uint8) >= INK_THRESHOLD


# ============================================================================
# PUBLIC API
# ============================================================================

def text_to_bitmap(text: str,
                   font: Optional[str] = None,
                   pixel_height: Optional[int] = None) -> PixelGrid:
    """
    Render text into a rectangular pixel grid.

    Args:
        text: Text to render
        font: FIGlet font name or TrueType file (uses config if None)
        pixel_height: Rasterization height for TrueType fonts (uses config if None)

    Returns:
        Tuple of equal-length tuples of bools

    Raises:
        InvalidInputError: Empty or whitespace-only text
        UnknownFontError: Font cannot be located or parsed
        RenderFailure: Rasterization produced nothing
    """
    if not text or not text.strip():
        raise InvalidInputError("Text is required")

    defaults = get_render_defaults()
    font = font or defaults.font
    pixel_height = pixel_height or defaults.ttf_pixel_height

    if is_truetype_font(font):
        grid = _truetype_bitmap(text, font, pixel_height)
    else:
        grid = _figlet_bitmap(text, font)

    grid = _trim_blank_rows(grid)
    if grid.size == 0:
        raise RenderFailure(f"Font '{font}' produced an empty bitmap for {text!r}")

    logger.debug(f"Bitmap for {text!r} with font '{font}': "
                 f"{grid.shape[0]}x{grid.shape[1]}, {int(grid.sum())} ink cells")
    return _to_pixel_grid(grid)
