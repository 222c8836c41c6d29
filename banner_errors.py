#!/usr/bin/env python3
"""
🔥 Emoji Banner - Error Types
=============================
Copyright (c) 2025 PNGN-Tec LLC

Every failure the banner pipeline raises derives from BannerError so the
command line can report it in one place.

- InvalidInputError: empty text, empty emoji list, ragged or degenerate
  pixel grids, bad option values. Also a ValueError.
- RenderFailure: the font rasterizer could not produce a bitmap.
- UnknownFontError: the requested font does not exist.
- ClipboardError: no usable clipboard tool, or the tool failed.
- OutputError: the banner could not be written to disk.
"""


class BannerError(Exception):
    """Base class for all emoji banner errors"""


class InvalidInputError(BannerError, ValueError):
    """Input rejected before any output is produced"""


class RenderFailure(BannerError):
    """Bitmap conversion failed"""


class UnknownFontError(RenderFailure):
    """Font could not be located or parsed"""

    def __init__(self, font: str, reason: str = ""):
        self.font = font
        message = f"Unknown font: {font}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ClipboardError(BannerError):
    """Clipboard access failed"""


class OutputError(BannerError):
    """Writing a banner file failed"""
