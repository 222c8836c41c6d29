#!/usr/bin/env python3
"""
🔥 Emoji Banner - Width Calculation Module
==========================================
Copyright (c) 2025 PNGN-Tec LLC

Visual Width Calculation System
================================
Terminal-column arithmetic for strings that mix ASCII with wide emoji,
providing the foundation for banner padding and marquee slicing.

Core Features
=============
- Visual width of a string in terminal columns
- Padding to a target visual width (never truncates)
- Visual substring extraction that never splits a code point
- Thread-safe LRU caching with memory bounds
- Two width strategies:
    heuristic  every code point above U+1F300 is 2 columns, all others 1
    wcwidth    per code point widths from the wcwidth library

Width Heuristic
===============
The default strategy is deliberately coarse. It does not implement Unicode
East Asian Width or grapheme cluster rules, so skin tone modifiers, zero
width joiners, variation selectors and flag pairs each count as separate
columns, and wide symbols below U+1F300 (e.g. ⬜ U+2B1C) count as 1.
Alignment of existing banners depends on these exact numbers, so the
heuristic is the default and wcwidth is opt-in.

Module Interface
================
- WidthCalculator: Main class with caching and statistics
- visual_width(): Width of a single string
- pad_to_visual_width(): Right-pad to a visual width
- visible_substring(): Slice by visual columns
- get_widths(): Batch processing for multiple strings
- clear_default_cache(): Clear the default calculator cache

Example Usage
=============
```python
from banner_width import visual_width, visible_substring

visual_width("Hi 🔥")                 # Returns 5
visible_substring("🔥🔥🔥", 2, 2)     # Returns "🔥"

from banner_width import WidthCalculator
calc = WidthCalculator(strategy='wcwidth', cache_size=256)
calc.get_width("你好")                # Returns 4
```
"""

import threading
import logging
from typing import Optional, List, Dict, Union
from collections import OrderedDict

from wcwidth import wcwidth

from banner_errors import InvalidInputError
from config import get_cache_config, get_render_defaults, WIDTH_STRATEGIES

# Configure logging
logger = logging.getLogger('banner_width')

# Code points strictly above this count as two columns in the heuristic
WIDE_CODEPOINT_THRESHOLD = 0x1F300


def heuristic_char_width(char: str) -> int:
    """Column width of a single code point under the threshold heuristic."""
    return 2 if ord(char) > WIDE_CODEPOINT_THRESHOLD else 1


def wcwidth_char_width(char: str) -> int:
    """
    Column width of a single code point according to wcwidth.

    Control characters count as 0. Non-BMP code points wcwidth cannot
    classify count as 2, which is what terminals do for most emoji.
    """
    width = wcwidth(char)
    if width is None:
        return 2 if ord(char) >= 0x10000 else 0
    if width < 0:
        return 0
    return width


class WidthCalculator:
    """
    Thread-safe visual width calculator with caching.

    All three text operations of the banner pipeline go through one
    calculator so that padding, slicing and measuring always agree on the
    width of every code point.

    Attributes:
        strategy: 'heuristic' or 'wcwidth'
        stats: Dictionary containing calculation statistics

    Cache Behavior:
    - LRU eviction when size limit reached
    - Memory-bounded with automatic cleanup
    - Separate codepoint cache for the per-character hot path
    """

    def __init__(self,
                 strategy: Optional[str] = None,
                 cache_size: Optional[int] = None,
                 cache_memory_mb: Optional[float] = None,
                 enable_cache: bool = True):
        """
        Initialize width calculator.

        Args:
            strategy: 'heuristic' or 'wcwidth' (uses config if None)
            cache_size: Maximum number of cached strings (uses config if None)
            cache_memory_mb: Maximum cache memory in MB (uses config if None)
            enable_cache: Whether to enable string caching
        """
        cache_config = get_cache_config()

        if strategy is None:
            strategy = get_render_defaults().width_strategy
        if strategy not in WIDTH_STRATEGIES:
            raise InvalidInputError(
                f"Invalid width strategy '{strategy}', expected one of {WIDTH_STRATEGIES}")

        if cache_size is None:
            cache_size = cache_config.default_size
        if cache_memory_mb is None:
            cache_memory_mb = cache_config.max_memory_mb
        if not cache_config.enable_caching:
            enable_cache = False
            logger.info("Caching disabled by configuration")

        self.strategy = strategy
        self._char_width = (heuristic_char_width if strategy == 'heuristic'
                            else wcwidth_char_width)

        # String cache with LRU eviction
        self._string_cache = OrderedDict()
        self._cache_size = cache_size
        self._cache_memory_limit = int(cache_memory_mb * 1024 * 1024)
        self._cache_memory = 0
        self._cache_enabled = enable_cache
        self._lock = threading.Lock()

        self._codepoint_cache: Dict[int, int] = {}

        # Statistics
        self.stats = {
            'cache_hits': 0,
            'cache_misses': 0,
            'calculations': 0,
            'cache_evictions': 0,
        }

        logger.info(f"WidthCalculator initialized with strategy={strategy}, "
                    f"cache_size={cache_size}, memory_limit={cache_memory_mb}MB, "
                    f"cache_enabled={self._cache_enabled}")

    # ------------------------------------------------------------------
    # Measuring
    # ------------------------------------------------------------------

    def char_width(self, char: str) -> int:
        """Width of a single code point."""
        code = ord(char)
        width = self._codepoint_cache.get(code)
        if width is None:
            width = self._char_width(char)
            self._codepoint_cache[code] = width
        return width

    def get_width(self, text: str) -> int:
        """
        Get visual width of text in terminal columns.

        Args:
            text: Text to measure

        Returns:
            Sum of the per code point widths (0 for empty text)
        """
        if not text:
            return 0

        cached = self._get_cached(text)
        if cached is not None:
            return cached

        width = sum(self.char_width(char) for char in text)
        self.stats['calculations'] += 1

        self._cache_result(text, width)
        return width

    def get_widths(self, texts: List[str]) -> List[int]:
        """
        Get widths for multiple strings.

        Args:
            texts: List of strings to measure

        Returns:
            List of visual widths in columns
        """
        return [self.get_width(text) for text in texts]

    # ------------------------------------------------------------------
    # Padding and slicing
    # ------------------------------------------------------------------

    def pad(self, text: str, target_width: int, pad_char: str = ' ') -> str:
        """
        Right-pad text to a visual width.

        Text already at or beyond the target is returned unchanged. The pad
        character is repeated once per missing column.

        Args:
            text: Text to pad
            target_width: Desired visual width
            pad_char: Padding character

        Returns:
            Padded text
        """
        if target_width < 0:
            raise InvalidInputError(f"Target width must not be negative: {target_width}")
        if not pad_char:
            raise InvalidInputError("Pad character must not be empty")

        current = self.get_width(text)
        if current >= target_width:
            return text
        return text + pad_char * (target_width - current)

    def visible_substring(self, text: str, start: int, length: int) -> str:
        """
        Extract the code points that cover visual columns [start, start+length).

        Code points whose span ends at or before ``start`` are skipped. A
        wide code point straddling ``start`` is kept whole, and collection
        stops once the collected width reaches ``length``, so the result may
        be one column wider than requested or shorter when text runs out.

        Args:
            text: Source text
            start: First visual column
            length: Number of visual columns wanted

        Returns:
            The collected code points, verbatim
        """
        if start < 0 or length < 0:
            raise InvalidInputError(
                f"Substring bounds must not be negative: start={start}, length={length}")

        position = 0
        collected = []
        collected_width = 0

        for char in text:
            width = self.char_width(char)

            if position + width <= start:
                position += width
                continue

            if collected_width >= length:
                break

            collected.append(char)
            collected_width += width
            position += width

        return ''.join(collected)

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def _get_cached(self, text: str) -> Optional[int]:
        """Get cached width if available."""
        if not self._cache_enabled:
            return None

        with self._lock:
            if text in self._string_cache:
                # Move to end for LRU
                self._string_cache.move_to_end(text)
                self.stats['cache_hits'] += 1
                return self._string_cache[text]

        self.stats['cache_misses'] += 1
        return None

    def _cache_result(self, text: str, width: int):
        """Cache a width calculation with memory management."""
        if not self._cache_enabled:
            return

        text_size = len(text.encode('utf-8', errors='ignore'))

        with self._lock:
            self._enforce_cache_limits(text_size)
            self._string_cache[text] = width
            self._cache_memory += text_size

    def _enforce_cache_limits(self, new_size: int = 0):
        """Evict oldest entries until the new item fits."""
        while self._string_cache and (
            len(self._string_cache) >= self._cache_size or
            self._cache_memory + new_size > self._cache_memory_limit
        ):
            evicted_text, _ = self._string_cache.popitem(last=False)
            self._cache_memory -= len(evicted_text.encode('utf-8', errors='ignore'))
            self.stats['cache_evictions'] += 1

            if self._cache_memory < 0:
                self._cache_memory = 0

    def clear_cache(self):
        """Clear all cached widths."""
        with self._lock:
            self._string_cache.clear()
            self._cache_memory = 0

    def get_stats(self) -> Dict[str, Union[int, float, bool, str]]:
        """
        Get calculator statistics.

        Returns:
            Dictionary of statistics including hit rate, current cache
            entries and memory, and the active strategy
        """
        stats = self.stats.copy()

        total_requests = stats['cache_hits'] + stats['cache_misses']
        if total_requests > 0:
            stats['cache_hit_rate'] = stats['cache_hits'] / total_requests
        else:
            stats['cache_hit_rate'] = 0.0

        with self._lock:
            stats['cache_entries'] = len(self._string_cache)
            stats['cache_memory_bytes'] = self._cache_memory
            stats['cache_enabled'] = self._cache_enabled
        stats['strategy'] = self.strategy

        return stats


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

_default_calculator = None
_calculator_lock = threading.Lock()


def get_default_calculator() -> WidthCalculator:
    """Shared calculator built from the current configuration."""
    global _default_calculator

    if _default_calculator is None:
        with _calculator_lock:
            if _default_calculator is None:
                _default_calculator = WidthCalculator()

    return _default_calculator


def visual_width(text: str) -> int:
    """
    Get visual width of text using the default calculator.

    Example:
        >>> visual_width("Hello")
        5
        >>> visual_width("🔥🔥")
        4
    """
    return get_default_calculator().get_width(text)


def get_widths(texts: List[str]) -> List[int]:
    """Get widths for multiple strings using the default calculator."""
    return get_default_calculator().get_widths(texts)


def pad_to_visual_width(text: str, target_width: int, pad_char: str = ' ') -> str:
    """Right-pad text to target_width visual columns; never truncates."""
    return get_default_calculator().pad(text, target_width, pad_char)


def visible_substring(text: str, start: int, length: int) -> str:
    """Slice text by visual columns using the default calculator."""
    return get_default_calculator().visible_substring(text, start, length)


def clear_default_cache():
    """Clear the default calculator's cache."""
    if _default_calculator is not None:
        _default_calculator.clear_cache()


def reset_default_calculator():
    """Drop the default calculator so the next call picks up new config."""
    global _default_calculator

    with _calculator_lock:
        _default_calculator = None
