#!/usr/bin/env python3
"""
🔥 Emoji Banner - Marquee Animation Module
==========================================
Copyright (c) 2025 PNGN-Tec LLC

Terminal Marquee
================
Scrolls a multi-line banner leftwards across a fixed-width terminal
viewport, redrawing in place with ANSI escape sequences.

Frame Model
===========
- total_frames = terminal_width + banner_width
- offset = terminal_width - frame
    offset >= 0  banner entering from the right: offset spaces, then the
                 first terminal_width - offset columns of the banner
    offset < 0   banner scrolling out on the left: terminal_width columns
                 starting at column -offset
- Each display line is padded to terminal_width so stale glyphs from the
  previous frame are overwritten
- frame advances modulo total_frames, so frame 0 puts the banner fully off
  screen to the right again and the loop is seamless

Lifecycle
=========
IDLE -> RUNNING -> STOPPED | INTERRUPTED

The cursor is hidden on start and shown again exactly once on every exit
path: frame limit reached, cancellation token set, KeyboardInterrupt, or an
exception from the output stream. Cancellation is observed at the pause
between frames, never in the middle of writing a frame.

Timing
======
The pause between frames is a fixed wait of ``speed`` milliseconds on the
cancellation token. Slow frames are never dropped; drift accumulates.
"""

import io
import os
import sys
import signal
import logging
import threading
from contextlib import contextmanager
from enum import Enum
from typing import Iterable, List, Optional, TextIO

from banner_errors import InvalidInputError
from banner_width import WidthCalculator, get_default_calculator
from config import get_animation_defaults

logger = logging.getLogger('banner_marquee')


# ============================================================================
# ANSI CODES
# ============================================================================

class ANSI:
    CLEAR_LINE = "\033[2K"
    CURSOR_TO_START = "\033[0G"
    HIDE_CURSOR = "\033[?25l"
    SHOW_CURSOR = "\033[?25h"

    @staticmethod
    def move_up(lines: int) -> str:
        return f"\033[{lines}A"


class AnimatorState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"
    INTERRUPTED = "interrupted"


# ============================================================================
# CANCELLATION
# ============================================================================

class CancellationToken:
    """
    Cooperative stop signal for a running animation.

    The animator waits on the token between frames, so cancelling wakes it
    immediately instead of after the current pause.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, seconds: float) -> bool:
        """Pause up to ``seconds``; True if cancelled meanwhile."""
        return self._event.wait(seconds)


def _default_signals():
    signals = [signal.SIGINT]
    if hasattr(signal, 'SIGTERM'):
        signals.append(signal.SIGTERM)
    return signals


@contextmanager
def cancel_on_signals(token: CancellationToken,
                      signals: Optional[Iterable[int]] = None):
    """
    Route interrupt/termination signals to a cancellation token.

    Previous handlers are restored on exit. Outside the main thread signal
    handlers cannot be installed; the token then only reacts to cancel().

    Args:
        token: Token to cancel when a signal arrives
        signals: Signal numbers (default SIGINT and SIGTERM)
    """
    previous = {}

    def _handler(signum, _frame):
        logger.info(f"Received signal {signum}, stopping animation")
        token.cancel()

    for signum in (signals if signals is not None else _default_signals()):
        try:
            previous[signum] = signal.signal(signum, _handler)
        except ValueError:
            logger.warning(f"Cannot install handler for signal {signum} outside the main thread")

    try:
        yield token
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


# ============================================================================
# TERMINAL HELPERS
# ============================================================================

def get_terminal_width(stream: Optional[TextIO] = None,
                       fallback: Optional[int] = None) -> int:
    """
    Column count of the terminal behind ``stream``.

    Falls back to the configured width (80 by default) when the stream is
    not a terminal or reports no size.
    """
    if fallback is None:
        fallback = get_animation_defaults().fallback_terminal_width
    stream = stream if stream is not None else sys.stdout

    try:
        columns = os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
        columns = 0

    if columns <= 0:
        logger.warning(f"Terminal width unavailable, using {fallback} columns")
        return fallback
    return columns


def compose_frame(lines: List[str],
                  frame: int,
                  terminal_width: int,
                  width_calculator: Optional[WidthCalculator] = None) -> List[str]:
    """
    Visible slice of every banner line for one frame.

    Args:
        lines: Banner lines, already padded to a common visual width
        frame: Frame index, 0 <= frame < terminal_width + banner width
        terminal_width: Viewport width in columns

    Returns:
        One display line per banner line, each at least terminal_width
        columns wide
    """
    calc = width_calculator or get_default_calculator()
    offset = terminal_width - frame

    display = []
    for line in lines:
        if offset >= 0:
            text = ' ' * offset + calc.visible_substring(line, 0, terminal_width - offset)
        else:
            text = calc.visible_substring(line, -offset, terminal_width)
        display.append(calc.pad(text, terminal_width))
    return display


# ============================================================================
# ANIMATOR
# ============================================================================

class AnimationOutcome(Enum):
    STOPPED = "stopped"
    INTERRUPTED = "interrupted"


class MarqueeAnimator:
    """
    Horizontally scrolling banner drawn in place on a terminal.

    Attributes:
        lines: Banner lines padded to max_width
        height: Number of banner lines
        max_width: Widest banner line in visual columns
        total_frames: Frames in one full scroll cycle
        frame: Current frame index
        frames_rendered: Frames written since run() started
        state: AnimatorState
    """

    def __init__(self,
                 banner_text: str,
                 speed: Optional[int] = None,
                 terminal_width: Optional[int] = None,
                 stream: Optional[TextIO] = None,
                 width_calculator: Optional[WidthCalculator] = None,
                 trailing_newlines: int = 1):
        """
        Args:
            banner_text: Multi-line banner
            speed: Milliseconds between frames (uses config if None)
            terminal_width: Viewport width (detected from stream if None)
            stream: Output stream (sys.stdout if None)
            width_calculator: Calculator for slicing (default shared one)
            trailing_newlines: Newlines written after the cursor is restored
        """
        if not banner_text:
            raise InvalidInputError("Banner is empty, nothing to animate")

        self.stream = stream if stream is not None else sys.stdout
        self.speed = speed if speed is not None else get_animation_defaults().speed_ms
        if terminal_width is None:
            terminal_width = get_terminal_width(self.stream)

        if self.speed < 1:
            raise InvalidInputError(f"Speed must be at least 1ms: {self.speed}")
        if terminal_width < 1:
            raise InvalidInputError(f"Terminal width must be positive: {terminal_width}")

        self.terminal_width = terminal_width
        self.trailing_newlines = trailing_newlines
        self._calc = width_calculator or get_default_calculator()

        raw_lines = banner_text.split('\n')
        self.height = len(raw_lines)
        self.max_width = max(self._calc.get_widths(raw_lines))
        self.lines = [self._calc.pad(line, self.max_width) for line in raw_lines]
        self.total_frames = self.terminal_width + self.max_width

        self.frame = 0
        self.frames_rendered = 0
        self.state = AnimatorState.IDLE
        self._cursor_hidden = False

    @property
    def offset(self) -> int:
        return self.terminal_width - self.frame

    def render_frame(self) -> str:
        """Escape sequences and text that draw the current frame."""
        parts = []
        display = compose_frame(self.lines, self.frame, self.terminal_width, self._calc)

        for index, line in enumerate(display):
            parts.append(ANSI.CLEAR_LINE + line)
            if index < self.height - 1:
                parts.append('\n')

        if self.height > 1:
            parts.append(ANSI.move_up(self.height - 1))
        parts.append(ANSI.CURSOR_TO_START)
        return ''.join(parts)

    def _write(self, text: str):
        self.stream.write(text)
        self.stream.flush()

    def _start(self):
        self.state = AnimatorState.RUNNING
        self._cursor_hidden = True
        self._write(ANSI.HIDE_CURSOR)
        logger.info(f"Marquee started: {self.height} lines, banner width {self.max_width}, "
                    f"terminal width {self.terminal_width}, {self.total_frames} frames/cycle, "
                    f"{self.speed}ms/frame")

    def _cleanup(self, failing: bool = False):
        """Show the cursor again; with failing=True a dead stream is only logged."""
        if not self._cursor_hidden:
            return
        self._cursor_hidden = False
        try:
            self._write(ANSI.SHOW_CURSOR + '\n' * self.trailing_newlines)
        except OSError as e:
            if not failing:
                raise
            logger.error(f"Could not restore cursor after output failure: {e}")

    def run(self,
            token: Optional[CancellationToken] = None,
            max_frames: Optional[int] = None) -> AnimationOutcome:
        """
        Animate until cancelled or until max_frames frames were drawn.

        Args:
            token: Cancellation token checked between frames
            max_frames: Stop after this many frames (None runs forever)

        Returns:
            AnimationOutcome.STOPPED or AnimationOutcome.INTERRUPTED
        """
        if self.state is not AnimatorState.IDLE:
            raise RuntimeError(f"Animator already {self.state.value}")

        token = token or CancellationToken()
        outcome = AnimationOutcome.STOPPED

        try:
            self._start()

            while not (max_frames is not None and self.frames_rendered >= max_frames):
                if token.cancelled:
                    outcome = AnimationOutcome.INTERRUPTED
                    break

                self._write(self.render_frame())
                self.frames_rendered += 1

                if token.wait(self.speed / 1000.0):
                    outcome = AnimationOutcome.INTERRUPTED
                    break

                self.frame = (self.frame + 1) % self.total_frames

        except KeyboardInterrupt:
            outcome = AnimationOutcome.INTERRUPTED

        except Exception:
            self._cleanup(failing=True)
            raise

        finally:
            self.state = (AnimatorState.INTERRUPTED if outcome is AnimationOutcome.INTERRUPTED
                          else AnimatorState.STOPPED)
            self._cleanup()

        logger.info(f"Marquee {outcome.value} after {self.frames_rendered} frames")
        return outcome


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def run_animation(banner_text: str,
                  speed: Optional[int] = None,
                  terminal_width: Optional[int] = None,
                  token: Optional[CancellationToken] = None,
                  stream: Optional[TextIO] = None) -> AnimationOutcome:
    """Scroll the banner until the token is cancelled or SIGINT/SIGTERM arrives."""
    animator = MarqueeAnimator(banner_text, speed=speed, terminal_width=terminal_width,
                               stream=stream)
    token = token or CancellationToken()
    with cancel_on_signals(token):
        return animator.run(token)


def run_single_cycle(banner_text: str,
                     speed: Optional[int] = None,
                     terminal_width: Optional[int] = None,
                     token: Optional[CancellationToken] = None,
                     stream: Optional[TextIO] = None) -> AnimationOutcome:
    """Scroll the banner through exactly one cycle, then move below it."""
    animator = MarqueeAnimator(banner_text, speed=speed, terminal_width=terminal_width,
                               stream=stream)
    animator.trailing_newlines = animator.height
    token = token or CancellationToken()
    with cancel_on_signals(token):
        return animator.run(token, max_frames=animator.total_frames)
