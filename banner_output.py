#!/usr/bin/env python3
"""
🔥 Emoji Banner - Output Module
===============================
Copyright (c) 2025 PNGN-Tec LLC

File and clipboard export for finished banners. Neither changes the banner
text; file names are sanitized and writes are confined to the requested
output directory.
"""

import os
import re
import time
import shutil
import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from banner_errors import ClipboardError, InvalidInputError, OutputError
from banner_render import BannerResult

logger = logging.getLogger('banner_output')

PathLike = Union[str, Path]

MAX_UNIQUE_ATTEMPTS = 1000
CLIPBOARD_TIMEOUT_SECONDS = 5.0

_UNSAFE_CHARS = re.compile(r'[<>:"|?*]')
_LEADING_DOTS = re.compile(r'^\.+')

# First available tool wins
CLIPBOARD_WRITERS = [
    ['pbcopy'],
    ['clip'],
    ['wl-copy'],
    ['xclip', '-selection', 'clipboard'],
    ['xsel', '--clipboard', '--input'],
]

CLIPBOARD_READERS = [
    ['pbpaste'],
    ['wl-paste', '--no-newline'],
    ['xclip', '-selection', 'clipboard', '-o'],
    ['xsel', '--clipboard', '--output'],
]


# ============================================================================
# FILES
# ============================================================================

def sanitize_filename(filename: str) -> str:
    """Remove path traversal and characters invalid in file names."""
    filename = filename.replace('..', '')
    filename = _UNSAFE_CHARS.sub('', filename)
    filename = _LEADING_DOTS.sub('', filename)
    return filename.strip()


def ensure_dir(directory: PathLike) -> Path:
    path = Path(directory)
    path.mkdir(parents=True, exist_ok=True)
    return path


def _write_text(target: Path, text: str):
    try:
        ensure_dir(target.parent)
        target.write_text(text, encoding='utf-8')
    except OSError as e:
        raise OutputError(f"Failed to write {target}: {e}") from e


def save_to_file(result: BannerResult,
                 output_dir: PathLike,
                 filename: str = 'banner.txt') -> Path:
    """
    Write a banner into output_dir.

    Args:
        result: Banner to save
        output_dir: Target directory, created if missing
        filename: File name, sanitized before use

    Returns:
        Absolute path of the written file

    Raises:
        InvalidInputError: Empty file name or a path escaping output_dir
        OutputError: The directory or file could not be written
    """
    safe_name = sanitize_filename(filename)
    if not safe_name:
        raise InvalidInputError("Invalid filename")

    base_dir = Path(output_dir).resolve()
    target = (base_dir / safe_name).resolve()

    if base_dir != target.parent and base_dir not in target.parents:
        raise InvalidInputError("Invalid output path: path traversal detected")

    _write_text(target, result.text)

    logger.info(f"Saved banner to {target}")
    return target


def save_raw_text(text: str, output_path: PathLike) -> Path:
    """Write text to output_path after sanitizing its file name."""
    path = Path(output_path)
    safe_name = sanitize_filename(path.name)
    if not safe_name:
        raise InvalidInputError("Invalid filename")

    target = (path.parent / safe_name).resolve()
    _write_text(target, text)

    logger.info(f"Saved text to {target}")
    return target


def is_writable(directory: PathLike) -> bool:
    """True when a probe file can be created and removed in directory."""
    probe = Path(directory) / f".write-test-{int(time.time() * 1000)}"
    try:
        probe.write_text('', encoding='utf-8')
        probe.unlink()
        return True
    except OSError:
        return False


def get_unique_filename(directory: PathLike, base_name: str, extension: str) -> str:
    """
    First unused name among base.ext, base-1.ext, base-2.ext, ...

    Raises:
        InvalidInputError: More than MAX_UNIQUE_ATTEMPTS names taken
    """
    safe_base = sanitize_filename(base_name)
    directory = Path(directory)

    filename = f"{safe_base}.{extension}"
    counter = 1
    while (directory / filename).exists():
        if counter > MAX_UNIQUE_ATTEMPTS:
            raise InvalidInputError("Too many files with same name")
        filename = f"{safe_base}-{counter}.{extension}"
        counter += 1

    return filename


# ============================================================================
# CLIPBOARD
# ============================================================================

def _find_tool(candidates: List[List[str]]) -> Optional[List[str]]:
    for command in candidates:
        if shutil.which(command[0]):
            return command
    return None


def copy_to_clipboard(text: str):
    """
    Copy text to the system clipboard.

    Raises:
        InvalidInputError: Empty text
        ClipboardError: No clipboard tool, or the tool failed
    """
    if not text or not isinstance(text, str):
        raise InvalidInputError("Invalid text for clipboard")

    command = _find_tool(CLIPBOARD_WRITERS)
    if command is None:
        raise ClipboardError("Failed to copy to clipboard: no clipboard tool found")

    # clip.exe expects UTF-16 on Windows
    encoding = 'utf-16-le' if command[0] == 'clip' and os.name == 'nt' else 'utf-8'

    try:
        subprocess.run(command, input=text.encode(encoding), check=True,
                       timeout=CLIPBOARD_TIMEOUT_SECONDS,
                       stdout=subprocess.DEVNULL, stderr=subprocess.PIPE)
    except (OSError, subprocess.SubprocessError) as e:
        raise ClipboardError(f"Failed to copy to clipboard: {e}") from e

    logger.debug(f"Copied {len(text)} characters with {command[0]}")


def read_from_clipboard() -> str:
    """
    Read the system clipboard as text.

    Raises:
        ClipboardError: No clipboard tool, or the tool failed
    """
    command = _find_tool(CLIPBOARD_READERS)
    if command is None:
        raise ClipboardError("Failed to read from clipboard: no clipboard tool found")

    try:
        completed = subprocess.run(command, check=True, capture_output=True,
                                   timeout=CLIPBOARD_TIMEOUT_SECONDS)
    except (OSError, subprocess.SubprocessError) as e:
        raise ClipboardError(f"Failed to read from clipboard: {e}") from e

    return completed.stdout.decode('utf-8', errors='replace')


def is_clipboard_available() -> bool:
    try:
        read_from_clipboard()
        return True
    except ClipboardError:
        return False
