#!/usr/bin/env python3
"""
🔥 Emoji Banner - Command Line
==============================
Copyright (c) 2025 PNGN-Tec LLC

Convert text to emoji banner art for terminal display, optionally scrolled
as a marquee, saved to a file, copied to the clipboard, or shaped as a
Slack Block Kit payload.

    emoji-banner HELLO -e fire
    emoji-banner "Ship it" -e :green_square:,:blue_square: -m cycle
    emoji-banner 2025 -t github -m theme --animate
    emoji-banner LGTM --format slack -o out/ --copy
"""

import sys
import logging
import argparse
from typing import List, Optional, TextIO

from banner_bitmap import list_fonts, text_to_bitmap
from banner_emoji import parse_emojis, resolve_emoji
from banner_errors import BannerError, ClipboardError, InvalidInputError
from banner_marquee import CancellationToken, MarqueeAnimator, cancel_on_signals
from banner_output import copy_to_clipboard, save_to_file
from banner_render import BannerResult, RenderMode, create_render_config, render_bitmap
from banner_slack import generate_slack_json
from banner_themes import get_available_themes, get_theme_background
from banner_width import WidthCalculator
from config import (
    OUTPUT_FORMATS, WIDTH_STRATEGIES, get_animation_defaults, get_config, get_render_defaults,
)

logger = logging.getLogger('emoji_banner')

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def create_parser() -> argparse.ArgumentParser:
    defaults = get_render_defaults()
    parser = argparse.ArgumentParser(
        prog='emoji-banner',
        description='Convert text to emoji banner art for CLI display')
    parser.add_argument('text', nargs='?', help='Text to render')
    parser.add_argument('-e', '--emoji', default=None,
                        help=f'Emoji or alias, comma-separated for several (default {defaults.emoji})')
    parser.add_argument('-b', '--background', default=None,
                        help='Background emoji or alias (default blank)')
    parser.add_argument('-f', '--font', default=None,
                        help=f'FIGlet font name or TrueType file (default {defaults.font})')
    parser.add_argument('-m', '--mode', default=defaults.mode,
                        choices=[mode.value for mode in RenderMode],
                        help='Foreground glyph selection')
    parser.add_argument('-t', '--theme', default=defaults.theme,
                        choices=get_available_themes(), help='Color theme')
    parser.add_argument('--seed', type=int, default=defaults.seed,
                        help='Pattern seed for themed rendering')
    parser.add_argument('-a', '--animate', action='store_true',
                        help='Scroll the banner across the terminal')
    parser.add_argument('--once', action='store_true',
                        help='With --animate, scroll through a single cycle and exit')
    parser.add_argument('-s', '--speed', type=int, default=get_animation_defaults().speed_ms,
                        help='Milliseconds per animation frame')
    parser.add_argument('--width-strategy', default=defaults.width_strategy,
                        choices=WIDTH_STRATEGIES, help='How emoji widths are measured')
    parser.add_argument('--format', dest='format', default='text', choices=OUTPUT_FORMATS,
                        help='Output format')
    parser.add_argument('-o', '--output', default=None, help='Directory to save the banner in')
    parser.add_argument('-c', '--copy', action='store_true', help='Copy the output to the clipboard')
    parser.add_argument('--list-fonts', action='store_true', help='List FIGlet fonts and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def validate_options(options: argparse.Namespace):
    """
    Reject option combinations argparse cannot catch.

    Raises:
        InvalidInputError: Missing text or out of range values
    """
    if not options.list_fonts and (not options.text or not options.text.strip()):
        raise InvalidInputError("Text is required")
    if options.speed < 1:
        raise InvalidInputError(f"Invalid speed: {options.speed} (must be at least 1ms)")
    if options.mode not in [mode.value for mode in RenderMode]:
        raise InvalidInputError(f"Invalid mode: {options.mode}")
    if options.theme not in get_available_themes():
        raise InvalidInputError(f"Invalid theme: {options.theme}")
    if options.format not in OUTPUT_FORMATS:
        raise InvalidInputError(f"Invalid format: {options.format}")
    if options.once and not options.animate:
        logger.warning("--once has no effect without --animate")


def configure_logging(options: argparse.Namespace):
    config = get_config()
    level = logging.DEBUG if options.verbose or config.debug_mode else config.log_level
    logging.basicConfig(level=level, stream=sys.stderr,
                        format='%(levelname)s %(name)s: %(message)s')


def generate_banner(options: argparse.Namespace,
                    width_calculator: Optional[WidthCalculator] = None) -> BannerResult:
    """Resolve emoji, rasterize the text and map it to emoji."""
    foreground = parse_emojis(options.emoji or get_render_defaults().emoji)

    if options.background:
        background = resolve_emoji(options.background)
    elif options.theme == 'github':
        background = get_theme_background('github')
    else:
        background = None

    bitmap = text_to_bitmap(options.text, options.font)
    config = create_render_config(foreground, background, options.mode,
                                  options.theme, options.seed)
    return render_bitmap(bitmap, config, width_calculator)


def handle_output(result: BannerResult,
                  options: argparse.Namespace,
                  width_calculator: Optional[WidthCalculator] = None,
                  stream: Optional[TextIO] = None):
    """Save, copy, animate or print a finished banner."""
    out = stream if stream is not None else sys.stdout
    output_text = result.text

    if options.format == 'slack':
        output_text = generate_slack_json(result)

    if options.output:
        if options.format == 'slack':
            saved = save_to_file(BannerResult(text=output_text), options.output, 'banner.json')
        else:
            saved = save_to_file(result, options.output, 'banner.txt')
        print(f"✅ Saved to: {saved}", file=out)

    if options.copy:
        try:
            copy_to_clipboard(output_text)
            print("📋 Copied to clipboard!", file=out)
        except ClipboardError as e:
            logger.warning(f"Could not copy to clipboard: {e}")
            print(f"⚠️  Could not copy to clipboard: {e}", file=sys.stderr)

    if options.animate and options.format != 'slack':
        print("\n🎬 Starting animation (Ctrl+C to stop)...\n", file=out)
        out.flush()

        animator = MarqueeAnimator(result.text, speed=options.speed, stream=out,
                                   width_calculator=width_calculator)
        token = CancellationToken()
        with cancel_on_signals(token):
            if options.once:
                animator.trailing_newlines = animator.height
                animator.run(token, max_frames=animator.total_frames)
            else:
                animator.run(token)
    else:
        print('\n' + output_text + '\n', file=out)


def handle_error(error: Exception):
    """Report an error on stderr with a hint where one helps."""
    if isinstance(error, InvalidInputError):
        if 'Text is required' in str(error):
            print(f"❌ Error: {error}", file=sys.stderr)
            print("\nUsage: emoji-banner <text> -e <emoji>", file=sys.stderr)
            print("       emoji-banner --help for more information", file=sys.stderr)
        else:
            print(f"❌ Validation Error: {error}", file=sys.stderr)
    else:
        print(f"❌ Error: {error}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    options = parser.parse_args(argv)
    configure_logging(options)

    try:
        validate_options(options)

        if options.list_fonts:
            print('\n'.join(list_fonts()))
            return EXIT_OK

        calc = WidthCalculator(strategy=options.width_strategy)
        result = generate_banner(options, calc)
        handle_output(result, options, calc)

    except BannerError as e:
        logger.debug("Banner generation failed", exc_info=True)
        handle_error(e)
        return EXIT_ERROR

    except OSError as e:
        logger.debug("Output failed", exc_info=True)
        handle_error(e)
        return EXIT_ERROR

    except KeyboardInterrupt:
        print(file=sys.stderr)
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
