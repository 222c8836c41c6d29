#!/usr/bin/env python3
"""
🔥 Emoji Banner - Emoji Resolution Module
=========================================
Copyright (c) 2025 PNGN-Tec LLC

Turns user input into the glyphs a banner is drawn with. Accepted forms:
- A literal emoji: 🔥
- A Slack/GitHub style alias with colons: :fire:
- A bare alias: fire, green_square, thumbs-up
- A Unicode character name: large_green_circle

Aliases go through the gemoji shortcode database of the emoji package
first, then CUSTOM_ALIASES, then Unicode character names.

Resolution happens once, before rendering starts.
"""

import re
import logging
import unicodedata
from typing import List, Optional

import emoji

from banner_errors import InvalidInputError

logger = logging.getLogger('banner_emoji')

FULL_WIDTH_SPACE = '　'

CUSTOM_ALIASES = {
    # Colored squares for themes
    'green_square': '🟩',
    'white_square': '⬜',
    'black_square': '⬛',
    'red_square': '🟥',
    'blue_square': '🟦',
    'yellow_square': '🟨',
    'orange_square': '🟧',
    'purple_square': '🟪',
    'brown_square': '🟫',
    # Common emojis
    'star': '⭐',
    'fire': '🔥',
    'heart': '❤️',
    'smile': '😊',
    'rocket': '🚀',
    'check': '✅',
    'x': '❌',
    'warning': '⚠️',
    'sparkles': '✨',
    'thumbsup': '👍',
    'thumbs_up': '👍',
    '+1': '👍',
    'clap': '👏',
    'wave': '👋',
    'eyes': '👀',
    'thinking': '🤔',
    'party': '🎉',
    'tada': '🎉',
    'sun': '☀️',
    'moon': '🌙',
    'cloud': '☁️',
    'rain': '🌧️',
    'snow': '❄️',
    'tree': '🌳',
    'flower': '🌸',
    'muscle': '💪',
    'coffee': '☕',
    'beer': '🍺',
    'pizza': '🍕',
    'apple': '🍎',
    'banana': '🍌',
    'cat': '🐱',
    'dog': '🐶',
    'bird': '🐦',
    'fish': '🐟',
    'bug': '🐛',
    'penguin': '🐧',
    'ghost': '👻',
    'alien': '👽',
    'robot': '🤖',
    'skull': '💀',
    'poop': '💩',
    '100': '💯',
    'money': '💰',
    'gem': '💎',
    'crown': '👑',
    'trophy': '🏆',
    'medal': '🏅',
    'flag': '🚩',
    'pin': '📌',
    'bell': '🔔',
    'key': '🔑',
    'lock': '🔒',
    'bulb': '💡',
    'book': '📚',
    'pencil': '✏️',
    'scissors': '✂️',
    'hammer': '🔨',
    'wrench': '🔧',
    'gear': '⚙️',
    'link': '🔗',
    'bomb': '💣',
    'zap': '⚡',
    'dizzy': '💫',
    'boom': '💥',
    'droplet': '💧',
    'leaves': '🍃',
    'cactus': '🌵',
    'palm': '🌴',
    'maple': '🍁',
    'cherry_blossom': '🌸',
    'rose': '🌹',
    'tulip': '🌷',
    'sunflower': '🌻',
}

EMOJI_PATTERN = re.compile(
    "["
    "\U0001F1E0-\U0001F1FF"  # Regional indicators
    "\U0001F300-\U0001FAFF"  # Pictographs, emoticons, transport, supplemental
    "\u2300-\u23FF"          # Misc technical
    "\u25AA\u25AB\u25B6\u25C0\u25FB-\u25FE"
    "\u2600-\u27BF"          # Misc symbols and dingbats
    "\u2934\u2935"
    "\u2B05-\u2B07\u2B1B\u2B1C\u2B50\u2B55"
    "\u3030\u303D\u3297\u3299"
    "\uFE00-\uFE0F"          # Variation selectors
    "\u200D"                 # Zero width joiner
    "]"
)


def is_emoji(value: str) -> bool:
    """True when value contains at least one emoji code point."""
    return bool(EMOJI_PATTERN.search(value))


def normalize_alias(alias: str) -> str:
    """Strip surrounding colons: ':fire:' -> 'fire'."""
    alias = alias.strip()
    if alias.startswith(':'):
        alias = alias[1:]
    if alias.endswith(':'):
        alias = alias[:-1]
    return alias.strip()


def _shortcode_lookup(alias: str) -> Optional[str]:
    """Glyph for a gemoji shortcode, None unless it names exactly one emoji."""
    resolved = emoji.emojize(f":{alias}:", language='alias')
    return resolved if emoji.is_emoji(resolved) else None


def _lookup(alias: str) -> Optional[str]:
    resolved = _shortcode_lookup(alias)
    if resolved is not None:
        return resolved

    if alias in CUSTOM_ALIASES:
        return CUSTOM_ALIASES[alias]

    name = alias.replace('_', ' ').replace('-', ' ').upper()
    try:
        return unicodedata.lookup(name)
    except KeyError:
        return None


def resolve_emoji(value: str) -> str:
    """
    Resolve an emoji literal or alias to the glyph it names.

    Args:
        value: Literal emoji, ':alias:', 'alias' or Unicode character name

    Returns:
        The glyph, or the trimmed input when nothing matches
    """
    trimmed = value.strip()

    if is_emoji(trimmed):
        return trimmed

    alias = normalize_alias(trimmed)

    variations = [
        alias,
        alias.replace('-', '_'),
        alias.replace('_', '-'),
        alias.lower(),
        alias.upper(),
    ]

    for variant in variations:
        resolved = _lookup(variant)
        if resolved is not None:
            logger.debug(f"Resolved emoji alias '{value}' -> {resolved}")
            return resolved

    logger.warning(f"Could not resolve emoji '{value}', using as-is")
    return trimmed


def parse_emojis(value: str) -> List[str]:
    """
    Parse a comma-separated emoji list.

    Raises:
        InvalidInputError: No emoji given
    """
    if not value or not isinstance(value, str):
        raise InvalidInputError("Emoji input is required")

    parts = [part.strip() for part in value.split(',')]
    parts = [part for part in parts if part]

    if not parts:
        raise InvalidInputError("At least one emoji is required")

    return [resolve_emoji(part) for part in parts]


def get_background_emoji() -> str:
    """Full-width space keeping alignment when no background is given."""
    return FULL_WIDTH_SPACE


def validate_emoji(value: str) -> bool:
    return len(value) > 0
