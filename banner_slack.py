#!/usr/bin/env python3
"""
🔥 Emoji Banner - Slack Format Module
=====================================
Copyright (c) 2025 PNGN-Tec LLC

Slack Block Kit payloads for finished banners. Emoji render at a fixed
width in Slack, so lines are passed through untouched; the only shaping is
splitting long banners across blocks to respect Slack's text limit.
"""

import json
import logging
from typing import Any, Dict, List

from banner_render import BannerResult

logger = logging.getLogger('banner_slack')

# Slack rejects section text longer than this
SLACK_TEXT_LIMIT = 3000

SlackMessage = Dict[str, Any]


def _text_block(text: str) -> Dict[str, Any]:
    return {
        'type': 'section',
        'text': {
            'type': 'mrkdwn',
            'text': text,
            'emoji': True,
        },
    }


def to_slack_format(result: BannerResult) -> SlackMessage:
    """
    Section blocks holding the banner, grouped under SLACK_TEXT_LIMIT.

    A single line longer than the limit gets a block of its own.
    """
    blocks: List[Dict[str, Any]] = []
    current = ''

    for line in result.text.split('\n'):
        if current and len(current) + len(line) + 1 > SLACK_TEXT_LIMIT:
            blocks.append(_text_block(current))
            current = line
        else:
            current = f"{current}\n{line}" if current else line

    if current:
        blocks.append(_text_block(current))

    logger.debug(f"Slack payload with {len(blocks)} blocks")
    return {'blocks': blocks}


def to_slack_rich_text(result: BannerResult) -> SlackMessage:
    """One rich_text block with a preformatted element per line."""
    elements = [
        {
            'type': 'rich_text_preformatted',
            'elements': [{'type': 'text', 'text': line}],
        }
        for line in result.text.split('\n')
    ]
    return {'blocks': [{'type': 'rich_text', 'elements': elements}]}


def to_slack_simple(result: BannerResult) -> Dict[str, str]:
    """Plain message wrapping the banner in a code fence."""
    return {'text': '```\n' + result.text + '\n```'}


def generate_slack_json(result: BannerResult) -> str:
    """to_slack_format() as indented JSON, emoji kept verbatim."""
    return json.dumps(to_slack_format(result), indent=2, ensure_ascii=False)


def validate_slack_message(message: Any) -> bool:
    if not isinstance(message, dict) or not isinstance(message.get('blocks'), list):
        return False
    return all(isinstance(block, dict) and block.get('type') for block in message['blocks'])
