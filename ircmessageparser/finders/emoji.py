"""Emoji and ``:shortcode:`` detection."""

import re
from functools import lru_cache

import emoji

from ircmessageparser.finders.models import EmojiRange


# Every colon-delimited word, including ones that share a colon
SHORTCODE_CANDIDATE = re.compile(r'(?=(:[^\s:]+:))')


@lru_cache(maxsize=1)
def shortcode_table() -> frozenset[str]:
    """Known shortcodes (with colons), from official names and aliases."""
    names = set()
    for data in emoji.EMOJI_DATA.values():
        names.add(data['en'])
        names.update(data.get('alias', ()))
    return frozenset(names)


def _find_shortcodes(text: str) -> list[EmojiRange]:
    known = shortcode_table()
    result = []
    position = 0
    for match in SHORTCODE_CANDIDATE.finditer(text):
        start = match.start()
        shortcode = match.group(1)
        if start < position or shortcode not in known:
            continue
        position = start + len(shortcode)
        result.append(EmojiRange(start=start, end=position, emoji=shortcode))
    return result


def find_emoji(text: str) -> list[EmojiRange]:
    """Find literal emoji and known ``:shortcode:`` names.

    Args:
        text: Plain message text.

    Returns:
        Emoji ranges in text order.
    """
    if not text:
        return []

    candidates = [
        EmojiRange(start=found['match_start'], end=found['match_end'], emoji=found['emoji'])
        for found in emoji.emoji_list(text)
    ]
    candidates.extend(_find_shortcodes(text))
    candidates.sort(key=lambda r: r.start)

    result: list[EmojiRange] = []
    for candidate in candidates:
        if result and result[-1].overlaps(candidate):
            continue
        result.append(candidate)
    return result
