"""Channel reference detection."""

import re
import string
import unicodedata
from collections.abc import Iterable
from functools import lru_cache

from ircmessageparser.finders.models import ChannelRange


DEFAULT_CHANNEL_PREFIXES = ('#', '&')
DEFAULT_USER_MODES = ('!', '@', '%', '+')


@lru_cache(maxsize=32)
def _channel_pattern(prefixes: str, modes: str) -> re.Pattern:
    mode_class = f'[{re.escape(modes)}]*' if modes else ''
    # Must open the text or follow whitespace; leading user modes are skipped
    return re.compile(rf'(?<!\S){mode_class}(?P<channel>[{re.escape(prefixes)}][^\s,\x07]+)')


def _is_punctuation(char: str) -> bool:
    return char in string.punctuation or unicodedata.category(char).startswith('P')


def find_channels(
    text: str,
    channel_prefixes: Iterable[str] = DEFAULT_CHANNEL_PREFIXES,
    user_modes: Iterable[str] = DEFAULT_USER_MODES,
) -> list[ChannelRange]:
    """Find channel references such as ``#lounge`` or ``@#ops``.

    Args:
        text: Plain message text.
        channel_prefixes: Characters a channel name may start with.
        user_modes: Nickname mode sigils that may precede a channel in a
            names listing; they are not part of the returned range.

    Returns:
        Channel ranges in text order.
    """
    prefixes = ''.join(sorted(set(channel_prefixes)))
    if not text or not prefixes:
        return []
    modes = ''.join(sorted(set(user_modes)))

    result = []
    for match in _channel_pattern(prefixes, modes).finditer(text):
        channel = match.group('channel')
        if all(_is_punctuation(char) for char in channel):
            continue
        result.append(ChannelRange(start=match.start('channel'), end=match.end('channel'), channel=channel))
    return result
