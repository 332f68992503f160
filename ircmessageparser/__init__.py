"""Styling and entity annotation for IRC chat messages."""

from ircmessageparser.errors import InvalidRangeError, OverlapError, ParserError
from ircmessageparser.finders import (
    ChannelRange,
    EmojiRange,
    EntityKind,
    EntityRange,
    LinkRange,
    NameRange,
    find_channels,
    find_emoji,
    find_links,
    find_names,
)
from ircmessageparser.merge import TextPart, merge_parts
from ircmessageparser.parser import annotate, annotate_async, parse
from ircmessageparser.render import color_class, to_html, to_rich_text
from ircmessageparser.resolver import resolve_ranges
from ircmessageparser.settings import ParserSettings
from ircmessageparser.style import StyleFragment, parse_style, strip_style


__all__ = [
    'ChannelRange',
    'EmojiRange',
    'EntityKind',
    'EntityRange',
    'InvalidRangeError',
    'LinkRange',
    'NameRange',
    'OverlapError',
    'ParserError',
    'ParserSettings',
    'StyleFragment',
    'TextPart',
    'annotate',
    'annotate_async',
    'color_class',
    'find_channels',
    'find_emoji',
    'find_links',
    'find_names',
    'merge_parts',
    'parse',
    'parse_style',
    'resolve_ranges',
    'strip_style',
    'to_html',
    'to_rich_text',
]
