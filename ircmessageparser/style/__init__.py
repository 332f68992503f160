"""Inline style control code decoding."""

from ircmessageparser.style.decoder import parse_style, strip_style
from ircmessageparser.style.models import StyleFragment


__all__ = [
    'StyleFragment',
    'parse_style',
    'strip_style',
]
