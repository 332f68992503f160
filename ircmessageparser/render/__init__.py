"""Renderers for annotated message parts."""

from ircmessageparser.render.colors import color_class
from ircmessageparser.render.console import to_rich_text
from ircmessageparser.render.html import to_html


__all__ = [
    'color_class',
    'to_html',
    'to_rich_text',
]
