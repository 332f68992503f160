"""HTML rendering of text parts."""

import html
from collections.abc import Iterable
from itertools import groupby

from ircmessageparser.finders.models import EntityKind, EntityRange
from ircmessageparser.merge import TextPart
from ircmessageparser.render.colors import color_class
from ircmessageparser.style.models import StyleFragment


def _fragment_html(fragment: StyleFragment) -> str:
    """Escaped fragment text, wrapped in a span when it carries style."""
    classes = []
    if fragment.bold:
        classes.append('irc-bold')
    # Hex colors take precedence over palette colors
    if fragment.text_color is not None and fragment.hex_color is None:
        classes.append(f'irc-fg{fragment.text_color}')
    if fragment.bg_color is not None and fragment.hex_bg_color is None:
        classes.append(f'irc-bg{fragment.bg_color}')
    if fragment.italic:
        classes.append('irc-italic')
    if fragment.underline:
        classes.append('irc-underline')
    if fragment.strikethrough:
        classes.append('irc-strikethrough')
    if fragment.monospace:
        classes.append('irc-monospace')

    styles = []
    if fragment.hex_color:
        styles.append(f'color:#{fragment.hex_color}')
    if fragment.hex_bg_color:
        styles.append(f'background-color:#{fragment.hex_bg_color}')

    attributes = ''
    if classes:
        attributes += f' class="{" ".join(classes)}"'
    if styles:
        attributes += f' style="{";".join(styles)}"'

    text = html.escape(fragment.text)
    if attributes:
        return f'<span{attributes}>{text}</span>'
    return text


def _wrap_entity(entity: EntityRange | None, content: str) -> str:
    if entity is None:
        return content

    value = html.escape(entity.value)
    if entity.kind is EntityKind.LINK:
        return f'<a href="{value}" target="_blank" rel="noopener noreferrer">{content}</a>'
    if entity.kind is EntityKind.CHANNEL:
        return f'<span class="inline-channel" role="button" tabindex="0" data-chan="{value}">{content}</span>'
    if entity.kind is EntityKind.EMOJI:
        return f'<span class="emoji">{content}</span>'
    if entity.kind is EntityKind.NAME:
        return f'<span role="button" class="user {color_class(entity.value)}" data-name="{value}">{content}</span>'
    return content


def to_html(parts: Iterable[TextPart]) -> str:
    """Render text parts as HTML.

    Consecutive parts belonging to the same entity (split only by a style
    change) are wrapped in a single element.

    Args:
        parts: Text parts as returned by merge_parts().

    Returns:
        HTML string with all text and attribute values escaped.
    """
    chunks = []
    for entity, group in groupby(parts, key=lambda part: part.entity):
        content = ''.join(_fragment_html(fragment) for part in group for fragment in part.fragments)
        chunks.append(_wrap_entity(entity, content))
    return ''.join(chunks)
