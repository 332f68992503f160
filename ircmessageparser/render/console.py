"""Terminal rendering of text parts with rich."""

from collections.abc import Iterable

from rich.style import Style
from rich.text import Text

from ircmessageparser.finders.models import EntityKind, EntityRange
from ircmessageparser.merge import TextPart
from ircmessageparser.style.codes import PALETTE
from ircmessageparser.style.models import StyleFragment


ENTITY_STYLES: dict[EntityKind, Style] = {
    EntityKind.CHANNEL: Style(color='cyan', bold=True),
    EntityKind.LINK: Style(color='blue', underline=True),
    EntityKind.EMOJI: Style(),
    EntityKind.NAME: Style(color='magenta', bold=True),
}


def _color(palette_index: int | None, hex_color: str | None) -> str | None:
    if hex_color:
        return f'#{hex_color.lower()}'
    if palette_index is not None:
        return f'#{PALETTE[palette_index].lower()}'
    return None


def fragment_style(fragment: StyleFragment) -> Style:
    """Rich style for a fragment. Monospace has no terminal equivalent."""
    return Style(
        bold=fragment.bold or None,
        italic=fragment.italic or None,
        underline=fragment.underline or None,
        strike=fragment.strikethrough or None,
        color=_color(fragment.text_color, fragment.hex_color),
        bgcolor=_color(fragment.bg_color, fragment.hex_bg_color),
    )


def entity_style(entity: EntityRange | None) -> Style:
    if entity is None:
        return Style()
    style = ENTITY_STYLES[entity.kind]
    if entity.kind is EntityKind.LINK:
        style += Style(link=entity.value)
    return style


def to_rich_text(parts: Iterable[TextPart]) -> Text:
    """Render text parts as a rich Text for console output."""
    text = Text()
    for part in parts:
        base = entity_style(part.entity)
        for fragment in part.fragments:
            text.append(fragment.text, style=base + fragment_style(fragment))
    return text
