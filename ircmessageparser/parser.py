"""Message annotation pipeline.

raw text -> style fragments + plain text -> finder candidates -> resolved
ranges -> text parts.
"""

import asyncio
import logging
from collections.abc import Callable, Iterable
from functools import partial

from ircmessageparser.finders import find_channels, find_emoji, find_links, find_names
from ircmessageparser.finders.models import EntityRange
from ircmessageparser.merge import TextPart, merge_parts
from ircmessageparser.render.html import to_html
from ircmessageparser.resolver import resolve_ranges
from ircmessageparser.settings import ParserSettings
from ircmessageparser.style import StyleFragment, parse_style


logger = logging.getLogger(__name__)

Finder = Callable[[], list[EntityRange]]


def _finders(plain: str, nicks: Iterable[str] | None, settings: ParserSettings) -> list[Finder]:
    """Finder calls bound to their inputs, in priority order."""
    finders: list[Finder] = [partial(find_channels, plain, settings.channel_prefixes, settings.user_modes)]
    if settings.detect_links:
        finders.append(partial(find_links, plain))
    if settings.detect_emoji:
        finders.append(partial(find_emoji, plain))
    finders.append(partial(find_names, plain, list(nicks or ())))
    return finders


def _build_parts(fragments: list[StyleFragment], found: list[list[EntityRange]]) -> list[TextPart]:
    candidates = [candidate for ranges in found for candidate in ranges]
    resolved = resolve_ranges(candidates)
    logger.debug(f'Resolved {len(resolved)} of {len(candidates)} entity candidates')
    return merge_parts(resolved, fragments)


def annotate(
    text: str | None,
    nicks: Iterable[str] | None = None,
    settings: ParserSettings | None = None,
) -> list[TextPart]:
    """Split a raw message into styled, entity-tagged text parts.

    Args:
        text: Raw message, possibly containing style control codes.
        nicks: Known nicknames to detect as mentions.
        settings: Channel/user-mode sigils and finder switches.

    Returns:
        Text parts partitioning the plain text. Empty for empty input.
    """
    settings = settings or ParserSettings()
    fragments = parse_style(text)
    plain = ''.join(fragment.text for fragment in fragments)
    found = [finder() for finder in _finders(plain, nicks, settings)]
    return _build_parts(fragments, found)


async def annotate_async(
    text: str | None,
    nicks: Iterable[str] | None = None,
    settings: ParserSettings | None = None,
) -> list[TextPart]:
    """Same as annotate(), running the finders concurrently in threads."""
    settings = settings or ParserSettings()
    fragments = parse_style(text)
    plain = ''.join(fragment.text for fragment in fragments)
    found = await asyncio.gather(*(asyncio.to_thread(finder) for finder in _finders(plain, nicks, settings)))
    return _build_parts(fragments, list(found))


def parse(
    text: str | None,
    nicks: Iterable[str] | None = None,
    settings: ParserSettings | None = None,
) -> str:
    """Render a raw message to HTML."""
    return to_html(annotate(text, nicks, settings))
