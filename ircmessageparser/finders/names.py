"""Nickname mention detection."""

import re
from collections.abc import Iterable

from ircmessageparser.finders.models import NameRange


# Characters allowed in IRC nicknames
NICK_TOKEN = re.compile(r'[\w\[\]\\`^{|}-]+')


def find_names(text: str, nicks: Iterable[str] | None) -> list[NameRange]:
    """Find whole-word, case-insensitive mentions of known nicknames.

    Args:
        text: Plain message text.
        nicks: Known nicknames. None or empty finds nothing.

    Returns:
        Name ranges in text order; ``nick`` is spelled as in ``nicks``.
    """
    if not text or not nicks:
        return []

    known = {nick.casefold(): nick for nick in nicks if nick}
    if not known:
        return []

    result = []
    for match in NICK_TOKEN.finditer(text):
        nick = known.get(match.group(0).casefold())
        if nick is not None:
            result.append(NameRange(start=match.start(), end=match.end(), nick=nick))
    return result
