"""Overlap resolution between candidates of different finders."""

import logging
from collections.abc import Iterable

from ircmessageparser.finders.models import EntityRange


logger = logging.getLogger(__name__)


def _sort_key(candidate: EntityRange) -> tuple[int, int, int]:
    # Earliest start first, then longest, then by kind priority
    return (candidate.start, -candidate.end, candidate.kind.priority)


def resolve_ranges(candidates: Iterable[EntityRange]) -> list[EntityRange]:
    """Select a non-overlapping subset of candidate ranges.

    Candidates are ordered by start, then by end descending, then by
    ``EntityKind.priority`` (channel, link, emoji, name). Walking that order,
    a candidate is kept only if it does not share an offset with the last
    kept range. Losing candidates are dropped whole, never truncated.

    Args:
        candidates: Ranges from any number of finders, in any order.

    Returns:
        Kept ranges sorted by start.
    """
    ordered = []
    for candidate in candidates:
        if candidate.length == 0:
            logger.debug(f'Dropping empty {candidate.kind.value} range at {candidate.start}')
            continue
        ordered.append(candidate)
    ordered.sort(key=_sort_key)

    resolved: list[EntityRange] = []
    last_end = 0
    for candidate in ordered:
        if resolved and candidate.start < last_end:
            logger.debug(f'Dropping {candidate.kind.value} [{candidate.start}, {candidate.end}): overlaps kept range')
            continue
        resolved.append(candidate)
        last_end = candidate.end

    return resolved
