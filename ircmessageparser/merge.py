"""Merging of resolved entity ranges with style fragments."""

from dataclasses import dataclass
from itertools import pairwise

from ircmessageparser.errors import OverlapError
from ircmessageparser.finders.models import EntityKind, EntityRange
from ircmessageparser.style.models import StyleFragment


@dataclass(frozen=True)
class TextPart:
    """A span of plain text with one entity classification (or none).

    Attributes:
        start: Start offset in the plain text.
        end: End offset in the plain text (exclusive).
        fragments: Style fragments sliced to exactly [start, end).
        entity: Resolved range covering this span, None for plain text.
    """

    start: int
    end: int
    fragments: tuple[StyleFragment, ...]
    entity: EntityRange | None = None

    @property
    def entity_kind(self) -> EntityKind | None:
        return self.entity.kind if self.entity else None

    @property
    def entity_value(self) -> str | None:
        return self.entity.value if self.entity else None

    @property
    def text(self) -> str:
        return ''.join(fragment.text for fragment in self.fragments)


def _check_ranges(ranges: list[EntityRange], length: int) -> None:
    previous = None
    for current in ranges:
        if current.end > length:
            raise OverlapError(f'Range [{current.start}, {current.end}) exceeds text length {length}')
        if previous is not None and previous.overlaps(current):
            raise OverlapError(
                f'Ranges [{previous.start}, {previous.end}) and [{current.start}, {current.end}) overlap'
            )
        previous = current


def merge_parts(ranges: list[EntityRange], fragments: list[StyleFragment]) -> list[TextPart]:
    """Combine resolved entity ranges and style fragments into text parts.

    The plain text is cut at every entity boundary and every style fragment
    boundary, so no part spans a change of entity or of style. Each part
    carries its slice of the style fragment covering it.

    Args:
        ranges: Non-overlapping entity ranges, as returned by resolve_ranges().
        fragments: Contiguous style fragments covering the whole plain text.

    Returns:
        Text parts in order, partitioning the plain text.

    Raises:
        OverlapError: If ranges overlap or extend past the end of the text.
    """
    spans: list[tuple[int, int, StyleFragment]] = []
    offset = 0
    for fragment in fragments:
        spans.append((offset, offset + len(fragment.text), fragment))
        offset += len(fragment.text)
    length = offset

    ranges = sorted((r for r in ranges if r.length > 0), key=lambda r: r.start)
    _check_ranges(ranges, length)

    boundaries = {0, length}
    boundaries.update(start for start, _, _ in spans)
    for entity in ranges:
        boundaries.update((entity.start, entity.end))

    parts: list[TextPart] = []
    span_index = 0
    range_index = 0
    for start, end in pairwise(sorted(boundaries)):
        while spans[span_index][1] <= start:
            span_index += 1
        span_start, _, fragment = spans[span_index]
        piece = fragment.with_text(fragment.text[start - span_start : end - span_start])

        while range_index < len(ranges) and ranges[range_index].end <= start:
            range_index += 1
        entity = None
        if range_index < len(ranges) and ranges[range_index].start <= start:
            entity = ranges[range_index]

        parts.append(TextPart(start=start, end=end, fragments=(piece,), entity=entity))

    return parts
