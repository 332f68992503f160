"""Tests for merging entity ranges with style fragments."""

import pytest

from ircmessageparser.errors import OverlapError
from ircmessageparser.finders.models import EntityKind, LinkRange, NameRange
from ircmessageparser.merge import TextPart, merge_parts
from ircmessageparser.style import StyleFragment


class TestMergeParts:
    """Tests for merge_parts."""

    def test_plain_text(self):
        parts = merge_parts([], [StyleFragment('hello')])
        assert parts == [TextPart(start=0, end=5, fragments=(StyleFragment('hello'),))]
        assert parts[0].entity_kind is None
        assert parts[0].entity_value is None

    def test_empty(self):
        assert merge_parts([], []) == []

    def test_entity_in_middle(self):
        name = NameRange(start=3, end=8, nick='alice')
        parts = merge_parts([name], [StyleFragment('hi alice!')])
        assert [(p.start, p.end, p.text, p.entity) for p in parts] == [
            (0, 3, 'hi ', None),
            (3, 8, 'alice', name),
            (8, 9, '!', None),
        ]
        assert parts[1].entity_kind is EntityKind.NAME
        assert parts[1].entity_value == 'alice'

    def test_splits_at_style_and_entity_boundaries(self):
        link = LinkRange(start=1, end=3, link='bc')
        fragments = [StyleFragment('ab', bold=True), StyleFragment('cd')]
        parts = merge_parts([link], fragments)
        assert parts == [
            TextPart(start=0, end=1, fragments=(StyleFragment('a', bold=True),)),
            TextPart(start=1, end=2, fragments=(StyleFragment('b', bold=True),), entity=link),
            TextPart(start=2, end=3, fragments=(StyleFragment('c'),), entity=link),
            TextPart(start=3, end=4, fragments=(StyleFragment('d'),)),
        ]

    def test_fragment_straddling_entity_keeps_attributes(self):
        link = LinkRange(start=2, end=4, link='x')
        fragment = StyleFragment('abcdef', italic=True, text_color=3)
        parts = merge_parts([link], [fragment])
        assert [p.fragments[0] for p in parts] == [
            StyleFragment('ab', italic=True, text_color=3),
            StyleFragment('cd', italic=True, text_color=3),
            StyleFragment('ef', italic=True, text_color=3),
        ]

    def test_entity_covering_whole_text(self):
        link = LinkRange(start=0, end=4, link='abcd')
        parts = merge_parts([link], [StyleFragment('abcd')])
        assert len(parts) == 1
        assert parts[0].entity == link

    def test_adjacent_entities(self):
        first = LinkRange(start=0, end=2, link='ab')
        second = NameRange(start=2, end=4, nick='cd')
        parts = merge_parts([second, first], [StyleFragment('abcd')])
        assert [p.entity for p in parts] == [first, second]

    def test_overlapping_ranges_rejected(self):
        with pytest.raises(OverlapError):
            merge_parts([LinkRange(0, 3, 'a'), NameRange(2, 4, 'b')], [StyleFragment('abcd')])

    def test_range_past_end_rejected(self):
        with pytest.raises(OverlapError):
            merge_parts([LinkRange(0, 10, 'a')], [StyleFragment('abcd')])

    def test_parts_partition_text(self):
        fragments = [StyleFragment('ab', bold=True), StyleFragment('cdef'), StyleFragment('gh', underline=True)]
        ranges = [NameRange(1, 3, 'x'), LinkRange(5, 7, 'y')]
        parts = merge_parts(ranges, fragments)
        assert ''.join(p.text for p in parts) == 'abcdefgh'
        assert parts[0].start == 0
        assert parts[-1].end == 8
        for previous, current in zip(parts, parts[1:]):
            assert previous.end == current.start
        for part in parts:
            assert len(part.text) == part.end - part.start
