"""Tests for style control code decoding."""

import pytest

from ircmessageparser.style import StyleFragment, parse_style, strip_style


class TestParseStylePlain:
    """Tests for text without control codes."""

    def test_plain_text_single_fragment(self):
        assert parse_style('hello world') == [StyleFragment('hello world')]

    def test_empty_text(self):
        assert parse_style('') == []

    def test_none_text(self):
        assert parse_style(None) == []

    def test_only_control_codes(self):
        # Codes produce no text, so no fragments
        assert parse_style('\x02\x1d\x0f') == []

    def test_unknown_control_bytes_are_literal(self):
        assert parse_style('a\x07b\x01c') == [StyleFragment('a\x07b\x01c')]


class TestParseStyleToggles:
    """Tests for boolean toggle codes."""

    def test_bold(self):
        assert parse_style('\x02bold\x02 normal') == [
            StyleFragment('bold', bold=True),
            StyleFragment(' normal'),
        ]

    @pytest.mark.parametrize(
        ('code', 'attr'),
        [
            ('\x1d', 'italic'),
            ('\x1f', 'underline'),
            ('\x1e', 'strikethrough'),
            ('\x11', 'monospace'),
        ],
    )
    def test_other_toggles(self, code, attr):
        fragments = parse_style(f'a{code}b{code}c')
        assert [f.text for f in fragments] == ['a', 'b', 'c']
        assert getattr(fragments[1], attr) is True
        assert not fragments[0].has_style
        assert not fragments[2].has_style

    def test_toggles_combine(self):
        fragments = parse_style('\x02\x1dboth')
        assert fragments == [StyleFragment('both', bold=True, italic=True)]

    def test_double_toggle_leaves_single_run(self):
        # Zero-length runs are dropped and equal neighbours merged
        assert parse_style('a\x02\x02b') == [StyleFragment('ab')]

    def test_reset_clears_everything(self):
        fragments = parse_style('\x02\x1d\x0304,02ab\x0fc')
        assert fragments == [
            StyleFragment('ab', bold=True, italic=True, text_color=4, bg_color=2),
            StyleFragment('c'),
        ]


class TestParseStyleColors:
    """Tests for palette and hex color codes."""

    def test_foreground(self):
        assert parse_style('\x0304red') == [StyleFragment('red', text_color=4)]

    def test_foreground_and_background(self):
        assert parse_style('\x0304,12text') == [StyleFragment('text', text_color=4, bg_color=12)]

    def test_single_digit(self):
        assert parse_style('\x035x') == [StyleFragment('x', text_color=5)]

    def test_wraps_into_palette(self):
        assert parse_style('\x0399x') == [StyleFragment('x', text_color=3)]

    def test_only_two_digits_consumed(self):
        assert parse_style('\x03123') == [StyleFragment('3', text_color=12)]

    def test_bare_color_code_clears_colors(self):
        assert parse_style('\x0304,02red\x03plain') == [
            StyleFragment('red', text_color=4, bg_color=2),
            StyleFragment('plain'),
        ]

    def test_comma_without_background_is_literal(self):
        assert parse_style('\x0304,x') == [StyleFragment(',x', text_color=4)]

    def test_foreground_change_keeps_background(self):
        fragments = parse_style('\x0304,02a\x0307b')
        assert fragments[1] == StyleFragment('b', text_color=7, bg_color=2)

    def test_hex_color_uppercased(self):
        assert parse_style('\x04ff0000red') == [StyleFragment('red', hex_color='FF0000')]

    def test_hex_color_with_background(self):
        assert parse_style('\x04FF0000,00ff00x') == [
            StyleFragment('x', hex_color='FF0000', hex_bg_color='00FF00'),
        ]

    def test_malformed_hex_is_literal(self):
        assert parse_style('\x04zz') == [StyleFragment('zz')]

    def test_bare_hex_code_clears_hex_colors(self):
        assert parse_style('\x04112233a\x04b') == [
            StyleFragment('a', hex_color='112233'),
            StyleFragment('b'),
        ]

    def test_reverse_swaps_colors(self):
        assert parse_style('\x0304,12a\x16b') == [
            StyleFragment('a', text_color=4, bg_color=12),
            StyleFragment('b', text_color=12, bg_color=4),
        ]


class TestStripStyle:
    """Tests for plain text extraction."""

    @pytest.mark.parametrize(
        'raw',
        [
            '\x02bold\x02 and \x0304,02color\x03 and \x04abcdef\x04 hex',
            'no codes at all',
            '\x0f\x0f',
            '\x0304,x \x07 bell',
        ],
    )
    def test_fragments_concatenate_to_plain_text(self, raw):
        assert ''.join(f.text for f in parse_style(raw)) == strip_style(raw)

    def test_strip(self):
        assert strip_style('\x02hello\x02 \x0304world') == 'hello world'

    @pytest.mark.parametrize('raw', ['\x02a\x02b', '\x0304x\x03y', 'plain'])
    def test_decoding_plain_text_is_idempotent(self, raw):
        plain = strip_style(raw)
        fragments = parse_style(plain)
        assert len(fragments) == 1
        assert fragments[0].text == plain
        assert not fragments[0].has_style

    def test_fragments_are_maximal_runs(self):
        fragments = parse_style('\x02a\x02b\x02c\x0304d\x0304e')
        for previous, current in zip(fragments, fragments[1:]):
            assert not previous.same_style(current)
