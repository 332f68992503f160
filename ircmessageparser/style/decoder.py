"""Decoding of inline mIRC style control codes.

The decoder is a single fold over control-code tokens: each token maps the
current (immutable) style state to a new one, and the literal text between
tokens is emitted as a fragment carrying the state active at that point.
"""

import re
from dataclasses import replace

from ircmessageparser.style.codes import (
    COLOR,
    HEX_COLOR,
    PALETTE_SIZE,
    RESET,
    REVERSE,
    TOGGLES,
)
from ircmessageparser.style.models import StyleFragment


# One control code together with its (optional) color arguments
STYLE_TOKEN = re.compile(
    r'\x03(?:(?P<fg>\d{1,2})(?:,(?P<bg>\d{1,2}))?)?'
    r'|\x04(?:(?P<hex_fg>[0-9a-fA-F]{6})(?:,(?P<hex_bg>[0-9a-fA-F]{6}))?)?'
    r'|[\x02\x0f\x11\x16\x1d\x1e\x1f]'
)

DEFAULT_STYLE = StyleFragment('')


def _apply_token(state: StyleFragment, match: re.Match) -> StyleFragment:
    """Return the style state that results from applying one control code."""
    code = match.group(0)[0]

    if code == RESET:
        return DEFAULT_STYLE

    if code in TOGGLES:
        attr = TOGGLES[code]
        return replace(state, **{attr: not getattr(state, attr)})

    if code == REVERSE:
        return replace(state, text_color=state.bg_color, bg_color=state.text_color)

    if code == COLOR:
        fg, bg = match.group('fg'), match.group('bg')
        if fg is None:
            # A bare color code clears palette colors
            return replace(state, text_color=None, bg_color=None)
        state = replace(state, text_color=int(fg) % PALETTE_SIZE)
        if bg is not None:
            state = replace(state, bg_color=int(bg) % PALETTE_SIZE)
        return state

    if code == HEX_COLOR:
        fg, bg = match.group('hex_fg'), match.group('hex_bg')
        if fg is None:
            return replace(state, hex_color=None, hex_bg_color=None)
        state = replace(state, hex_color=fg.upper())
        if bg is not None:
            state = replace(state, hex_bg_color=bg.upper())
        return state

    return state


def _emit(fragments: list[StyleFragment], state: StyleFragment, text: str) -> None:
    """Append text under the given style, extending the last run if it matches."""
    if not text:
        return
    if fragments and fragments[-1].same_style(state):
        fragments[-1] = fragments[-1].with_text(fragments[-1].text + text)
    else:
        fragments.append(state.with_text(text))


def parse_style(text: str | None) -> list[StyleFragment]:
    """Split raw message text into styled fragments.

    Control codes are consumed and never appear in fragment text. Anything
    that is not a recognized code, including malformed color arguments and
    other control bytes, is kept as literal text.

    Args:
        text: Raw message text with mIRC control codes.

    Returns:
        Contiguous fragments whose texts concatenate to the plain text. Empty
        for empty input.
    """
    fragments: list[StyleFragment] = []
    if not text:
        return fragments

    state = DEFAULT_STYLE
    position = 0

    for match in STYLE_TOKEN.finditer(text):
        _emit(fragments, state, text[position : match.start()])
        state = _apply_token(state, match)
        position = match.end()

    _emit(fragments, state, text[position:])
    return fragments


def strip_style(text: str | None) -> str:
    """Remove all style control codes, returning the plain text."""
    return ''.join(fragment.text for fragment in parse_style(text))
