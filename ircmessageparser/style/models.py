"""Style fragment model."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class StyleFragment:
    """A maximal run of text sharing the same formatting.

    Attributes:
        text: Plain text of the run, control codes removed.
        bold: Bold toggle state.
        italic: Italic toggle state.
        underline: Underline toggle state.
        strikethrough: Strikethrough toggle state.
        monospace: Monospace toggle state.
        text_color: Foreground palette index (0-15).
        bg_color: Background palette index (0-15).
        hex_color: Foreground RGB as 6 uppercase hex digits.
        hex_bg_color: Background RGB as 6 uppercase hex digits.
    """

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    monospace: bool = False
    text_color: int | None = None
    bg_color: int | None = None
    hex_color: str | None = None
    hex_bg_color: str | None = None

    @property
    def style_key(self) -> tuple:
        """All style attributes, excluding text."""
        return (
            self.bold,
            self.italic,
            self.underline,
            self.strikethrough,
            self.monospace,
            self.text_color,
            self.bg_color,
            self.hex_color,
            self.hex_bg_color,
        )

    @property
    def has_style(self) -> bool:
        """True if any formatting attribute is active."""
        return self.style_key != StyleFragment('').style_key

    def same_style(self, other: 'StyleFragment') -> bool:
        return self.style_key == other.style_key

    def with_text(self, text: str) -> 'StyleFragment':
        """Copy of this fragment carrying different text."""
        return replace(self, text=text)
