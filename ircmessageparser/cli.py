"""Command line tool for annotating IRC messages."""

import argparse
import logging
import re
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ircmessageparser.merge import TextPart
from ircmessageparser.parser import annotate
from ircmessageparser.render import to_html, to_rich_text
from ircmessageparser.settings import ParserSettings
from ircmessageparser.style.models import StyleFragment


logger = logging.getLogger(__name__)

console = Console()

ESCAPE = re.compile(r'\\x([0-9a-fA-F]{2})')


def unescape(text: str) -> str:
    r"""Turn ``\x02``-style escapes into the characters they name."""
    return ESCAPE.sub(lambda match: chr(int(match.group(1), 16)), text)


def describe_style(fragment: StyleFragment) -> str:
    """Short human-readable list of a fragment's active attributes."""
    labels = [
        name
        for name in ('bold', 'italic', 'underline', 'strikethrough', 'monospace')
        if getattr(fragment, name)
    ]
    if fragment.text_color is not None:
        labels.append(f'fg{fragment.text_color}')
    if fragment.bg_color is not None:
        labels.append(f'bg{fragment.bg_color}')
    if fragment.hex_color:
        labels.append(f'#{fragment.hex_color}')
    if fragment.hex_bg_color:
        labels.append(f'bg#{fragment.hex_bg_color}')
    return ' '.join(labels)


def parts_table(parts: list[TextPart]) -> Table:
    table = Table(title='Text parts')
    table.add_column('Range', justify='right')
    table.add_column('Kind')
    table.add_column('Value')
    table.add_column('Text')
    table.add_column('Style')

    for part in parts:
        kind = part.entity_kind.value if part.entity_kind else ''
        styles = ', '.join(describe_style(fragment) for fragment in part.fragments if fragment.has_style)
        table.add_row(
            f'{part.start}-{part.end}',
            kind,
            escape(part.entity_value or ''),
            escape(repr(part.text)),
            styles,
        )
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Annotate an IRC message with styles, links, channels and mentions')
    parser.add_argument('text', nargs='?', help='Message text (read from stdin if omitted)')
    parser.add_argument('--nick', action='append', default=[], help='Known nickname (repeatable)')
    parser.add_argument('--channel-prefixes', default='#&', help='Channel prefix characters (default: #&)')
    parser.add_argument('--user-modes', default='!@%+', help='User mode sigils (default: !@%%+)')
    parser.add_argument(
        '--format',
        choices=('rich', 'html', 'parts'),
        default='rich',
        help='Output format (default: rich)',
    )
    parser.add_argument('--escapes', action='store_true', help=r'Decode \xHH escapes in the text first')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    try:
        settings = ParserSettings(channel_prefixes=args.channel_prefixes, user_modes=args.user_modes)
    except ValidationError as e:
        logger.error(f'Invalid sigil configuration: {e}')
        return 2

    text = args.text if args.text is not None else sys.stdin.read().rstrip('\n')
    if args.escapes:
        text = unescape(text)

    parts = annotate(text, args.nick, settings)
    logger.debug(f'Annotated message into {len(parts)} parts')

    if args.format == 'html':
        print(to_html(parts))
    elif args.format == 'parts':
        console.print(parts_table(parts))
    else:
        console.print(to_rich_text(parts))
    return 0


if __name__ == '__main__':
    sys.exit(main())
