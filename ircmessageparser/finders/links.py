"""URL detection."""

import re

from ircmessageparser.finders.models import LinkRange


SCHEMES = ('http', 'https', 'ftp', 'ftps', 'sftp', 'irc', 'ircs', 'ssh', 'git', 'smb', 'file')

URL_PATTERN = re.compile(
    r'(?<![\w.@/-])'
    r'(?:(?P<scheme>(?:' + '|'.join(SCHEMES) + r')://)|(?P<www>www\.))'
    r'[^\s<>"\x00-\x1f]+',
    re.IGNORECASE,
)

# Never the last character of a link
TRAILING_PUNCTUATION = frozenset('.,:;!?\'"*')

# Closing bracket -> opening bracket
BRACKETS = {')': '(', ']': '[', '}': '{'}


def _trim_trailing(url: str) -> str:
    """Strip trailing punctuation and unbalanced closing brackets."""
    counts = {char: url.count(char) for pair in BRACKETS.items() for char in pair}
    end = len(url)
    while end:
        char = url[end - 1]
        if char in TRAILING_PUNCTUATION:
            end -= 1
            continue
        if char in BRACKETS and counts[char] > counts[BRACKETS[char]]:
            counts[char] -= 1
            end -= 1
            continue
        break
    return url[:end]


def find_links(text: str) -> list[LinkRange]:
    """Find scheme-qualified URLs and bare ``www.`` hosts.

    A bare ``www.`` host is reported with an ``http://`` link.

    Args:
        text: Plain message text.

    Returns:
        Link ranges in text order.
    """
    if not text:
        return []

    result = []
    for match in URL_PATTERN.finditer(text):
        prefix = match.group('scheme') or match.group('www')
        url = _trim_trailing(match.group(0))
        if len(url) <= len(prefix):
            continue
        link = url if match.group('scheme') else f'http://{url}'
        result.append(LinkRange(start=match.start(), end=match.start() + len(url), link=link))
    return result
