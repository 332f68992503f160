"""Nickname color classes."""

NICK_COLOR_COUNT = 32


def color_class(nick: str) -> str:
    """Deterministic CSS class (``color-1`` .. ``color-32``) for a nickname."""
    return f'color-{1 + sum(ord(char) for char in nick) % NICK_COLOR_COUNT}'
