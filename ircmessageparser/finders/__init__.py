"""Independent entity finders over plain message text."""

from ircmessageparser.finders.channels import DEFAULT_CHANNEL_PREFIXES, DEFAULT_USER_MODES, find_channels
from ircmessageparser.finders.emoji import find_emoji
from ircmessageparser.finders.links import find_links
from ircmessageparser.finders.models import (
    ChannelRange,
    EmojiRange,
    EntityKind,
    EntityRange,
    LinkRange,
    NameRange,
)
from ircmessageparser.finders.names import find_names


__all__ = [
    'DEFAULT_CHANNEL_PREFIXES',
    'DEFAULT_USER_MODES',
    'ChannelRange',
    'EmojiRange',
    'EntityKind',
    'EntityRange',
    'LinkRange',
    'NameRange',
    'find_channels',
    'find_emoji',
    'find_links',
    'find_names',
]
