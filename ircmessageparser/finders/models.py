"""Entity range models produced by the finders."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from ircmessageparser.errors import InvalidRangeError


class EntityKind(Enum):
    """Kinds of entity a span of plain text can be classified as."""

    CHANNEL = 'channel'
    LINK = 'link'
    EMOJI = 'emoji'
    NAME = 'name'

    @property
    def priority(self) -> int:
        """Tie-break rank for candidates with identical start and end (lower wins)."""
        return ENTITY_PRIORITY[self]


ENTITY_PRIORITY: dict[EntityKind, int] = {
    EntityKind.CHANNEL: 0,
    EntityKind.LINK: 1,
    EntityKind.EMOJI: 2,
    EntityKind.NAME: 3,
}


@dataclass(frozen=True)
class EntityRange(ABC):
    """A half-open span [start, end) of plain text, in character offsets."""

    start: int
    end: int

    kind: ClassVar[EntityKind]

    def __post_init__(self) -> None:
        if self.start < 0 or self.start > self.end:
            raise InvalidRangeError(self.start, self.end)

    @property
    @abstractmethod
    def value(self) -> str:
        """Channel name, URL, emoji or nickname the range stands for."""

    @property
    def length(self) -> int:
        return self.end - self.start

    def overlaps(self, other: 'EntityRange') -> bool:
        """True if the two ranges share at least one offset."""
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class ChannelRange(EntityRange):
    channel: str

    kind: ClassVar[EntityKind] = EntityKind.CHANNEL

    @property
    def value(self) -> str:
        return self.channel


@dataclass(frozen=True)
class LinkRange(EntityRange):
    link: str

    kind: ClassVar[EntityKind] = EntityKind.LINK

    @property
    def value(self) -> str:
        return self.link


@dataclass(frozen=True)
class EmojiRange(EntityRange):
    emoji: str

    kind: ClassVar[EntityKind] = EntityKind.EMOJI

    @property
    def value(self) -> str:
        return self.emoji


@dataclass(frozen=True)
class NameRange(EntityRange):
    nick: str

    kind: ClassVar[EntityKind] = EntityKind.NAME

    @property
    def value(self) -> str:
        return self.nick
