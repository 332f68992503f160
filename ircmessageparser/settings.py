"""Parser configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from ircmessageparser.finders.channels import DEFAULT_CHANNEL_PREFIXES, DEFAULT_USER_MODES


class ParserSettings(BaseModel):
    """Network-specific sigils and finder switches.

    Attributes:
        channel_prefixes: Characters a channel name may start with.
        user_modes: Nickname mode sigils (op, voice, ...) that may precede a
            channel or nickname.
        detect_links: Run the URL finder.
        detect_emoji: Run the emoji finder.
    """

    model_config = ConfigDict(frozen=True)

    channel_prefixes: tuple[str, ...] = DEFAULT_CHANNEL_PREFIXES
    user_modes: tuple[str, ...] = DEFAULT_USER_MODES
    detect_links: bool = True
    detect_emoji: bool = True

    @field_validator('channel_prefixes', 'user_modes', mode='before')
    @classmethod
    def _split_string(cls, value: Any) -> Any:
        # Allow compact forms such as "#&"
        if isinstance(value, str):
            return tuple(value)
        return value

    @field_validator('channel_prefixes', 'user_modes')
    @classmethod
    def _check_sigils(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for sigil in value:
            if len(sigil) != 1 or sigil.isspace() or sigil == ',':
                raise ValueError(f'Sigils must be single non-whitespace characters, got {sigil!r}')
        return tuple(dict.fromkeys(value))

    @model_validator(mode='after')
    def _check_disjoint(self) -> 'ParserSettings':
        shared = set(self.channel_prefixes) & set(self.user_modes)
        if shared:
            raise ValueError(f'Characters used as both channel prefix and user mode: {sorted(shared)}')
        return self
