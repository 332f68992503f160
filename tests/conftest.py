"""Shared pytest fixtures for message parser tests."""

import pytest

from ircmessageparser.settings import ParserSettings


@pytest.fixture
def settings():
    """Default network sigils."""
    return ParserSettings()


@pytest.fixture
def hash_only_settings():
    """Settings recognizing only '#' channels."""
    return ParserSettings(channel_prefixes=('#',))


@pytest.fixture
def nicks():
    """Nicknames present in the channel."""
    return ['alice', 'Bob', '[m]']
