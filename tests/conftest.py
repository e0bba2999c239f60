"""Shared fixtures for the engine tests."""

import pytest

from phoenix_logic.engine import GameEngine
from phoenix_logic.state import new_game_state, new_session_sets


@pytest.fixture
def state():
    """A fresh session's game state."""
    return new_game_state()


@pytest.fixture
def sessions():
    """Fresh visited/unlocked sets."""
    return new_session_sets()


@pytest.fixture
def engine():
    """A fresh single-session engine."""
    return GameEngine()


def play(engine, *commands):
    """Run commands in order and return the last message."""
    message = ""
    for command in commands:
        message = engine.execute(command)
    return message
