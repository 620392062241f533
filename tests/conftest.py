"""Shared fixtures for the bot test suite."""

import pytest

from greencircle.config import Config
from greencircle.model.game import GameSession


@pytest.fixture
def cfg():
    return Config()


@pytest.fixture
def session(cfg):
    """Fresh per-game session: turn counter at 0, empty event log."""
    return GameSession(cfg=cfg)
