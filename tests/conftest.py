"""Shared test fixtures for the game engine and sync server tests."""

import pytest

from monopoly.config import GameConfig
from monopoly.state import GameStateStore


@pytest.fixture
def game_config():
    """Two-player configuration with fixed seed for reproducibility."""
    return GameConfig(player_names=["A", "B"], seed=42)


@pytest.fixture
def store(game_config):
    """Fresh game store with players A and B."""
    return GameStateStore(game_config)


@pytest.fixture
def three_player_store():
    return GameStateStore(GameConfig(player_names=["Alice", "Bob", "Charlie"], seed=7))


@pytest.fixture
def board(store):
    return store.board
