"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Generator

import pytest

from src.core.config import Settings
from src.db.memory_repository import InMemoryGameRepository


@pytest.fixture
def settings() -> Settings:
    """Standard 6x7 board with explicit defaults, independent of the environment."""
    return Settings(
        board_height=6,
        board_width=7,
        player_one_color="red",
        player_two_color="gold",
        log_level="DEBUG",
    )


@pytest.fixture
def repository() -> Generator[InMemoryGameRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = InMemoryGameRepository()
    try:
        yield repo
    finally:
        repo.clear()
