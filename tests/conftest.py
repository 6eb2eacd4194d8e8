"""
Shared pytest fixtures for Menu Adventures tests.

This module provides:
- three_rooms: The three-room world with an empty choice script
- play_three_rooms: Play the three-room world from a list of choices
- worlds_dir: The bundled worlds directory
- Custom markers for test categorization
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest

from menu_adventures.config import PROJECT_ROOT
from menu_adventures.engine.turn import turn
from tests.fixtures.three_rooms import ThreeRooms, build_three_rooms
from tests.mocks.interface import RecordingInterface


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line(
        "markers", "e2e: marks tests as end-to-end tests driving the CLI"
    )


# =============================================================================
# World Fixtures
# =============================================================================


@pytest.fixture
def three_rooms() -> ThreeRooms:
    """Three-room world whose interface has no choices queued.

    Use it to call actions and domains directly; anything they write
    ends up in `three_rooms.interface.transcript`.
    """
    return build_three_rooms()


@pytest.fixture
def play_three_rooms() -> Callable[[Iterable[int | str]], ThreeRooms]:
    """Play the three-room world from the start with the given choices."""

    def play(choices: Iterable[int | str]) -> ThreeRooms:
        world = build_three_rooms(choices)
        turn(world.universe, introduce=True)
        return world

    return play


@pytest.fixture
def worlds_dir() -> Path:
    """The worlds shipped with the project."""
    return PROJECT_ROOT / "worlds"


# =============================================================================
# Mock Fixtures
# =============================================================================


@pytest.fixture
def recording_interface() -> RecordingInterface:
    """Interface that always picks the first option."""
    return RecordingInterface()
