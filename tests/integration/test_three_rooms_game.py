"""Integration tests playing the three-room world end to end.

Tests cover:
- Lighting the dark room and opening the box
- Nested disambiguation of the keys in the box
- The wrong key, then the right key, then the door
- Driving the car
- The YAML world plays exactly like the Python one
"""

import click
import pytest

from menu_adventures.models.grammar import CARRYING, CONTAINING
from menu_adventures.testing import replay
from menu_adventures.world import WorldLoader
from tests.fixtures.three_rooms import build_three_rooms


FETCH_KEYS = [
    "Take something",
    "Take the lamp",
    "Go north",
    "Turn on the lamp",
    "Open the yellow box",
    "Take something",
    "Take something in the yellow box",
    "Take the yellow key in the yellow box",
    "Take something",
    "Take the red key in the yellow box",
    "Go south",
]


@pytest.mark.integration
class TestThreeRoomsGame:
    """Scripted games in the three-room world."""

    def test_open_the_box(self, play_three_rooms) -> None:
        """Opening the box lists both keys."""
        world = play_three_rooms(FETCH_KEYS[:5] + ["Quit"])
        transcript = world.interface.transcript

        assert (
            "Ok\n"
            "\n"
            "The yellow box:\n"
            "  contains:\n"
            "    a yellow key\n"
            "    a red key\n"
        ) in transcript
        assert world.yellow_box.openable.closed is False

    def test_nested_take_menus(self, play_three_rooms) -> None:
        """Keys in the box are picked through a second menu."""
        world = play_three_rooms(FETCH_KEYS[:8] + ["Quit"])
        transcript = world.interface.transcript

        assert (
            "Take what?\n"
            "  1. Take the yellow box\n"
            "  2. Take something in the yellow box\n"
            "> 2\n"
            "\n"
            "Take what in the yellow box?\n"
            "  1. Take the yellow key in the yellow box\n"
            "  2. Take the red key in the yellow box\n"
            "> 1\n"
            "Ok\n"
        ) in transcript
        assert world.universe.get_parent_relationship(world.yellow_key) == (world.you, CARRYING)
        assert world.yellow_key.portable.handled is True

    def test_wrong_key_then_right_key(self, play_three_rooms) -> None:
        """The red key does not fit; the yellow key opens the way west."""
        world = play_three_rooms(
            FETCH_KEYS
            + [
                "Unlock the yellow door with something",
                "Unlock the yellow door with the red key",
                "Unlock the yellow door with something",
                "Unlock the yellow door with the yellow key",
                "Open the yellow door",
                "Go some way",
                "Go west",
                "Quit",
            ]
        )
        transcript = world.interface.transcript

        assert (
            "Unlock the yellow door with what?\n"
            "  1. Unlock the yellow door with the yellow key\n"
            "  2. Unlock the yellow door with the red key\n"
            "> 2\n" + click.style("It doesn't fit!", fg="red") + "\n"
        ) in transcript
        assert "Go which way?\n  1. Go north\n  2. Go west\n> 2\nOk\n" in transcript
        assert "C:\n  contains:\n    you\n  east:\n    a yellow door\n" in transcript
        assert world.universe.get_parent(world.you) is world.room_c
        assert world.room_c.visited is True
        assert world.yellow_door.lockable.locked is False

    def test_door_hidden_until_open(self, play_three_rooms) -> None:
        """West is not offered while the door is closed."""
        world = play_three_rooms(["Quit"])

        assert world.interface.menus[0][1].count("Go north") == 1
        assert not any("west" in option for option in world.interface.menus[0][1])

    def test_back_in_a_after_the_trip(self, play_three_rooms) -> None:
        """Coming back lists the player after the things left behind."""
        world = play_three_rooms(FETCH_KEYS + ["Quit"])

        assert (
            "A:\n"
            "  contains:\n"
            "    a car\n"
            "    a blue table\n"
            "    a hat\n"
            "    an apple\n"
            "    you\n"
        ) in world.interface.transcript

    def test_driving_the_car(self, play_three_rooms) -> None:
        """The car takes the player north and back out again."""
        world = play_three_rooms(["Go into the car", "Go north", "Leave", "Quit"])

        assert world.universe.get_parent_relationship(world.car) == (world.room_b, CONTAINING)
        assert world.universe.get_parent_relationship(world.you) == (world.room_b, CONTAINING)
        assert "Leave" in world.interface.menus[2][1]

    def test_eat_the_apple(self, play_three_rooms) -> None:
        """Eaten food is gone from the next listing and the menu."""
        world = play_three_rooms(["Eat the apple", "Quit"])

        assert "Eat the apple" not in world.interface.menus[1][1]


@pytest.mark.integration
class TestWorldFile:
    """The demo world file describes the same world."""

    @pytest.mark.parametrize(
        "choices",
        [
            ["Quit"],
            FETCH_KEYS + ["Quit"],
            ["Go into the car", "Go north", "Leave", "Quit"],
        ],
    )
    def test_same_transcript(self, worlds_dir, choices) -> None:
        """Python and YAML builds of the world play identically."""
        loader = WorldLoader(worlds_dir)

        from_file = replay(lambda interface: loader.load_universe("demo", interface), choices)
        from_code = replay(lambda interface: _python_universe(interface), choices)

        assert from_file == from_code


def _python_universe(interface):
    world = build_three_rooms()
    world.universe.interface = interface
    return world.universe
