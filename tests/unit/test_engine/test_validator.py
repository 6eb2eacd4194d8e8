"""Unit tests for WorldValidator.

Tests cover:
- The bundled worlds validate cleanly
- Unknown kinds, nouns, relationships and directions
- Locations placed inside things, non-locations linked by exits
- Locks without keys
- Duplicate exits, including the implied way back
- Unplaced players, orphans and dialog on kinds that cannot talk
- The error summary raised on load
"""

import pytest

from menu_adventures.engine.validator import ValidationResult, WorldValidator
from menu_adventures.models.world import WorldSpec
from menu_adventures.world import KINDS, WorldLoader


def validate(data: dict) -> ValidationResult:
    world = WorldSpec.model_validate(data)
    return WorldValidator(world, "test-world", KINDS).validate()


@pytest.fixture
def base_world() -> dict:
    """A valid two-room world to break in each test."""
    return {
        "player": "you",
        "nouns": {
            "you": {"kind": "person", "name": "me", "grammatical_person": "second"},
            "hall": {"kind": "room", "name": "hall"},
            "yard": {"kind": "room", "name": "yard"},
            "gate": {"kind": "door", "name": "gate", "key": "key"},
            "key": {"kind": "key", "name": "key"},
        },
        "relationships": [
            {"parent": "hall", "child": "you"},
            {"parent": "hall", "child": "key"},
        ],
        "exits": [{"from": "hall", "to": "yard", "direction": "north", "door": "gate"}],
    }


class TestWorldValidator:
    """Tests for WorldValidator."""

    def test_valid_world(self, base_world) -> None:
        """The base world has no errors or warnings."""
        result = validate(base_world)

        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    @pytest.mark.parametrize("world_id", ["demo", "parlor"])
    def test_bundled_worlds_are_valid(self, worlds_dir, world_id) -> None:
        """Every shipped world passes validation."""
        world = WorldLoader(worlds_dir).load_world(world_id, validate=False)

        result = WorldValidator(world, world_id, KINDS).validate()

        assert result.errors == []

    def test_unknown_kind(self, base_world) -> None:
        """Nouns must use a registered kind."""
        base_world["nouns"]["key"]["kind"] = "spoon"

        result = validate(base_world)

        assert not result.is_valid
        assert any("unknown kind 'spoon'" in error for error in result.errors)

    def test_unknown_noun_in_relationship(self, base_world) -> None:
        """Relationships must name declared nouns."""
        base_world["relationships"].append({"parent": "hall", "child": "ghost"})

        result = validate(base_world)

        assert any("unknown noun 'ghost'" in error for error in result.errors)

    def test_unknown_relationship(self, base_world) -> None:
        """Relationship labels must exist."""
        base_world["relationships"][1]["relationship"] = "juggling"

        result = validate(base_world)

        assert any("unknown relationship 'juggling'" in error for error in result.errors)

    def test_location_as_child(self, base_world) -> None:
        """Locations cannot be put inside anything."""
        base_world["relationships"].append({"parent": "hall", "child": "yard"})

        result = validate(base_world)

        assert any("places location 'yard'" in error for error in result.errors)

    def test_exit_between_non_locations(self, base_world) -> None:
        """Exits link locations only."""
        base_world["exits"].append({"from": "hall", "to": "key", "direction": "east"})

        result = validate(base_world)

        assert any("'key', which is not a location" in error for error in result.errors)

    def test_door_must_be_door(self, base_world) -> None:
        """Only doors sit on exits."""
        base_world["exits"][0]["door"] = "yard"

        result = validate(base_world)

        assert any("uses 'yard' as a door" in error for error in result.errors)

    def test_unknown_direction(self, base_world) -> None:
        """Directions must exist."""
        base_world["exits"][0]["direction"] = "sideways"

        result = validate(base_world)

        assert any("unknown direction 'sideways'" in error for error in result.errors)

    def test_duplicate_exit(self, base_world) -> None:
        """Two exits the same way from one location are rejected."""
        base_world["nouns"]["garden"] = {"kind": "room", "name": "garden"}
        base_world["exits"].append({"from": "hall", "to": "garden", "direction": "north"})

        result = validate(base_world)

        assert any("second exit north from 'hall'" in error for error in result.errors)

    def test_duplicate_way_back(self, base_world) -> None:
        """The implied way back counts as an exit too."""
        base_world["nouns"]["garden"] = {"kind": "room", "name": "garden"}
        base_world["exits"].append({"from": "garden", "to": "yard", "direction": "north"})

        result = validate(base_world)

        assert any("second exit south from 'yard'" in error for error in result.errors)

    def test_one_way_has_no_way_back(self, base_world) -> None:
        """A one-way exit leaves the way back free."""
        base_world["nouns"]["garden"] = {"kind": "room", "name": "garden"}
        base_world["exits"].append(
            {"from": "yard", "to": "garden", "direction": "north", "one_way": True}
        )
        base_world["nouns"]["shed"] = {"kind": "room", "name": "shed"}
        base_world["exits"].append({"from": "shed", "to": "garden", "direction": "north"})

        result = validate(base_world)

        assert result.is_valid

    def test_locked_without_key(self, base_world) -> None:
        """A lock needs a key."""
        base_world["nouns"]["chest"] = {"kind": "box", "name": "chest", "locked": True}
        base_world["relationships"].append({"parent": "hall", "child": "chest"})

        result = validate(base_world)

        assert any("noun:chest is locked but has no key" in error for error in result.errors)

    def test_unknown_key(self, base_world) -> None:
        """Keys must be declared nouns."""
        base_world["nouns"]["gate"]["key"] = "skeleton_key"

        result = validate(base_world)

        assert any("noun:gate/key references unknown noun" in error for error in result.errors)

    def test_player_not_placed(self, base_world) -> None:
        """The player must start somewhere."""
        base_world["relationships"] = [{"parent": "hall", "child": "key"}]

        result = validate(base_world)

        assert any("player 'you' is not placed" in error for error in result.errors)

    def test_orphan_warning(self, base_world) -> None:
        """Unplaced nouns only warn."""
        base_world["nouns"]["sock"] = {"kind": "clothes", "name": "sock"}

        result = validate(base_world)

        assert result.is_valid
        assert result.warnings == ["noun:sock is never placed in the world"]

    def test_dialog_on_silent_kind(self, base_world) -> None:
        """Dialog on a kind that cannot talk is dropped, so it warns."""
        base_world["nouns"]["statue"] = {
            "kind": "thing",
            "name": "statue",
            "dialog": {"Hello": "..."},
        }
        base_world["relationships"].append({"parent": "hall", "child": "statue"})

        result = validate(base_world)

        assert result.is_valid
        assert result.warnings == [
            "noun:statue has dialog, but kind 'thing' cannot be talked to"
        ]

    def test_dialog_on_npc(self, base_world) -> None:
        """NPCs take dialog without complaint."""
        base_world["nouns"]["guard"] = {
            "kind": "npc",
            "name": "guard",
            "dialog": {"Hello": "Move along."},
        }
        base_world["relationships"].append({"parent": "hall", "child": "guard"})

        assert validate(base_world).warnings == []

    def test_summary(self, base_world) -> None:
        """The summary names the world, the noun count and every error."""
        base_world["nouns"]["key"]["kind"] = "spoon"
        base_world["relationships"] = [{"parent": "hall", "child": "key"}]

        result = validate(base_world)

        assert result.noun_count == 5
        assert result.summary() == (
            "World 'test-world' validation failed with 2 error(s) in 5 nouns:\n"
            "  - noun:key has unknown kind 'spoon'\n"
            "  - player 'you' is not placed anywhere"
        )
