"""
World loader - Load and validate YAML world files, build universes
"""

import logging
from pathlib import Path

import yaml

from menu_adventures.config import get_worlds_dir
from menu_adventures.content import NOUN_KINDS
from menu_adventures.engine.protocols import Interface
from menu_adventures.engine.universe import Universe
from menu_adventures.models.grammar import DIRECTIONS, RELATIONSHIPS
from menu_adventures.models.nouns import (
    DialogLine,
    Door,
    Lockable,
    Noun,
    Openable,
    Room,
    Switchable,
)
from menu_adventures.models.world import NounSpec, WorldSpec

logger = logging.getLogger(__name__)

KINDS: dict[str, type[Noun]] = {
    "thing": Noun,
    "room": Room,
    "door": Door,
    **NOUN_KINDS,
}


class WorldLoader:
    """Loads game worlds from YAML files"""

    def __init__(self, worlds_dir: str | Path | None = None):
        """Initialize with worlds directory path"""
        self.worlds_dir = Path(worlds_dir) if worlds_dir is not None else get_worlds_dir()

    def list_worlds(self) -> list[dict]:
        """List available worlds with metadata"""
        worlds = []

        if not self.worlds_dir.exists():
            return worlds

        for world_path in sorted(self.worlds_dir.iterdir()):
            world_yaml = world_path / "world.yaml"
            if world_path.is_dir() and world_yaml.exists():
                with open(world_yaml) as f:
                    data = yaml.safe_load(f) or {}
                worlds.append({
                    "id": world_path.name,
                    "name": data.get("name", world_path.name),
                })

        return worlds

    def load_world(self, world_id: str, validate: bool = True) -> WorldSpec:
        """
        Load a world definition from its YAML file.

        Args:
            world_id: The world identifier (folder name in worlds/)
            validate: Whether to validate the world on load (default True)

        Returns:
            WorldSpec with all world content

        Raises:
            FileNotFoundError: If world doesn't exist
            ValueError: If validation fails and validate=True
        """
        world_yaml = self.worlds_dir / world_id / "world.yaml"

        if not world_yaml.exists():
            raise FileNotFoundError(f"World '{world_id}' not found at {world_yaml.parent}")

        with open(world_yaml) as f:
            world = WorldSpec.model_validate(yaml.safe_load(f))

        if validate:
            from menu_adventures.engine.validator import WorldValidator

            result = WorldValidator(world, world_id, KINDS).validate()
            for warning in result.warnings:
                logger.warning(f"World '{world_id}': {warning}")

            if not result.is_valid:
                raise ValueError(result.summary())

        logger.info(f"Loaded world '{world_id}' with {len(world.nouns)} nouns")
        return world

    def load_universe(self, world_id: str, interface: Interface) -> Universe:
        """Load, validate and build a world in one go."""
        return build_universe(self.load_world(world_id), interface)


def _make_noun(spec: NounSpec, kind: type[Noun]) -> Noun:
    fields = {
        "name": spec.name,
        "description": spec.description,
        "grammatical_person": spec.grammatical_person,
        "plural": spec.plural,
    }
    for optional in ("indefinite_article", "transparent", "vehicle"):
        value = getattr(spec, optional)
        if value is not None:
            fields[optional] = value
    if spec.providing_light is not None and issubclass(kind, Room):
        fields["providing_light"] = spec.providing_light
    if spec.closed is not None:
        fields["openable"] = Openable(closed=spec.closed)
    if spec.switched_on is not None:
        fields["switchable"] = Switchable(on=spec.switched_on)
    if spec.dialog:
        fields["dialog"] = {text: DialogLine(reply=reply) for text, reply in spec.dialog.items()}
    return kind(**fields)


def build_universe(world: WorldSpec, interface: Interface) -> Universe:
    """Create every noun and wire them up with relationships and exits.

    The world is expected to be valid; see WorldLoader.load_world.
    """
    nouns = {noun_id: _make_noun(spec, KINDS[spec.kind]) for noun_id, spec in world.nouns.items()}

    # Keys can only be attached once every noun exists
    for noun_id, spec in world.nouns.items():
        if spec.key is not None:
            noun = nouns[noun_id]
            noun.lockable = Lockable(
                key=nouns[spec.key],
                locked=spec.locked if spec.locked is not None else True,
            )
            if noun.openable is None:
                noun.openable = Openable()

    universe = Universe(nouns[world.player], interface=interface, introduction=world.introduction)
    for spec in world.relationships:
        universe.set_relationship(
            nouns[spec.parent], nouns[spec.child], RELATIONSHIPS[spec.relationship]
        )
    for spec in world.exits:
        universe.set_exit(
            nouns[spec.origin],
            nouns[spec.destination],
            DIRECTIONS[spec.direction],
            door=nouns[spec.door] if spec.door is not None else None,
            one_way=spec.one_way,
        )
    return universe
