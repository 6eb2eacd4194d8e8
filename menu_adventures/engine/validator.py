"""
World Validator - Validates consistency of YAML world definitions

Checks:
- Noun kinds: every noun uses a known kind
- Noun references: relationships, exits, keys and the player name declared nouns
- Labels: relationships and directions exist
- Graph shape: only locations are linked by exits, locations are never
  placed inside anything, doors sit on exits, no exit is declared twice
- Player placement: the player has a parent
- Orphan detection: nouns never placed anywhere (warnings)
- Dialog on kinds that cannot talk (warnings)
"""

from dataclasses import dataclass, field

from menu_adventures.models.grammar import DIRECTIONS, RELATIONSHIPS, opposite
from menu_adventures.models.nouns import Noun
from menu_adventures.models.world import WorldSpec

LOCATION_KINDS = {"room", "door"}


@dataclass
class ValidationResult:
    """Findings for one world file.

    Errors make the world unplayable; warnings point at content that
    loads but probably does not do what the author meant.
    """

    world_id: str
    noun_count: int = 0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, message: str):
        self.errors.append(message)

    def add_warning(self, message: str):
        self.warnings.append(message)

    def summary(self) -> str:
        """One message listing every error, for raising on load."""
        lines = [
            f"World '{self.world_id}' validation failed with {len(self.errors)} error(s) "
            f"in {self.noun_count} nouns:"
        ]
        lines.extend(f"  - {error}" for error in self.errors)
        return "\n".join(lines)


class WorldValidator:
    """Validates world definition consistency"""

    def __init__(self, world: WorldSpec, world_id: str, kinds: dict[str, type[Noun]]):
        self.world = world
        self.world_id = world_id
        self.kinds = kinds
        self.result = ValidationResult(world_id=world_id, noun_count=len(world.nouns))

    def validate(self) -> ValidationResult:
        """Run all validation checks"""
        self._validate_kinds()
        self._validate_dialog()
        self._validate_keys()
        self._validate_relationships()
        self._validate_exits()
        self._validate_player()
        self._detect_orphans()

        return self.result

    def _kind_of(self, noun_id: str) -> str | None:
        noun = self.world.nouns.get(noun_id)
        return noun.kind if noun else None

    def _check_noun(self, noun_id: str, where: str) -> bool:
        if noun_id not in self.world.nouns:
            self.result.add_error(f"{where} references unknown noun '{noun_id}'")
            return False
        return True

    def _validate_kinds(self):
        for noun_id, noun in self.world.nouns.items():
            if noun.kind not in self.kinds:
                self.result.add_error(f"noun:{noun_id} has unknown kind '{noun.kind}'")

    def _validate_dialog(self):
        for noun_id, noun in self.world.nouns.items():
            kind = self.kinds.get(noun.kind)
            if noun.dialog and kind is not None and "dialog" not in kind.model_fields:
                self.result.add_warning(
                    f"noun:{noun_id} has dialog, but kind '{noun.kind}' cannot be talked to"
                )

    def _validate_keys(self):
        for noun_id, noun in self.world.nouns.items():
            if noun.key is not None:
                self._check_noun(noun.key, f"noun:{noun_id}/key")
            elif noun.locked:
                self.result.add_error(f"noun:{noun_id} is locked but has no key")

    def _validate_relationships(self):
        for index, spec in enumerate(self.world.relationships):
            where = f"relationships[{index}]"
            if spec.relationship not in RELATIONSHIPS:
                self.result.add_error(f"{where} has unknown relationship '{spec.relationship}'")
            self._check_noun(spec.parent, where)
            if self._check_noun(spec.child, where) and self._kind_of(spec.child) in LOCATION_KINDS:
                self.result.add_error(f"{where} places location '{spec.child}' inside '{spec.parent}'")

    def _validate_exits(self):
        taken: set[tuple[str, str]] = set()
        for index, spec in enumerate(self.world.exits):
            where = f"exits[{index}]"
            for noun_id in (spec.origin, spec.destination):
                if self._check_noun(noun_id, where) and self._kind_of(noun_id) not in LOCATION_KINDS:
                    self.result.add_error(f"{where} links '{noun_id}', which is not a location")
            if spec.door is not None and self._check_noun(spec.door, where):
                if self._kind_of(spec.door) != "door":
                    self.result.add_error(f"{where} uses '{spec.door}' as a door")

            direction = DIRECTIONS.get(spec.direction)
            if direction is None:
                self.result.add_error(f"{where} has unknown direction '{spec.direction}'")
                continue

            hops = [(spec.origin, direction.name)]
            if spec.door is not None:
                hops.append((spec.door, direction.name))
            if not spec.one_way:
                back = opposite(direction).name
                hops.append((spec.destination, back))
                if spec.door is not None:
                    hops.append((spec.door, back))
            for hop in hops:
                if hop in taken:
                    self.result.add_error(f"{where} adds a second exit {hop[1]} from '{hop[0]}'")
                taken.add(hop)

    def _validate_player(self):
        if not self._check_noun(self.world.player, "player"):
            return
        if not any(spec.child == self.world.player for spec in self.world.relationships):
            self.result.add_error(f"player '{self.world.player}' is not placed anywhere")

    def _detect_orphans(self):
        placed = {spec.child for spec in self.world.relationships}
        placed.update(spec.parent for spec in self.world.relationships)
        for spec in self.world.exits:
            placed.update({spec.origin, spec.destination})
            if spec.door is not None:
                placed.add(spec.door)
        keys = {noun.key for noun in self.world.nouns.values() if noun.key}
        for noun_id in self.world.nouns:
            if noun_id not in placed and noun_id not in keys:
                self.result.add_warning(f"noun:{noun_id} is never placed in the world")
