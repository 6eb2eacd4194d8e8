"""
Grammar models - relationships, directions and verbs.

Relationships label the edges of the containment graph ("the box is
containing the key"), directions label the edges of the topology graph
("the hall is north of the kitchen"). Both are open sets: a game can
create new values at any time, the engine only relies on the fields
declared here.

Example:
    >>> BEHIND = Relationship(
    ...     name="hiding",
    ...     verb=Verb(base="hide"),
    ...     phrase="{thing} behind {parent}",
    ... )
    >>> NORTH_NORTH_EAST, SOUTH_SOUTH_WEST = Direction.pair(
    ...     "north-north-east", "south-south-west"
    ... )
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class Verb(BaseModel):
    """An English verb with its irregular third person singular form."""

    model_config = ConfigDict(frozen=True)

    base: str
    third_person_singular_present: str = ""

    @model_validator(mode="before")
    @classmethod
    def default_third_person(cls, data: Any) -> Any:
        """Regular verbs just add an "s"."""
        if isinstance(data, dict) and not data.get("third_person_singular_present"):
            data = {**data, "third_person_singular_present": f"{data['base']}s"}
        return data


BE = Verb(base="are", third_person_singular_present="is")
DO = Verb(base="do", third_person_singular_present="does")
REPLY = Verb(base="reply", third_person_singular_present="replies")


class Relationship(BaseModel):
    """Label of a containment edge from a parent to a child.

    Attributes:
        name: Identifier, also used in fallback phrases
        verb: Verb used when the parent is the subject ("X contains:")
        phrase: Template describing the child relative to its parent.
            Placeholders: {thing}, {parent}, {be} (the form of "to be"
            agreeing with the parent).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    verb: Verb
    phrase: str = "{thing} to the {name} of {parent}"

    def __str__(self) -> str:
        return self.name


CARRYING = Relationship(
    name="carrying",
    verb=Verb(base="carry", third_person_singular_present="carries"),
    phrase="{thing} that {parent} {be} carrying",
)
CONTAINING = Relationship(
    name="containing", verb=Verb(base="contain"), phrase="{thing} in {parent}"
)
INCORPORATING = Relationship(
    name="incorporating",
    verb=Verb(base="incorporate"),
    phrase="{thing} attached to {parent}",
)
SUPPORTING = Relationship(
    name="supporting", verb=Verb(base="support"), phrase="{thing} on {parent}"
)
WEARING = Relationship(
    name="wearing",
    verb=Verb(base="wear"),
    phrase="{thing} that {parent} {be} wearing",
)


class Direction(BaseModel):
    """Label of a topology edge between two locations."""

    model_config = ConfigDict(frozen=True)

    name: str

    def __str__(self) -> str:
        return self.name

    @classmethod
    def pair(cls, name: str, opposite_name: str) -> tuple["Direction", "Direction"]:
        """Create two directions and register them as each other's opposite."""
        direction = cls(name=name)
        opposite_direction = cls(name=opposite_name)
        _OPPOSITES[direction] = opposite_direction
        _OPPOSITES[opposite_direction] = direction
        return direction, opposite_direction


_OPPOSITES: dict[Direction, Direction] = {}


def opposite(direction: Direction) -> Direction:
    """The opposite of a direction.

    Raises:
        ValueError: If the direction was never registered with a partner
    """
    try:
        return _OPPOSITES[direction]
    except KeyError:
        raise ValueError(f"{direction} has no opposite") from None


NORTH, SOUTH = Direction.pair("north", "south")
EAST, WEST = Direction.pair("east", "west")
NORTH_EAST, SOUTH_WEST = Direction.pair("north-east", "south-west")
NORTH_WEST, SOUTH_EAST = Direction.pair("north-west", "south-east")
UP, DOWN = Direction.pair("up", "down")
INSIDE, OUTSIDE = Direction.pair("inside", "outside")

RELATIONSHIPS: dict[str, Relationship] = {
    relationship.name: relationship
    for relationship in (CARRYING, CONTAINING, INCORPORATING, SUPPORTING, WEARING)
}

DIRECTIONS: dict[str, Direction] = {
    direction.name: direction
    for direction in (
        NORTH,
        SOUTH,
        EAST,
        WEST,
        NORTH_EAST,
        SOUTH_WEST,
        NORTH_WEST,
        SOUTH_EAST,
        UP,
        DOWN,
        INSIDE,
        OUTSIDE,
    )
}
