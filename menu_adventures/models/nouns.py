"""
Noun models - Pydantic models for everything the player can refer to.

A noun only carries the data the engine needs to talk about it: a name,
its grammatical person and number, and its indefinite article (empty
for proper nouns). Everything an action may need to read or flip lives
in an optional capability component, so a noun supports "open" exactly
when it has an `openable` component.

Capabilities:
    - Openable: closed state, required by Open/Close
    - Lockable: key and locked state, required by Lock/Unlock
    - Switchable: on state, required by TurnOn/TurnOff
    - Portable: handled flag, required by Take

Example:
    >>> box = Noun(name="yellow box", openable=Openable(closed=True))
    >>> room = Room(name="kitchen")
"""

from __future__ import annotations

from enum import Enum
from itertools import count
from typing import TYPE_CHECKING, Callable

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from menu_adventures.engine.universe import Universe


_noun_ids = count(1)


class GrammaticalPerson(str, Enum):
    """Grammatical person of a noun, used for pronouns and verb agreement."""

    FIRST = "first"
    SECOND = "second"
    THIRD = "third"


class Openable(BaseModel):
    """Something that can be opened and closed"""

    closed: bool = True


class Lockable(BaseModel):
    """Something that can be locked with a specific key"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    key: "Noun"
    locked: bool = True


class Switchable(BaseModel):
    """Something that can be turned on and off"""

    on: bool = False


class Portable(BaseModel):
    """Something that can be picked up"""

    handled: bool = False


class Noun(BaseModel):
    """Any addressable game entity.

    Nouns are compared by identity in the engine; `noun_id` is the stable
    handle the world graph keys its adjacency maps by.

    Attributes:
        name: Display name without article
        description: Text shown by "Look at"; empty means nothing to see
        grammatical_person: Person used for pronouns and verb agreement
        indefinite_article: "a", "an", "some"; empty for proper nouns
        plural: Whether the noun is plural
        transparent: Whether the contents are visible when closed
        vehicle: Whether a player inside moves it around
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    noun_id: int = Field(default_factory=lambda: next(_noun_ids), repr=False)
    name: str
    description: str = ""
    grammatical_person: GrammaticalPerson = GrammaticalPerson.THIRD
    indefinite_article: str = "a"
    plural: bool = False
    transparent: bool = False
    vehicle: bool = False

    # Capability components
    openable: Openable | None = None
    lockable: Lockable | None = None
    switchable: Switchable | None = None
    portable: Portable | None = None

    def get_description(self, universe: "Universe") -> str:
        """Description of the noun, possibly depending on the world state."""
        return self.description

    def is_providing_light(self) -> bool:
        """Whether the noun lights up its surroundings by itself."""
        return False

    def is_closable_and_closed(self) -> bool:
        return self.openable is not None and self.openable.closed

    def is_lockable_and_locked(self) -> bool:
        return self.lockable is not None and self.lockable.locked


class Location(Noun):
    """A root of the containment graph and a vertex of the topology graph."""


class Room(Location):
    """A room, lit unless told otherwise.

    Attributes:
        visited: Set the first time the player occupies the room
        providing_light: Whether the room is naturally lit
    """

    visited: bool = False
    providing_light: bool = True

    def is_providing_light(self) -> bool:
        return self.providing_light


class Door(Location):
    """A door sits inline on an exit, between two other locations.

    Doors are closed by default; pass a `lockable` component to give
    them a lock.
    """

    openable: Openable | None = Field(default_factory=Openable)


class DialogLine(BaseModel):
    """Reply to a line of dialog, plus an optional trigger.

    The trigger is called with the universe and the addressee after the
    reply is printed.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    reply: str
    trigger: Callable[..., None] | None = None


Lockable.model_rebuild()
