"""
Sample content - ready-made nouns for building worlds.

Each noun type comes with the possibilities it declares: a Key can be
taken and used to unlock things, a Box can be opened and filled, a Car
can be driven, and so on. Hosts can subclass these, or declare new
possibilities for their own Noun subclasses the same way.

Example:
    >>> you = Person(name="matilda", grammatical_person=GrammaticalPerson.SECOND)
    >>> box = Box(name="yellow box")
    >>> universe.set_relationship(box, Key(name="yellow key"), CONTAINING)
"""

from __future__ import annotations

from pydantic import Field

from menu_adventures.engine.actions import (
    Attach,
    Dress,
    Eat,
    Give,
    GoInto,
    GoOnto,
    Push,
    PutInto,
    PutOnto,
    Say,
    Unlock,
    Wear,
)
from menu_adventures.engine.domains import Immediate, Inventory, Reachable, Visible
from menu_adventures.engine.possibility import declare
from menu_adventures.models.nouns import (
    DialogLine,
    Noun,
    Openable,
    Portable,
    Switchable,
)


class Person(Noun):
    """Someone who can be handed things and dressed."""

    indefinite_article: str = ""


class NPC(Person):
    """Someone the player can talk to.

    Attributes:
        dialog: What the player may say, mapped to the reply
    """

    dialog: dict[str, DialogLine] = Field(default_factory=dict)


class Key(Noun):
    portable: Portable | None = Field(default_factory=Portable)


class Lamp(Noun):
    """A portable light, lit while switched on."""

    portable: Portable | None = Field(default_factory=Portable)
    switchable: Switchable | None = Field(default_factory=Switchable)

    def is_providing_light(self) -> bool:
        return self.switchable is not None and self.switchable.on


class Box(Noun):
    """A portable container, closed to begin with."""

    openable: Openable | None = Field(default_factory=Openable)
    portable: Portable | None = Field(default_factory=Portable)


class Car(Noun):
    """A see-through vehicle: whoever sits inside drives it around."""

    transparent: bool = True
    vehicle: bool = True


class Table(Noun):
    pass


class Clothes(Noun):
    portable: Portable | None = Field(default_factory=Portable)


class Food(Noun):
    portable: Portable | None = Field(default_factory=Portable)


class Anvil(Noun):
    """Too heavy to carry, but it can be pushed to the next room."""


class StickyThing(Noun):
    portable: Portable | None = Field(default_factory=Portable)


declare(Unlock, Inventory, Key)
declare(PutInto, Reachable, Box)
declare(GoInto, Immediate, Car)
declare(PutOnto, Reachable, Table)
declare(GoOnto, Immediate, Table)
declare(Wear, Inventory, Clothes)
declare(Dress, Inventory, Clothes)
declare(Dress, Reachable, Person)
declare(Give, Reachable, Person)
declare(Eat, Reachable, Food)
declare(Say, Visible, NPC)
declare(Push, Immediate, Anvil)
declare(Attach, Inventory, StickyThing)

NOUN_KINDS: dict[str, type[Noun]] = {
    "person": Person,
    "npc": NPC,
    "key": Key,
    "lamp": Lamp,
    "box": Box,
    "car": Car,
    "table": Table,
    "clothes": Clothes,
    "food": Food,
    "anvil": Anvil,
    "sticky_thing": StickyThing,
}
