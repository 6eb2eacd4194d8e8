"""
World file models - the YAML schema for authoring worlds.

A world file names every noun once, under an identifier, and then
places nouns with relationships and links locations with exits:

    name: Demo
    introduction: Welcome!
    player: you
    nouns:
      you: {kind: person, name: matilda, grammatical_person: second}
      hall: {kind: room, name: hall}
      box: {kind: box, name: yellow box}
    relationships:
      - {parent: hall, child: you}
      - {parent: hall, child: box}
    exits:
      - {from: hall, to: yard, direction: north, door: front_door}
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from menu_adventures.models.nouns import GrammaticalPerson


class NounSpec(BaseModel):
    """One noun in a world file.

    Optional fields left unset keep the defaults of the noun kind.
    Unknown fields are rejected.

    Attributes:
        kind: Noun kind, e.g. "room", "door", "key", "thing"
        key: Identifier of the key; makes the noun lockable
        closed: Initial closed state; makes the noun openable
        locked: Initial locked state (needs `key`)
        switched_on: Initial switch state, written `on` in world files;
            makes the noun switchable
        dialog: Lines the player may say, mapped to the reply
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    kind: str = "thing"
    name: str
    description: str = ""
    grammatical_person: GrammaticalPerson = GrammaticalPerson.THIRD
    indefinite_article: str | None = None
    plural: bool = False
    transparent: bool | None = None
    vehicle: bool | None = None
    providing_light: bool | None = None
    key: str | None = None
    closed: bool | None = None
    locked: bool | None = None
    switched_on: bool | None = Field(default=None, alias="on")
    dialog: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def restore_on_key(cls, data: Any) -> Any:
        """YAML 1.1 reads a bare `on:` key as True; put the name back."""
        if isinstance(data, dict) and True in data:
            data = dict(data)
            data["on"] = data.pop(True)
        return data


class RelationshipSpec(BaseModel):
    """Places `child` under `parent`."""

    parent: str
    child: str
    relationship: str = "containing"


class ExitSpec(BaseModel):
    """Links two locations, optionally through a door."""

    model_config = ConfigDict(populate_by_name=True)

    origin: str = Field(alias="from")
    destination: str = Field(alias="to")
    direction: str
    door: str | None = None
    one_way: bool = False


class WorldSpec(BaseModel):
    """A complete world file."""

    name: str = "Unnamed World"
    introduction: str = ""
    player: str
    nouns: dict[str, NounSpec] = Field(default_factory=dict)
    relationships: list[RelationshipSpec] = Field(default_factory=list)
    exits: list[ExitSpec] = Field(default_factory=list)
