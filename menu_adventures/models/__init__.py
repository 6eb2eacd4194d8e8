"""Pydantic models for Menu Adventures"""

from menu_adventures.models.answers import Answer, Question, Sentence
from menu_adventures.models.grammar import (
    BE,
    CARRYING,
    CONTAINING,
    DIRECTIONS,
    DO,
    DOWN,
    EAST,
    INCORPORATING,
    INSIDE,
    NORTH,
    NORTH_EAST,
    NORTH_WEST,
    OUTSIDE,
    RELATIONSHIPS,
    REPLY,
    SOUTH,
    SOUTH_EAST,
    SOUTH_WEST,
    SUPPORTING,
    UP,
    WEARING,
    WEST,
    Direction,
    Relationship,
    Verb,
    opposite,
)
from menu_adventures.models.nouns import (
    DialogLine,
    Door,
    GrammaticalPerson,
    Location,
    Lockable,
    Noun,
    Openable,
    Portable,
    Room,
    Switchable,
)

__all__ = [
    # Noun models
    "Noun",
    "Location",
    "Room",
    "Door",
    "GrammaticalPerson",
    "DialogLine",
    # Capability components
    "Openable",
    "Lockable",
    "Switchable",
    "Portable",
    # Grammar models
    "Verb",
    "BE",
    "DO",
    "REPLY",
    "Relationship",
    "CARRYING",
    "CONTAINING",
    "INCORPORATING",
    "SUPPORTING",
    "WEARING",
    "RELATIONSHIPS",
    "Direction",
    "opposite",
    "NORTH",
    "SOUTH",
    "EAST",
    "WEST",
    "NORTH_EAST",
    "SOUTH_WEST",
    "NORTH_WEST",
    "SOUTH_EAST",
    "UP",
    "DOWN",
    "INSIDE",
    "OUTSIDE",
    "DIRECTIONS",
    # Answer models
    "Answer",
    "Question",
    "Sentence",
]
