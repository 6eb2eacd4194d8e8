"""
Lighting - whether the player can see anything.

A noun is lit when it provides light itself or when anything the
domain can see inside it is lit. The player is lit when the visible
origin is, or when something sharing the player's place is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from menu_adventures.engine.domains import VISIBLE, Domain
from menu_adventures.models.nouns import Noun

if TYPE_CHECKING:
    from menu_adventures.engine.universe import Universe


def is_lit(universe: "Universe", thing: Noun, domain: Domain = VISIBLE) -> bool:
    """Whether `thing` or anything visible inside it provides light."""
    if thing.is_providing_light():
        return True
    for child, relationship in universe.get_children(thing):
        if not domain.blocking(thing, relationship, child) and is_lit(universe, child, domain):
            return True
    return False


def is_player_lit(universe: "Universe", domain: Domain = VISIBLE) -> bool:
    """Whether the player's surroundings are lit."""
    origin, origin_relationship = domain.origin(universe)
    if origin.is_providing_light():
        return True
    for thing, relationship in universe.get_children(origin):
        if relationship == origin_relationship and is_lit(universe, thing, domain):
            return True
    return False
