"""
Outfit actions - dressing, wearing and taking clothes off.

Clothes declare themselves wearable (Wear and Dress from the
inventory); people declare themselves dressable from Reachable.
Anything worn can be taken off again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from menu_adventures.engine.actions.base import Action
from menu_adventures.engine.domains import INVENTORY, OUTFIT, REACHABLE, Outfit
from menu_adventures.engine.possibility import declare, ever_possible
from menu_adventures.models.grammar import CARRYING, WEARING
from menu_adventures.models.nouns import Noun

if TYPE_CHECKING:
    from menu_adventures.engine.universe import Universe


class Dress(Action):
    """Dress someone reachable in something from the inventory."""

    name = "dress"
    argument_domains = (REACHABLE, INVENTORY)

    def print_sentence(self, person_text: str, thing_text: str) -> str:
        return f"Dress {person_text} in {thing_text}"

    def __call__(self, universe: "Universe", person: Noun, thing: Noun) -> bool:
        universe.set_relationship(person, thing, WEARING)
        universe.success()
        return False


class TakeOff(Action):
    """Take off something the player wears and carry it instead."""

    name = "take_off"
    argument_domains = (OUTFIT,)

    def print_sentence(self, thing_text: str) -> str:
        return f"Take off {thing_text}"

    def __call__(self, universe: "Universe", thing: Noun) -> bool:
        universe.set_relationship(universe.player, thing, CARRYING)
        universe.success()
        return False


class Wear(Action):
    """Put on something from the inventory."""

    name = "wear"
    argument_domains = (INVENTORY,)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        if not ever_possible(self, domain, thing):
            return False
        _, relationship = universe.get_parent_relationship(thing)
        return relationship != WEARING

    def print_sentence(self, thing_text: str) -> str:
        return f"Wear {thing_text}"

    def __call__(self, universe: "Universe", thing: Noun) -> bool:
        return Dress()(universe, universe.player, thing)


declare(TakeOff, Outfit, Noun)
