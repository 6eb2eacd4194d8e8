"""
Looking actions - descriptions and the inventory listing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from menu_adventures.engine.actions.base import Action
from menu_adventures.engine.domains import VISIBLE, Visible
from menu_adventures.engine.narration import capitalize, print_relations, render_noun
from menu_adventures.engine.possibility import declare, ever_possible
from menu_adventures.models.nouns import Noun

if TYPE_CHECKING:
    from menu_adventures.engine.universe import Universe


class ListInventory(Action):
    """List everything the player carries, wears or has attached."""

    name = "list_inventory"

    def is_possible(self, universe: "Universe") -> bool:
        return universe.graph.has_children(universe.player)

    def print_sentence(self) -> str:
        return "List inventory"

    def __call__(self, universe: "Universe") -> bool:
        player = universe.player
        relations: dict = {}
        for thing, relationship in universe.get_children(player):
            relations.setdefault(relationship, []).append(thing)
        universe.interface.write_line()
        universe.interface.write_line(f"{capitalize(render_noun(player))}:")
        print_relations(universe, 0, VISIBLE, player, relations)
        return False


class LookAt(Action):
    """Read the description of something visible."""

    name = "look_at"
    argument_domains = (VISIBLE,)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        return ever_possible(self, domain, thing) and thing.get_description(universe) != ""

    def print_sentence(self, thing_text: str) -> str:
        return f"Look at {thing_text}"

    def __call__(self, universe: "Universe", thing: Noun) -> bool:
        universe.interface.write_wrapped(thing.get_description(universe))
        return False


declare(LookAt, Visible, Noun)
