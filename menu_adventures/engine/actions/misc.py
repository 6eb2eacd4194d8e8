"""
Miscellaneous actions: eating and quitting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from menu_adventures.engine.actions.base import Action
from menu_adventures.engine.domains import REACHABLE
from menu_adventures.models.nouns import Noun

if TYPE_CHECKING:
    from menu_adventures.engine.universe import Universe


class Eat(Action):
    """Eat something; it leaves the world for good."""

    name = "eat"
    argument_domains = (REACHABLE,)

    def print_sentence(self, thing_text: str) -> str:
        return f"Eat {thing_text}"

    def __call__(self, universe: "Universe", thing: Noun) -> bool:
        universe.graph.detach(universe.get_parent(thing), thing)
        universe.success()
        return False


class Quit(Action):
    name = "quit"

    def print_sentence(self) -> str:
        return "Quit"

    def __call__(self, universe: "Universe") -> bool:
        return True
