"""
Handling actions - moving things around the containment forest.

Everything here ends in a single `set_relationship` call followed by
"Ok". Take is Give-to-yourself plus marking the thing as handled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from menu_adventures.engine.actions.base import Action
from menu_adventures.engine.domains import INVENTORY, REACHABLE, Inventory, Reachable
from menu_adventures.engine.possibility import declare, ever_possible
from menu_adventures.models.grammar import CARRYING, CONTAINING, INCORPORATING, SUPPORTING
from menu_adventures.models.nouns import Location, Noun

if TYPE_CHECKING:
    from menu_adventures.engine.universe import Universe
    from menu_adventures.models.answers import Sentence


def _first_argument(sentence: "Sentence") -> Any:
    return sentence.arguments[0].object if sentence.arguments else None


def _inside_first_argument(universe: "Universe", sentence: "Sentence", thing: Noun) -> bool:
    """Whether `thing` is the chosen first argument or somewhere inside it."""
    first = _first_argument(sentence)
    return isinstance(first, Noun) and universe.is_within(thing, first)


class Attach(Action):
    """Attach something from the inventory to something reachable."""

    name = "attach"
    argument_domains = (INVENTORY, REACHABLE)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        if not ever_possible(self, domain, thing):
            return False
        if isinstance(domain, Reachable):
            return not _inside_first_argument(universe, sentence, thing)
        return True

    def print_sentence(self, thing_text: str, parent_text: str) -> str:
        return f"Attach {thing_text} to {parent_text}"

    def __call__(self, universe: "Universe", thing: Noun, parent: Noun) -> bool:
        universe.set_relationship(parent, thing, INCORPORATING)
        universe.success()
        return False


class Drop(Action):
    """Drop something where the player is standing (or sitting)."""

    name = "drop"
    argument_domains = (INVENTORY,)

    def print_sentence(self, thing_text: str) -> str:
        return f"Drop {thing_text}"

    def __call__(self, universe: "Universe", thing: Noun) -> bool:
        parent, relationship = universe.get_parent_relationship(universe.player)
        universe.set_relationship(parent, thing, relationship)
        universe.success()
        return False


class Give(Action):
    """Give something from the inventory to someone reachable."""

    name = "give"
    argument_domains = (INVENTORY, REACHABLE)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        if not ever_possible(self, domain, thing):
            return False
        if isinstance(domain, Reachable):
            return thing is not universe.player and not _inside_first_argument(
                universe, sentence, thing
            )
        return True

    def print_sentence(self, thing_text: str, parent_text: str) -> str:
        return f"Give {thing_text} to {parent_text}"

    def __call__(self, universe: "Universe", thing: Noun, parent: Noun) -> bool:
        universe.set_relationship(parent, thing, CARRYING)
        universe.success()
        return False


class PutInto(Action):
    """Put something from the inventory into an open container."""

    name = "put_into"
    argument_domains = (INVENTORY, REACHABLE)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        if not ever_possible(self, domain, thing):
            return False
        if isinstance(domain, Reachable):
            # nothing goes into itself or into something it holds
            return not thing.is_closable_and_closed() and not _inside_first_argument(
                universe, sentence, thing
            )
        return True

    def print_sentence(self, thing_text: str, parent_text: str) -> str:
        return f"Put {thing_text} into {parent_text}"

    def __call__(self, universe: "Universe", thing: Noun, parent: Noun) -> bool:
        universe.set_relationship(parent, thing, CONTAINING)
        universe.success()
        return False


class PutOnto(Action):
    """Put something from the inventory onto a surface."""

    name = "put_onto"
    argument_domains = (INVENTORY, REACHABLE)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        if not ever_possible(self, domain, thing):
            return False
        if isinstance(domain, Reachable):
            return not _inside_first_argument(universe, sentence, thing)
        return True

    def print_sentence(self, thing_text: str, parent_text: str) -> str:
        return f"Put {thing_text} onto {parent_text}"

    def __call__(self, universe: "Universe", thing: Noun, parent: Noun) -> bool:
        universe.set_relationship(parent, thing, SUPPORTING)
        universe.success()
        return False


class Take(Action):
    """Pick something up, unless the player already carries it."""

    name = "take"
    argument_domains = (REACHABLE,)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        if isinstance(thing, Location) or not ever_possible(self, domain, thing):
            return False
        parent, relationship = universe.get_parent_relationship(thing)
        return not (parent is universe.player and relationship == CARRYING)

    def print_sentence(self, thing_text: str) -> str:
        return f"Take {thing_text}"

    def __call__(self, universe: "Universe", thing: Noun) -> bool:
        Give()(universe, thing, universe.player)
        if thing.portable is not None:
            thing.portable.handled = True
        return False


def _is_portable(thing: Noun) -> bool:
    return thing.portable is not None


# Anything carried can be put down somewhere or handed over
for _action in (Drop, Give, PutInto, PutOnto):
    declare(_action, Inventory, Noun)
declare(Attach, Reachable, Noun)
declare(Take, Reachable, Noun, when=_is_portable)
