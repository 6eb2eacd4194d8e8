"""
Movement actions.

The mover is the player, or the vehicle the player sits in. Go resolves
a direction to its final destination (passing through an open door)
and then does GoInto; Push quietly moves the pushed thing first and
then goes the same way.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from menu_adventures.engine.actions.base import Action
from menu_adventures.engine.domains import EXIT_DIRECTIONS, IMMEDIATE, ExitDirections
from menu_adventures.engine.possibility import declare, ever_possible
from menu_adventures.models.grammar import CONTAINING, SUPPORTING, Direction
from menu_adventures.models.nouns import Location, Noun

if TYPE_CHECKING:
    from menu_adventures.engine.universe import Universe


def _exit_open(universe: "Universe", direction: Direction) -> bool:
    return not universe.first_destination(direction).is_closable_and_closed()


def _can_move_to(universe: "Universe", thing: Noun) -> bool:
    """Somewhere new next to the mover that is not shut."""
    return (
        not thing.is_closable_and_closed()
        and thing is not universe.mover()
        and thing is not universe.get_parent(universe.player)
    )


class Go(Action):
    """Go in a direction."""

    name = "go"
    argument_domains = (EXIT_DIRECTIONS,)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        return ever_possible(self, domain, thing) and _exit_open(universe, thing)

    def print_sentence(self, direction_text: str) -> str:
        return f"Go {direction_text}"

    def __call__(self, universe: "Universe", direction: Direction) -> bool:
        return GoInto()(universe, universe.final_destination(direction))


class GoInto(Action):
    """Get into something next to the mover, or into a new location."""

    name = "go_into"
    argument_domains = (IMMEDIATE,)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        return ever_possible(self, domain, thing) and _can_move_to(universe, thing)

    def print_sentence(self, place_text: str) -> str:
        return f"Go into {place_text}"

    def __call__(self, universe: "Universe", place: Noun) -> bool:
        universe.set_relationship(place, universe.mover(), CONTAINING)
        universe.success()
        return False


class GoOnto(Action):
    """Climb onto something next to the mover."""

    name = "go_onto"
    argument_domains = (IMMEDIATE,)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        return ever_possible(self, domain, thing) and _can_move_to(universe, thing)

    def print_sentence(self, place_text: str) -> str:
        return f"Go onto {place_text}"

    def __call__(self, universe: "Universe", place: Noun) -> bool:
        universe.set_relationship(place, universe.mover(), SUPPORTING)
        universe.success()
        return False


class Leave(Action):
    """Get out of (or off) whatever the player is in (or on)."""

    name = "leave"

    def is_possible(self, universe: "Universe") -> bool:
        return not isinstance(universe.get_parent(universe.player), Location)

    def print_sentence(self) -> str:
        return "Leave"

    def __call__(self, universe: "Universe") -> bool:
        parent = universe.get_parent(universe.player)
        grandparent, relationship = universe.get_parent_relationship(parent)
        universe.set_relationship(grandparent, universe.player, relationship)
        universe.success()
        return False


class Push(Action):
    """Push something next to the mover into the next location."""

    name = "push"
    argument_domains = (IMMEDIATE, EXIT_DIRECTIONS)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        if not ever_possible(self, domain, thing):
            return False
        if isinstance(domain, ExitDirections):
            return _exit_open(universe, thing)
        return thing is not universe.mover()

    def print_sentence(self, thing_text: str, direction_text: str) -> str:
        return f"Push {thing_text} {direction_text}"

    def __call__(self, universe: "Universe", thing: Noun, direction: Direction) -> bool:
        universe.set_relationship(universe.final_destination(direction), thing, CONTAINING)
        return Go()(universe, direction)


declare(Go, ExitDirections, Direction)
declare(Push, ExitDirections, Direction)
