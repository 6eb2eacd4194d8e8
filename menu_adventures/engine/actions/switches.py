"""
Switch actions - turning things with a `switchable` component on and off.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from menu_adventures.engine.actions.base import Action
from menu_adventures.engine.domains import REACHABLE, Reachable
from menu_adventures.engine.possibility import declare, ever_possible
from menu_adventures.models.nouns import Noun

if TYPE_CHECKING:
    from menu_adventures.engine.universe import Universe


class TurnOff(Action):
    name = "turn_off"
    argument_domains = (REACHABLE,)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        return ever_possible(self, domain, thing) and thing.switchable.on

    def print_sentence(self, thing_text: str) -> str:
        return f"Turn off {thing_text}"

    def __call__(self, universe: "Universe", thing: Noun) -> bool:
        thing.switchable.on = False
        universe.success()
        return False


class TurnOn(Action):
    name = "turn_on"
    argument_domains = (REACHABLE,)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        return ever_possible(self, domain, thing) and not thing.switchable.on

    def print_sentence(self, thing_text: str) -> str:
        return f"Turn on {thing_text}"

    def __call__(self, universe: "Universe", thing: Noun) -> bool:
        thing.switchable.on = True
        universe.success()
        return False


declare(TurnOn, Reachable, Noun, when=lambda thing: thing.switchable is not None)
declare(TurnOff, Reachable, Noun, when=lambda thing: ever_possible(TurnOn, REACHABLE, thing))
