"""
Turn loop.

One turn: describe the surroundings if they changed, offer every
possible sentence, let the player pick and disambiguate one, run it.
Turns repeat until an action returns True.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from menu_adventures.engine.lighting import is_player_lit
from menu_adventures.engine.narration import print_environment
from menu_adventures.engine.sentences import (
    enumerate_sentences,
    render_sentence,
    resolve_arguments,
)
from menu_adventures.models.nouns import Location, Room

if TYPE_CHECKING:
    from menu_adventures.engine.universe import Universe

logger = logging.getLogger(__name__)


def _mark_visited(universe: "Universe") -> None:
    """Mark the room around the player as visited."""
    place = universe.get_parent(universe.player)
    while not isinstance(place, Location):
        place = universe.get_parent(place)
    if isinstance(place, Room) and not place.visited:
        logger.info(f"First visit to {place.name}")
        place.visited = True


def turn(universe: "Universe", introduce: bool = False, look_around: bool = True) -> None:
    """Play turns until an action ends the game.

    Args:
        universe: The game session
        introduce: Show the introduction before the first turn
        look_around: Describe the surroundings before the first menu
    """
    interface = universe.interface
    turns = 0
    while True:
        turns += 1
        if turns == 1 and introduce:
            if universe.introduction:
                interface.write_wrapped(universe.introduction)
                interface.write_line()
        else:
            interface.write_line()

        lit = is_player_lit(universe)
        if look_around:
            if lit:
                print_environment(universe)
            else:
                interface.write_wrapped("In darkness")

        location = universe.get_parent(universe.player)
        _mark_visited(universe)

        sentences = enumerate_sentences(universe, lit=lit)
        choice = interface.present_menu("", [render_sentence(sentence) for sentence in sentences])
        universe.log_choice(choice)
        sentence = sentences[choice - 1]
        logger.info(f"Turn {turns}: {render_sentence(sentence)}")

        objects = resolve_arguments(universe, sentence, lit=lit)
        if sentence.action(universe, *objects):
            logger.info("Game over")
            return

        look_around = (
            universe.get_parent(universe.player) is not location
            or is_player_lit(universe) != lit
        )
