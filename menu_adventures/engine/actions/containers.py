"""
Container actions - opening, closing, locking and unlocking.

Nouns take part through their capability components: anything with an
`openable` component can be opened and closed, anything with a
`lockable` component can be locked and unlocked with its key. Keys
declare themselves usable from the inventory.

Trying the wrong key is not an error; the player is told it does not
fit and the game goes on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from menu_adventures.engine.actions.base import Action
from menu_adventures.engine.domains import (
    INVENTORY,
    REACHABLE,
    VISIBLE,
    Inventory,
    Reachable,
)
from menu_adventures.engine.narration import (
    capitalize,
    print_relations,
    pronoun_for,
    render_noun,
    subject_to_verb,
)
from menu_adventures.engine.possibility import declare, ever_possible
from menu_adventures.models.grammar import BE, CONTAINING, DO
from menu_adventures.models.nouns import Location, Noun

if TYPE_CHECKING:
    from menu_adventures.engine.universe import Universe


def _does_not_fit(universe: "Universe", key: Noun) -> None:
    message = f"{capitalize(pronoun_for(key))} {subject_to_verb(key, DO)}n't fit!"
    universe.interface.write_wrapped(click.style(message, fg="red"))


class Close(Action):
    """Close something open."""

    name = "close"
    argument_domains = (REACHABLE,)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        return ever_possible(self, domain, thing) and not thing.openable.closed

    def print_sentence(self, thing_text: str) -> str:
        return f"Close {thing_text}"

    def __call__(self, universe: "Universe", thing: Noun) -> bool:
        thing.openable.closed = True
        universe.success()
        return False


class Lock(Action):
    """Lock something closed with a key from the inventory."""

    name = "lock"
    argument_domains = (REACHABLE, INVENTORY)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        if not ever_possible(self, domain, thing):
            return False
        if isinstance(domain, Reachable):
            return thing.is_closable_and_closed() and not thing.lockable.locked
        return True

    def print_sentence(self, thing_text: str, key_text: str) -> str:
        return f"Lock {thing_text} with {key_text}"

    def __call__(self, universe: "Universe", thing: Noun, key: Noun) -> bool:
        if thing.lockable.key is key:
            thing.lockable.locked = True
            universe.success()
        else:
            _does_not_fit(universe, key)
        return False


class Open(Action):
    """Open something closed and unlocked, then say what is inside."""

    name = "open"
    argument_domains = (REACHABLE,)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        return (
            ever_possible(self, domain, thing)
            and thing.is_closable_and_closed()
            and not thing.is_lockable_and_locked()
        )

    def print_sentence(self, thing_text: str) -> str:
        return f"Open {thing_text}"

    def __call__(self, universe: "Universe", thing: Noun) -> bool:
        thing.openable.closed = False
        universe.success()
        if isinstance(thing, Location):
            return False

        contents = [
            child
            for child, relationship in universe.get_children(thing)
            if relationship == CONTAINING
        ]
        interface = universe.interface
        interface.write_line()
        if contents:
            interface.write_line(f"{capitalize(render_noun(thing))}:")
            print_relations(universe, 0, VISIBLE, thing, {CONTAINING: contents})
        else:
            interface.write_line(f"{capitalize(render_noun(thing))} {subject_to_verb(thing, BE)} empty")
        return False


class Unlock(Action):
    """Unlock something with a key from the inventory."""

    name = "unlock"
    argument_domains = (REACHABLE, INVENTORY)

    def possible_now(self, universe, sentence, domain, thing) -> bool:
        if not ever_possible(self, domain, thing):
            return False
        if isinstance(domain, Reachable):
            return thing.is_closable_and_closed() and thing.lockable.locked
        return True

    def print_sentence(self, thing_text: str, key_text: str) -> str:
        return f"Unlock {thing_text} with {key_text}"

    def __call__(self, universe: "Universe", thing: Noun, key: Noun) -> bool:
        if thing.lockable.key is key:
            thing.lockable.locked = False
            universe.success()
        else:
            _does_not_fit(universe, key)
        return False


def _is_openable(thing: Noun) -> bool:
    return thing.openable is not None


def _is_lockable(thing: Noun) -> bool:
    return thing.lockable is not None


declare(Open, Reachable, Noun, when=_is_openable)
declare(Close, Reachable, Noun, when=lambda thing: ever_possible(Open, REACHABLE, thing))
declare(Unlock, Reachable, Noun, when=_is_lockable)
declare(Lock, Reachable, Noun, when=lambda thing: ever_possible(Unlock, REACHABLE, thing))
declare(Lock, Inventory, Noun, when=lambda thing: ever_possible(Unlock, INVENTORY, thing))
