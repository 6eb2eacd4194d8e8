"""
Action base class.

An action declares the domains its arguments come from, how a sentence
using it reads, when a candidate is possible right now, and what
happens when the player picks it. Effects return True to end the game.

Example:
    >>> class Wave(Action):
    ...     name = "wave"
    ...     argument_domains = (VISIBLE,)
    ...
    ...     def print_sentence(self, thing_text):
    ...         return f"Wave at {thing_text}"
    ...
    ...     def __call__(self, universe, thing):
    ...         universe.interface.write_wrapped("Nobody waves back.")
    ...         return False
    >>> declare(Wave, Visible, Person)
    >>> universe = Universe(you, interface, actions=[*default_actions(), Wave()])
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from menu_adventures.engine.possibility import ever_possible

if TYPE_CHECKING:
    from menu_adventures.engine.domains import Domain
    from menu_adventures.engine.universe import Universe
    from menu_adventures.models.answers import Sentence


class Action:
    """Something the player can do, possibly with arguments.

    Attributes:
        name: Identifier used in logs
        argument_domains: One domain per argument, in sentence order
    """

    name: ClassVar[str] = "action"
    argument_domains: ClassVar[tuple["Domain", ...]] = ()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def possible_now(
        self,
        universe: "Universe",
        sentence: "Sentence",
        domain: "Domain",
        thing: Any,
    ) -> bool:
        """Whether `thing` fits this argument in the current state.

        Overrides must stay within `ever_possible`: they can rule more
        candidates out, never in. `sentence.arguments` holds the earlier
        arguments already bound.
        """
        return ever_possible(self, domain, thing)

    def is_possible(self, universe: "Universe") -> bool:
        """Whether the action can be offered at all this turn."""
        return True

    def print_sentence(self, *argument_texts: str) -> str:
        """The sentence as it reads in a menu."""
        raise NotImplementedError

    def __call__(self, universe: "Universe", *arguments: Any) -> bool:
        """Apply the action; return True to end the game."""
        raise NotImplementedError
