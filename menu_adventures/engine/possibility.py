"""
Possibility model - which actions can ever apply to which nouns.

`ever_possible(action, domain, noun)` is a static declaration looked up
in a table keyed by (action type, domain type, noun type). Noun types are
matched along the noun's MRO, so a declaration for `Noun` covers every
noun and a declaration for `Key` only covers keys. Without a matching
declaration the answer is False.

A declaration is either a plain bool or a predicate over the candidate,
which is how capability components plug in:

    declare(Open, Reachable, Noun, when=lambda noun: noun.openable is not None)

`possible_now` lives on the actions; every override there starts from
`ever_possible`, so the dynamic check can only narrow the static one.

Example:
    >>> declare(Take, Reachable, Key)
    >>> ever_possible(Take, REACHABLE, yellow_key)
    True
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Union

logger = logging.getLogger(__name__)

Declaration = Union[bool, Callable[[Any], bool]]


def _as_type(value: Any) -> type:
    return value if isinstance(value, type) else type(value)


class PossibilityTable:
    """Registry of ever-possible declarations.

    Attributes:
        entries: Declarations keyed by (action type, domain type, candidate type)
    """

    def __init__(self) -> None:
        self.entries: dict[tuple[type, type, type], Declaration] = {}

    def declare(
        self,
        action: Any,
        domain: Any,
        candidate_type: type,
        when: Declaration = True,
    ) -> None:
        """Declare that `action` can take a `candidate_type` from `domain`.

        Args:
            action: Action class or instance
            domain: Domain class or instance
            candidate_type: Noun class (or Direction, or str for dialog)
            when: True, False, or a predicate over the candidate
        """
        key = (_as_type(action), _as_type(domain), candidate_type)
        self.entries[key] = when

    def lookup(self, action: Any, domain: Any, candidate: Any) -> bool:
        """Whether an action could ever apply to a candidate in a domain."""
        action_type = _as_type(action)
        domain_type = _as_type(domain)
        for candidate_type in type(candidate).__mro__:
            declaration = self.entries.get((action_type, domain_type, candidate_type))
            if declaration is None:
                continue
            if callable(declaration):
                return bool(declaration(candidate))
            return declaration
        return False


POSSIBILITIES = PossibilityTable()


def declare(action: Any, domain: Any, candidate_type: type, when: Declaration = True) -> None:
    """Declare an ever-possible combination in the shared table."""
    POSSIBILITIES.declare(action, domain, candidate_type, when)


def ever_possible(action: Any, domain: Any, candidate: Any) -> bool:
    """Whether an action could ever apply to a candidate in a domain."""
    return POSSIBILITIES.lookup(action, domain, candidate)
