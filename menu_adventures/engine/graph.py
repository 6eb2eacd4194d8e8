"""
World graph - containment forest plus location topology.

Two labeled directed graphs share one vertex set:

- The containment forest: edges point from a parent to a child and are
  labeled with a Relationship. Every noun has exactly one parent except
  locations, which are the roots.
- The topology graph: edges point from one location to another and are
  labeled with a Direction. A location has at most one exit per
  direction. Doors sit inline, so a door splits one traversal into two
  hops in the same direction.

Adjacency maps are keyed by `noun_id` and keep insertion order, so every
traversal is deterministic for a given graph state. A reparented child
moves to the end of its new parent's children.

Example:
    >>> graph = WorldGraph()
    >>> graph.set_parent(player, kitchen, CONTAINING)
    >>> graph.connect(kitchen, hall, NORTH)
    >>> graph.get_exit(hall, SOUTH) is kitchen
    True
"""

from __future__ import annotations

import logging
from typing import Iterator

from menu_adventures.engine.errors import (
    DuplicateExit,
    InvalidGraphOperation,
    NoExit,
    NoParent,
)
from menu_adventures.models.grammar import Direction, Relationship, opposite
from menu_adventures.models.nouns import Door, Location, Noun

logger = logging.getLogger(__name__)


class WorldGraph:
    """Containment forest and topology graph over the same nouns."""

    def __init__(self) -> None:
        self._nouns: dict[int, Noun] = {}
        self._parent_of: dict[int, tuple[int, Relationship]] = {}
        self._children_of: dict[int, dict[int, Relationship]] = {}
        self._exits_of: dict[int, dict[Direction, int]] = {}

    def __contains__(self, thing: Noun) -> bool:
        return thing.noun_id in self._nouns

    def __iter__(self) -> Iterator[Noun]:
        """Every registered noun, in the order it was first added."""
        return iter(list(self._nouns.values()))

    def add(self, thing: Noun) -> None:
        """Register a noun without any edges."""
        if thing.noun_id not in self._nouns:
            self._nouns[thing.noun_id] = thing
            self._children_of[thing.noun_id] = {}

    # Containment forest

    def set_parent(self, child: Noun, parent: Noun, relationship: Relationship) -> None:
        """Make `parent` the only parent of `child`.

        Both nouns are added to the graph if missing. An existing edge to
        the child is removed first, so the child keeps exactly one parent.

        Raises:
            InvalidGraphOperation: If the child is a location, or the
                parent is the child or sits somewhere below it
        """
        if isinstance(child, Location):
            raise InvalidGraphOperation(
                f"Cannot give location {child.name!r} a parent; use exits instead"
            )
        if self.is_within(parent, child):
            raise InvalidGraphOperation(
                f"Cannot put {child.name!r} under {parent.name!r}, which is inside it"
            )
        self.add(parent)
        self.add(child)

        previous = self._parent_of.get(child.noun_id)
        if previous is not None:
            old_parent_id, _ = previous
            del self._children_of[old_parent_id][child.noun_id]

        self._parent_of[child.noun_id] = (parent.noun_id, relationship)
        self._children_of[parent.noun_id][child.noun_id] = relationship
        logger.debug(f"{parent.name} is {relationship} {child.name}")

    def detach(self, parent: Noun, child: Noun) -> None:
        """Remove the containment edge from `parent` to `child`.

        The child stays registered but is no longer part of any tree.

        Raises:
            InvalidGraphOperation: If there is no such edge
        """
        previous = self._parent_of.get(child.noun_id)
        if previous is None or previous[0] != parent.noun_id:
            raise InvalidGraphOperation(
                f"{child.name!r} is not a child of {parent.name!r}"
            )
        del self._parent_of[child.noun_id]
        del self._children_of[parent.noun_id][child.noun_id]
        logger.debug(f"Detached {child.name} from {parent.name}")

    def get_parent_relationship(self, thing: Noun) -> tuple[Noun, Relationship]:
        """The parent of a noun and the label of the edge between them.

        Raises:
            NoParent: For locations and detached nouns
        """
        try:
            parent_id, relationship = self._parent_of[thing.noun_id]
        except KeyError:
            raise NoParent(f"{thing.name!r} has no parent") from None
        return self._nouns[parent_id], relationship

    def get_parent(self, thing: Noun) -> Noun:
        """The parent of a noun.

        Raises:
            NoParent: For locations and detached nouns
        """
        parent, _ = self.get_parent_relationship(thing)
        return parent

    def get_children(self, thing: Noun) -> Iterator[tuple[Noun, Relationship]]:
        """Children of a noun with their relationships, in insertion order."""
        for child_id, relationship in list(self._children_of.get(thing.noun_id, {}).items()):
            yield self._nouns[child_id], relationship

    def has_children(self, thing: Noun) -> bool:
        return bool(self._children_of.get(thing.noun_id))

    def is_within(self, thing: Noun, ancestor: Noun) -> bool:
        """Whether `thing` is `ancestor` or anywhere in its subtree."""
        node_id: int | None = thing.noun_id
        while node_id is not None:
            if node_id == ancestor.noun_id:
                return True
            parent = self._parent_of.get(node_id)
            node_id = parent[0] if parent is not None else None
        return False

    # Topology graph

    def _add_exit(self, origin: Location, destination: Location, direction: Direction) -> None:
        self.add(origin)
        self.add(destination)
        self._exits_of.setdefault(origin.noun_id, {})[direction] = destination.noun_id
        logger.debug(f"{destination.name} is {direction} of {origin.name}")

    def _check_free(self, origin: Location, direction: Direction) -> None:
        if direction in self._exits_of.get(origin.noun_id, {}):
            raise DuplicateExit(f"{origin.name!r} already has an exit {direction}")

    def connect(
        self,
        origin: Location,
        destination: Location,
        direction: Direction,
        one_way: bool = False,
        door: Door | None = None,
    ) -> None:
        """Connect two locations, optionally through a door.

        Unless `one_way`, the way back is added in the opposite direction.
        With a door, each traversal takes two hops in the same direction:
        origin to door, then door to destination.

        Every edge is checked before any is inserted, so a failed call
        leaves the graph unchanged.

        Raises:
            DuplicateExit: If any source already has an exit that way
            ValueError: If the direction has no opposite and one_way is False
        """
        hops = [(origin, destination, direction)]
        if door is not None:
            hops = [(origin, door, direction), (door, destination, direction)]
        if not one_way:
            back = opposite(direction)
            if door is None:
                hops.append((destination, origin, back))
            else:
                hops.extend([(destination, door, back), (door, origin, back)])

        pending: set[tuple[int, Direction]] = set()
        for source, _, way in hops:
            self._check_free(source, way)
            if (source.noun_id, way) in pending:
                raise DuplicateExit(f"{source.name!r} already has an exit {way}")
            pending.add((source.noun_id, way))

        for source, target, way in hops:
            self._add_exit(source, target, way)

    def get_exits(self, location: Noun) -> Iterator[tuple[Location, Direction]]:
        """Exits of a location as (destination, direction), in insertion order."""
        for direction, destination_id in list(self._exits_of.get(location.noun_id, {}).items()):
            yield self._nouns[destination_id], direction

    def get_exit(self, location: Noun, direction: Direction) -> Location:
        """The location one hop away in a direction.

        Raises:
            NoExit: If there is no exit that way
        """
        try:
            return self._nouns[self._exits_of[location.noun_id][direction]]
        except KeyError:
            raise NoExit(f"{location.name!r} has no exit {direction}") from None
