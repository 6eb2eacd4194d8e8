"""
Universe - everything one game session needs.

The Universe owns the world graph, the player, the interface the game
talks through, the introduction, the registered actions and the choice
log. World-authoring code populates it only through `set_relationship`
and `set_exit`; after that, only action effects mutate it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Sequence

from menu_adventures.engine.graph import WorldGraph
from menu_adventures.models.grammar import Direction, Relationship
from menu_adventures.models.nouns import Door, Location, Noun

if TYPE_CHECKING:
    from menu_adventures.engine.actions.base import Action
    from menu_adventures.engine.protocols import Interface

logger = logging.getLogger(__name__)


class Universe:
    """A game session: world graph, player, interface and choice log.

    Attributes:
        player: The noun the player controls
        interface: Menu device and output sink
        introduction: Text shown before the first turn
        graph: Containment forest and topology graph
        actions: Actions offered each turn, in menu order
        choices_log: Every 1-based menu choice, in the order made

    Example:
        >>> universe = Universe(you, interface=ScriptedInterface([1]))
        >>> universe.set_relationship(kitchen, you, CONTAINING)
        >>> universe.set_exit(kitchen, hall, NORTH)
        >>> turn(universe, introduce=True)
    """

    def __init__(
        self,
        player: Noun,
        interface: "Interface",
        introduction: str = "",
        actions: Sequence["Action"] | None = None,
    ):
        """Create an empty universe around a player.

        Args:
            player: The noun the player controls
            interface: Menu device and output sink
            introduction: Text shown before the first turn
            actions: Actions to offer; defaults to the full built-in set
        """
        if actions is None:
            from menu_adventures.engine.actions import default_actions

            actions = default_actions()

        self.player = player
        self.interface = interface
        self.introduction = introduction
        self.graph = WorldGraph()
        self.actions: list["Action"] = list(actions)
        self.choices_log: list[int] = []

    # World authoring

    def set_relationship(self, parent: Noun, child: Noun, relationship: Relationship) -> None:
        """Put `child` under `parent`, replacing its previous parent."""
        self.graph.set_parent(child, parent, relationship)

    def set_exit(
        self,
        origin: Location,
        destination: Location,
        direction: Direction,
        door: Door | None = None,
        one_way: bool = False,
    ) -> None:
        """Connect two locations, optionally through a door."""
        self.graph.connect(origin, destination, direction, one_way=one_way, door=door)

    # Graph queries

    def get_parent(self, thing: Noun) -> Noun:
        return self.graph.get_parent(thing)

    def get_parent_relationship(self, thing: Noun) -> tuple[Noun, Relationship]:
        return self.graph.get_parent_relationship(thing)

    def get_children(self, thing: Noun) -> Iterator[tuple[Noun, Relationship]]:
        return self.graph.get_children(thing)

    def is_within(self, thing: Noun, ancestor: Noun) -> bool:
        return self.graph.is_within(thing, ancestor)

    def get_exits(self, location: Noun) -> Iterator[tuple[Location, Direction]]:
        return self.graph.get_exits(location)

    # Movement

    def mover(self) -> Noun:
        """The vehicle the player sits in, or the player."""
        parent = self.get_parent(self.player)
        if parent.vehicle:
            return parent
        return self.player

    def first_destination(self, direction: Direction) -> Location:
        """The location one hop away from the mover's place; may be a door."""
        origin = self.get_parent(self.mover())
        return self.graph.get_exit(origin, direction)

    def final_destination(self, direction: Direction) -> Location:
        """Where going in a direction ends up, passing through a door."""
        destination = self.first_destination(direction)
        if isinstance(destination, Door):
            return self.graph.get_exit(destination, direction)
        return destination

    # Interaction

    def success(self) -> None:
        self.interface.write_line("Ok")

    def log_choice(self, choice: int) -> None:
        self.choices_log.append(choice)
        logger.debug(f"Choice {len(self.choices_log)}: {choice}")
