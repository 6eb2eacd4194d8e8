"""
Engine exceptions.

Everything raised here is a content-authoring fault: a broken world
graph or a broken menu. Expected negative outcomes during play, like
trying the wrong key, are narrated by the actions instead.
"""


class WorldGraphError(Exception):
    """Base class for faults in how a world was put together."""


class InvalidGraphOperation(WorldGraphError):
    """A containment edge change that would break the forest property."""


class DuplicateExit(WorldGraphError):
    """A second topology edge with the same direction from one location."""


class NoParent(WorldGraphError):
    """Asked for the parent of a location or a detached noun."""


class NoExit(WorldGraphError):
    """Followed a direction that does not lead anywhere."""


class MalformedQuestion(WorldGraphError):
    """A question without answers reached the menu layer."""


class ChoicesExhausted(Exception):
    """A scripted interface ran out of choices before the game ended."""


class InvalidChoice(Exception):
    """A scripted choice that does not match any offered option."""
