"""
Built-in actions.

Importing this package declares the default possibilities of every
built-in action. `default_actions()` returns one instance of each, in
the order they are offered on the menu.
"""

from menu_adventures.engine.actions.base import Action
from menu_adventures.engine.actions.containers import Close, Lock, Open, Unlock
from menu_adventures.engine.actions.handling import (
    Attach,
    Drop,
    Give,
    PutInto,
    PutOnto,
    Take,
)
from menu_adventures.engine.actions.looking import ListInventory, LookAt
from menu_adventures.engine.actions.misc import Eat, Quit
from menu_adventures.engine.actions.moving import Go, GoInto, GoOnto, Leave, Push
from menu_adventures.engine.actions.outfits import Dress, TakeOff, Wear
from menu_adventures.engine.actions.switches import TurnOff, TurnOn
from menu_adventures.engine.actions.talking import Say

ACTION_TYPES: tuple[type[Action], ...] = (
    Attach,
    Close,
    Dress,
    Drop,
    Eat,
    Give,
    Go,
    GoInto,
    GoOnto,
    Leave,
    ListInventory,
    Lock,
    LookAt,
    Open,
    Push,
    PutInto,
    PutOnto,
    Quit,
    Say,
    Take,
    TakeOff,
    TurnOff,
    TurnOn,
    Unlock,
    Wear,
)


def default_actions() -> list[Action]:
    """One instance of every built-in action, in menu order."""
    return [action_type() for action_type in ACTION_TYPES]


__all__ = [
    "Action",
    "ACTION_TYPES",
    "default_actions",
    "Attach",
    "Close",
    "Dress",
    "Drop",
    "Eat",
    "Give",
    "Go",
    "GoInto",
    "GoOnto",
    "Leave",
    "ListInventory",
    "Lock",
    "LookAt",
    "Open",
    "Push",
    "PutInto",
    "PutOnto",
    "Quit",
    "Say",
    "Take",
    "TakeOff",
    "TurnOff",
    "TurnOn",
    "Unlock",
    "Wear",
]
