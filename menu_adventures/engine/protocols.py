"""
Protocol definitions for the menu adventure engine.

The engine never talks to a terminal directly. Everything the player
sees goes through an Interface, and every decision the player makes
comes back through `present_menu`. Swapping the interface is how tests
inject a fixed list of choices and capture the transcript.

Component Flow:
    turn() -> enumerate sentences -> Interface.present_menu -> index
                                            |
                                            v
                        choose() -> nested present_menu calls -> indices
                                            |
                                            v
                              Action(universe, *objects) -> Interface.write*
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class Interface(Protocol):
    """Protocol for the menu device plus the output sink.

    Implementations must be deterministic: the same injected inputs
    must produce the same sequence of indices.

    Example implementations:
        - ConsoleInterface: numbered menu on a terminal via click
        - ScriptedInterface: replays a list of choices into a buffer
    """

    def present_menu(self, prompt: str, options: Sequence[str]) -> int:
        """Show a single-select menu and return the 1-based choice.

        Args:
            prompt: Text shown above the options; may be empty
            options: Rendered option strings, at least one

        Returns:
            The 1-based index of the chosen option
        """
        ...

    def write(self, text: str) -> None:
        """Write raw text, without a trailing newline."""
        ...

    def write_line(self, text: str = "") -> None:
        """Write text followed by a newline."""
        ...

    def write_wrapped(self, text: str) -> None:
        """Write a paragraph wrapped to the configured width, plus a newline."""
        ...
