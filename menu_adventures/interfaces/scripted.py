"""
Scripted interface - replays choices and records the transcript.

Choices are either 1-based option numbers, as stored in a choice log,
or the exact text of the option to pick, which keeps tests readable:

    interface = ScriptedInterface(["Take something", "Take the hat", "Quit"])

Every menu is written to the transcript followed by the choice, so a
transcript shows exactly what the player saw and did.
"""

import io
import logging
from typing import Iterable, Sequence

from menu_adventures.engine.errors import ChoicesExhausted, InvalidChoice
from menu_adventures.interfaces.base import TextInterface

logger = logging.getLogger(__name__)


class ScriptedInterface(TextInterface):
    """An interface driven by a fixed list of choices.

    Attributes:
        menus: Every (prompt, options) pair presented, in order
    """

    def __init__(self, choices: Iterable[int | str], width: int | None = None):
        super().__init__(width)
        self._choices = list(choices)
        self._position = 0
        self._buffer = io.StringIO()
        self.menus: list[tuple[str, list[str]]] = []

    @property
    def transcript(self) -> str:
        """Everything written so far."""
        return self._buffer.getvalue()

    @property
    def remaining(self) -> int:
        return len(self._choices) - self._position

    def write(self, text: str) -> None:
        self._buffer.write(text)

    def present_menu(self, prompt: str, options: Sequence[str]) -> int:
        self.menus.append((prompt, list(options)))
        if prompt:
            self.write_line(prompt)
        for number, option in enumerate(options, start=1):
            self.write_line(f"{number:>3}. {option}")

        if self._position >= len(self._choices):
            raise ChoicesExhausted(f"No choice left for menu {prompt or list(options)!r}")
        choice = self._choices[self._position]
        self._position += 1

        index = self._resolve(choice, options)
        self.write_line(f"> {index}")
        return index

    @staticmethod
    def _resolve(choice: int | str, options: Sequence[str]) -> int:
        if isinstance(choice, str):
            try:
                return list(options).index(choice) + 1
            except ValueError:
                raise InvalidChoice(f"{choice!r} is not one of {list(options)!r}") from None
        if not 1 <= choice <= len(options):
            raise InvalidChoice(f"Choice {choice} is out of range 1-{len(options)}")
        return choice
