"""
Record and replay harness.

A game is a deterministic function of how its universe was built and
the choices made, so a saved choice log plus the transcript it produced
make a regression test: replay the choices against a freshly built
universe and compare transcripts byte for byte.

Choice files hold whitespace-separated integers, one choice per line.

Example:
    >>> def make_universe(interface):
    ...     return WorldLoader().load_universe("demo", interface)
    >>> save_choices(make_universe, "choices.txt", "transcript.txt")  # play once
    >>> check_choices(make_universe, "choices.txt", "transcript.txt")
    True
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

import click

from menu_adventures.engine.errors import ChoicesExhausted
from menu_adventures.engine.protocols import Interface
from menu_adventures.engine.turn import turn
from menu_adventures.engine.universe import Universe
from menu_adventures.interfaces.console import ConsoleInterface
from menu_adventures.interfaces.scripted import ScriptedInterface

logger = logging.getLogger(__name__)

UniverseFactory = Callable[[Interface], Universe]

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


@dataclass
class LineDifference:
    """First line where two transcripts disagree.

    `line_number` is None when one transcript is a prefix of the other;
    the missing side is then reported as an empty string.
    """

    line_number: int | None
    expected: str
    received: str


def read_choices(path: str | Path) -> list[int]:
    """Read a choice log."""
    return [int(token) for token in Path(path).read_text().split()]


def write_choices(path: str | Path, choices: Iterable[int], append: bool = False) -> None:
    """Write a choice log, one choice per line."""
    with open(path, "a" if append else "w") as f:
        for choice in choices:
            f.write(f"{choice}\n")


def replay(make_universe: UniverseFactory, choices: Iterable[int], introduce: bool = True) -> str:
    """Play a game from a fixed list of choices and return its transcript.

    Raises:
        ChoicesExhausted: If the game has not ended when the choices run out
    """
    interface = ScriptedInterface(choices)
    universe = make_universe(interface)
    turn(universe, introduce=introduce)
    return interface.transcript


def find_line_difference(expected: str, received: str) -> LineDifference:
    """Locate the first differing line of two transcripts.

    Raises:
        ValueError: If the transcripts are equal
    """
    expected_lines = expected.split("\n")
    received_lines = received.split("\n")
    for line_number, (expected_line, received_line) in enumerate(
        zip(expected_lines, received_lines), start=1
    ):
        if expected_line != received_line:
            return LineDifference(line_number, expected_line, received_line)
    if len(received_lines) > len(expected_lines):
        return LineDifference(None, "", received_lines[len(expected_lines)])
    if len(expected_lines) > len(received_lines):
        return LineDifference(None, expected_lines[len(received_lines)], "")
    raise ValueError("Transcripts must be different")


class _RecordingConsole(ConsoleInterface):
    """A console that replays a prefix of choices before asking the player."""

    def __init__(self, prefix: list[int]):
        super().__init__()
        self._prefix = list(prefix)

    def present_menu(self, prompt, options):
        if self._prefix:
            return self._prefix.pop(0)
        return super().present_menu(prompt, options)


def save_choices(
    make_universe: UniverseFactory,
    choices_file: str | Path = "choices.txt",
    transcript_file: str | Path = "transcript.txt",
    resume: bool = False,
) -> None:
    """Play interactively, then save the choices and their transcript.

    With `resume`, the choices already in `choices_file` are replayed
    first and the game continues from there.
    """
    previous = read_choices(choices_file) if resume else []
    universe = make_universe(_RecordingConsole(previous))
    turn(universe, introduce=True)

    write_choices(choices_file, universe.choices_log)
    Path(transcript_file).write_text(replay(make_universe, universe.choices_log))
    logger.info(f"Saved {len(universe.choices_log)} choices to {choices_file}")


def check_choices(
    make_universe: UniverseFactory,
    choices_file: str | Path = "choices.txt",
    transcript_file: str | Path = "transcript.txt",
) -> bool:
    """Replay saved choices and compare against the saved transcript.

    Prints the first differing line when they do not match.
    """
    expected = Path(transcript_file).read_text()
    try:
        received = replay(make_universe, read_choices(choices_file))
    except ChoicesExhausted as e:
        logger.warning(f"Replay of {choices_file} did not finish: {e}")
        return False

    if received == expected:
        return True

    difference = find_line_difference(expected, received)
    logger.warning(f"Transcript mismatch at line {difference.line_number}")
    click.echo("Line:")
    click.echo(difference.line_number if difference.line_number is not None else "")
    click.echo("Expected:")
    click.echo(_ANSI_ESCAPE.sub("", difference.expected))
    click.echo("Got:")
    click.echo(_ANSI_ESCAPE.sub("", difference.received))
    return False
