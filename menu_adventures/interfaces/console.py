"""
Console interface - a numbered menu on the terminal.
"""

from typing import Sequence

import click

from menu_adventures.interfaces.base import TextInterface


class ConsoleInterface(TextInterface):
    """Prints numbered options and reads the number the player types.

    Example:
        >>> universe = Universe(you, interface=ConsoleInterface())
        >>> turn(universe, introduce=True)
    """

    def write(self, text: str) -> None:
        click.echo(text, nl=False)

    def present_menu(self, prompt: str, options: Sequence[str]) -> int:
        if prompt:
            click.echo(click.style(prompt, fg="green", bold=True))
        for number, option in enumerate(options, start=1):
            click.echo(f"{number:>3}. " + click.style(option, fg="green"))
        return click.prompt(">", type=click.IntRange(1, len(options)), prompt_suffix=" ")
