"""Unit tests for the console interface."""

import click
from click.testing import CliRunner

from menu_adventures.engine.protocols import Interface
from menu_adventures.interfaces import ConsoleInterface


class TestConsoleInterface:
    """Tests for ConsoleInterface."""

    def test_write_goes_to_stdout(self, capsys) -> None:
        """Text is echoed to the terminal."""
        interface = ConsoleInterface(width=40)

        interface.write_line("Ok")

        assert capsys.readouterr().out == "Ok\n"

    def test_protocol(self) -> None:
        """The console satisfies the Interface protocol."""
        assert isinstance(ConsoleInterface(width=40), Interface)

    def test_present_menu(self) -> None:
        """Options are numbered and the typed number is returned."""

        @click.command()
        def menu():
            choice = ConsoleInterface(width=40).present_menu("Go where?", ["Go north", "Quit"])
            click.echo(f"picked {choice}")

        result = CliRunner().invoke(menu, input="3\n2\n", color=False)

        assert result.exit_code == 0
        assert "Go where?\n  1. Go north\n  2. Quit\n" in result.output
        assert "picked 2" in result.output
