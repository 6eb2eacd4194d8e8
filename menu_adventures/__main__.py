#!/usr/bin/env python3
"""
Menu Adventures CLI
Play, record and check menu-driven text adventures.
"""
import sys
import logging
from pathlib import Path
from datetime import datetime

import click

from menu_adventures.config import get_log_dir


def setup_logging(debug: bool = False) -> Path:
    """Configure logging to both console and file.

    Returns:
        Path to the log file
    """
    logs_dir = get_log_dir()
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Create timestamped log file
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = logs_dir / f"menu_adventures_{timestamp}.log"

    # File handler - always verbose
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    file_handler.setFormatter(file_formatter)

    # Console handler - only errors, so the menu stays readable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.ERROR)
    console_formatter = logging.Formatter('%(levelname)s: %(message)s')
    console_handler.setFormatter(console_formatter)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return log_file


def _universe_factory(world_id: str, worlds_dir: str | None):
    from menu_adventures.world import WorldLoader

    loader = WorldLoader(worlds_dir)
    loader.load_world(world_id)  # fail early on a broken world

    def make_universe(interface):
        return loader.load_universe(world_id, interface)

    return make_universe


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.option('--worlds-dir', type=click.Path(exists=True, file_okay=False),
              default=None, help='Path to worlds directory')
@click.pass_context
def main(ctx: click.Context, debug: bool, worlds_dir: str | None):
    """Menu-driven text adventures."""
    log_file = setup_logging(debug=debug)

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("Menu Adventures starting")
    logger.info(f"Debug mode: {debug}")
    logger.info(f"Worlds dir: {worlds_dir or 'default'}")
    logger.info(f"Log file: {log_file}")
    logger.info("=" * 60)

    ctx.ensure_object(dict)
    ctx.obj["worlds_dir"] = worlds_dir


@main.command("list")
@click.pass_context
def list_worlds(ctx: click.Context):
    """List the available worlds."""
    from menu_adventures.world import WorldLoader

    for world in WorldLoader(ctx.obj["worlds_dir"]).list_worlds():
        click.echo(f"{world['id']}: {world['name']}")


@main.command()
@click.argument('world_id')
@click.pass_context
def play(ctx: click.Context, world_id: str):
    """Play a world on the terminal."""
    from menu_adventures.engine.turn import turn
    from menu_adventures.interfaces.console import ConsoleInterface

    make_universe = _universe_factory(world_id, ctx.obj["worlds_dir"])
    turn(make_universe(ConsoleInterface()), introduce=True)


@main.command()
@click.argument('world_id')
@click.option('--choices-file', default='choices.txt', show_default=True)
@click.option('--transcript-file', default='transcript.txt', show_default=True)
@click.option('--resume', is_flag=True, help='Replay the saved choices first, then continue')
@click.pass_context
def record(ctx: click.Context, world_id: str, choices_file: str, transcript_file: str, resume: bool):
    """Play a world and save the choices and transcript."""
    from menu_adventures.testing import save_choices

    save_choices(
        _universe_factory(world_id, ctx.obj["worlds_dir"]),
        choices_file=choices_file,
        transcript_file=transcript_file,
        resume=resume,
    )


@main.command()
@click.argument('world_id')
@click.option('--choices-file', default='choices.txt', show_default=True)
@click.option('--transcript-file', default='transcript.txt', show_default=True)
@click.pass_context
def check(ctx: click.Context, world_id: str, choices_file: str, transcript_file: str):
    """Replay saved choices and compare against the saved transcript."""
    from menu_adventures.testing import check_choices

    if check_choices(
        _universe_factory(world_id, ctx.obj["worlds_dir"]),
        choices_file=choices_file,
        transcript_file=transcript_file,
    ):
        click.echo("Transcript matches")
    else:
        ctx.exit(1)


if __name__ == "__main__":
    main()
