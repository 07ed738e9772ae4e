"""Elemental CLI entry point: Click group with subcommands."""

import click

from elemental import __version__


@click.group()
@click.version_option(version=__version__, prog_name="elemental")
def cli() -> None:
    """Elemental - convert inline markup into UI element descriptors."""


# Import and register subcommands
from elemental.cli.convert import convert  # noqa: E402
from elemental.cli.style import style  # noqa: E402

cli.add_command(convert)
cli.add_command(style)
