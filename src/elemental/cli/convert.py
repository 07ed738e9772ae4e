"""CLI command: elemental convert -- print element descriptors as JSON."""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from typing import TextIO

import click

from elemental.config import ConverterConfig
from elemental.errors import ParseError, ProtocolError
from elemental.model.element import to_data
from elemental.pipeline import convert as run_convert


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation.")
@click.option(
    "--empty-is-present",
    is_flag=True,
    help="Translate attributes even when their value is empty.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def convert(source: TextIO, indent: int, empty_is_present: bool, verbose: bool) -> None:
    """Convert markup from SOURCE (a file, or - for stdin) to JSON.

    Prints the list of element descriptors. Text fragments appear as JSON
    strings, elements as objects with type, props and children.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = ConverterConfig.from_env()
    if empty_is_present:
        config = dataclasses.replace(config, empty_is_present=True)

    try:
        descriptors = run_convert(source.read(), config=config)
    except (ParseError, ProtocolError) as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps([to_data(d) for d in descriptors], indent=indent or None))
