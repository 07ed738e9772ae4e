"""CLI command: elemental style -- translate inline CSS to a style map."""

from __future__ import annotations

import json
import sys

import click

from elemental.errors import CssParseError
from elemental.stylesheet import extract_declarations, translate_style


@click.command()
@click.argument("css")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation.")
def style(css: str, indent: int) -> None:
    """Translate a CSS declaration list into a camelCase style map."""
    try:
        declarations = extract_declarations(css)
    except CssParseError as exc:
        click.echo(f"CSS parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps(translate_style(declarations), indent=indent or None))
