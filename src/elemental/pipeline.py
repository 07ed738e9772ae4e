"""Entry point: markup or template in, element descriptors out."""

from __future__ import annotations

import logging
from typing import Any

from elemental.config import ConverterConfig
from elemental.model.element import ElementFactory, KeyCounter
from elemental.parser.markup import MarkupParser, parse_markup
from elemental.template import is_template, join_template
from elemental.transforms.tree import convert_tree

logger = logging.getLogger(__name__)

__all__ = ["convert", "el"]


def convert(
    markup: Any,
    *values: Any,
    counter: KeyCounter | None = None,
    create_element: ElementFactory | None = None,
    parser: MarkupParser | None = None,
    config: ConverterConfig | None = None,
) -> list[Any]:
    """Convert markup into a list of element descriptors.

    *markup* is a plain string, a t-string template, or a sequence of
    literal pieces interleaved with *values*::

        convert('<p class="lead">Hi</p>')
        convert(("<b>", "</b>"), name)

    Each call starts keys at zero unless *counter* is supplied.

    Raises:
        ParseError: the markup parser rejected the input.
        ProtocolError: the markup parser returned neither nodes nor an error.
        TypeError: *markup* is neither a string nor a template.
    """
    if is_template(markup, values):
        source = join_template(markup, values)
    elif isinstance(markup, str):
        if values:
            logger.debug("Ignoring %d value(s) passed with plain string markup", len(values))
        source = markup
    else:
        raise TypeError(
            f"markup must be a string or template, got {type(markup).__name__}"
        )

    nodes = parse_markup(source, parser)
    return convert_tree(
        nodes,
        counter if counter is not None else KeyCounter(),
        create_element=create_element,
        config=config,
    )


el = convert
