"""Tree conversion: generic nodes -> element descriptors."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from elemental.config import ConverterConfig
from elemental.model.element import ElementFactory, KeyCounter, create_element as default_factory
from elemental.model.nodes import Cdata, Comment, Directive, Node, Script, Tag, Text
from elemental.transforms.attributes import normalize_attributes

logger = logging.getLogger(__name__)

__all__ = ["collapse_whitespace", "convert_tree"]

_WHITESPACE_RE = re.compile(r"[ \t\r\n]+")

# Tags whose children are captured as a property instead of converted.
_CHILDLESS_TAGS = frozenset({"textarea"})


def collapse_whitespace(text: str) -> str:
    """Collapse every run of spaces, tabs and newlines to a single space."""
    return _WHITESPACE_RE.sub(" ", text)


def convert_tree(
    nodes: Iterable[Node],
    counter: KeyCounter | None = None,
    *,
    create_element: ElementFactory | None = None,
    config: ConverterConfig | None = None,
) -> list[Any]:
    """Convert generic nodes into element descriptors, depth-first.

    One descriptor is produced per text, tag or style node, in input order.
    Comments, scripts, CDATA sections and directives produce nothing.
    Keys come from *counter* in document pre-order; pass the same counter to
    continue numbering across calls.
    """
    if counter is None:
        counter = KeyCounter()
    factory = create_element or default_factory
    fragment: list[Any] = []

    for node in nodes:
        if isinstance(node, Text):
            fragment.append(collapse_whitespace(node.data))
        elif isinstance(node, Script):
            logger.debug("Skipping <script> element")
        elif isinstance(node, Tag):
            props = normalize_attributes(node, counter, config)
            children = [] if node.name in _CHILDLESS_TAGS else node.children
            fragment.append(
                factory(
                    node.name,
                    props,
                    *convert_tree(children, counter, create_element=factory, config=config),
                )
            )
        elif isinstance(node, Cdata):
            logger.debug("Skipping CDATA section")
        elif isinstance(node, (Comment, Directive)):
            continue
        else:
            raise TypeError(f"Unknown node type: {type(node).__name__}")

    return fragment
