"""Attribute normalization: raw markup attributes -> element properties."""

from __future__ import annotations

import logging
from typing import Any

from elemental.config import ConverterConfig
from elemental.errors import CssParseError
from elemental.model.element import KeyCounter
from elemental.model.nodes import Tag
from elemental.parser.serialize import render_children
from elemental.stylesheet import extract_declarations, translate_style

logger = logging.getLogger(__name__)

__all__ = ["normalize_attributes"]

# Attributes renamed to their property names, value passed through.
_RENAMES: tuple[tuple[str, str], ...] = (
    ("class", "className"),
    ("for", "htmlFor"),
)

EVENT_HANDLER_PREFIX = "on"


def _is_set(props: dict[str, Any], name: str, config: ConverterConfig) -> bool:
    """Return True if the rule for attribute *name* should fire."""
    if name not in props:
        return False
    if config.empty_is_present:
        return True
    return bool(props[name])


def normalize_attributes(
    node: Tag,
    counter: KeyCounter,
    config: ConverterConfig | None = None,
) -> dict[str, Any]:
    """Return the property map for *node* and assign it the next key.

    Rules, applied in order on a copy of ``node.attributes``:

    1. ``checked`` becomes ``defaultChecked=True``.
    2. ``class`` and ``for`` become ``className`` and ``htmlFor``.
    3. ``style`` becomes a camelCase style map, or is dropped when the CSS
       cannot be parsed.
    4. ``contenteditable`` is dropped.
    5. ``value`` becomes ``defaultValue``; a ``textarea`` instead takes its
       inner markup as ``defaultValue``.
    6. Every ``on*`` attribute is dropped.
    7. ``key`` is set from *counter*, which is then advanced.

    Rules 1 to 5 skip an attribute whose value is empty unless
    ``config.empty_is_present`` is set. *node* is never modified.
    """
    config = config or ConverterConfig()
    props: dict[str, Any] = dict(node.attributes)

    if _is_set(props, "checked", config):
        props["defaultChecked"] = True
        del props["checked"]

    for source, target in _RENAMES:
        if _is_set(props, source, config):
            props[target] = props.pop(source)

    if _is_set(props, "style", config):
        try:
            props["style"] = translate_style(extract_declarations(props["style"]))
        except CssParseError as exc:
            logger.debug("Dropping unparseable style on <%s>: %s", node.name, exc)
            del props["style"]

    if _is_set(props, "contenteditable", config):
        del props["contenteditable"]

    if _is_set(props, "value", config):
        props["defaultValue"] = props.pop("value")

    if node.name == "textarea":
        props["defaultValue"] = render_children(node)

    for name in [name for name in props if name.startswith(EVENT_HANDLER_PREFIX)]:
        del props[name]

    props["key"] = counter.next()
    return props
