"""Recognize template input and join it into a single markup string."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["is_template", "join_template"]

_CONVERSIONS = {"r": repr, "s": str, "a": ascii}


def _is_template_string(markup: Any) -> bool:
    # PEP 750 ``string.templatelib.Template``, matched by shape.
    return hasattr(markup, "strings") and hasattr(markup, "interpolations")


def is_template(markup: Any, values: Sequence[Any]) -> bool:
    """Return True if *markup* is literal pieces meant to be joined with *values*.

    Two shapes are recognized: a t-string ``Template``, and a list or tuple
    of strings holding exactly one more piece than there are values.
    """
    if isinstance(markup, str):
        return False
    if _is_template_string(markup):
        return True
    return (
        isinstance(markup, (list, tuple))
        and len(markup) == len(values) + 1
        and all(isinstance(piece, str) for piece in markup)
    )


def join_template(markup: Any, values: Sequence[Any] = ()) -> str:
    """Alternate literal pieces with stringified values."""
    if _is_template_string(markup):
        pieces = list(markup.strings)
        rendered = [_render_interpolation(i) for i in markup.interpolations]
    else:
        pieces = list(markup)
        rendered = [str(value) for value in values]

    parts: list[str] = []
    for index, piece in enumerate(pieces):
        parts.append(piece)
        if index < len(rendered):
            parts.append(rendered[index])
    return "".join(parts)


def _render_interpolation(interpolation: Any) -> str:
    value = interpolation.value
    conversion = getattr(interpolation, "conversion", None)
    if conversion:
        value = _CONVERSIONS[conversion](value)
    return format(value, getattr(interpolation, "format_spec", "") or "")
