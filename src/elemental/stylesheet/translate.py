"""Translate CSS declarations into an inline-style property map."""

from __future__ import annotations

import re
from collections.abc import Iterable

from elemental.stylesheet.model import Declaration

__all__ = ["camelize", "translate_style"]

_HYPHEN_LETTER_RE = re.compile(r"-([a-z])", re.IGNORECASE)


def camelize(name: str) -> str:
    """Convert a kebab-case CSS property name to camelCase.

    A leading hyphen is treated like any other, so vendor prefixes come out
    capitalized: ``-webkit-transition`` -> ``WebkitTransition``.
    """
    return _HYPHEN_LETTER_RE.sub(lambda m: m.group(1).upper(), name)


def translate_style(declarations: Iterable[Declaration]) -> dict[str, str]:
    """Build a style map from *declarations*; later duplicates win.

    Values are kept as the authored strings, without unit parsing.
    """
    props: dict[str, str] = {}
    for decl in declarations:
        props[camelize(decl.property)] = decl.value
    return props
