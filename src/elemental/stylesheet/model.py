"""Declaration model for inline CSS."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair from a style attribute.

    ``property`` is kept exactly as written (kebab-case). ``value`` is the raw
    source text without comments or the ``!important`` marker.
    """

    property: str
    value: str
    important: bool = False
