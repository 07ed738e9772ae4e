"""Conversion options."""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class ConverterConfig:
    """Options shared by the attribute normalizer and tree converter.

    Attributes:
        empty_is_present: Treat an attribute with an empty value as set when
            deciding whether a rename/drop rule applies. Off by default, so
            ``<input checked>`` and ``value=""`` are left untranslated.
    """

    empty_is_present: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ConverterConfig:
        """Build a config from ``ELEMENTAL_*`` environment variables."""
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}
        raw = env.get("ELEMENTAL_EMPTY_IS_PRESENT")
        if raw is not None:
            kwargs["empty_is_present"] = raw.strip().lower() in _TRUTHY
        return cls(**kwargs)  # type: ignore[arg-type]
