"""Lark-based extractor for inline CSS declarations.

Syntax example:
    color: red; background-color: blue !important;
    font-family: "Helvetica Neue", sans-serif;
    background: url(data:image/png;base64,AAAA) no-repeat;
    width: calc(100% - (2 * 10px)); filter: progid:Foo.Alpha(Opacity=80);

Rules (``a { ... }``), at-rules (``@media ... { ... }``) and comments are
accepted and dropped. Only declarations are returned.
"""

from __future__ import annotations

import functools
import re
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from elemental.errors import CssParseError
from elemental.stylesheet.model import Declaration

__all__ = ["extract_declarations"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)


class _Discarded:
    """Marker returned for rules and at-rules."""


_DISCARDED = _Discarded()


class DeclarationTransformer(Transformer):  # type: ignore[type-arg]
    """Collect ``Declaration`` objects from a Lark parse tree.

    Values are sliced straight out of *source* so that inner whitespace and
    punctuation survive exactly as authored.
    """

    def __init__(self, source: str) -> None:
        super().__init__()
        self._source = source

    def function(self, items: list[Token]) -> tuple[int, int]:
        # Opening token (FUNCTION or LPAREN) first, RPAREN token last.
        return (items[0].start_pos, items[-1].end_pos)

    group = function

    def value(self, items: list[object]) -> str:
        start = _span(items[0])[0]
        end = _span(items[-1])[1]
        raw = self._source[start:end]
        return _COMMENT_RE.sub("", raw).strip()

    def declaration(self, items: list[object]) -> Declaration:
        prop = str(items[0])
        value = ""
        important = False
        for item in items[1:]:
            if isinstance(item, Token):
                important = important or item.type == "IMPORTANT"
            elif isinstance(item, str):
                value = item
        return Declaration(property=prop, value=value, important=important)

    def block(self, items: list[object]) -> _Discarded:
        return _DISCARDED

    def rule(self, items: list[object]) -> _Discarded:
        return _DISCARDED

    def at_rule(self, items: list[object]) -> _Discarded:
        return _DISCARDED

    def start(self, items: list[object]) -> list[Declaration]:
        return [item for item in items if isinstance(item, Declaration)]


def _span(item: object) -> tuple[int, int]:
    if isinstance(item, Token):
        return (item.start_pos, item.end_pos)  # type: ignore[return-value]
    return item  # type: ignore[return-value]


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def extract_declarations(css: str) -> list[Declaration]:
    """Parse inline CSS text into its declarations, in source order."""
    try:
        tree = _parser().parse(css)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise CssParseError(str(e), line=line, column=column, cause=e) from e
    return DeclarationTransformer(css).transform(tree)
