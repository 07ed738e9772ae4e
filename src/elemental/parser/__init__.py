from elemental.errors import ParseError, ProtocolError
from elemental.parser.markup import MarkupParser, ParseOutcome, SoupMarkupParser, parse_markup
from elemental.parser.serialize import render, render_children

__all__ = [
    "MarkupParser",
    "ParseError",
    "ParseOutcome",
    "ProtocolError",
    "SoupMarkupParser",
    "parse_markup",
    "render",
    "render_children",
]
