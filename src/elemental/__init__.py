"""Elemental: convert inline markup into UI element descriptors."""

__version__ = "0.1.0"

from elemental.config import ConverterConfig  # noqa: E402
from elemental.pipeline import convert, el  # noqa: E402
from elemental.errors import (  # noqa: E402
    CssParseError,
    ElementalError,
    ParseError,
    ProtocolError,
)
from elemental.model import (  # noqa: E402
    Cdata,
    Comment,
    Descriptor,
    Directive,
    Element,
    KeyCounter,
    Node,
    NodeType,
    Script,
    Style,
    Tag,
    Text,
    create_element,
)
from elemental.parser import MarkupParser, ParseOutcome, parse_markup, render_children  # noqa: E402
from elemental.stylesheet import (  # noqa: E402
    Declaration,
    camelize,
    extract_declarations,
    translate_style,
)
from elemental.transforms import convert_tree, normalize_attributes  # noqa: E402

__all__ = [
    # Entry point
    "convert",
    "el",
    # Pipeline stages
    "parse_markup",
    "convert_tree",
    "normalize_attributes",
    "extract_declarations",
    "translate_style",
    "camelize",
    "render_children",
    # Parser adapter contract
    "MarkupParser",
    "ParseOutcome",
    # Models
    "Cdata",
    "Comment",
    "Declaration",
    "Descriptor",
    "Directive",
    "Element",
    "KeyCounter",
    "Node",
    "NodeType",
    "Script",
    "Style",
    "Tag",
    "Text",
    "create_element",
    # Configuration
    "ConverterConfig",
    # Errors
    "CssParseError",
    "ElementalError",
    "ParseError",
    "ProtocolError",
]
