from elemental.model.element import Descriptor, Element, KeyCounter, create_element, to_data
from elemental.model.nodes import (
    Cdata,
    Comment,
    Directive,
    Node,
    NodeType,
    Script,
    Style,
    Tag,
    Text,
    link_siblings,
)

__all__ = [
    "Cdata",
    "Comment",
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
    "link_siblings",
    "to_data",
]
