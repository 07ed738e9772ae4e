"""Generic markup node model produced by the parser adapter.

Every construct the markup parser understands maps to one dataclass. The set
is closed: consumers dispatch on the concrete class and must handle each of
``Tag`` (and its ``Style``/``Script`` subclasses), ``Text``, ``Comment``,
``Cdata`` and ``Directive``.

Navigation links (``parent``, ``prev``, ``next``) are filled in by the parser
adapter. They are informational only and take no part in equality or repr.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar


class NodeType(StrEnum):
    """Type tag carried by every generic node class."""

    TAG = "tag"
    STYLE = "style"
    SCRIPT = "script"
    TEXT = "text"
    COMMENT = "comment"
    CDATA = "cdata"
    DIRECTIVE = "directive"


@dataclass
class _Linked:
    """Non-owning links to the surrounding nodes."""

    parent: Tag | Cdata | None = field(default=None, repr=False, compare=False, kw_only=True)
    prev: Node | None = field(default=None, repr=False, compare=False, kw_only=True)
    next: Node | None = field(default=None, repr=False, compare=False, kw_only=True)


@dataclass
class Tag(_Linked):
    """An element with a lowercase name, attributes and children."""

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.TAG


@dataclass
class Style(Tag):
    """A ``<style>`` element. Children are text only."""

    type: ClassVar[NodeType] = NodeType.STYLE


@dataclass
class Script(Tag):
    """A ``<script>`` element. Children are text only."""

    type: ClassVar[NodeType] = NodeType.SCRIPT


@dataclass
class Text(_Linked):
    """Decoded character data."""

    data: str

    type: ClassVar[NodeType] = NodeType.TEXT


@dataclass
class Comment(_Linked):
    data: str

    type: ClassVar[NodeType] = NodeType.COMMENT


@dataclass
class Cdata(_Linked):
    """A CDATA section, holding its content as text children."""

    children: list[Text] = field(default_factory=list)

    type: ClassVar[NodeType] = NodeType.CDATA


@dataclass
class Directive(_Linked):
    """A doctype, markup declaration or processing instruction.

    ``data`` is the text between the angle brackets (``!DOCTYPE html``) and
    ``name`` its lowercased first word (``!doctype``).
    """

    name: str
    data: str

    type: ClassVar[NodeType] = NodeType.DIRECTIVE


Node = Tag | Text | Comment | Cdata | Directive


def link_siblings(nodes: list[Node], parent: Tag | Cdata | None = None) -> list[Node]:
    """Set parent and sibling links on *nodes* in place and return them."""
    previous: Node | None = None
    for node in nodes:
        node.parent = parent
        node.prev = previous
        node.next = None
        if previous is not None:
            previous.next = node
        previous = node
    return nodes
