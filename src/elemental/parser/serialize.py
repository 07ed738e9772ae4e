"""Render generic nodes back to markup text."""

from __future__ import annotations

from collections.abc import Iterable

from elemental.model.nodes import Cdata, Comment, Directive, Node, Tag, Text

# Elements that never have a closing tag.
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "basefont",
        "br",
        "col",
        "command",
        "embed",
        "frame",
        "hr",
        "img",
        "input",
        "isindex",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


def render(nodes: Iterable[Node]) -> str:
    """Serialize a sequence of nodes.

    Text is written as decoded data, the way it came out of the parser, so
    ``<textarea>a &amp; b</textarea>`` renders its content as ``a & b``.
    """
    return "".join(_render_node(node) for node in nodes)


def render_children(node: Tag) -> str:
    """Return the inner markup of *node*."""
    return render(node.children)


def _render_node(node: Node) -> str:
    if isinstance(node, Text):
        return node.data
    if isinstance(node, Tag):
        opening = f"<{node.name}{_render_attributes(node.attributes)}>"
        if node.name in VOID_ELEMENTS:
            return opening
        return f"{opening}{render(node.children)}</{node.name}>"
    if isinstance(node, Comment):
        return f"<!--{node.data}-->"
    if isinstance(node, Cdata):
        return f"<![CDATA[{render(node.children)}]]>"
    if isinstance(node, Directive):
        return f"<{node.data}>"
    raise TypeError(f"Cannot render {type(node).__name__}")


def _render_attributes(attributes: dict[str, str]) -> str:
    parts: list[str] = []
    for name, value in attributes.items():
        if value == "":
            parts.append(f" {name}")
        else:
            escaped = value.replace("&", "&amp;").replace('"', "&quot;")
            parts.append(f' {name}="{escaped}"')
    return "".join(parts)
