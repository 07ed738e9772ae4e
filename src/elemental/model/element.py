"""Element descriptors emitted by the tree converter."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class KeyCounter:
    """Monotonic source of identity keys for one conversion.

    A single instance is shared by reference across a whole conversion call
    and every recursive step beneath it.
    """

    value: int = 0

    def next(self) -> int:
        """Return the current value, then advance by one."""
        current = self.value
        self.value += 1
        return current


@dataclass(frozen=True)
class Element:
    """A framework element: tag name, property map and ordered children.

    Instances are immutable but not hashable, since ``props`` is a dict.
    """

    type: str
    props: dict[str, Any] = field(default_factory=dict)
    children: tuple[Descriptor, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    @property
    def key(self) -> Any:
        """Return the identity key assigned during conversion, if any."""
        return self.props.get("key")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view of this element and its subtree."""
        return {
            "type": self.type,
            "props": dict(self.props),
            "children": [to_data(child) for child in self.children],
        }


Descriptor = Union[Element, str]

ElementFactory = Callable[..., Any]


def create_element(type: str, props: dict[str, Any], *children: Any) -> Element:
    """Default element factory: build an ``Element`` dataclass."""
    return Element(type=type, props=props, children=tuple(children))


def to_data(descriptor: Any) -> Any:
    """Return the JSON-serializable form of a single descriptor."""
    if isinstance(descriptor, Element):
        return descriptor.to_dict()
    return descriptor
