"""Markup parser adapter: BeautifulSoup tree -> generic node tree."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Protocol

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, ParserRejectedMarkup
from bs4.element import (
    CData,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    PageElement,
)
from bs4.element import Comment as SoupComment
from bs4.element import Tag as SoupTag

from elemental.errors import ParseError, ProtocolError
from elemental.model.nodes import (
    Cdata,
    Comment,
    Directive,
    Node,
    Script,
    Style,
    Tag,
    Text,
    link_siblings,
)

logger = logging.getLogger(__name__)

__all__ = ["MarkupParser", "ParseOutcome", "SoupMarkupParser", "parse_markup"]


@dataclass(frozen=True)
class ParseOutcome:
    """What a markup parser reports back: nodes on success, else an error."""

    nodes: list[Node] | None = None
    error: BaseException | None = None


class MarkupParser(Protocol):
    """Anything that can turn a markup string into a ``ParseOutcome``."""

    def parse(self, markup: str) -> ParseOutcome: ...


class SoupMarkupParser:
    """Parse markup with BeautifulSoup's ``html.parser`` tree builder.

    The builder lowercases tag and attribute names and decodes character
    references. Multi-valued attributes (``class``, ``rel``...) are kept as
    the raw string instead of being split into lists.
    """

    features = "html.parser"

    def parse(self, markup: str) -> ParseOutcome:
        with warnings.catch_warnings():
            # Short fragments such as "index.html" are content, not filenames.
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            try:
                soup = BeautifulSoup(markup, self.features, multi_valued_attributes=None)
            except ParserRejectedMarkup as exc:
                return ParseOutcome(error=exc)
        return ParseOutcome(nodes=_convert_children(soup, parent=None))


def _convert_children(element: SoupTag, parent: Tag | None) -> list[Node]:
    nodes: list[Node] = []
    for child in element.contents:
        node = _convert(child)
        if node is not None:
            nodes.append(node)
    return link_siblings(nodes, parent)


def _convert(element: PageElement) -> Node | None:
    """Map one bs4 element onto the generic node model."""
    # PreformattedString subclasses first: they are all NavigableStrings too.
    if isinstance(element, SoupComment):
        return Comment(data=str(element))
    if isinstance(element, CData):
        cdata = Cdata(children=[Text(data=str(element))])
        link_siblings(cdata.children, cdata)  # type: ignore[arg-type]
        return cdata
    if isinstance(element, Doctype):
        return _directive(f"!DOCTYPE {element}")
    if isinstance(element, Declaration):
        return _directive(f"!{element}")
    if isinstance(element, ProcessingInstruction):
        return _directive(f"?{element}")
    if isinstance(element, NavigableString):
        return Text(data=str(element))
    if isinstance(element, SoupTag):
        tag_class = _TAG_CLASSES.get(element.name, Tag)
        tag = tag_class(name=element.name, attributes=dict(element.attrs))
        tag.children = _convert_children(element, parent=tag)
        return tag
    return None


_TAG_CLASSES: dict[str, type[Tag]] = {"style": Style, "script": Script}


def _directive(data: str) -> Directive:
    name = data.split(None, 1)[0].lower() if data.strip() else data
    return Directive(name=name, data=data)


def parse_markup(markup: str, parser: MarkupParser | None = None) -> list[Node]:
    """Parse *markup* into a list of top-level generic nodes.

    Raises:
        ParseError: the parser reported an error.
        ProtocolError: the parser reported neither nodes nor an error.
    """
    outcome = (parser or SoupMarkupParser()).parse(markup)
    if outcome.nodes is not None:
        logger.debug("Parsed markup into %d top-level node(s)", len(outcome.nodes))
        return outcome.nodes
    if outcome.error is not None:
        error = outcome.error
        raise ParseError(
            str(error) or type(error).__name__,
            line=getattr(error, "line", None),
            column=getattr(error, "column", None),
            cause=error,
        ) from error
    raise ProtocolError()
