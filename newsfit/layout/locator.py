"""Find the named text slots and body columns inside an article frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from newsfit.config import COLUMN_SLOT_NAME, SLOT_NAMES
from newsfit.document.nodes import ContainerNode, Node, TextNode
from newsfit.errors import SelectionError


@dataclass
class ArticleLayout:
    headline: Optional[TextNode] = None
    title: Optional[TextNode] = None
    subtitle: Optional[TextNode] = None
    source: Optional[TextNode] = None
    url: Optional[TextNode] = None
    columns: list[TextNode] = field(default_factory=list)

    def summary(self) -> dict:
        return {
            "has_headline": self.headline is not None,
            "has_title": self.title is not None,
            "has_subtitle": self.subtitle is not None,
            "has_source": self.source is not None,
            "has_url": self.url is not None,
            "column_count": len(self.columns),
        }


def collect_text_nodes(node: Node) -> list[TextNode]:
    """Return every text layer under ``node`` in depth-first order."""
    found: list[TextNode] = []

    def _walk(n: Node) -> None:
        if isinstance(n, TextNode):
            found.append(n)
        elif isinstance(n, ContainerNode):
            for child in n.children:
                _walk(child)

    _walk(node)
    return found


def _first_named(nodes: list[TextNode], name: str) -> Optional[TextNode]:
    for n in nodes:
        if n.name == name:
            return n
    return None


def detect_layout(frame: ContainerNode) -> ArticleLayout:
    """Resolve the article slots of a frame.

    Body columns are the text layers named like the template's column layer
    (excluding the title slot itself) that have a bounding box, sorted left
    to right.
    """
    text_nodes = collect_text_nodes(frame)

    layout = ArticleLayout(
        headline=_first_named(text_nodes, SLOT_NAMES["headline"]),
        title=_first_named(text_nodes, SLOT_NAMES["title"]),
        subtitle=_first_named(text_nodes, SLOT_NAMES["subtitle"]),
        source=_first_named(text_nodes, SLOT_NAMES["source"]),
        url=_first_named(text_nodes, SLOT_NAMES["url"]),
    )

    candidates = [
        n for n in text_nodes
        if n.name == COLUMN_SLOT_NAME and n is not layout.title and n.has_bounds
    ]
    layout.columns = sorted(candidates, key=lambda n: n.x)
    return layout


def resolve_frame(selection: list[Node]) -> ContainerNode:
    """Return the single selected article frame or raise SelectionError."""
    if len(selection) != 1:
        raise SelectionError("Please select exactly one article frame")
    frame = selection[0]
    if not isinstance(frame, ContainerNode) or not frame.is_frame:
        raise SelectionError("Selected element must be a frame")
    return frame
