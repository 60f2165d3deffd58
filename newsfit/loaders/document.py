"""Read and write JSON document trees.

Each node is an object with a ``type`` and ``name``. Text layers carry
``characters``, ``x``/``y``, ``width``/``height``, ``font_size``,
``line_height``, ``fonts`` and ``auto_resize``; containers carry
``children``.
"""

from __future__ import annotations

import json
from pathlib import Path

from newsfit.document.nodes import CONTAINER_TYPES, ContainerNode, Node, OtherNode, TextNode

TEXT_FIELDS = (
    "characters", "x", "y", "width", "height",
    "font_size", "line_height", "fonts", "auto_resize",
)


def node_from_dict(data: dict) -> Node:
    node_type = str(data.get("type", "")).upper()
    name = data.get("name", "")

    if node_type == "TEXT":
        kwargs = {k: data[k] for k in TEXT_FIELDS if k in data}
        return TextNode(name=name, **kwargs)
    if node_type in CONTAINER_TYPES:
        children = [node_from_dict(c) for c in data.get("children", [])]
        return ContainerNode(name=name, type=node_type, children=children)
    return OtherNode(name=name, type=node_type or "UNKNOWN")


def node_to_dict(node: Node) -> dict:
    if isinstance(node, TextNode):
        out = {"type": node.type, "name": node.name}
        for k in TEXT_FIELDS:
            out[k] = getattr(node, k)
        return out
    if isinstance(node, ContainerNode):
        return {
            "type": node.type,
            "name": node.name,
            "children": [node_to_dict(c) for c in node.children],
        }
    return {"type": node.type, "name": node.name}


def load_document(path: Path) -> Node:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return node_from_dict(data)


def save_document(root: Node, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(node_to_dict(root), indent=2, ensure_ascii=False), encoding="utf-8")


def find_nodes_by_name(root: Node, name: str) -> list[Node]:
    """Every node (any kind) under ``root`` whose name matches exactly."""
    matches: list[Node] = []

    def _walk(n: Node) -> None:
        if n.name == name:
            matches.append(n)
        if isinstance(n, ContainerNode):
            for child in n.children:
                _walk(child)

    _walk(root)
    return matches
