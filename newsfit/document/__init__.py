"""Document model: node types and the in-memory host that edits them."""

from newsfit.document.nodes import ContainerNode, Node, OtherNode, TextNode
from newsfit.document.host import DocumentHost

__all__ = ["ContainerNode", "Node", "OtherNode", "TextNode", "DocumentHost"]
