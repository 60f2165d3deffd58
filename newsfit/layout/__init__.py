"""Article layout: slot detection and column distribution."""

from newsfit.layout.locator import ArticleLayout, collect_text_nodes, detect_layout, resolve_frame
from newsfit.layout.distributor import distribute, split_paragraphs

__all__ = [
    "ArticleLayout",
    "collect_text_nodes",
    "detect_layout",
    "resolve_frame",
    "distribute",
    "split_paragraphs",
]
