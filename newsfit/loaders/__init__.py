"""Data loading: article records and JSON document trees."""

from newsfit.loaders.article import ArticleContent, article_from_dict, load_article
from newsfit.loaders.document import (
    find_nodes_by_name,
    load_document,
    node_from_dict,
    node_to_dict,
    save_document,
)

__all__ = [
    "ArticleContent",
    "article_from_dict",
    "load_article",
    "find_nodes_by_name",
    "load_document",
    "node_from_dict",
    "node_to_dict",
    "save_document",
]
