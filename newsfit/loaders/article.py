"""Load article text records from JSON files."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from newsfit.errors import InputError


@dataclass(frozen=True)
class ArticleContent:
    overline: str = ""
    title: str = ""
    subtitle: str = ""
    source: str = ""
    url: str = ""
    dateline: str = ""
    body: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


def article_from_dict(data: dict) -> ArticleContent:
    """Build an ArticleContent, ignoring unknown keys and coercing None to ''."""
    if not isinstance(data, dict):
        raise InputError(f"Article data must be an object of text fields, got {type(data).__name__}")
    known = {f.name for f in fields(ArticleContent)}
    values = {k: str(v) if v is not None else "" for k, v in data.items() if k in known}
    return ArticleContent(**values)


def load_article(path: Path) -> ArticleContent:
    """Read an article JSON file: {"overline", "title", ..., "dateline", "body"}.

    A plain-text file is treated as the body alone.
    """
    path = Path(path)
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() != ".json":
        return ArticleContent(body=raw.strip())

    return article_from_dict(json.loads(raw))
