from __future__ import annotations

from pathlib import Path

import pytest

from newsfit.credentials import CredentialStore
from newsfit.document.nodes import ContainerNode, OtherNode, TextNode
from newsfit.loaders.article import ArticleContent
from tests.helpers import EventRecorder, make_column


@pytest.fixture
def article_frame() -> ContainerNode:
    """Article frame with all named slots and three body columns (out of x order)."""
    return ContainerNode(
        name="Article",
        type="FRAME",
        children=[
            TextNode(name="Headline", x=0, y=0, width=600, height=20),
            TextNode(name="#Title", x=0, y=30, width=600, height=60, font_size=32),
            TextNode(name="#Subtitle", x=0, y=100, width=600, height=40, font_size=18),
            OtherNode(name="Rule", type="LINE"),
            ContainerNode(
                name="Body",
                type="GROUP",
                children=[make_column(400), make_column(0), make_column(200)],
            ),
            TextNode(name="Source", x=0, y=720, width=300, height=14),
            TextNode(name="URL", x=300, y=720, width=300, height=14),
        ],
    )


@pytest.fixture
def article() -> ArticleContent:
    return ArticleContent(
        overline="WORLD",
        title="Harbour reopens after storm",
        subtitle="Shipping resumes at reduced capacity",
        source="Staff reporter",
        url="https://example.com/harbour",
        dateline="CAPE TOWN",
        body="First paragraph here.\n\nSecond paragraph here.\n\nThird paragraph here.",
    )


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def store(tmp_path: Path) -> CredentialStore:
    return CredentialStore(path=tmp_path / "credentials.json", fallback="")
