"""User-facing operations on a selected article frame.

Each operation takes the selection, host and notifier explicitly. Errors the
user can act on are raised as NewsFitError subclasses; ``dispatch`` turns
them into ErrorEvent notifications.
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Optional

from newsfit.config import FIT_TOLERANCE, MAX_ITERATIONS
from newsfit.credentials import CredentialStore
from newsfit.document.host import DocumentHost
from newsfit.document.nodes import Node
from newsfit.errors import CredentialMissingError, NewsFitError, SelectionError
from newsfit.events import ApiKeySaved, ErrorEvent, FillComplete, LayoutDetected, Notifier
from newsfit.layout.locator import ArticleLayout, detect_layout, resolve_frame
from newsfit.loaders.article import ArticleContent, article_from_dict
from newsfit.pipeline.adjuster import adjust_length, create_client
from newsfit.pipeline.autofit import AdjustFn, FitOutcome, fill_columns, run_auto_fit

# api_key -> rewrite function
AdjusterFactory = Callable[[str], AdjustFn]


def claude_adjuster(api_key: str) -> AdjustFn:
    return partial(adjust_length, create_client(api_key))


def detect(selection: list[Node], notify: Notifier) -> ArticleLayout:
    """Report which slots and how many body columns the selected frame has."""
    layout = detect_layout(resolve_frame(selection))
    notify(LayoutDetected(**layout.summary()))
    return layout


def fill_content(
    content: ArticleContent,
    selection: list[Node],
    host: DocumentHost,
    notify: Notifier,
    tolerance: float = FIT_TOLERANCE,
) -> float:
    """Write every field into its slot and spread the body over the columns.

    Returns the last column's overflow (0 when there are no columns or no body).
    """
    layout = detect_layout(resolve_frame(selection))

    for node, value in (
        (layout.headline, content.overline),
        (layout.title, content.title),
        (layout.subtitle, content.subtitle),
        (layout.source, content.source),
        (layout.url, content.url),
    ):
        if node is not None and value:
            host.set_text(node, value)

    if not layout.columns or not content.body:
        notify(FillComplete(overflow=0.0, needs_adjustment=False))
        return 0.0

    fill_columns(host, layout.columns, content.dateline, content.body)
    overflow = host.measure_overflow(layout.columns[-1])
    print(f"  OK Filled {len(layout.columns)} columns, overflow {overflow:+.1f}")

    notify(FillComplete(overflow=overflow, needs_adjustment=overflow > tolerance))
    return overflow


def save_api_key(api_key: str, store: CredentialStore, notify: Notifier) -> None:
    store.set(api_key)
    notify(ApiKeySaved())


def auto_fit(
    content: ArticleContent,
    selection: list[Node],
    host: DocumentHost,
    store: CredentialStore,
    notify: Notifier,
    adjuster_factory: AdjusterFactory = claude_adjuster,
    max_iterations: int = MAX_ITERATIONS,
) -> FitOutcome:
    """Fill the body columns and rewrite the body until it fits.

    Raises SelectionError or CredentialMissingError before anything is written.
    """
    frame = resolve_frame(selection)

    api_key = store.get()
    if not api_key:
        raise CredentialMissingError("Please save your Claude API key first")

    layout = detect_layout(frame)
    if not layout.columns:
        raise SelectionError("No body columns detected in this frame")

    print(f"  -> Auto-fitting '{frame.name}' ({len(layout.columns)} columns)...")
    return run_auto_fit(
        content=content,
        layout=layout,
        host=host,
        adjust=adjuster_factory(api_key),
        notify=notify,
        max_iterations=max_iterations,
    )


def dispatch(
    message: dict,
    selection: list[Node],
    host: DocumentHost,
    store: CredentialStore,
    notify: Notifier,
    adjuster_factory: AdjusterFactory = claude_adjuster,
) -> Optional[object]:
    """Route a ``{"type": ..., "data": ...}`` message to its operation.

    Any NewsFitError is reported as an ErrorEvent instead of raised.
    """
    msg_type = message.get("type")
    data = message.get("data")

    try:
        if msg_type == "detect-layout":
            return detect(selection, notify)
        if msg_type == "fill-content":
            return fill_content(article_from_dict(data or {}), selection, host, notify)
        if msg_type == "save-api-key":
            return save_api_key(str(data or ""), store, notify)
        if msg_type == "auto-fit":
            return auto_fit(
                article_from_dict(data or {}), selection, host, store, notify,
                adjuster_factory=adjuster_factory,
            )
    except NewsFitError as e:
        notify(ErrorEvent(message=str(e)))
        return None

    notify(ErrorEvent(message=f"Unknown message type: {msg_type}"))
    return None
