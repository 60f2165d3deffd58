"""Iteratively rewrite the article body until it fits the body columns.

Each iteration fills the columns, measures the last column's overflow and,
unless the overflow is within tolerance or the iteration ceiling is hit,
asks the rewrite step for a body sized by the ratio of allotted height to
needed height. Word count is assumed proportional to rendered height.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Callable, Optional

from newsfit.config import FIT_TOLERANCE, MAX_ITERATIONS
from newsfit.document.host import DocumentHost
from newsfit.document.nodes import TextNode
from newsfit.errors import MeasurementError, OracleError
from newsfit.events import AutoFitComplete, ErrorEvent, IterationStarted, Notifier
from newsfit.layout.distributor import distribute
from newsfit.layout.locator import ArticleLayout
from newsfit.loaders.article import ArticleContent
from newsfit.pipeline.adjuster import count_words

# (content, current_words, target_words, needs_condensing) -> rewritten content
AdjustFn = Callable[[str, int, int, bool], str]


class FitStatus(enum.Enum):
    CONVERGED = "converged"
    MAX_ITERATIONS_REACHED = "max_iterations_reached"
    FAILED = "failed"


@dataclass
class FitState:
    current_body: str
    iteration: int = 0
    last_overflow: float = 0.0


@dataclass(frozen=True)
class FitOutcome:
    status: FitStatus
    iterations: int
    overflow: float
    body: str
    adjust_calls: int = 0
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "iterations": self.iterations,
            "overflow": self.overflow,
            "adjust_calls": self.adjust_calls,
            "error": self.error,
            "word_count": count_words(self.body),
            "body": self.body,
        }


def compute_target_words(current_words: int, column_height: float, overflow: float) -> int:
    """Scale the word count by allotted height over needed height.

    >>> compute_target_words(1000, 500, 100)
    833
    """
    needed_height = column_height + overflow
    if needed_height <= 0:
        raise MeasurementError(
            "Last column is empty, so no target length can be estimated; "
            "add body text or use a frame with fewer columns"
        )
    height_ratio = column_height / needed_height
    return math.floor(current_words * height_ratio)


def fill_columns(
    host: DocumentHost,
    columns: list[TextNode],
    dateline: str,
    body: str,
) -> list[str]:
    """Distribute the dateline and body across ``columns`` and write them in order."""
    texts = distribute(dateline, body, len(columns))
    for column, text in zip(columns, texts):
        host.set_text(column, text)
    return texts


def run_auto_fit(
    content: ArticleContent,
    layout: ArticleLayout,
    host: DocumentHost,
    adjust: AdjustFn,
    notify: Notifier,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = FIT_TOLERANCE,
) -> FitOutcome:
    """Run the fill -> measure -> rewrite loop and return its terminal outcome.

    ``layout`` must have at least one column. Rewrite and measurement
    failures end the run as FAILED with an ErrorEvent; whatever was last
    written to the columns stays in place.
    """
    if not layout.columns:
        raise ValueError("run_auto_fit needs a layout with at least one column")

    state = FitState(current_body=content.body)
    last_column = layout.columns[-1]
    adjust_calls = 0

    while state.iteration < max_iterations:
        state.iteration += 1
        notify(IterationStarted(iteration=state.iteration))
        print(f"  -> Iteration {state.iteration}/{max_iterations}")

        try:
            fill_columns(host, layout.columns, content.dateline, state.current_body)
            state.last_overflow = host.measure_overflow(last_column)
        except MeasurementError as e:
            return _fail(state, notify, str(e), adjust_calls)

        print(f"  .. overflow {state.last_overflow:+.1f}")

        if abs(state.last_overflow) <= tolerance:
            notify(AutoFitComplete(iterations=state.iteration, overflow=state.last_overflow))
            return FitOutcome(
                status=FitStatus.CONVERGED,
                iterations=state.iteration,
                overflow=state.last_overflow,
                body=state.current_body,
                adjust_calls=adjust_calls,
            )

        if state.iteration >= max_iterations:
            break

        current_words = count_words(state.current_body)
        try:
            target_words = compute_target_words(current_words, last_column.height, state.last_overflow)
        except MeasurementError as e:
            return _fail(state, notify, str(e), adjust_calls)
        needs_condensing = state.last_overflow > 0

        adjust_calls += 1
        try:
            state.current_body = adjust(state.current_body, current_words, target_words, needs_condensing)
        except OracleError as e:
            return _fail(state, notify, f"Claude API error: {e}", adjust_calls)

    notify(AutoFitComplete(iterations=state.iteration, overflow=state.last_overflow, max_reached=True))
    return FitOutcome(
        status=FitStatus.MAX_ITERATIONS_REACHED,
        iterations=state.iteration,
        overflow=state.last_overflow,
        body=state.current_body,
        adjust_calls=adjust_calls,
    )


def _fail(state: FitState, notify: Notifier, message: str, adjust_calls: int) -> FitOutcome:
    print(f"  Warning: auto-fit stopped at iteration {state.iteration}: {message}")
    notify(ErrorEvent(message=message))
    return FitOutcome(
        status=FitStatus.FAILED,
        iterations=state.iteration,
        overflow=state.last_overflow,
        body=state.current_body,
        adjust_calls=adjust_calls,
        error=message,
    )
