"""One-way notifications sent from operations to the caller.

Operations receive a ``notify`` callable and hand it event objects; nothing
is returned to the operation. ``to_message()`` gives the plugin UI message
shape ``{"type": ..., "data": {"camelCaseKey": ...}}``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Callable, ClassVar, Union


@dataclass(frozen=True)
class IterationStarted:
    type: ClassVar[str] = "iteration-update"
    iteration: int


@dataclass(frozen=True)
class LayoutDetected:
    type: ClassVar[str] = "layout-detected"
    has_headline: bool
    has_title: bool
    has_subtitle: bool
    has_source: bool
    has_url: bool
    column_count: int


@dataclass(frozen=True)
class FillComplete:
    type: ClassVar[str] = "fill-complete"
    overflow: float
    needs_adjustment: bool


@dataclass(frozen=True)
class AutoFitComplete:
    type: ClassVar[str] = "auto-fit-complete"
    iterations: int
    overflow: float
    max_reached: bool = False


@dataclass(frozen=True)
class ApiKeySaved:
    type: ClassVar[str] = "api-key-saved"


@dataclass(frozen=True)
class ErrorEvent:
    type: ClassVar[str] = "error"
    message: str


Event = Union[IterationStarted, LayoutDetected, FillComplete, AutoFitComplete, ApiKeySaved, ErrorEvent]
Notifier = Callable[[Event], None]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_message(event: Event) -> dict:
    """Plugin UI message: camelCase keys under ``data``; errors carry ``message`` at the top."""
    if isinstance(event, ErrorEvent):
        return {"type": event.type, "message": event.message}
    data = {_camel(k): v for k, v in asdict(event).items()}
    if not data:
        return {"type": event.type}
    return {"type": event.type, "data": data}
