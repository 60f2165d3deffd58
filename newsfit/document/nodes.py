"""Document tree node types.

The tree is a closed set of node kinds: text layers, containers (frames,
groups, components) and everything else. Only containers have children.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from newsfit.config import DEFAULT_FONT_SIZE, LINE_HEIGHT_FACTOR

CONTAINER_TYPES = {"FRAME", "GROUP", "COMPONENT", "INSTANCE", "SECTION"}

# Text sizing modes
AUTO_RESIZE_NONE = "NONE"
AUTO_RESIZE_HEIGHT = "HEIGHT"


@dataclass
class TextNode:
    name: str
    characters: str = ""
    x: Optional[float] = None  # None when the layer has no bounding box
    y: Optional[float] = None
    width: float = 0.0
    height: float = 0.0
    font_size: float = DEFAULT_FONT_SIZE
    line_height: Optional[float] = None
    fonts: list[str] = field(default_factory=lambda: ["Inter Regular"])
    auto_resize: str = AUTO_RESIZE_NONE
    type: str = "TEXT"

    @property
    def has_bounds(self) -> bool:
        return self.x is not None

    @property
    def effective_line_height(self) -> float:
        if self.line_height is not None:
            return self.line_height
        return self.font_size * LINE_HEIGHT_FACTOR

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height


@dataclass
class ContainerNode:
    name: str
    type: str = "FRAME"
    children: list[Node] = field(default_factory=list)

    @property
    def is_frame(self) -> bool:
        return self.type == "FRAME"


@dataclass
class OtherNode:
    """Any layer that neither holds text nor other layers (shapes, images...)."""

    name: str
    type: str = "RECTANGLE"


Node = Union[TextNode, ContainerNode, OtherNode]
