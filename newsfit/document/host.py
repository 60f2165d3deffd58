"""In-memory document host: font loading, text writes and overflow measurement.

Text height is estimated from the layer's width, font size and line height
by word-wrapping each line at a fixed average glyph width. This is enough to
drive the auto-fit loop from the command line; an editor integration supplies
its own host with the same three methods.
"""

from __future__ import annotations

import math
import textwrap
from contextlib import contextmanager
from typing import Iterator, Optional

from newsfit.config import CHAR_WIDTH_RATIO
from newsfit.document.nodes import AUTO_RESIZE_HEIGHT, TextNode
from newsfit.errors import MeasurementError


class DocumentHost:
    """Owns font availability and performs writes/measurements on text nodes."""

    def __init__(self, available_fonts: Optional[set[str]] = None):
        # None means every font can be loaded
        self.available_fonts = available_fonts
        self.loaded_fonts: set[str] = set()

    # ── Fonts ─────────────────────────────────────────────────────────────

    def load_fonts(self, node: TextNode) -> None:
        for font in node.fonts:
            if font in self.loaded_fonts:
                continue
            if self.available_fonts is not None and font not in self.available_fonts:
                raise MeasurementError(f"Font not available: {font} (layer '{node.name}')")
            self.loaded_fonts.add(font)

    # ── Text ──────────────────────────────────────────────────────────────

    def set_text(self, node: TextNode, content: str) -> None:
        """Write text into a layer once its fonts are loaded."""
        self.load_fonts(node)
        node.characters = content

    def text_height(self, node: TextNode) -> float:
        """Height the layer's text needs at its current width."""
        if not node.characters:
            return 0.0
        glyph_width = node.font_size * CHAR_WIDTH_RATIO
        chars_per_line = max(1, math.floor(node.width / glyph_width)) if glyph_width > 0 else 1

        line_count = 0
        for line in node.characters.split("\n"):
            wrapped = textwrap.wrap(line, width=chars_per_line, break_long_words=True)
            line_count += max(1, len(wrapped))
        return line_count * node.effective_line_height

    # ── Measurement ───────────────────────────────────────────────────────

    @contextmanager
    def sizing_override(self, node: TextNode) -> Iterator[TextNode]:
        """Temporarily let the layer grow to its content height.

        Sizing mode and height are restored on every exit path.
        """
        original_mode = node.auto_resize
        original_height = node.height
        try:
            node.auto_resize = AUTO_RESIZE_HEIGHT
            node.resize(node.width, self.text_height(node))
            yield node
        finally:
            node.auto_resize = original_mode
            node.resize(node.width, original_height)

    def measure_overflow(self, node: TextNode) -> float:
        """Return content height minus allotted height.

        Positive means the text overflows the layer, negative means spare room.
        """
        self.load_fonts(node)
        original_height = node.height
        with self.sizing_override(node) as sized:
            true_height = sized.height
        return true_height - original_height
