"""Test doubles shared across the suite."""

from newsfit.document.host import DocumentHost
from newsfit.document.nodes import TextNode


class EventRecorder:
    """Notifier that keeps every event it receives."""

    def __init__(self):
        self.events = []

    def __call__(self, event):
        self.events.append(event)

    def of_type(self, cls):
        return [e for e in self.events if isinstance(e, cls)]


class StubHost(DocumentHost):
    """Host whose overflow readings come from a scripted list."""

    def __init__(self, overflows):
        super().__init__()
        self.overflows = list(overflows)
        self.measure_calls = 0
        self.writes = []

    def set_text(self, node, content):
        super().set_text(node, content)
        self.writes.append((node.name, node.x, content))

    def measure_overflow(self, node):
        value = self.overflows[min(self.measure_calls, len(self.overflows) - 1)]
        self.measure_calls += 1
        return value


def make_column(x: float, height: float = 500.0) -> TextNode:
    return TextNode(name="Title", x=x, y=200.0, width=180.0, height=height)
