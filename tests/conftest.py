import pytest

from isotile import SimulationService


class RecordingSurface:
    """DrawingSurface that records every call as (name, args)."""

    def __init__(self):
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name, args))

    def fill(self, color):
        self._record("fill", color)

    def stroke(self, color):
        self._record("stroke", color)

    def stroke_weight(self, weight):
        self._record("stroke_weight", weight)

    def push(self):
        self._record("push")

    def pop(self):
        self._record("pop")

    def circle(self, x, y, diameter):
        self._record("circle", x, y, diameter)

    def ellipse(self, x, y, width, height):
        self._record("ellipse", x, y, width, height)

    def quad(self, x1, y1, x2, y2, x3, y3, x4, y4):
        self._record("quad", x1, y1, x2, y2, x3, y3, x4, y4)

    def line(self, x1, y1, x2, y2):
        self._record("line", x1, y1, x2, y2)

    def text(self, text, x, y):
        self._record("text", text, x, y)

    def text_align(self, horizontal, vertical):
        self._record("text_align", horizontal, vertical)

    def text_size(self, size):
        self._record("text_size", size)

    # Queries

    def names(self):
        return [name for name, _ in self.calls]

    def args_of(self, name):
        return [args for n, args in self.calls if n == name]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def sim():
    service = SimulationService()
    service.initialize()
    return service
