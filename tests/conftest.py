"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from dwencanvas import Canvas
from dwenturtle import Turtle

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


class RecordingCanvas:
    """Stands in for Canvas and keeps every segment the turtle asks for."""

    def __init__(self):
        self.segments = []
        self.dots = []

    def draw_line(self, x0, y0, x1, y1, color, width=1):
        self.segments.append(((x0, y0), (x1, y1), color, width))

    def dot(self, x, y, diameter, color):
        self.dots.append((x, y, diameter, color))

    def total_length(self):
        return sum(math.dist(a, b) for a, b, _, _ in self.segments)


def angle_between(a: float, b: float) -> float:
    """Smallest absolute difference between two headings in degrees."""
    d = (a - b) % 360.0
    return min(d, 360.0 - d)


@pytest.fixture
def canvas() -> Canvas:
    return Canvas(100, 100, WHITE)


@pytest.fixture
def turtle(canvas) -> Turtle:
    t = Turtle(canvas, x=50, y=50, heading=0)
    t.color(BLACK)
    t.pensize(1)
    t.pendown()
    return t


@pytest.fixture
def recorder() -> RecordingCanvas:
    return RecordingCanvas()
