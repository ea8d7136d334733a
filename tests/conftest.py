"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from wordswarm.config import WorldConfig
from wordswarm.vector import Vector
from wordswarm.world import World


def _bitmap(*rows):
    return [[1 if c == "#" else 0 for c in row] for row in rows]


@pytest.fixture
def ab_glyphs():
    """5x5 table where 'A' has 3 set cells and 'B' has 4."""
    return {
        "A": _bitmap("..#..", ".....", "#...#", ".....", "....."),
        "B": _bitmap("#....", "#....", ".....", ".....", "##..."),
    }


@pytest.fixture
def line_glyphs():
    """A single glyph 'L' of ten cells in one row."""
    return {"L": [[1] * 10]}


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_world(ab_glyphs, rng):
    """Build a world over the 'AB' table; keyword arguments go to WorldConfig."""
    def factory(glyphs=None, width=800, height=600, **overrides):
        settings = {"word": "AB", "word_size": 10, "delay": 0}
        settings.update(overrides)
        return World(glyphs or ab_glyphs, WorldConfig(**settings), width=width, height=height, rng=rng)
    return factory


def spread_out(world, spacing=100.0):
    """Park every particle on its own spot on a grid with zero velocity."""
    per_row = 5
    for idx, p in enumerate(world.particles):
        p.position = Vector(spacing * (idx % per_row + 1), spacing * (idx // per_row + 1))
        p.velocity = Vector(0.0, 0.0)


class RecordingCanvas:
    """Canvas that records every drawing call in order."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def add_particle(self, x, y, size=20, border=None, foreground=None, opacity=1):
        self.calls.append(("particle", x, y, size, border, foreground, opacity))

    def add_line(self, x1, y1, x2, y2, color=None, opacity=1):
        self.calls.append(("line", x1, y1, x2, y2, color, opacity))

    def add_background_text(self, text):
        self.calls.append(("text", text))

    def kinds(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def recording_canvas():
    return RecordingCanvas()
