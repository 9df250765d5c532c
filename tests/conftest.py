"""Shared fixtures: a recording pixel sink and seeded generators."""

import numpy as np
import pytest


class RecordingSink:
    """Pixel sink that remembers every display() call in order."""

    def __init__(self):
        self.calls = []

    def display(self, x, y, color):
        self.calls.append((x, y, color))

    @property
    def coords(self):
        return [(x, y) for x, y, _ in self.calls]

    @property
    def colors(self):
        return {c for _, _, c in self.calls}


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_sink():
    return RecordingSink


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
