import random

import pytest

from flappy.config import Bounds


class FixedRng:
    """Stands in for random.Random and always picks the same gap top."""

    def __init__(self, top):
        self.top = top
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.top


@pytest.fixture
def bounds():
    return Bounds(width=400, height=600)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    return FixedRng
