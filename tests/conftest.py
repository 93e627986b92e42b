import random

import pytest


@pytest.fixture
def rng():
    return random.Random(1234)


class FakeClock:
    """Manual clock; sleep() moves it forward."""

    def __init__(self, t: float = 0.0):
        self.t = t

    def __call__(self) -> float:
        return self.t

    def sleep(self, seconds: float) -> None:
        self.t += seconds


@pytest.fixture
def clock():
    return FakeClock()
