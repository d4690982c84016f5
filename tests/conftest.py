import random

import pytest

from arcadesim.inputs import PongInput, SnakeInput


class ScriptedRng:
    """Stand-in for random.Random that replays queued draws, then repeats a default."""

    def __init__(self, draws=(), default=0):
        self.draws = list(draws)
        self.default = default

    def _next(self):
        return self.draws.pop(0) if self.draws else self.default

    def randrange(self, n):
        return self._next() % n

    def uniform(self, a, b):
        return min(max(float(self._next()), a), b)


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def scripted_rng() -> ScriptedRng:
    return ScriptedRng()


def run_frames(game, frames: int, inputs=None) -> None:
    if inputs is None:
        inputs = SnakeInput() if hasattr(game, "snake") else PongInput()
    for _ in range(frames):
        game.update(inputs)
