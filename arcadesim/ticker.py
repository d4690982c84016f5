"""
ticker.py — Frame-count step scheduler.

Turns the stream of rendered frames into discrete simulation steps. The only
clock is the frame count itself: no wall-clock delta is involved, so the Nth
step always lands on a computable frame.
"""

from .errors import ConfigError


class FrameTicker:
    """Fires once every `threshold` frames. A threshold of 1 fires every frame."""

    def __init__(self, threshold: int = 1):
        self.counter: int = 0
        self._threshold: int = 1
        self.threshold = threshold

    @property
    def threshold(self) -> int:
        return self._threshold

    @threshold.setter
    def threshold(self, value: int) -> None:
        if value < 1:
            raise ConfigError(f"threshold must be >= 1, got {value}")
        self._threshold = value

    def tick(self) -> bool:
        """Count one frame. Return True if a simulation step fires on it."""
        self.counter += 1
        if self.counter >= self._threshold:
            self.counter = 0
            return True
        return False

    def reset(self, threshold: int | None = None) -> None:
        self.counter = 0
        if threshold is not None:
            self.threshold = threshold
