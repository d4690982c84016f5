"""
errors.py — Exception hierarchy.

Only programmer and configuration mistakes are exceptions. Losing, winning and
running out of room are ordinary phases (see phase.py).
"""


class ArcadeError(Exception):
    """Base class for every error raised by arcadesim."""


class ConfigError(ArcadeError, ValueError):
    """A tunable or constant combination that cannot produce a playable game."""


class SnakeCapacityError(ConfigError):
    """Snake.grow() was called on a snake that is already at capacity."""
