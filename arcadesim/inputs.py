"""
inputs.py — Per-frame input snapshots.

The host reads the keyboard once at the start of a frame and freezes the
result into one of these. The models never poll devices themselves, so every
check inside a frame sees the same input.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SnakeInput:
    """Edge signals: True only on the frame the key went down."""
    confirm: bool = False
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


@dataclass(frozen=True)
class PongInput:
    """`confirm` is an edge; the paddle signals are held levels."""
    confirm: bool = False
    left_up: bool = False
    left_down: bool = False
    right_up: bool = False
    right_down: bool = False
