"""
collision.py — Overlap tests and collision responses.

Everything here is a pure function: it reads positions and returns booleans or
new values, and the models decide what to do with them.

Grid tests work on (x, y) integer cells. Continuous tests work on floats and
on Box, an axis-aligned rectangle given by its top-left corner and size.
"""

from collections.abc import Sequence
from itertools import islice
from typing import NamedTuple

from pygame.math import Vector2

Cell = tuple[int, int]


class Box(NamedTuple):
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


# ── Grid ──────────────────────────────────────────────────────────
def in_grid(cell: Cell, cols: int, rows: int) -> bool:
    x, y = cell
    return 0 <= x < cols and 0 <= y < rows


def hits_body(body: Sequence[Cell]) -> bool:
    """True if the head (index 0) shares a cell with any later segment."""
    head = body[0]
    return any(seg == head for seg in islice(body, 1, None))


# ── Continuous ────────────────────────────────────────────────────
def point_in_rect(x: float, y: float, box: Box) -> bool:
    return box.x <= x <= box.right and box.y <= y <= box.bottom


def rects_overlap(a: Box, b: Box) -> bool:
    return a.x < b.right and b.x < a.right and a.y < b.bottom and b.y < a.bottom


def circles_overlap(c1: Vector2, r1: float, c2: Vector2, r2: float) -> bool:
    return c1.distance_squared_to(c2) <= (r1 + r2) ** 2


def circle_rect_overlap(center: Vector2, radius: float, box: Box) -> bool:
    """Closest-point test: clamp the centre onto the box and measure the gap."""
    nearest_x = min(max(center.x, box.x), box.right)
    nearest_y = min(max(center.y, box.y), box.bottom)
    dx = center.x - nearest_x
    dy = center.y - nearest_y
    return dx * dx + dy * dy <= radius * radius


# ── Responses ─────────────────────────────────────────────────────
def wall_bounce(y: float, vy: float, radius: float, height: float) -> tuple[float, float]:
    """
    Reflect off the top/bottom walls.

    Returns the new (y, vy). When the ball's edge touches or crosses a wall the
    vertical velocity is negated and the ball is pushed back inside in the same
    step, so it cannot stick to or tunnel through the wall over several frames.
    """
    if y - radius <= 0 or y + radius >= height:
        vy = -vy
        if y - radius < 0:
            y = radius
        elif y + radius > height:
            y = height - radius
    return y, vy


def hit_offset(ball_y: float, paddle: Box) -> float:
    """Where the ball met the paddle: 0.0 at the top edge, 1.0 at the bottom."""
    return min(max((ball_y - paddle.y) / paddle.h, 0.0), 1.0)


def deflect(
    velocity: Vector2,
    offset: float,
    sign: int,
    *,
    max_angle: float,
    increase: float,
    min_speed: float,
    max_speed: float,
) -> Vector2:
    """
    New ball velocity after a paddle hit.

    offset    : hit_offset() of the contact, mapped linearly onto
                [-max_angle, +max_angle] degrees
    sign      : horizontal direction the ball leaves in (+1 right, -1 left)

    The speed grows by `increase` and is kept inside [min_speed, max_speed].
    """
    angle = (offset - 0.5) * 2.0 * max_angle
    speed = min(max(velocity.length() + increase, min_speed), max_speed)
    out = Vector2(speed, 0).rotate(angle)
    out.x *= sign
    return out


def serve_velocity(angle: float, speed: float, sign: int) -> Vector2:
    out = Vector2(speed, 0).rotate(angle)
    out.x *= sign
    return out
