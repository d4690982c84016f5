"""
pong_model.py — Physics game model.

Two paddles and one ball in a continuous field. Every Playing frame is a
simulation step: constant-velocity motion, wall and paddle reflection, and
scoring when the ball leaves the field on either side.

Classes:
    Paddle     — vertical position driven by a held input, clamped to the field
    Ball       — position, velocity and radius
    PongFrame  — read-only snapshot handed to the view
    PongGame   — top-level model; owns paddles, ball, scores and phase
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from pygame.math import Vector2

from .collision import Box, circle_rect_overlap, deflect, hit_offset, serve_velocity, wall_bounce
from .config import PongConfig
from .inputs import PongInput
from .phase import MENU, Cause, Phase, Playing, Side, Terminal, next_phase, phase_name, starts_round

logger = logging.getLogger(__name__)


# ──────────────────────────── Paddle ─────────────────────────────
class Paddle:
    def __init__(self, x: float, y: float, w: float, h: float, speed: float):
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.speed = speed

    @property
    def box(self) -> Box:
        return Box(self.x, self.y, self.w, self.h)

    def move(self, up: bool, down: bool, field_height: float) -> None:
        """Apply one frame of held input, then clamp to [0, field_height - h]."""
        if up:
            self.y -= self.speed
        if down:
            self.y += self.speed
        self.y = min(max(self.y, 0.0), field_height - self.h)


# ───────────────────────────── Ball ──────────────────────────────
class Ball:
    def __init__(self, position: Vector2, velocity: Vector2, radius: float):
        self.pos = Vector2(position)
        self.vel = Vector2(velocity)
        self.radius = radius

    @property
    def speed(self) -> float:
        return self.vel.length()

    def integrate(self) -> None:
        self.pos += self.vel


# ─────────────────────────── PongFrame ───────────────────────────
@dataclass(frozen=True)
class PongFrame:
    phase: Phase
    left: Box
    right: Box
    ball: tuple[float, float]
    velocity: tuple[float, float]
    radius: float
    left_score: int
    right_score: int
    winner: Optional[Side]
    winning_score: int
    width: float
    height: float


# ─────────────────────────── PongGame ────────────────────────────
class PongGame:
    """
    Top-level model. Owns all game state.
    The controller calls update() once per rendered frame.
    """

    def __init__(
        self,
        config: Optional[PongConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self.config: PongConfig = config or PongConfig()
        self.rng = rng if rng is not None else random.Random(seed)
        self.phase: Phase = MENU
        self.left: Paddle = None
        self.right: Paddle = None
        self.ball: Ball = None
        self.scores: dict[Side, int] = {}
        self._reset_entities()

    # ── Public API ───────────────────────────────────────────────
    def update(self, inputs: PongInput) -> Phase:
        """Advance one frame. Returns the phase in effect after the frame."""
        outcome = None
        if isinstance(self.phase, Playing):
            outcome = self._game_step(inputs)

        before = self.phase
        self.phase = next_phase(before, inputs.confirm, outcome)
        if starts_round(before, self.phase):
            self._reset_entities()
        if self.phase is not before:
            logger.info("pong: %s -> %s", phase_name(before), phase_name(self.phase))
            if isinstance(self.phase, Terminal):
                logger.info(
                    "pong: %s wins %d-%d",
                    self.phase.winner.value, *self.phase.scores,
                )
        return self.phase

    def serve(self, toward: Side) -> None:
        """Put the ball back at the centre, heading for `toward` at a random angle."""
        cfg = self.config
        angle = self.rng.uniform(-cfg.serve_angle, cfg.serve_angle)
        self.ball = Ball(
            Vector2(cfg.width / 2, cfg.height / 2),
            serve_velocity(angle, cfg.ball_speed_start, toward.sign),
            cfg.ball_radius,
        )

    def frame(self) -> PongFrame:
        cfg = self.config
        winner = self.phase.winner if isinstance(self.phase, Terminal) else None
        return PongFrame(
            phase=self.phase,
            left=self.left.box,
            right=self.right.box,
            ball=(self.ball.pos.x, self.ball.pos.y),
            velocity=(self.ball.vel.x, self.ball.vel.y),
            radius=self.ball.radius,
            left_score=self.scores[Side.LEFT],
            right_score=self.scores[Side.RIGHT],
            winner=winner,
            winning_score=cfg.winning_score,
            width=cfg.width,
            height=cfg.height,
        )

    # ── Private helpers ──────────────────────────────────────────
    def _reset_entities(self) -> None:
        cfg = self.config
        top = cfg.height / 2 - cfg.paddle_h / 2
        self.left = Paddle(cfg.paddle_margin, top, cfg.paddle_w, cfg.paddle_h, cfg.paddle_speed)
        self.right = Paddle(
            cfg.width - cfg.paddle_margin - cfg.paddle_w, top,
            cfg.paddle_w, cfg.paddle_h, cfg.paddle_speed,
        )
        self.scores = {Side.LEFT: 0, Side.RIGHT: 0}
        self.serve(Side.RIGHT)

    def _game_step(self, inputs: PongInput) -> Optional[Terminal]:
        cfg = self.config
        self.left.move(inputs.left_up, inputs.left_down, cfg.height)
        self.right.move(inputs.right_up, inputs.right_down, cfg.height)

        ball = self.ball
        ball.integrate()
        ball.pos.y, ball.vel.y = wall_bounce(ball.pos.y, ball.vel.y, ball.radius, cfg.height)

        self._paddle_hit(self.left, Side.LEFT)
        self._paddle_hit(self.right, Side.RIGHT)

        if ball.pos.x < 0:
            return self._point(Side.RIGHT)
        if ball.pos.x > cfg.width:
            return self._point(Side.LEFT)
        return None

    def _paddle_hit(self, paddle: Paddle, side: Side) -> None:
        ball = self.ball
        # Only a ball moving toward the paddle can hit it.
        if ball.vel.x * side.sign <= 0:
            return
        box = paddle.box
        if not circle_rect_overlap(ball.pos, ball.radius, box):
            return

        cfg = self.config
        offset = hit_offset(ball.pos.y, box)
        ball.vel = deflect(
            ball.vel,
            offset,
            side.opponent.sign,
            max_angle=cfg.bounce_angle,
            increase=cfg.ball_speed_increase,
            min_speed=cfg.ball_speed_start,
            max_speed=cfg.ball_speed_max,
        )
        if side is Side.LEFT:
            ball.pos.x = box.right + ball.radius
        else:
            ball.pos.x = box.x - ball.radius
        logger.debug("pong: %s paddle hit at offset %.2f, speed %.2f", side.value, offset, ball.speed)

    def _point(self, scorer: Side) -> Optional[Terminal]:
        self.scores[scorer] += 1
        left, right = self.scores[Side.LEFT], self.scores[Side.RIGHT]
        logger.debug("pong: point to %s, %d-%d", scorer.value, left, right)
        if self.scores[scorer] >= self.config.winning_score:
            return Terminal(Cause.WIN, score=self.scores[scorer], winner=scorer, scores=(left, right))
        self.serve(scorer.opponent)
        return None
