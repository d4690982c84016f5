"""
config.py — Shared constants and validated tunables.

Constants are plain module-level names. The two dataclasses group the values a
game session is built from and refuse impossible combinations up front, so a
bad tunable fails at construction instead of half-way through a match.
"""

from dataclasses import dataclass

from .errors import ConfigError

# ── Window & Grid ─────────────────────────────────────────────────
WIDTH, HEIGHT   = 800, 600
PANEL_H         = 30
CELL            = 20
COLS            = WIDTH // CELL
ROWS            = HEIGHT // CELL
FPS             = 60

# ── Snake ─────────────────────────────────────────────────────────
MAX_SNAKE_LENGTH     = 300
INITIAL_SNAKE_LENGTH = 3
INITIAL_SPEED        = 15   # frames per step, lower is faster
MIN_SPEED            = 5
FOOD_SCORE           = 10
SPAWN_ATTEMPTS       = 256

# ── Pong ──────────────────────────────────────────────────────────
PADDLE_W            = 15
PADDLE_H            = 80
PADDLE_MARGIN       = 30
PADDLE_SPEED        = 6.0
BALL_RADIUS         = 8.0
BALL_SPEED_START    = 5.0
BALL_SPEED_MAX      = 12.0
BALL_SPEED_INCREASE = 0.5
WINNING_SCORE       = 5
SERVE_ANGLE         = 30.0  # degrees either side of horizontal
BOUNCE_ANGLE        = 30.0

# ── Colors ────────────────────────────────────────────────────────
BG          = (0,   117, 44)
GRID_COL    = (0,   104, 40)
SNAKE_COL   = (0,   228, 48)
SNAKE_DIM   = (0,   140, 40)
FOOD_COL    = (230, 41,  55)
PONG_BG     = (0,   0,   0)
LEFT_COL    = (0,   121, 241)
RIGHT_COL   = (230, 41,  55)
BALL_COL    = (253, 249, 0)
UI_COL      = (200, 200, 200)
WHITE       = (255, 255, 255)
GRAY        = (130, 130, 130)
PANEL_BG    = (0,   0,   0)


@dataclass(frozen=True)
class SnakeConfig:
    cols: int = COLS
    rows: int = ROWS
    max_length: int = MAX_SNAKE_LENGTH
    initial_length: int = INITIAL_SNAKE_LENGTH
    initial_speed: int = INITIAL_SPEED
    min_speed: int = MIN_SPEED
    food_score: int = FOOD_SCORE
    spawn_attempts: int = SPAWN_ATTEMPTS

    def __post_init__(self):
        if self.cols < 1 or self.rows < 1:
            raise ConfigError(f"grid must be at least 1x1, got {self.cols}x{self.rows}")
        if self.max_length > self.cols * self.rows:
            raise ConfigError(
                f"max_length {self.max_length} exceeds the {self.cols * self.rows} cells of the grid"
            )
        # Room to eat at least once before reaching capacity.
        if not 1 <= self.initial_length < self.max_length:
            raise ConfigError(
                f"initial_length must be in [1, {self.max_length - 1}], got {self.initial_length}"
            )
        # The starting chain extends left from the centre column.
        if self.initial_length > self.cols // 2 + 1:
            raise ConfigError(
                f"a snake of length {self.initial_length} does not fit left of column {self.cols // 2}"
            )
        if self.min_speed < 1:
            raise ConfigError(f"min_speed must be >= 1, got {self.min_speed}")
        if self.initial_speed < self.min_speed:
            raise ConfigError(
                f"initial_speed {self.initial_speed} is below min_speed {self.min_speed}"
            )
        if self.food_score < 1:
            raise ConfigError(f"food_score must be positive, got {self.food_score}")
        if self.spawn_attempts < 1:
            raise ConfigError(f"spawn_attempts must be >= 1, got {self.spawn_attempts}")


@dataclass(frozen=True)
class PongConfig:
    width: float = WIDTH
    height: float = HEIGHT
    paddle_w: float = PADDLE_W
    paddle_h: float = PADDLE_H
    paddle_margin: float = PADDLE_MARGIN
    paddle_speed: float = PADDLE_SPEED
    ball_radius: float = BALL_RADIUS
    ball_speed_start: float = BALL_SPEED_START
    ball_speed_max: float = BALL_SPEED_MAX
    ball_speed_increase: float = BALL_SPEED_INCREASE
    winning_score: int = WINNING_SCORE
    serve_angle: float = SERVE_ANGLE
    bounce_angle: float = BOUNCE_ANGLE

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"field must have a positive size, got {self.width}x{self.height}")
        for name in ("paddle_w", "paddle_h", "paddle_speed", "ball_radius", "ball_speed_start"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.ball_speed_increase < 0:
            raise ConfigError(
                f"ball_speed_increase must not be negative, got {self.ball_speed_increase}"
            )
        if self.ball_speed_max < self.ball_speed_start:
            raise ConfigError(
                f"ball_speed_max {self.ball_speed_max} is below ball_speed_start {self.ball_speed_start}"
            )
        if self.paddle_h > self.height:
            raise ConfigError(f"paddle_h {self.paddle_h} is taller than the field")
        if 2 * (self.paddle_margin + self.paddle_w) >= self.width:
            raise ConfigError("paddles overlap; widen the field or shrink the margin")
        if self.winning_score < 1:
            raise ConfigError(f"winning_score must be >= 1, got {self.winning_score}")
        for name in ("serve_angle", "bounce_angle"):
            if not 0 < getattr(self, name) < 90:
                raise ConfigError(f"{name} must be in (0, 90) degrees, got {getattr(self, name)}")
