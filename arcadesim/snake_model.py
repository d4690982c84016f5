"""
snake_model.py — Grid game model.

Owns ALL snake game state and rules. Zero rendering, zero input handling.
The controller feeds one SnakeInput per frame into SnakeGame.update() and
reads SnakeGame.frame() back for drawing.

Classes:
    Direction   — immutable (dx, dy) unit step
    Snake       — ordered chain of cells with a buffered next direction
    SnakeFrame  — read-only snapshot handed to the view
    SnakeGame   — top-level model; owns the snake, food, score and phase
"""

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Optional

from .collision import hits_body, in_grid
from .config import SnakeConfig
from .errors import SnakeCapacityError
from .inputs import SnakeInput
from .phase import MENU, Cause, Phase, Playing, Terminal, next_phase, phase_name, starts_round
from .spawner import spawn_cell
from .ticker import FrameTicker

logger = logging.getLogger(__name__)

Cell = tuple[int, int]


# ─────────────────────────── Direction ───────────────────────────
class Direction:
    """Immutable 2-D unit direction."""
    LEFT  = None  # filled below after class definition
    RIGHT = None
    UP    = None
    DOWN  = None

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y

    def step(self, cell: Cell) -> Cell:
        return (cell[0] + self.x, cell[1] + self.y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __eq__(self, other):
        return isinstance(other, Direction) and self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Direction({self.x}, {self.y})"


Direction.LEFT  = Direction(-1,  0)
Direction.RIGHT = Direction( 1,  0)
Direction.UP    = Direction( 0, -1)
Direction.DOWN  = Direction( 0,  1)


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Pure game data for the snake. Head is body[0].

    Direction changes are latched into a "next direction" slot and only
    committed at the start of the step that consumes them. The reverse check
    runs against the committed direction, so no sequence of key presses between
    two steps can turn the head back into the second segment.
    """

    def __init__(self, head: Cell, length: int, start_dir: Direction, capacity: int):
        hx, hy = head
        self.body: deque[Cell] = deque(
            (hx - i * start_dir.x, hy - i * start_dir.y) for i in range(length)
        )
        self.dir: Direction = start_dir
        self._next_dir: Direction = start_dir
        self.capacity: int = capacity

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)

    @property
    def next_dir(self) -> Direction:
        return self._next_dir

    @property
    def is_full(self) -> bool:
        return len(self.body) >= self.capacity

    # ── Commands ─────────────────────────────────────────────────
    def request_direction(self, new_dir: Direction) -> bool:
        """Queue a direction change (ignored if it would reverse the snake)."""
        if new_dir.is_opposite(self.dir):
            return False
        self._next_dir = new_dir
        return True

    def commit_direction(self) -> Direction:
        self.dir = self._next_dir
        return self.dir

    def advance(self, direction: Direction) -> None:
        """Every segment takes its predecessor's cell; the head steps once."""
        self.body.appendleft(direction.step(self.head))
        self.body.pop()

    def grow(self) -> None:
        """Duplicate the tail cell; the copy trails correctly after the next advance."""
        if self.is_full:
            raise SnakeCapacityError(
                f"snake is already at its capacity of {self.capacity} segments"
            )
        self.body.append(self.body[-1])


# ─────────────────────────── SnakeFrame ──────────────────────────
@dataclass(frozen=True)
class SnakeFrame:
    phase: Phase
    body: tuple[Cell, ...]
    food: Optional[Cell]
    direction: tuple[int, int]
    score: int
    length: int
    move_speed: int
    speed_level: int
    cols: int
    rows: int


# ─────────────────────────── SnakeGame ───────────────────────────
class SnakeGame:
    """
    Top-level model. Owns all game state.
    The controller calls update() once per rendered frame.
    """

    def __init__(
        self,
        config: Optional[SnakeConfig] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self.config: SnakeConfig = config or SnakeConfig()
        self.rng = rng if rng is not None else random.Random(seed)
        self.phase: Phase = MENU
        self.ticker = FrameTicker(self.config.initial_speed)
        self.snake: Snake = None
        self.food: Optional[Cell] = None
        self.score: int = 0
        self._reset_entities()

    # ── Public API ───────────────────────────────────────────────
    @property
    def move_speed(self) -> int:
        """Frames per simulation step. Lower is faster."""
        return self.ticker.threshold

    def update(self, inputs: SnakeInput) -> Phase:
        """Advance one frame. Returns the phase in effect after the frame."""
        outcome = None
        if isinstance(self.phase, Playing):
            self._buffer_direction(inputs)
            if self.ticker.tick():
                outcome = self._game_step()

        before = self.phase
        self.phase = next_phase(before, inputs.confirm, outcome)
        if starts_round(before, self.phase):
            self._reset_entities()
        if self.phase is not before:
            logger.info("snake: %s -> %s", phase_name(before), phase_name(self.phase))
            if isinstance(self.phase, Terminal):
                logger.info(
                    "snake: game over (%s), score %d, length %d",
                    self.phase.cause.value, self.score, self.snake.length,
                )
        return self.phase

    def frame(self) -> SnakeFrame:
        cfg = self.config
        return SnakeFrame(
            phase=self.phase,
            body=tuple(self.snake.body),
            food=self.food,
            direction=self.snake.dir.as_tuple(),
            score=self.score,
            length=self.snake.length,
            move_speed=self.move_speed,
            speed_level=cfg.initial_speed - self.move_speed + 1,
            cols=cfg.cols,
            rows=cfg.rows,
        )

    # ── Private helpers ──────────────────────────────────────────
    def _reset_entities(self) -> None:
        cfg = self.config
        self.snake = Snake(
            (cfg.cols // 2, cfg.rows // 2),
            cfg.initial_length,
            Direction.RIGHT,
            cfg.max_length,
        )
        self.score = 0
        self.ticker.reset(cfg.initial_speed)
        self.food = self._spawn_food()

    def _spawn_food(self) -> Optional[Cell]:
        return spawn_cell(
            self.rng,
            self.config.cols,
            self.config.rows,
            set(self.snake.body),
            self.config.spawn_attempts,
        )

    def _buffer_direction(self, inputs: SnakeInput) -> None:
        pressed = (
            (inputs.up,    Direction.UP),
            (inputs.down,  Direction.DOWN),
            (inputs.left,  Direction.LEFT),
            (inputs.right, Direction.RIGHT),
        )
        for down, direction in pressed:
            if down:
                self.snake.request_direction(direction)

    def _game_step(self) -> Optional[Terminal]:
        snake = self.snake
        snake.advance(snake.commit_direction())

        if snake.head == self.food:
            full = self._eat()
            if full is not None:
                return full

        if not in_grid(snake.head, self.config.cols, self.config.rows):
            return Terminal(Cause.WALL, score=self.score)
        if hits_body(snake.body):
            return Terminal(Cause.SELF, score=self.score)
        return None

    def _eat(self) -> Optional[Terminal]:
        cfg = self.config
        if not self.snake.is_full:
            self.snake.grow()
        self.score += cfg.food_score
        if self.move_speed > cfg.min_speed:
            self.ticker.threshold = self.move_speed - 1
        logger.debug(
            "snake: ate food at %s, score %d, length %d, speed %d",
            self.food, self.score, self.snake.length, self.move_speed,
        )

        if self.snake.is_full:
            self.food = None
            return Terminal(Cause.CAPACITY, score=self.score)
        self.food = self._spawn_food()
        if self.food is None:
            return Terminal(Cause.FIELD_FULL, score=self.score)
        return None
