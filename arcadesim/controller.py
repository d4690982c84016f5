"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Read the keyboard once per frame and freeze it into an input snapshot.
  - Drive the game loop: tick the model, hand its frame to the view.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that reads pygame events.
"""

import logging
from collections.abc import Callable, Collection, Sequence
from typing import Union

import pygame

from .config import WIDTH, HEIGHT, FPS
from .inputs import PongInput, SnakeInput
from .pong_model import PongGame
from .snake_model import SnakeGame
from .view import PongView, SnakeView

logger = logging.getLogger(__name__)

Model = Union[SnakeGame, PongGame]

QUIT_KEYS = (pygame.K_q, pygame.K_ESCAPE)


# ── Input snapshots ───────────────────────────────────────────────
def snake_input(pressed: Collection[int], _held: Sequence[bool]) -> SnakeInput:
    """
    Direction changes use pressed-this-frame so one tap moves one cell.

    Held keys are unused; the signature matches pong_input for GAMES.
    """
    return SnakeInput(
        confirm=pygame.K_RETURN in pressed,
        up=pygame.K_UP in pressed,
        down=pygame.K_DOWN in pressed,
        left=pygame.K_LEFT in pressed,
        right=pygame.K_RIGHT in pressed,
    )


def pong_input(pressed: Collection[int], held: Sequence[bool]) -> PongInput:
    """Paddles follow held keys; only the confirm key is an edge."""
    return PongInput(
        confirm=pygame.K_SPACE in pressed,
        left_up=bool(held[pygame.K_w]),
        left_down=bool(held[pygame.K_s]),
        right_up=bool(held[pygame.K_UP]),
        right_down=bool(held[pygame.K_DOWN]),
    )


GAMES = {
    "snake": (SnakeView, snake_input, "Snake Game"),
    "pong":  (PongView,  pong_input,  "Pong"),
}


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(self, name: str, model: Model, fps: int = FPS):
        view_cls, read_input, caption = GAMES[name]
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(caption)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.model = model
        self.view = view_cls(self.screen)
        self._read_input: Callable = read_input
        self._running = False

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Run the game loop until the window is closed or a quit key is hit."""
        self._running = True
        logger.info("starting %s at %d fps", type(self.model).__name__, self.fps)
        try:
            while self._running:
                self.clock.tick(self.fps)
                pressed = self._handle_events()
                if not self._running:
                    break
                inputs = self._read_input(pressed, pygame.key.get_pressed())
                self.model.update(inputs)
                self.view.render(self.model.frame())
        finally:
            pygame.quit()

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> set[int]:
        """Drain the event queue; return the keys that went down this frame."""
        pressed: set[int] = set()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in QUIT_KEYS:
                    self._running = False
                pressed.add(event.key)
        return pressed
