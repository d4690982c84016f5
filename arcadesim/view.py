"""
view.py — View layer.

Draws frame snapshots (SnakeFrame / PongFrame). Views never touch a model;
everything they show comes from the snapshot handed to render().

Public API:
    SnakeView(screen)   — bind to a pygame surface
    PongView(screen)    — bind to a pygame surface
    view.render(frame)  — draw the current frame
"""

import math
import pygame

from .config import (
    WIDTH, HEIGHT, PANEL_H, CELL,
    BG, GRID_COL, SNAKE_COL, SNAKE_DIM, FOOD_COL,
    PONG_BG, LEFT_COL, RIGHT_COL, BALL_COL,
    UI_COL, WHITE, GRAY, PANEL_BG,
)
from .phase import Cause, Menu, Side, Terminal
from .pong_model import PongFrame
from .snake_model import SnakeFrame


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


# ─────────────────────────── BaseView ────────────────────────────
class _BaseView:
    """Fonts, overlays and text helpers shared by both games."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._anim_tick: int = 0

    def _draw_overlay_base(self) -> None:
        surf = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        surf.fill((0, 0, 0, 180))
        self.screen.blit(surf, (0, 0))

    def _draw_animated_title(self, title: str, color: tuple, cy: int) -> int:
        pulse = 0.82 + 0.18 * math.sin(self._anim_tick * 0.05)
        surf = self.font_title.render(title, True, _brighten(color, pulse))
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy + surf.get_height() // 2)))
        return cy + surf.get_height() + 14

    def _draw_text_line(self, text: str, color: tuple, cy: int, font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 8

    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "courier", 56, True),
            ("font_big",   "courier", 40, True),
            ("font_med",   "courier", 22, False),
            ("font_small", "courier", 18, True),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except (pygame.error, OSError):
                setattr(self, attr, pygame.font.SysFont(None, size))


# ─────────────────────────── SnakeView ───────────────────────────
class SnakeView(_BaseView):
    """Renders a SnakeFrame."""

    def __init__(self, screen: pygame.Surface):
        super().__init__(screen)
        self._grid_key: tuple[int, int] = (0, 0)
        self._grid_surf: pygame.Surface | None = None

    def render(self, frame: SnakeFrame) -> None:
        self._anim_tick += 1
        self.screen.fill(BG)

        if isinstance(frame.phase, Menu):
            self._draw_menu_overlay()
        else:
            self.screen.blit(self._grid_for(frame.cols, frame.rows), (0, 0))
            if frame.food is not None:
                self._draw_food(frame.food)
            self._draw_snake(frame)
            self._draw_panel(frame)
            if isinstance(frame.phase, Terminal):
                self._draw_game_over_overlay(frame)

        pygame.display.flip()

    def _grid_for(self, cols: int, rows: int) -> pygame.Surface:
        # Checkerboard, rebuilt only when the field size changes
        if self._grid_surf is None or self._grid_key != (cols, rows):
            self._grid_surf = self._build_grid(cols, rows)
            self._grid_key = (cols, rows)
        return self._grid_surf

    def _build_grid(self, cols: int, rows: int) -> pygame.Surface:
        surf = pygame.Surface((WIDTH, HEIGHT))
        surf.fill(BG)
        for x in range(cols):
            for y in range(rows):
                if (x + y) % 2:
                    pygame.draw.rect(surf, GRID_COL, (x * CELL, y * CELL, CELL, CELL))
        return surf

    def _draw_food(self, food: tuple[int, int]) -> None:
        pulse = 0.85 + 0.15 * math.sin(self._anim_tick * 0.10)
        r = max(2, int((CELL // 2 - 2) * pulse))
        x = food[0] * CELL + CELL // 2
        y = food[1] * CELL + CELL // 2
        pygame.draw.circle(self.screen, FOOD_COL, (x, y), r)

    def _draw_snake(self, frame: SnakeFrame) -> None:
        length = len(frame.body)
        for i, (sx, sy) in enumerate(frame.body):
            # Colour fades from bright head to dim tail
            t = 1.0 - (i / max(length - 1, 1)) * 0.72
            color = _lerp_color(SNAKE_DIM, SNAKE_COL, t)
            rect = pygame.Rect(sx * CELL + 1, sy * CELL + 1, CELL - 2, CELL - 2)
            radius = CELL // 3 if i == 0 else CELL // 6
            pygame.draw.rect(self.screen, color, rect, border_radius=radius)
        if frame.body:
            self._draw_eyes(frame.body[0], frame.direction)

    def _draw_eyes(self, head: tuple[int, int], direction: tuple[int, int]) -> None:
        cx = head[0] * CELL + CELL // 2
        cy = head[1] * CELL + CELL // 2
        dx, dy = direction
        px, py = -dy, dx  # perpendicular
        for sign in (+1, -1):
            ex = int(cx + dx * 4 + sign * px * 4)
            ey = int(cy + dy * 4 + sign * py * 4)
            pygame.draw.circle(self.screen, (0, 0, 0), (ex, ey), 2)

    def _draw_panel(self, frame: SnakeFrame) -> None:
        panel = pygame.Surface((WIDTH, PANEL_H), pygame.SRCALPHA)
        panel.fill(_with_alpha(PANEL_BG, 180))
        self.screen.blit(panel, (0, 0))
        labels = [
            (10,  f"Score: {frame.score}"),
            (200, f"Length: {frame.length}"),
            (400, f"Speed: {frame.speed_level}"),
        ]
        for x, text in labels:
            self.screen.blit(self.font_small.render(text, True, WHITE), (x, 5))

    def _draw_menu_overlay(self) -> None:
        cy = 130
        cy = self._draw_animated_title("SNAKE GAME", SNAKE_COL, cy)
        cy = self._draw_text_line("Eat food to grow and gain points", UI_COL, cy, self.font_med)
        cy += 30
        for line in ("Arrow keys to move", "Don't hit walls or yourself!"):
            cy = self._draw_text_line(line, WHITE, cy, self.font_small)
        cy += 40
        self._draw_text_line("Press ENTER to start", SNAKE_COL, cy, self.font_med)

    def _draw_game_over_overlay(self, frame: SnakeFrame) -> None:
        self._draw_overlay_base()
        if frame.phase.cause is Cause.FIELD_FULL:
            title, color = "FIELD CLEARED", SNAKE_COL
        elif frame.phase.cause is Cause.CAPACITY:
            title, color = "MAX LENGTH", SNAKE_COL
        else:
            title, color = "GAME OVER", FOOD_COL
        cy = 180
        cy = self._draw_animated_title(title, color, cy)
        cy = self._draw_text_line(f"Final Score: {frame.score}", WHITE, cy, self.font_med)
        cy = self._draw_text_line(f"Snake Length: {frame.length}", WHITE, cy, self.font_med)
        cy += 40
        self._draw_text_line("Press ENTER to play again", GRAY, cy, self.font_med)


# ─────────────────────────── PongView ────────────────────────────
class PongView(_BaseView):
    """Renders a PongFrame."""

    def render(self, frame: PongFrame) -> None:
        self._anim_tick += 1
        self.screen.fill(PONG_BG)

        if isinstance(frame.phase, Menu):
            self._draw_menu_overlay(frame)
        elif isinstance(frame.phase, Terminal):
            self._draw_winner_overlay(frame)
        else:
            self._draw_court(frame)
            self._draw_ball(frame)
            self._draw_scores(frame)

        pygame.display.flip()

    def _draw_court(self, frame: PongFrame) -> None:
        # Dashed centre line
        cx = int(frame.width // 2)
        for y in range(0, int(frame.height), 20):
            pygame.draw.rect(self.screen, GRAY, (cx - 2, y, 4, 10))
        for box, color in ((frame.left, LEFT_COL), (frame.right, RIGHT_COL)):
            pygame.draw.rect(self.screen, color, pygame.Rect(box.x, box.y, box.w, box.h))

    def _draw_ball(self, frame: PongFrame) -> None:
        x, y = frame.ball
        vx, vy = frame.velocity
        # Motion ghost half a step behind
        ghost = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        pygame.draw.circle(ghost, _with_alpha(WHITE, 76),
                           (int(x - vx * 0.5), int(y - vy * 0.5)), int(frame.radius * 0.7))
        self.screen.blit(ghost, (0, 0))
        pygame.draw.circle(self.screen, BALL_COL, (int(x), int(y)), int(frame.radius))

    def _draw_scores(self, frame: PongFrame) -> None:
        left = self.font_big.render(str(frame.left_score), True, LEFT_COL)
        right = self.font_big.render(str(frame.right_score), True, RIGHT_COL)
        self.screen.blit(left, left.get_rect(center=(frame.width / 4, 40)))
        self.screen.blit(right, right.get_rect(center=(frame.width * 3 / 4, 40)))

    def _draw_menu_overlay(self, frame: PongFrame) -> None:
        cy = 120
        cy = self._draw_animated_title("PONG", WHITE, cy)
        cy = self._draw_text_line(f"First to {frame.winning_score} points wins", UI_COL, cy, self.font_med)
        cy += 30
        cy = self._draw_text_line("Player 1 (left): W / S", LEFT_COL, cy, self.font_small)
        cy = self._draw_text_line("Player 2 (right): UP / DOWN", RIGHT_COL, cy, self.font_small)
        cy += 40
        self._draw_text_line("Press SPACE to start", BALL_COL, cy, self.font_med)

    def _draw_winner_overlay(self, frame: PongFrame) -> None:
        if frame.winner is Side.LEFT:
            title, color = "PLAYER 1 WINS!", LEFT_COL
        else:
            title, color = "PLAYER 2 WINS!", RIGHT_COL
        cy = 200
        cy = self._draw_animated_title(title, color, cy)
        cy = self._draw_text_line(
            f"Final Score: {frame.left_score} - {frame.right_score}", WHITE, cy, self.font_med,
        )
        cy += 40
        self._draw_text_line("Press SPACE to play again", GRAY, cy, self.font_med)
