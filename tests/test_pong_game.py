import math
import random

import pytest
from pygame.math import Vector2

from arcadesim.config import PongConfig
from arcadesim.inputs import PongInput
from arcadesim.phase import MENU, Cause, Playing, Side, Terminal
from arcadesim.pong_model import Ball, Paddle, PongGame

from conftest import ScriptedRng, run_frames

CONFIRM = PongInput(confirm=True)
IDLE = PongInput()


def _started(config: PongConfig = None, rng=None) -> PongGame:
    game = PongGame(config, rng=rng if rng is not None else random.Random(11))
    game.update(CONFIRM)
    assert isinstance(game.phase, Playing)
    return game


def _put_ball(game: PongGame, pos: tuple, vel: tuple) -> None:
    game.ball = Ball(Vector2(pos), Vector2(vel), game.config.ball_radius)


# ── Setup ─────────────────────────────────────────────────────────
def test_initial_layout() -> None:
    game = _started()
    cfg = game.config
    assert game.left.x == cfg.paddle_margin
    assert game.right.x == cfg.width - cfg.paddle_margin - cfg.paddle_w
    assert game.left.y == game.right.y == cfg.height / 2 - cfg.paddle_h / 2
    assert game.scores == {Side.LEFT: 0, Side.RIGHT: 0}


def test_first_serve_goes_right_from_centre() -> None:
    game = _started()
    assert tuple(game.ball.pos) == (400, 300)
    assert game.ball.vel.x > 0
    assert game.ball.speed == pytest.approx(game.config.ball_speed_start)


def test_serve_angle_stays_inside_cone() -> None:
    game = PongGame(rng=random.Random(2))
    for i in range(200):
        side = Side.LEFT if i % 2 else Side.RIGHT
        game.serve(side)
        vx, vy = game.ball.vel
        assert math.copysign(1, vx) == side.sign
        assert abs(math.degrees(math.atan2(vy, abs(vx)))) <= game.config.serve_angle + 1e-9
        assert game.ball.speed == pytest.approx(game.config.ball_speed_start)


# ── Paddles ───────────────────────────────────────────────────────
def test_paddles_follow_held_input_and_clamp() -> None:
    game = _started()
    _put_ball(game, (400, 300), (0.5, 0))
    game.update(PongInput(left_up=True, right_down=True))
    assert game.left.y == 260 - 6
    assert game.right.y == 260 + 6

    run_frames(game, 100, PongInput(left_up=True, right_down=True))
    assert game.left.y == 0
    assert game.right.y == game.config.height - game.config.paddle_h


def test_opposing_held_inputs_cancel() -> None:
    paddle = Paddle(30, 100, 15, 80, 6)
    paddle.move(True, True, 600)
    assert paddle.y == 100


# ── Ball physics ──────────────────────────────────────────────────
def test_ball_moves_by_its_velocity() -> None:
    game = _started()
    _put_ball(game, (400, 300), (3, -2))
    game.update(IDLE)
    assert tuple(game.ball.pos) == (403, 298)


def test_ball_bounces_off_top_wall() -> None:
    game = _started()
    _put_ball(game, (400, 10), (2, -5))
    game.update(IDLE)
    assert game.ball.pos.y == game.config.ball_radius
    assert game.ball.vel.y == 5


def test_ball_bounces_off_bottom_wall() -> None:
    game = _started()
    _put_ball(game, (400, 590), (2, 5))
    game.update(IDLE)
    assert game.ball.pos.y == game.config.height - game.config.ball_radius
    assert game.ball.vel.y == -5


def test_right_paddle_returns_centre_hit() -> None:
    game = _started()
    # Right paddle spans x 755..770, y 260..340.
    _put_ball(game, (745, 300), (5, 0))
    game.update(IDLE)
    assert game.ball.vel.x == pytest.approx(-5.5)
    assert game.ball.vel.y == pytest.approx(0.0, abs=1e-9)
    assert game.ball.pos.x == game.right.x - game.config.ball_radius


def test_left_paddle_hit_near_top_angles_up() -> None:
    game = _started()
    # Left paddle spans x 30..45, y 260..340.
    _put_ball(game, (55, 265), (-5, 0))
    game.update(IDLE)
    assert game.ball.vel.x > 0
    assert game.ball.vel.y < 0
    assert game.ball.speed == pytest.approx(5.5)
    assert game.ball.pos.x == game.left.x + game.config.paddle_w + game.config.ball_radius


def test_ball_leaving_paddle_is_not_hit_again() -> None:
    game = _started()
    _put_ball(game, (50, 300), (5, 1))
    game.update(IDLE)
    assert tuple(game.ball.vel) == (5, 1)


def test_speed_is_capped_after_many_hits() -> None:
    cfg = PongConfig()
    game = _started(cfg)
    _put_ball(game, (745, 300), (11.8, 0))
    game.update(IDLE)
    assert game.ball.speed == pytest.approx(cfg.ball_speed_max)


@pytest.mark.parametrize("dy", [-40, -30, -10, 0, 10, 30, 40, 46])
def test_paddle_hit_speed_stays_in_bounds(dy: float) -> None:
    game = _started()
    centre = game.right.y + game.config.paddle_h / 2
    _put_ball(game, (745, centre + dy), (6, 0))
    game.update(IDLE)
    cfg = game.config
    assert game.ball.vel.x < 0
    assert cfg.ball_speed_start - 1e-9 <= game.ball.speed <= cfg.ball_speed_max + 1e-9


# ── Scoring ───────────────────────────────────────────────────────
def test_ball_past_left_edge_scores_for_right() -> None:
    game = _started()
    _put_ball(game, (2, 100), (-5, 0))
    game.update(IDLE)
    assert game.scores == {Side.LEFT: 0, Side.RIGHT: 1}
    assert isinstance(game.phase, Playing)
    assert tuple(game.ball.pos) == (400, 300)
    # Served toward the side that conceded.
    assert game.ball.vel.x < 0


def test_ball_past_right_edge_scores_for_left() -> None:
    game = _started()
    _put_ball(game, (798, 100), (5, 0))
    game.update(IDLE)
    assert game.scores == {Side.LEFT: 1, Side.RIGHT: 0}
    assert game.ball.vel.x > 0


def test_reaching_winning_score_ends_match() -> None:
    game = _started()
    game.scores[Side.RIGHT] = game.config.winning_score - 1
    _put_ball(game, (2, 100), (-5, 0))
    game.update(IDLE)
    assert game.phase == Terminal(Cause.WIN, score=5, winner=Side.RIGHT, scores=(0, 5))
    assert game.frame().winner is Side.RIGHT


def test_custom_winning_score() -> None:
    game = _started(PongConfig(winning_score=1))
    _put_ball(game, (798, 100), (5, 0))
    game.update(IDLE)
    assert game.phase.winner is Side.LEFT


# ── Phases ────────────────────────────────────────────────────────
def test_menu_frames_do_not_mutate_state() -> None:
    game = PongGame(rng=random.Random(4))
    before = game.frame()
    run_frames(game, 120, PongInput(left_up=True, right_down=True))
    assert game.phase is MENU
    assert game.frame() == before


def test_terminal_frames_do_not_mutate_state() -> None:
    game = _started(PongConfig(winning_score=1))
    _put_ball(game, (2, 100), (-5, 0))
    game.update(IDLE)
    before = game.frame()
    run_frames(game, 30, PongInput(left_down=True))
    assert game.frame() == before


def test_restart_matches_a_fresh_start() -> None:
    played = _started(PongConfig(winning_score=2), rng=ScriptedRng())
    while isinstance(played.phase, Playing):
        played.update(PongInput(left_up=True, right_down=True))
    assert played.phase.cause is Cause.WIN
    played.update(CONFIRM)

    fresh = _started(PongConfig(winning_score=2), rng=ScriptedRng())
    assert played.frame() == fresh.frame()
