import logging
import random

import pytest

from arcadesim.spawner import first_free_cell, spawn_cell

from conftest import ScriptedRng


def test_spawn_avoids_occupied_cells(rng: random.Random) -> None:
    occupied = {(x, y) for x in range(4) for y in range(4)} - {(1, 2), (3, 0)}
    for _ in range(50):
        cell = spawn_cell(rng, 4, 4, occupied, max_attempts=64)
        assert cell in {(1, 2), (3, 0)}


def test_spawn_stays_inside_grid(rng: random.Random) -> None:
    for _ in range(200):
        x, y = spawn_cell(rng, 7, 3, set(), max_attempts=8)
        assert 0 <= x < 7
        assert 0 <= y < 3


def test_falls_back_to_scan_when_draws_run_out() -> None:
    # Every draw lands on (0, 0), which is taken.
    rng = ScriptedRng(default=0)
    occupied = {(0, 0), (1, 0)}
    assert spawn_cell(rng, 3, 2, occupied, max_attempts=5) == (2, 0)


def test_scan_fallback_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="arcadesim.spawner"):
        spawn_cell(ScriptedRng(default=0), 3, 2, {(0, 0)}, max_attempts=4)
    assert [r.levelno for r in caplog.records] == [logging.WARNING]
    assert "no free cell after 4 random draws, scanning 3x2 grid" in caplog.text


def test_successful_draw_logs_nothing(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="arcadesim.spawner"):
        spawn_cell(ScriptedRng(default=1), 3, 2, {(0, 0)}, max_attempts=4)
    assert caplog.records == []


def test_full_grid_yields_none() -> None:
    occupied = {(x, y) for x in range(3) for y in range(2)}
    assert spawn_cell(ScriptedRng(), 3, 2, occupied, max_attempts=10) is None


def test_scan_is_row_major() -> None:
    assert first_free_cell(2, 2, {(0, 0), (1, 0)}) == (0, 1)
