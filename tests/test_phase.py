import pytest

from arcadesim.phase import (
    MENU, PLAYING, Cause, Menu, Playing, Side, Terminal, next_phase, phase_name, starts_round,
)

GAME_OVER = Terminal(Cause.WALL, score=30)


def test_menu_waits_for_confirm() -> None:
    assert next_phase(MENU, False) is MENU
    assert next_phase(MENU, True) == PLAYING


def test_menu_ignores_terminal_outcome() -> None:
    assert next_phase(MENU, False, GAME_OVER) is MENU


def test_playing_ignores_confirm() -> None:
    assert next_phase(PLAYING, True) is PLAYING


def test_playing_ends_on_outcome() -> None:
    assert next_phase(PLAYING, False, GAME_OVER) == GAME_OVER
    assert next_phase(PLAYING, True, GAME_OVER) == GAME_OVER


def test_terminal_restarts_on_confirm() -> None:
    assert next_phase(GAME_OVER, False) is GAME_OVER
    assert isinstance(next_phase(GAME_OVER, True), Playing)


def test_rejects_non_phase() -> None:
    with pytest.raises(TypeError):
        next_phase("playing", True)


def test_starts_round_only_when_entering_playing() -> None:
    assert starts_round(MENU, PLAYING)
    assert starts_round(GAME_OVER, PLAYING)
    assert not starts_round(PLAYING, PLAYING)
    assert not starts_round(PLAYING, GAME_OVER)
    assert not starts_round(MENU, MENU)


def test_terminal_carries_result() -> None:
    won = Terminal(Cause.WIN, score=5, winner=Side.LEFT, scores=(5, 2))
    assert won.winner is Side.LEFT
    assert won.scores == (5, 2)
    assert phase_name(won) == "Terminal"
    assert phase_name(Menu()) == "Menu"


def test_side_helpers() -> None:
    assert Side.LEFT.opponent is Side.RIGHT
    assert Side.RIGHT.opponent is Side.LEFT
    assert Side.LEFT.sign == -1
    assert Side.RIGHT.sign == 1
