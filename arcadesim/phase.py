"""
phase.py — Game phase controller.

A session is always in exactly one of three phases:

    Menu ──confirm──► Playing ──terminal outcome──► Terminal
                         ▲                              │
                         └───────────confirm────────────┘

Each phase is its own small value type. Terminal carries the data the
game-over screen needs; Menu and Playing carry nothing. next_phase() is a pure
function, evaluated once per frame by both games whether or not a simulation
step fired that frame. It never decides *whether* the game ended; the caller
passes in the Terminal produced by its collision checks.
"""

import enum
from dataclasses import dataclass
from typing import Optional, Union


class Cause(enum.Enum):
    """Why active play stopped."""
    WALL       = "wall"
    SELF       = "self"
    FIELD_FULL = "field_full"
    CAPACITY   = "capacity"
    WIN        = "win"


class Side(enum.Enum):
    LEFT  = "left"
    RIGHT = "right"

    @property
    def opponent(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT

    @property
    def sign(self) -> int:
        """Horizontal direction pointing at this side of the field."""
        return -1 if self is Side.LEFT else 1


@dataclass(frozen=True)
class Menu:
    pass


@dataclass(frozen=True)
class Playing:
    pass


@dataclass(frozen=True)
class Terminal:
    cause: Cause
    score: int = 0
    winner: Optional[Side] = None
    scores: tuple[int, int] = (0, 0)


Phase = Union[Menu, Playing, Terminal]

MENU    = Menu()
PLAYING = Playing()


def next_phase(phase: Phase, confirm: bool, outcome: Optional[Terminal] = None) -> Phase:
    """
    Return the phase that follows `phase` this frame.

    confirm  : the "confirm" key went down this frame
    outcome  : the Terminal produced by this frame's simulation, if any

    Inputs that the current phase does not recognise are ignored.
    """
    match phase:
        case Menu():
            return PLAYING if confirm else phase
        case Playing():
            return outcome if outcome is not None else phase
        case Terminal():
            return PLAYING if confirm else phase
        case _:
            raise TypeError(f"not a phase: {phase!r}")


def starts_round(before: Phase, after: Phase) -> bool:
    """True when this transition enters Playing and the session must reset."""
    return isinstance(after, Playing) and not isinstance(before, Playing)


def phase_name(phase: Phase) -> str:
    return type(phase).__name__
