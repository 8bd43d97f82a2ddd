"""
Data models and state representations.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from config import BOARD_CELLS, PLAYERS

Board = Tuple[Optional[str], ...]


def empty_board() -> Board:
    return (None,) * BOARD_CELLS


@dataclass(frozen=True)
class Snapshot:
    """A board plus the cell played to reach it (None for the start)."""
    squares: Board
    location: Optional[int] = None


@dataclass(frozen=True)
class GameState:
    """
    Whole game: every snapshot since the empty board, the active position
    and the history display order. Replaced wholesale on every event.
    """
    history: Tuple[Snapshot, ...]
    step_number: int = 0
    reverse_order: bool = False

    @property
    def current(self) -> Snapshot:
        return self.history[self.step_number]

    @property
    def x_is_next(self) -> bool:
        return self.step_number % 2 == 0

    @property
    def next_player(self) -> str:
        return PLAYERS[self.step_number % 2]


@dataclass(frozen=True)
class GameStatus:
    """Outcome of the active board, as shown in the status line."""
    winner: Optional[str]
    line: Optional[Tuple[int, int, int]]
    is_draw: bool
    next_player: str

    @property
    def is_over(self) -> bool:
        return self.winner is not None or self.is_draw


# Events produced by the presentation layer

@dataclass(frozen=True)
class CellClicked:
    index: int


@dataclass(frozen=True)
class JumpTo:
    step: int


@dataclass(frozen=True)
class ToggleOrder:
    pass


@dataclass(frozen=True)
class ResetGame:
    pass
