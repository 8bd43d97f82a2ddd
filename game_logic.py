"""
Core game logic: state transitions and win detection.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from config import BOARD_CELLS, BOARD_SIDE, GAME_START_LABEL, MOVE_LABEL, WIN_LINES
from models import (
    Board,
    CellClicked,
    GameState,
    GameStatus,
    JumpTo,
    ResetGame,
    Snapshot,
    ToggleOrder,
    empty_board,
)

logger = logging.getLogger(__name__)


def make_initial_gamestate(reverse_order: bool = False) -> GameState:
    """One empty-board snapshot, X to move."""
    return GameState(
        history=(Snapshot(squares=empty_board(), location=None),),
        step_number=0,
        reverse_order=reverse_order,
    )


def calculate_winner(
    squares: Board,
) -> Tuple[Optional[str], Optional[Tuple[int, int, int]]]:
    """
    Check the 8 lines in WIN_LINES order and return (mark, line) for the
    first one holding three equal marks, or (None, None).
    """
    if len(squares) != BOARD_CELLS:
        raise ValueError(f"board must have {BOARD_CELLS} cells, got {len(squares)}")

    for line in WIN_LINES:
        a, b, c = line
        if squares[a] is not None and squares[a] == squares[b] == squares[c]:
            return squares[a], line
    return None, None


def is_draw(squares: Board) -> bool:
    """Full board and nobody won."""
    winner, _ = calculate_winner(squares)
    return winner is None and all(cell is not None for cell in squares)


def game_status(state: GameState) -> GameStatus:
    squares = state.current.squares
    winner, line = calculate_winner(squares)
    return GameStatus(
        winner=winner,
        line=line,
        is_draw=winner is None and all(cell is not None for cell in squares),
        next_player=state.next_player,
    )


def status_message(status: GameStatus) -> str:
    if status.winner is not None:
        return f"Winner: {status.winner}"
    if status.is_draw:
        return "Draw"
    return f"Next player: {status.next_player}"


def apply_move(state: GameState, index: int) -> GameState:
    """
    Play the current player's mark on `index` from the active snapshot.

      - Occupied cell or already-won board: returns `state` unchanged.
      - Otherwise drops every snapshot after the active one, appends the new
        board and makes it active.
    """
    if not 0 <= index < BOARD_CELLS:
        raise ValueError(f"cell index must be in 0..{BOARD_CELLS - 1}, got {index}")

    history = state.history[: state.step_number + 1]
    squares = history[-1].squares
    winner, _ = calculate_winner(squares)
    if winner is not None:
        logger.debug("Ignoring move on %d: %s already won", index, winner)
        return state
    if squares[index] is not None:
        logger.debug("Ignoring move on %d: cell holds %s", index, squares[index])
        return state

    mark = state.next_player
    new_squares = list(squares)
    new_squares[index] = mark
    snapshot = Snapshot(squares=tuple(new_squares), location=index)

    dropped = len(state.history) - len(history)
    if dropped:
        logger.debug("Discarding %d snapshot(s) after position %d", dropped, state.step_number)
    logger.debug("%s plays %d (move #%d)", mark, index, len(history))

    return replace(state, history=history + (snapshot,), step_number=len(history))


def jump_to(state: GameState, step: int) -> GameState:
    """Make `step` the active position. History is left intact."""
    if not 0 <= step < len(state.history):
        raise IndexError(f"step {step} outside history of length {len(state.history)}")
    logger.debug("Jumping to position %d", step)
    return replace(state, step_number=step)


def toggle_order(state: GameState) -> GameState:
    return replace(state, reverse_order=not state.reverse_order)


def reduce(state: GameState, event) -> GameState:
    """Apply one UI event and return the next state."""
    if isinstance(event, CellClicked):
        return apply_move(state, event.index)
    if isinstance(event, JumpTo):
        return jump_to(state, event.step)
    if isinstance(event, ToggleOrder):
        return toggle_order(state)
    if isinstance(event, ResetGame):
        return make_initial_gamestate(reverse_order=state.reverse_order)
    raise TypeError(f"unknown event: {event!r}")


def replay_moves(cells: Iterable[int], state: Optional[GameState] = None) -> GameState:
    """Click each cell in turn, starting from `state` (or a fresh game)."""
    if state is None:
        state = make_initial_gamestate()
    for index in cells:
        state = apply_move(state, index)
    return state


def cell_coordinates(index: int) -> Tuple[int, int]:
    """0-based (row, col) of a cell, row-major."""
    return divmod(index, BOARD_SIDE)


def ordered_history(state: GameState) -> List[Tuple[int, Snapshot]]:
    """History paired with positions, in display order."""
    indexed = list(enumerate(state.history))
    if state.reverse_order:
        indexed.reverse()
    return indexed


def describe_step(step: int, snapshot: Snapshot) -> str:
    """
    History entry text, e.g. "Go to move #3 (2, 1)".
    Coordinates are shown 1-based.
    """
    desc = MOVE_LABEL.format(move=step) if step else GAME_START_LABEL
    if snapshot.location is None:
        return desc
    row, col = cell_coordinates(snapshot.location)
    return f"{desc} ({row + 1}, {col + 1})"
