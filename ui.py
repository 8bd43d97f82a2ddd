"""
UI components and rendering helpers.
"""

from typing import Callable

import pandas as pd
import streamlit as st

from config import BOARD_SIDE, EMPTY_CELL_LABEL
from game_logic import cell_coordinates, describe_step, ordered_history, status_message
from models import CellClicked, GameState, GameStatus, JumpTo

Dispatch = Callable[[object], None]


def render_board(state: GameState, status: GameStatus, dispatch: Dispatch) -> None:
    """3x3 grid of buttons; the winning line is drawn as primary buttons."""
    squares = state.current.squares
    winning = set(status.line or ())

    for row in range(BOARD_SIDE):
        columns = st.columns(BOARD_SIDE)
        for col, column in enumerate(columns):
            i = row * BOARD_SIDE + col
            with column:
                st.button(
                    squares[i] or EMPTY_CELL_LABEL,
                    key=f"cell_{i}",
                    on_click=dispatch,
                    args=(CellClicked(i),),
                    type="primary" if i in winning else "secondary",
                )


def render_status(status: GameStatus) -> None:
    st.markdown(f"### {status_message(status)}")


def render_history(state: GameState, dispatch: Dispatch) -> None:
    """
    One jump button per snapshot, in the current display order.
    The active position is shown bold.
    """
    st.markdown("#### History")
    for step, snapshot in ordered_history(state):
        label = describe_step(step, snapshot)
        if step == state.step_number:
            label = f"**{label}**"
        st.button(label, key=f"jump_{step}", on_click=dispatch, args=(JumpTo(step),))


def render_moves_table(state: GameState) -> None:
    """Table of every recorded move with 1-based coordinates."""
    data_moves = []
    for step, snapshot in enumerate(state.history[1:], start=1):
        row, col = cell_coordinates(snapshot.location)
        data_moves.append(
            {
                "Move": step,
                "Player": snapshot.squares[snapshot.location],
                "Row": row + 1,
                "Column": col + 1,
            }
        )

    if not data_moves:
        st.info("No moves yet.")
        return

    df_moves = pd.DataFrame(data_moves)
    st.dataframe(df_moves, width="stretch", hide_index=True)
