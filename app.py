"""
Main Streamlit application.
"""

import logging

import streamlit as st

from config import LOG_LEVEL, PAGE_TITLE
from game_logic import game_status, make_initial_gamestate, reduce
from models import GameState, ResetGame, ToggleOrder
from ui import render_board, render_history, render_moves_table, render_status

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def dispatch(event) -> None:
    """Button callback: swap the session's game for its successor."""
    st.session_state["game"] = reduce(st.session_state["game"], event)


def run_app() -> None:
    """Run the main Streamlit application."""
    st.set_page_config(page_title=PAGE_TITLE, layout="centered")
    st.title(PAGE_TITLE)

    # Initialize session state
    if "game" not in st.session_state:
        logger.info("Starting new session")
        st.session_state["game"] = make_initial_gamestate()

    game: GameState = st.session_state["game"]
    status = game_status(game)

    board_col, info_col = st.columns([1, 1.4])

    with board_col:
        render_board(game, status, dispatch)

    with info_col:
        render_status(status)

        col_order, col_reset = st.columns([1, 1])
        with col_order:
            st.button("Toggle order", key="toggle_order", on_click=dispatch, args=(ToggleOrder(),))
        with col_reset:
            st.button("🔁 Restart", key="reset", on_click=dispatch, args=(ResetGame(),))

        render_history(game, dispatch)

    with st.expander("Moves", expanded=False):
        render_moves_table(game)


if __name__ == "__main__":
    run_app()
