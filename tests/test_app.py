"""Headless tests of the Streamlit front-end via AppTest."""

from __future__ import annotations

from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


def _click(at: AppTest, key: str) -> AppTest:
    return at.button(key=key).click().run()


def _markdown(at: AppTest) -> list[str]:
    return [m.value for m in at.markdown]


def test_app_starts_with_empty_board() -> None:
    at = AppTest.from_file(APP_PATH).run()
    assert not at.exception
    assert at.session_state["game"].step_number == 0
    assert "### Next player: X" in _markdown(at)
    assert at.button(key="jump_0").label == "**Go to game start**"


def test_click_places_mark_and_adds_history_entry() -> None:
    at = AppTest.from_file(APP_PATH).run()
    _click(at, "cell_4")
    assert not at.exception
    assert at.button(key="cell_4").label == "X"
    assert at.button(key="jump_1").label == "**Go to move #1 (2, 2)**"
    assert "### Next player: O" in _markdown(at)


def test_winner_shown_and_board_frozen() -> None:
    at = AppTest.from_file(APP_PATH).run()
    for i in (0, 1, 3, 2, 6):
        _click(at, f"cell_{i}")
    assert "### Winner: X" in _markdown(at)

    _click(at, "cell_8")
    assert at.session_state["game"].step_number == 5
    assert at.button(key="cell_8").label != "O"


def test_jump_and_toggle_order() -> None:
    at = AppTest.from_file(APP_PATH).run()
    for i in (0, 1, 2):
        _click(at, f"cell_{i}")

    _click(at, "jump_1")
    game = at.session_state["game"]
    assert game.step_number == 1
    assert len(game.history) == 4
    assert at.button(key="cell_1").label != "O"

    _click(at, "toggle_order")
    assert at.session_state["game"].reverse_order is True
    assert not at.exception


def test_restart_clears_board() -> None:
    at = AppTest.from_file(APP_PATH).run()
    _click(at, "cell_0")
    _click(at, "reset")
    game = at.session_state["game"]
    assert game.step_number == 0
    assert len(game.history) == 1
