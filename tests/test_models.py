"""Tests for the derived properties on the state dataclasses."""

from __future__ import annotations

import dataclasses

import pytest

from config import PLAYER_O, PLAYER_X
from game_logic import make_initial_gamestate, replay_moves
from models import GameStatus, Snapshot


def test_initial_state_has_one_empty_snapshot() -> None:
    state = make_initial_gamestate()
    assert len(state.history) == 1
    assert state.step_number == 0
    assert state.current == Snapshot(squares=(None,) * 9, location=None)
    assert state.reverse_order is False


def test_next_player_follows_position_parity() -> None:
    state = replay_moves([4, 0, 8])
    assert state.next_player == PLAYER_O and not state.x_is_next
    back = dataclasses.replace(state, step_number=2)
    assert back.next_player == PLAYER_X and back.x_is_next


def test_snapshots_are_immutable() -> None:
    snapshot = replay_moves([4]).current
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.location = 0  # type: ignore[misc]


def test_status_is_over() -> None:
    assert GameStatus("X", (0, 1, 2), False, "O").is_over
    assert GameStatus(None, None, True, "O").is_over
    assert not GameStatus(None, None, False, "X").is_over
