"""
Game configuration and constants.
"""

import os

# Player marks
PLAYER_X = "X"
PLAYER_O = "O"
PLAYERS = [PLAYER_X, PLAYER_O]  # index 0 moves on even positions

# Board geometry
BOARD_SIDE = 3
BOARD_CELLS = BOARD_SIDE * BOARD_SIDE

# Winning lines, checked in this order: rows, columns, diagonals
WIN_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

# UI Settings
PAGE_TITLE = "Tic-Tac-Toe"
EMPTY_CELL_LABEL = "\u2003"  # em space, button labels cannot be blank
GAME_START_LABEL = "Go to game start"
MOVE_LABEL = "Go to move #{move}"

# Logging
LOG_LEVEL = os.environ.get("TICTACTOE_LOG_LEVEL", "WARNING").upper()
