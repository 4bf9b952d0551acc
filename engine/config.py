"""
Game configuration for TicTacToe.
The fixed board geometry and the defaults used by the front ends.
"""


class GameConfig:
    """
    Configuration class for the game engine.
    The board is always 3x3; the rest can be tuned for your setup.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells numbered 0-8 row by row
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # X always opens a new game
    FIRST_MARK = "X"

    # ==================== WINNING LINES ====================
    # Checked in this order: rows, then columns, then diagonals
    WINNING_ROWS = [
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
    ]
    WINNING_COLUMNS = [
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
    ]
    WINNING_DIAGONALS = [
        (0, 4, 8),
        (2, 4, 6),
    ]
    WINNING_LINES = WINNING_ROWS + WINNING_COLUMNS + WINNING_DIAGONALS

    # ==================== LOGGING ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
