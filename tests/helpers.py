from block_puzzle_engine.game import Board

FILL = "#FFFFFF"


def board_from_rows(rows):
    """Build a board from strings, '#' for occupied and '.' for empty."""
    return Board.from_grid_snapshot([[FILL if ch == "#" else None for ch in row] for row in rows])
