from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .board import Board


@dataclass(frozen=True)
class ClearResult:
    rows_cleared: Tuple[int, ...] = ()
    columns_cleared: Tuple[int, ...] = ()
    cells_cleared: int = 0

    @property
    def total_lines_cleared(self) -> int:
        return len(self.rows_cleared) + len(self.columns_cleared)

    def __bool__(self) -> bool:
        return self.total_lines_cleared > 0


def find_complete_rows(board: Board) -> Tuple[int, ...]:
    return tuple(int(r) for r in np.flatnonzero(np.all(board.occupancy(), axis=1)))


def find_complete_columns(board: Board) -> Tuple[int, ...]:
    return tuple(int(c) for c in np.flatnonzero(np.all(board.occupancy(), axis=0)))


def clear_lines(board: Board) -> ClearResult:
    """Clear complete rows and columns in place.

    Rows and columns are both detected on the board as it was before any
    clearing, so a clear never cascades. Cells outside cleared lines keep
    their positions (no gravity).
    """
    rows = find_complete_rows(board)
    cols = find_complete_columns(board)
    if not rows and not cols:
        return ClearResult()

    cells = len(rows) * board.size + len(cols) * board.size - len(rows) * len(cols)
    for row in rows:
        for col in range(board.size):
            board._set_cell(row, col, None)
    for col in cols:
        for row in range(board.size):
            board._set_cell(row, col, None)
    return ClearResult(rows_cleared=rows, columns_cleared=cols, cells_cleared=cells)
