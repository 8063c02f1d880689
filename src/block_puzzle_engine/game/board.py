from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from .pieces import Piece
from .rules import DEFAULT_RULES


Coordinate = Tuple[int, int]
GridSnapshot = List[List[Optional[Any]]]


class Board:
    """Square grid of cells for block placement.

    Each cell holds either a colour token (occupied) or ``None`` (empty).
    Placement is anchored at the top-left corner of the piece's bounding box
    and only the occupied cells of the piece shape are checked.
    """

    def __init__(self, size: int = DEFAULT_RULES.board_size) -> None:
        self.size = int(size)
        self._grid = np.full((self.size, self.size), None, dtype=object)

    @classmethod
    def from_grid_snapshot(cls, grid: Sequence[Sequence[Optional[Any]]] | np.ndarray,
                           size: int = DEFAULT_RULES.board_size) -> "Board":
        """Build a board from a serialized grid, copying every cell token as is."""
        rows = list(grid)
        if len(rows) != size or any(len(row) != size for row in rows):
            raise ValueError(f"Grid must be {size}x{size}")
        board = cls(size)
        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                board._grid[r, c] = cell
        return board

    def to_grid_snapshot(self) -> GridSnapshot:
        return self._grid.tolist()

    def copy(self) -> "Board":
        new_board = Board(self.size)
        new_board._grid = self._grid.copy()
        return new_board

    def reset(self) -> None:
        self._grid.fill(None)

    def is_in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get_cell(self, row: int, col: int) -> Optional[str]:
        if not self.is_in_bounds(row, col):
            return None
        return self._grid[row, col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.is_in_bounds(row, col) and self._grid[row, col] is None

    def occupancy(self) -> np.ndarray:
        """Boolean mask, True where a cell is occupied."""
        return np.not_equal(self._grid, None).astype(np.bool_)

    def empty_cell_count(self) -> int:
        return int(self.size * self.size - np.count_nonzero(self.occupancy()))

    def is_full(self) -> bool:
        return bool(np.all(self.occupancy()))

    def can_place(self, piece: Piece, top_row: int, top_col: int) -> bool:
        for row, col in piece.cells_at(top_row, top_col):
            if not self.is_empty(row, col):
                return False
        return True

    def try_place(self, piece: Piece, top_row: int, top_col: int) -> bool:
        """Place ``piece`` if every occupied cell is in bounds and empty.

        Nothing is written when validation fails.
        """
        if not self.can_place(piece, top_row, top_col):
            return False
        for row, col in piece.cells_at(top_row, top_col):
            self._grid[row, col] = piece.color
        return True

    def _anchors(self, piece: Piece):
        for row in range(self.size - piece.rows + 1):
            for col in range(self.size - piece.columns + 1):
                yield row, col

    def can_place_anywhere(self, piece: Piece) -> bool:
        return any(self.can_place(piece, row, col) for row, col in self._anchors(piece))

    def valid_positions(self, piece: Piece, limit: Optional[int] = None) -> List[Coordinate]:
        """All valid anchors in row-major order, stopping after ``limit`` if given."""
        positions: List[Coordinate] = []
        for row, col in self._anchors(piece):
            if limit is not None and len(positions) >= limit:
                break
            if self.can_place(piece, row, col):
                positions.append((row, col))
        return positions

    def _set_cell(self, row: int, col: int, value: Optional[str]) -> None:
        # Line clearing only; placements go through try_place.
        if self.is_in_bounds(row, col):
            self._grid[row, col] = value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.to_grid_snapshot() == other.to_grid_snapshot()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(size={self.size}, empty={self.empty_cell_count()})"
