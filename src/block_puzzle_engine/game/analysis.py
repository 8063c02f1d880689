from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .board import Board
from .lines import find_complete_columns, find_complete_rows
from .pieces import Piece, PieceType
from .rules import DEFAULT_RULES, EngineRules


# One piece from each size class; enough to gauge how open the board is.
REPRESENTATIVE_PIECES: Tuple[PieceType, ...] = (
    PieceType.DOT,
    PieceType.LINE2,
    PieceType.LINE3,
    PieceType.T,
    PieceType.SQUARE_2X2,
)


@dataclass(frozen=True)
class BoardAnalysis:
    danger_level: float
    empty_cells: int
    total_legal_moves: int
    near_complete_rows: Tuple[int, ...]
    near_complete_columns: Tuple[int, ...]


def count_empty_cells(board: Board) -> int:
    return board.empty_cell_count()


def count_legal_moves(board: Board) -> int:
    return sum(len(board.valid_positions(Piece.create(p))) for p in REPRESENTATIVE_PIECES)


def find_near_complete_rows(board: Board, max_missing: int = DEFAULT_RULES.near_complete_max_missing) -> List[int]:
    """Rows with between 1 and ``max_missing`` empty cells"""
    empty_per_row = board.size - np.count_nonzero(board.occupancy(), axis=1)
    return [int(r) for r in np.flatnonzero((empty_per_row > 0) & (empty_per_row <= max_missing))]


def find_near_complete_columns(board: Board, max_missing: int = DEFAULT_RULES.near_complete_max_missing) -> List[int]:
    empty_per_col = board.size - np.count_nonzero(board.occupancy(), axis=0)
    return [int(c) for c in np.flatnonzero((empty_per_col > 0) & (empty_per_col <= max_missing))]


def danger_level(empty_cells: int, legal_moves: int, near_complete_lines: int,
                 rules: Optional[EngineRules] = None) -> float:
    """Combine occupancy, move scarcity and fragmentation into 0.0 (safe) .. 1.0 (critical)."""
    rules = rules or DEFAULT_RULES
    occupancy = 1.0 - float(empty_cells) / float(rules.total_cells)

    if legal_moves <= rules.critical_moves_threshold:
        scarcity = 1.0
    else:
        scarcity = 1.0 - min(1.0, float(legal_moves) / float(rules.max_expected_moves))

    # Lots of nearly finished lines means a fragmented board
    fragmentation = 0.3 if near_complete_lines > 6 else 0.0

    level = 0.50 * occupancy + 0.40 * scarcity + 0.10 * fragmentation
    level = level ** 1.5
    return float(np.clip(level, 0.0, 1.0))


def analyze(board: Board, rules: Optional[EngineRules] = None) -> BoardAnalysis:
    rules = rules or DEFAULT_RULES
    empty = count_empty_cells(board)
    moves = count_legal_moves(board)
    rows = find_near_complete_rows(board, rules.near_complete_max_missing)
    cols = find_near_complete_columns(board, rules.near_complete_max_missing)
    return BoardAnalysis(
        danger_level=danger_level(empty, moves, len(rows) + len(cols), rules),
        empty_cells=empty,
        total_legal_moves=moves,
        near_complete_rows=tuple(rows),
        near_complete_columns=tuple(cols),
    )


def contributes_to_line_clear(board: Board, piece: Piece, top_row: int, top_col: int) -> bool:
    """True if placing ``piece`` at the anchor would complete a row or column."""
    if not board.can_place(piece, top_row, top_col):
        return False
    cells = piece.cells_at(top_row, top_col)
    temp = board.copy()
    temp.try_place(piece, top_row, top_col)
    touched_rows = {r for r, _ in cells}
    touched_cols = {c for _, c in cells}
    return any(r in touched_rows for r in find_complete_rows(temp)) or any(
        c in touched_cols for c in find_complete_columns(temp)
    )
