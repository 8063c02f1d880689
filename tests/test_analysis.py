import pytest

from block_puzzle_engine.game import Piece, PieceType, analyze, contributes_to_line_clear
from block_puzzle_engine.game.analysis import (
    count_legal_moves,
    danger_level,
    find_near_complete_columns,
    find_near_complete_rows,
)
from tests.helpers import board_from_rows


def test_empty_board_is_safe(empty_board):
    analysis = analyze(empty_board)
    assert analysis.empty_cells == 64
    # DOT 64 + LINE2 56 + LINE3 48 + T 42 + SQUARE_2X2 49
    assert analysis.total_legal_moves == 259
    assert analysis.near_complete_rows == ()
    assert analysis.near_complete_columns == ()
    assert analysis.danger_level == pytest.approx(0.0)


def test_full_board_is_critical(full_board):
    analysis = analyze(full_board)
    assert analysis.empty_cells == 0
    assert count_legal_moves(full_board) == 0
    assert analysis.danger_level == pytest.approx(0.9 ** 1.5)


def test_near_complete_lines():
    rows = ["........"] * 8
    rows[1] = "######.."
    rows[4] = "#######."
    board = board_from_rows(rows)
    assert find_near_complete_rows(board) == [1, 4]
    assert find_near_complete_rows(board, max_missing=1) == [4]
    assert find_near_complete_columns(board) == []


def test_danger_level_is_clamped():
    assert 0.0 <= danger_level(10, 0, 16) <= 1.0
    assert danger_level(64, 500, 0) == pytest.approx(0.0)


def test_contributes_to_line_clear():
    rows = ["........"] * 8
    rows[0] = "#####..."
    board = board_from_rows(rows)
    assert contributes_to_line_clear(board, Piece.create(PieceType.LINE3), 0, 5)
    assert not contributes_to_line_clear(board, Piece.create(PieceType.LINE2), 0, 5)
    assert not contributes_to_line_clear(board, Piece.create(PieceType.LINE3), 0, 4)
    # Board is not modified
    assert board.is_empty(0, 5)
