import pytest

from block_puzzle_engine.game import Board, EngineRules, GameSession, PieceType, SessionState
from tests.helpers import board_from_rows


def test_place_piece_runs_line_clear():
    rows = ["........"] * 8
    rows[0] = "#######."
    session = GameSession(board=board_from_rows(rows))
    session.deal([PieceType.DOT, PieceType.LINE2, PieceType.T])

    result = session.place_piece(0, 0, 7)
    assert result.success
    assert result.clear_result.rows_cleared == (0,)
    assert result.lines_cleared == 1
    assert result.pieces_remaining == 2
    assert session.hand == [PieceType.LINE2, PieceType.T]
    assert session.pieces_placed == 1
    assert session.total_lines_cleared == 1
    assert session.board.empty_cell_count() == 64


def test_invalid_placement_leaves_state():
    session = GameSession()
    session.deal([PieceType.LINE5])
    before = session.board.to_grid_snapshot()
    assert not session.place_piece(0, 0, 4).success
    assert not session.place_piece(3, 0, 0).success
    assert not session.can_place(0, 0, 4)
    assert session.board.to_grid_snapshot() == before
    assert session.hand == [PieceType.LINE5]
    assert session.pieces_placed == 0


def test_rotation_is_applied():
    session = GameSession()
    session.deal([PieceType.LINE5])
    assert session.place_piece(0, 3, 0, rotation=1).success
    assert [session.board.is_empty(r, 0) for r in range(3, 8)] == [False] * 5


def test_deal_rules():
    session = GameSession()
    with pytest.raises(ValueError):
        session.deal([PieceType.DOT] * 4)
    session.deal([PieceType.DOT])
    with pytest.raises(ValueError):
        session.deal([PieceType.DOT])


def test_game_over_when_nothing_fits():
    session = GameSession(board=board_from_rows(["#" * 8] * 7 + ["######.."]))
    assert not session.is_game_over
    session.deal([PieceType.SQUARE_2X2, PieceType.LINE3])
    assert session.is_game_over
    assert not session.check_hand().at_least_one_fits


def test_check_hand_uses_current_hand():
    session = GameSession(board=board_from_rows(["#######."] + ["#" * 8] * 7))
    session.deal([PieceType.LINE2, PieceType.DOT])
    check = session.check_hand()
    assert check.is_solvable
    assert check.order == (PieceType.DOT, PieceType.LINE2)


def test_state_round_trip():
    session = GameSession()
    session.deal([PieceType.O, PieceType.DOT])
    session.place_piece(0, 2, 2)
    state = session.get_state()
    restored = GameSession.from_state(state)
    assert restored.board == session.board
    assert restored.hand == [PieceType.DOT]
    assert restored.pieces_placed == 1

    restored.place_piece(0, 0, 0)
    assert session.board.is_empty(0, 0)


def test_from_state_rejects_wrong_size():
    state = SessionState(grid=[[None] * 10 for _ in range(10)], hand=[])
    with pytest.raises(ValueError):
        GameSession.from_state(state)


def test_board_must_match_rules():
    with pytest.raises(ValueError):
        GameSession(board=Board(10))
    session = GameSession(rules=EngineRules(board_size=10, hand_size=2))
    assert session.board.size == 10


def test_analysis_available():
    assert GameSession().analysis().empty_cells == 64
