from __future__ import annotations

import numpy as np

from .board import Board
from .pieces import Piece, PieceType, get_all_rotations
from .session import GameSession


def _format_mask(mask: np.ndarray) -> str:
    return "\n".join("".join("█" if cell else "·" for cell in row) for row in mask)


def format_board(board: Board) -> str:
    return _format_mask(board.occupancy())


def format_piece(piece: Piece) -> str:
    return _format_mask(piece.shape)


def print_board(board: Board) -> None:
    print(format_board(board))


def print_piece(piece: Piece) -> None:
    print(format_piece(piece))


def run_demo() -> None:  # pragma: no cover
    session = GameSession()
    print("=== Block Puzzle Engine Demo ===")

    # Fill row 0 except its last cell
    for col in range(0, 6, 3):
        session.board.try_place(Piece.create(PieceType.LINE3), 0, col)
    session.board.try_place(Piece.create(PieceType.DOT), 0, 6)
    print("\nStarting board:")
    print_board(session.board)

    hand = [PieceType.DOT, PieceType.SQUARE_3X3, PieceType.L]
    session.deal(hand)
    check = session.check_hand()
    print(f"\nHand: {[p.name for p in hand]}")
    print(f"Solvable: {check.is_solvable}, best first piece: "
          f"{check.best_first_piece.name if check.best_first_piece else None}")

    result = session.place_piece(0, 0, 7)
    print(f"\nPlaced DOT at (0, 7): success={result.success}, lines cleared={result.lines_cleared}")
    print_board(session.board)

    analysis = session.analysis()
    print(f"\nDanger level: {analysis.danger_level:.3f}, legal moves: {analysis.total_legal_moves}")


if __name__ == "__main__":  # pragma: no cover
    run_demo()
    print("\n=== Piece Rotations ===")
    for piece_type in PieceType:
        print(f"\n{piece_type.name}:")
        for i, shape in enumerate(get_all_rotations(piece_type)):
            print(f"Rotation {i}:")
            print(_format_mask(shape))
