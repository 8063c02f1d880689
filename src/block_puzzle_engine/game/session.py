from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .analysis import BoardAnalysis, analyze
from .board import Board, GridSnapshot
from .lines import ClearResult, clear_lines
from .pieces import Piece, PieceType
from .rules import DEFAULT_RULES, EngineRules
from .solvability import SolvabilityChecker, SolvabilityResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlacementResult:
    success: bool
    clear_result: ClearResult = field(default_factory=ClearResult)
    pieces_remaining: int = 0
    game_over: bool = False

    @property
    def lines_cleared(self) -> int:
        return self.clear_result.total_lines_cleared


@dataclass
class SessionState:
    grid: GridSnapshot
    hand: List[PieceType]
    pieces_placed: int = 0
    total_lines_cleared: int = 0


class GameSession:
    """One live board plus the hand of pieces currently offered to the player.

    Hands are dealt by the caller; the session only validates placements,
    runs the line clearer after each one and keeps running counters.
    """

    def __init__(self, rules: Optional[EngineRules] = None, board: Optional[Board] = None) -> None:
        self.rules = rules or DEFAULT_RULES
        self.board = board if board is not None else Board(self.rules.board_size)
        if self.board.size != self.rules.board_size:
            raise ValueError(f"Board must be {self.rules.board_size}x{self.rules.board_size}")
        self.checker = SolvabilityChecker(self.rules)
        self.hand: List[PieceType] = []
        self.pieces_placed = 0
        self.total_lines_cleared = 0

    def deal(self, pieces: Sequence[PieceType]) -> None:
        if self.hand:
            raise ValueError(f"Cannot deal while {len(self.hand)} piece(s) remain in hand")
        if len(pieces) > self.rules.hand_size:
            raise ValueError(f"Hand holds at most {self.rules.hand_size} pieces, got {len(pieces)}")
        self.hand = [PieceType(p) for p in pieces]
        logger.debug("Dealt %s", [p.name for p in self.hand])

    def _piece(self, piece_idx: int, rotation: int = 0) -> Optional[Piece]:
        if piece_idx < 0 or piece_idx >= len(self.hand):
            return None
        return Piece.create(self.hand[piece_idx], rotation)

    def can_place(self, piece_idx: int, row: int, col: int, rotation: int = 0) -> bool:
        piece = self._piece(piece_idx, rotation)
        return piece is not None and self.board.can_place(piece, row, col)

    def place_piece(self, piece_idx: int, row: int, col: int, rotation: int = 0) -> PlacementResult:
        piece = self._piece(piece_idx, rotation)
        if piece is None or not self.board.try_place(piece, row, col):
            return PlacementResult(success=False, pieces_remaining=len(self.hand), game_over=self.is_game_over)

        self.hand.pop(piece_idx)
        result = clear_lines(self.board)
        self.pieces_placed += 1
        self.total_lines_cleared += result.total_lines_cleared
        logger.debug("Placed %s at (%d, %d); cleared rows=%s cols=%s",
                     piece.type.name, row, col, result.rows_cleared, result.columns_cleared)
        return PlacementResult(
            success=True,
            clear_result=result,
            pieces_remaining=len(self.hand),
            game_over=self.is_game_over,
        )

    @property
    def is_game_over(self) -> bool:
        # An empty hand waits for the next deal rather than ending the game.
        if not self.hand:
            return False
        return not self.checker.at_least_one_fits(self.board, self.hand)

    def check_hand(self) -> SolvabilityResult:
        return self.checker.check(self.board, self.hand)

    def analysis(self) -> BoardAnalysis:
        return analyze(self.board, self.rules)

    def get_state(self) -> SessionState:
        return SessionState(
            grid=self.board.to_grid_snapshot(),
            hand=list(self.hand),
            pieces_placed=self.pieces_placed,
            total_lines_cleared=self.total_lines_cleared,
        )

    @classmethod
    def from_state(cls, state: SessionState, rules: Optional[EngineRules] = None) -> "GameSession":
        rules = rules or DEFAULT_RULES
        board = Board.from_grid_snapshot(state.grid, size=rules.board_size)
        session = cls(rules, board)
        session.hand = [PieceType(p) for p in state.hand]
        session.pieces_placed = int(state.pieces_placed)
        session.total_lines_cleared = int(state.total_lines_cleared)
        return session
