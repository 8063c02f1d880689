"""Game module for the block puzzle engine.

Exports the rules engine:
- Piece, PieceType: piece catalog with rotation
- Board: placement and anchor enumeration
- clear_lines, ClearResult: row/column clearing without gravity
- SolvabilityChecker, SolvabilityResult: can a dealt hand be placed in some order
- analyze, BoardAnalysis: board danger metrics
- GameSession: one live board and its current hand
- EngineRules: engine configuration
"""

from .rules import EngineRules, DEFAULT_RULES
from .pieces import Piece, PieceType, create_piece, get_color, get_all_rotations, rotate_shape
from .board import Board
from .lines import ClearResult, clear_lines, find_complete_columns, find_complete_rows
from .solvability import (
    SolvabilityChecker,
    SolvabilityResult,
    at_least_one_fits,
    check_solvability,
    fitting_pieces,
    unique_permutations,
)
from .analysis import BoardAnalysis, analyze, contributes_to_line_clear
from .session import GameSession, PlacementResult, SessionState

__all__ = [
    "EngineRules",
    "DEFAULT_RULES",
    "Piece",
    "PieceType",
    "create_piece",
    "get_color",
    "get_all_rotations",
    "rotate_shape",
    "Board",
    "ClearResult",
    "clear_lines",
    "find_complete_rows",
    "find_complete_columns",
    "SolvabilityChecker",
    "SolvabilityResult",
    "check_solvability",
    "at_least_one_fits",
    "fitting_pieces",
    "unique_permutations",
    "BoardAnalysis",
    "analyze",
    "contributes_to_line_clear",
    "GameSession",
    "PlacementResult",
    "SessionState",
]
