"""Solvability checks for a dealt hand of pieces.

A hand is solvable when some ordering of its pieces can be placed one after
another on the board, with line clears applied after every placement. The
search tries each distinct ordering and, within an ordering, commits to the
first valid anchor in row-major order. The caller's board is never touched;
every attempt runs on a private copy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .board import Board, Coordinate
from .lines import clear_lines
from .pieces import Piece, PieceType
from .rules import DEFAULT_RULES, EngineRules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolvabilityResult:
    is_solvable: bool
    at_least_one_fits: bool
    all_fit: bool
    best_first_piece: Optional[PieceType] = None
    # Accepted ordering and the anchor used for each of its pieces.
    order: Tuple[PieceType, ...] = ()
    placements: Tuple[Coordinate, ...] = ()


def _swap_orderings(items: List[PieceType], start: int) -> Iterator[Tuple[PieceType, ...]]:
    # Swap each remaining item into ``start`` in turn, recurse, then swap back.
    if start >= len(items) - 1:
        yield tuple(items)
        return
    for i in range(start, len(items)):
        items[start], items[i] = items[i], items[start]
        yield from _swap_orderings(items, start + 1)
        items[start], items[i] = items[i], items[start]


def unique_permutations(pieces: Sequence[PieceType]) -> Iterator[Tuple[PieceType, ...]]:
    """Yield each distinct ordering of ``pieces`` once.

    Orderings come out in swap order (for a, b, c: abc, acb, bac, bca, cba,
    cab). Orderings that only swap two pieces of the same type are skipped.
    """
    seen = set()
    for perm in _swap_orderings(list(pieces), 0):
        key = tuple(int(p) for p in perm)
        if key in seen:
            continue
        seen.add(key)
        yield perm


class SolvabilityChecker:
    def __init__(self, rules: Optional[EngineRules] = None) -> None:
        self.rules = rules or DEFAULT_RULES

    def fitting_pieces(self, board: Board, pieces: Sequence[PieceType]) -> List[PieceType]:
        """Pieces that fit somewhere on the board as it stands."""
        return [p for p in pieces if board.can_place_anywhere(Piece.create(p))]

    def at_least_one_fits(self, board: Board, pieces: Sequence[PieceType]) -> bool:
        return any(board.can_place_anywhere(Piece.create(p)) for p in pieces)

    def try_sequence(self, board: Board, sequence: Sequence[PieceType]) -> Optional[List[Coordinate]]:
        """Place ``sequence`` in order on a copy of ``board``.

        Returns the anchor chosen for each piece, or None if some piece has
        nowhere to go.
        """
        sim = board.copy()
        anchors: List[Coordinate] = []
        for piece_type in sequence:
            piece = Piece.create(piece_type)
            placed = False
            for row, col in sim.valid_positions(piece, limit=self.rules.max_placements_per_piece):
                if sim.try_place(piece, row, col):
                    clear_lines(sim)
                    anchors.append((row, col))
                    placed = True
                    break
            if not placed:
                return None
        return anchors

    def check(self, board: Board, pieces: Sequence[PieceType]) -> SolvabilityResult:
        pieces = [PieceType(p) for p in pieces]
        if not pieces:
            return SolvabilityResult(is_solvable=True, at_least_one_fits=True, all_fit=True)

        fitting = self.fitting_pieces(board, pieces)
        at_least_one = len(fitting) > 0
        all_fit = len(fitting) == len(pieces)

        if not at_least_one:
            logger.debug("No piece of %s fits the board", [p.name for p in pieces])
            return SolvabilityResult(is_solvable=False, at_least_one_fits=False, all_fit=False)

        if len(pieces) == 1:
            anchor = board.valid_positions(Piece.create(pieces[0]), limit=1)[0]
            return SolvabilityResult(
                is_solvable=True,
                at_least_one_fits=True,
                all_fit=True,
                best_first_piece=pieces[0],
                order=(pieces[0],),
                placements=(anchor,),
            )

        best_first: Optional[PieceType] = None
        best_positions = 0
        for perm in unique_permutations(pieces):
            anchors = self.try_sequence(board, perm)
            if anchors is None:
                continue
            positions = len(board.valid_positions(Piece.create(perm[0])))
            if positions > best_positions:
                best_positions = positions
                best_first = perm[0]
            logger.debug("Hand solvable in order %s", [p.name for p in perm])
            return SolvabilityResult(
                is_solvable=True,
                at_least_one_fits=at_least_one,
                all_fit=all_fit,
                best_first_piece=best_first,
                order=tuple(perm),
                placements=tuple(anchors),
            )

        logger.debug("No ordering of %s can be placed", [p.name for p in pieces])
        return SolvabilityResult(is_solvable=False, at_least_one_fits=at_least_one, all_fit=all_fit)


_default_checker = SolvabilityChecker()


def check_solvability(board: Board, pieces: Sequence[PieceType]) -> SolvabilityResult:
    return _default_checker.check(board, pieces)


def at_least_one_fits(board: Board, pieces: Sequence[PieceType]) -> bool:
    return _default_checker.at_least_one_fits(board, pieces)


def fitting_pieces(board: Board, pieces: Sequence[PieceType]) -> List[PieceType]:
    return _default_checker.fitting_pieces(board, pieces)
