from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np


class PieceType(IntEnum):
    # Tetrominoes
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7
    # Lines
    DOT = 8
    LINE2 = 9
    LINE3 = 10
    LINE5 = 11
    # Corners, squares, rectangles
    CORNER = 12
    BIG_CORNER = 13
    SQUARE_2X2 = 14
    SQUARE_3X3 = 15
    RECT_2X3 = 16


Shape = np.ndarray


def _shape(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.bool_)
    arr.setflags(write=False)
    return arr


BASE_SHAPES: Dict[PieceType, Shape] = {
    PieceType.I: _shape([[1, 1, 1, 1]]),
    PieceType.O: _shape([[1, 1], [1, 1]]),
    PieceType.T: _shape([[1, 1, 1], [0, 1, 0]]),
    PieceType.S: _shape([[0, 1, 1], [1, 1, 0]]),
    PieceType.Z: _shape([[1, 1, 0], [0, 1, 1]]),
    PieceType.J: _shape([[1, 0], [1, 0], [1, 1]]),
    PieceType.L: _shape([[0, 1], [0, 1], [1, 1]]),
    PieceType.DOT: _shape([[1]]),
    PieceType.LINE2: _shape([[1, 1]]),
    PieceType.LINE3: _shape([[1, 1, 1]]),
    PieceType.LINE5: _shape([[1, 1, 1, 1, 1]]),
    PieceType.CORNER: _shape([[1, 1], [1, 0]]),
    PieceType.BIG_CORNER: _shape([[1, 1, 1], [1, 0, 0], [1, 0, 0]]),
    PieceType.SQUARE_2X2: _shape([[1, 1], [1, 1]]),
    PieceType.SQUARE_3X3: _shape([[1, 1, 1], [1, 1, 1], [1, 1, 1]]),
    PieceType.RECT_2X3: _shape([[1, 1, 1], [1, 1, 1]]),
}

PIECE_COLORS: Dict[PieceType, str] = {
    PieceType.I: "#00FFFF",
    PieceType.O: "#FFFF00",
    PieceType.T: "#800080",
    PieceType.S: "#00FF00",
    PieceType.Z: "#FF0000",
    PieceType.J: "#0000FF",
    PieceType.L: "#FFA500",
    PieceType.DOT: "#808080",
    PieceType.LINE2: "#FFB6C1",
    PieceType.LINE3: "#90EE90",
    PieceType.LINE5: "#87CEEB",
    PieceType.CORNER: "#DDA0DD",
    PieceType.BIG_CORNER: "#F0E68C",
    PieceType.SQUARE_2X2: "#CD853F",
    PieceType.SQUARE_3X3: "#8B4513",
    PieceType.RECT_2X3: "#FF69B4",
}

# RECT_2X3 stood in for a separate 3x2 piece; portrait rotations keep its old colour.
PORTRAIT_RECT_COLOR = "#4169E1"


def rotate_shape(shape: Shape, rotation: int) -> Shape:
    """Rotate a shape matrix clockwise by ``rotation`` quarter turns.

    Each step maps cell (r, c) of an R x C matrix to (c, R - 1 - r).
    """
    k = rotation % 4
    if k == 0:
        return shape
    rotated = np.ascontiguousarray(np.rot90(shape, k, axes=(1, 0)))
    rotated.setflags(write=False)
    return rotated


def get_shape(piece_type: PieceType, rotation: int = 0) -> Shape:
    return rotate_shape(BASE_SHAPES[piece_type], rotation)


def get_color(piece_type: PieceType, rotation: int = 0) -> str:
    if piece_type == PieceType.RECT_2X3 and rotation % 4 in (1, 3):
        return PORTRAIT_RECT_COLOR
    return PIECE_COLORS[piece_type]


def get_all_rotations(piece_type: PieceType) -> List[Shape]:
    """Get all distinct rotations for a piece type"""
    rotations: List[Shape] = []
    for r in range(4):
        shape = get_shape(piece_type, r)
        if not any(np.array_equal(shape, existing) for existing in rotations):
            rotations.append(shape)
    return rotations


@dataclass(frozen=True, eq=False)
class Piece:
    """Immutable piece: a type, its rotated shape matrix and display colour.

    Build pieces with ``Piece.create``; direct construction must agree with
    the catalog for the given type and rotation.
    """

    type: PieceType
    shape: Shape = field(repr=False)
    color: str
    rotation: int = 0  # 0..3, quarter turns clockwise

    def __post_init__(self) -> None:
        if self.rotation not in (0, 1, 2, 3):
            raise ValueError(f"rotation must be 0..3, got {self.rotation}")
        expected = get_shape(PieceType(self.type), self.rotation)
        if not np.array_equal(self.shape, expected):
            raise ValueError(f"Shape does not match {PieceType(self.type).name} at rotation {self.rotation}")
        if self.color != get_color(self.type, self.rotation):
            raise ValueError(f"Colour {self.color} does not match {PieceType(self.type).name}")
        # Keep the read-only catalog matrix rather than a caller's array
        object.__setattr__(self, "shape", expected)
        object.__setattr__(self, "type", PieceType(self.type))

    @classmethod
    def create(cls, piece_type: PieceType, rotation: int = 0) -> "Piece":
        piece_type = PieceType(piece_type)
        rotation %= 4
        return cls(
            type=piece_type,
            shape=get_shape(piece_type, rotation),
            color=get_color(piece_type, rotation),
            rotation=rotation,
        )

    @property
    def rows(self) -> int:
        return int(self.shape.shape[0])

    @property
    def columns(self) -> int:
        return int(self.shape.shape[1])

    @property
    def cell_count(self) -> int:
        return int(np.count_nonzero(self.shape))

    def rotated(self, delta: int = 1) -> "Piece":
        return Piece.create(self.type, self.rotation + delta)

    def cells(self) -> List[Tuple[int, int]]:
        """Occupied (row, col) offsets in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.shape)]

    def cells_at(self, top_row: int, top_col: int) -> List[Tuple[int, int]]:
        return [(top_row + dr, top_col + dc) for dr, dc in self.cells()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return (
            self.type == other.type
            and self.rotation == other.rotation
            and self.color == other.color
            and np.array_equal(self.shape, other.shape)
        )

    def __hash__(self) -> int:
        return hash((self.type, self.rotation))


def create_piece(piece_type: PieceType, rotation: int = 0) -> Piece:
    return Piece.create(piece_type, rotation)
