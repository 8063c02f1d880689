from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineRules:
    board_size: int = 8
    max_placements_per_piece: int = 50  # anchor cap for the solvability search
    hand_size: int = 3
    near_complete_max_missing: int = 3
    critical_moves_threshold: int = 30
    max_expected_moves: int = 250

    def __post_init__(self) -> None:
        for name in ("board_size", "max_placements_per_piece", "hand_size", "max_expected_moves"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.near_complete_max_missing < 0 or self.critical_moves_threshold < 0:
            raise ValueError("Thresholds must not be negative")

    @property
    def total_cells(self) -> int:
        return self.board_size * self.board_size


DEFAULT_RULES = EngineRules()
