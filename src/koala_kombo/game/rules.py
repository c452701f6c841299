from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    points_per_line_cell: int = 1

    def score_for_lines(self, rows: int, columns: int, board_size: int) -> int:
        # Cells where a cleared row meets a cleared column count for both lines
        lines = rows + columns
        if lines <= 0:
            return 0
        return self.points_per_line_cell * board_size * lines
