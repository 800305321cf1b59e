from __future__ import annotations

from dataclasses import dataclass, field

from .grid import Board
from .rules import ScoringRules


@dataclass
class ScoreKeeper:
    """Running score, line total and level for one session."""

    rules: ScoringRules = field(default_factory=ScoringRules)
    score: int = 0
    lines: int = 0
    level: int = 1

    @property
    def drop_interval_ms(self) -> int:
        return self.rules.drop_interval_ms(self.level)

    def register_clears(self, cleared: int) -> int:
        """Credit `cleared` rows at the current level and return the points gained."""
        if cleared <= 0:
            return 0
        gained = self.rules.score_for_lines(cleared, self.level)
        self.score += gained
        self.lines += cleared
        self.level = self.rules.level_for_lines(self.lines)
        return gained

    def reset(self) -> None:
        self.score = 0
        self.lines = 0
        self.level = 1


def clear_lines(board: Board, keeper: ScoreKeeper) -> int:
    """One line-clear pass: remove full rows, then score them."""
    cleared = board.clear_full_rows()
    keeper.register_clears(cleared)
    return cleared
