from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class MoveOption:
    """A legal piece move with its heuristic priority."""

    piece_index: int
    current_pos: int
    new_pos: int
    dice_roll: int
    priority: float = 0.0
    reasons: List[str] = field(default_factory=list)

    @property
    def reason(self) -> str:
        return ", ".join(self.reasons) if self.reasons else "Standard move"
