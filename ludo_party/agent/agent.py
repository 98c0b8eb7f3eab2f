from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from ludo_party.engine import board
from ludo_party.engine.config import DifficultyProfile, agent_config
from ludo_party.engine.rules import get_valid_moves
from ludo_party.engine.types import GameState

from .difficulty import get_profile, select_move
from .features import build_move_options
from .types import MoveOption


@dataclass(slots=True)
class OpponentAgent:
    """Computer player that picks moves with the shared rule engine.

    Stateless between calls apart from its random source; the delay returned
    by :meth:`thinking_time` is for the caller to apply, never slept here.
    """

    player_id: str
    difficulty: str = agent_config.default_difficulty
    rng: random.Random = field(default_factory=random.Random)
    profile: DifficultyProfile = field(init=False)

    def __post_init__(self) -> None:
        self.profile = get_profile(self.difficulty)
        self.difficulty = self.profile.name

    def analyze_moves(self, state: GameState, player_index: int) -> List[MoveOption]:
        return build_move_options(state, player_index)

    def decide_move(self, state: GameState, player_index: int) -> Optional[MoveOption]:
        valid = get_valid_moves(state, player_index)
        if not valid:
            return None
        if len(valid) == 1:
            player = state.players[player_index]
            current = player.pieces[valid[0]]
            return MoveOption(
                piece_index=valid[0],
                current_pos=current,
                new_pos=board.destination(player.color, current, state.dice_value),
                dice_roll=state.dice_value,
                priority=1.0,
                reasons=["Only valid move"],
            )

        options = self.analyze_moves(state, player_index)
        logger.debug(
            f"Agent {self.player_id} ({self.difficulty}) options: "
            + ", ".join(f"{m.piece_index}:{m.priority:.1f}" for m in options)
        )
        chosen = select_move(options, self.profile, self.rng)
        logger.debug(f"Agent {self.player_id} picked piece {chosen.piece_index} ({chosen.reason})")
        return chosen

    def decide_piece(self, state: GameState, player_index: int) -> Optional[int]:
        move = self.decide_move(state, player_index)
        return move.piece_index if move is not None else None

    def thinking_time(self) -> float:
        low, high = self.profile.thinking_time
        return self.rng.uniform(low, high)
