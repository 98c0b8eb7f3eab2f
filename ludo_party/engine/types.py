from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional

from .config import config


class Color(IntEnum):
    RED = 0
    BLUE = 1
    GREEN = 2
    YELLOW = 3

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "Color":
        return cls[label.upper()]


class GameStatus(str, Enum):
    WAITING = "waiting"
    PLAYING = "playing"
    FINISHED = "finished"


@dataclass(slots=True)
class Player:
    id: str
    name: str
    color: Color
    pieces: List[int] = field(
        default_factory=lambda: [config.HOME] * config.PIECES_PER_PLAYER
    )
    is_active: bool = True

    def pieces_at_home(self) -> int:
        return sum(1 for pos in self.pieces if pos == config.HOME)

    def has_won(self) -> bool:
        return all(pos == config.FINISH for pos in self.pieces)


@dataclass(slots=True)
class GameState:
    """Full snapshot of one game.

    ``dice_value == 0`` means no roll is live. ``move_completed`` is True when
    no piece move is pending and ``can_roll_again`` marks the bonus roll that
    follows a resolved 6.
    """

    players: List[Player]
    current_player: int = 0
    dice_value: int = 0
    game_status: GameStatus = GameStatus.PLAYING
    winner: Optional[str] = None
    can_roll_again: bool = False
    move_completed: bool = True
    last_roll: Optional[int] = None

    def copy(self) -> "GameState":
        """Return an independent snapshot (no shared piece lists)."""
        return GameState(
            players=[
                Player(
                    id=p.id,
                    name=p.name,
                    color=p.color,
                    pieces=list(p.pieces),
                    is_active=p.is_active,
                )
                for p in self.players
            ],
            current_player=self.current_player,
            dice_value=self.dice_value,
            game_status=self.game_status,
            winner=self.winner,
            can_roll_again=self.can_roll_again,
            move_completed=self.move_completed,
            last_roll=self.last_roll,
        )

    @property
    def current(self) -> Player:
        return self.players[self.current_player]

    @property
    def is_over(self) -> bool:
        return self.game_status == GameStatus.FINISHED


@dataclass(slots=True)
class MoveEvents:
    exited_home: bool = False
    entered_home_stretch: bool = False
    finished: bool = False
    captures: List[Dict[str, int]] = field(default_factory=list)
    won: bool = False


@dataclass(slots=True)
class MoveResult:
    state: GameState
    player_index: int
    piece_index: int
    dice_value: int
    old_position: int
    new_position: int
    events: MoveEvents
    extra_turn: bool
