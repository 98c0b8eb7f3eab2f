"""Command layer that owns game snapshots per room.

Turns the ``roll`` / ``move`` / ``state`` vocabulary into rule-engine calls,
serializes transitions per room and stores the results in a repository.
"""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Sequence

from loguru import logger

from ludo_party.engine import rules
from ludo_party.engine.types import GameState, GameStatus
from ludo_party.errors import GameInProgress, GameNotFound, LudoError, NoLegalMoves

from .repository import GameRepository, InMemoryRepository, Room

if TYPE_CHECKING:  # avoid runtime import to prevent circular deps
    from ludo_party.agent.agent import OpponentAgent


@dataclass(slots=True)
class CommandResult:
    ok: bool
    state: Optional[GameState] = None
    dice_value: Optional[int] = None
    reason: Optional[str] = None
    message: Optional[str] = None
    winner: Optional[str] = None
    no_legal_moves: bool = False
    roll_again: bool = False
    events: List[str] = field(default_factory=list)

    @classmethod
    def rejected(cls, error: LudoError, state: Optional[GameState]) -> "CommandResult":
        return cls(ok=False, state=state, reason=type(error).__name__, message=str(error))


@dataclass(slots=True)
class GameSession:
    repository: GameRepository = field(default_factory=InMemoryRepository)
    rng: random.Random = field(default_factory=random.Random)
    _locks: Dict[str, threading.Lock] = field(default_factory=dict, init=False, repr=False)
    _locks_guard: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def _lock(self, room_id: str, *, create: bool = True) -> threading.Lock:
        key = room_id.upper()
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                # unknown rooms never get a lock entry
                if not create and self.repository.get_state(room_id) is None:
                    raise GameNotFound(f"No game in room {room_id}")
                lock = self._locks[key] = threading.Lock()
            return lock

    def _drop_lock(self, room_id: str) -> None:
        with self._locks_guard:
            self._locks.pop(room_id.upper(), None)

    def _load(self, room_id: str) -> GameState:
        state = self.repository.get_state(room_id)
        if state is None:
            raise GameNotFound(f"No game in room {room_id}")
        return state

    def _command(self, room_id: str, action: Callable[..., CommandResult], *args) -> CommandResult:
        """Run ``action`` on the stored state while holding the room's lock."""
        try:
            with self._lock(room_id, create=False):
                return action(room_id, self._load(room_id), *args)
        except GameNotFound as e:
            logger.warning(f"Room {room_id}: {e}")
            return CommandResult.rejected(e, None)

    # --- Commands ---
    def start(self, room_id: str, player_names: Sequence[str]) -> CommandResult:
        with self._lock(room_id):
            current = self.repository.get_state(room_id)
            if current is not None and not current.is_over:
                e = GameInProgress(f"Room {room_id} already has a game in progress")
                logger.warning(f"Room {room_id}: cannot start game: {e}")
                return CommandResult.rejected(e, current)
            try:
                state = rules.create_initial_state(player_names)
            except LudoError as e:
                logger.warning(f"Room {room_id}: cannot start game: {e}")
                if current is None:
                    self._drop_lock(room_id)
                return CommandResult.rejected(e, None)

            names = [p.name for p in state.players]
            room = self.repository.get_room(room_id)
            host = room.host if room is not None and room.host in names else names[0]
            self.repository.save_room(
                Room(room_id=room_id, players=names, host=host, status=GameStatus.PLAYING)
            )
            self.repository.save_state(room_id, state)
            logger.info(f"Room {room_id}: game started for {', '.join(names)}")
            return CommandResult(ok=True, state=state, events=["game-started"])

    def roll(self, room_id: str, player_index: int) -> CommandResult:
        return self._command(room_id, self._roll, player_index)

    def move(self, room_id: str, player_index: int, piece_index: int) -> CommandResult:
        return self._command(room_id, self._move, player_index, piece_index)

    def _roll(self, room_id: str, state: GameState, player_index: int) -> CommandResult:
        try:
            rules.validate_roll(state, player_index)
        except LudoError as e:
            logger.warning(f"Room {room_id}: roll rejected for player {player_index}: {e}")
            return CommandResult.rejected(e, state)

        dice = rules.roll_dice(self.rng)
        state = rules.apply_roll(state, player_index, dice)
        result = CommandResult(ok=True, state=state, dice_value=dice, events=["dice-rolled"])
        if not rules.has_valid_moves(state, player_index):
            state = rules.resolve_no_legal_moves(state)
            result.state = state
            result.no_legal_moves = True
            result.roll_again = state.can_roll_again
            result.events.append("no-valid-moves")
            result.message = (
                "No moves with 6! Roll again." if state.can_roll_again else "No valid moves! Turn skipped."
            )
        self.repository.save_state(room_id, state)
        return result

    def _move(
        self, room_id: str, state: GameState, player_index: int, piece_index: int
    ) -> CommandResult:
        try:
            outcome = rules.apply_move(state, player_index, piece_index)
        except LudoError as e:
            logger.warning(f"Room {room_id}: move rejected for player {player_index}: {e}")
            result = CommandResult.rejected(e, state)
            result.no_legal_moves = isinstance(e, NoLegalMoves)
            return result

        self.repository.save_state(room_id, outcome.state)
        result = CommandResult(
            ok=True,
            state=outcome.state,
            dice_value=outcome.dice_value,
            roll_again=outcome.extra_turn,
            events=["piece-moved"],
        )
        if outcome.events.won:
            result.winner = outcome.state.winner
            result.events.append("game-finished")
            room = self.repository.get_room(room_id)
            if room is not None:
                room.status = GameStatus.FINISHED
                self.repository.save_room(room)
        elif outcome.extra_turn:
            result.events.append("roll-again")
        return result

    def state(self, room_id: str) -> GameState:
        return self._load(room_id)

    def room(self, room_id: str) -> Optional[Room]:
        return self.repository.get_room(room_id)

    def end(self, room_id: str) -> None:
        with self._lock(room_id):
            self.repository.delete_state(room_id)
            self.repository.delete_room(room_id)
        self._drop_lock(room_id)

    def play_agent_turn(
        self, room_id: str, agent: "OpponentAgent", player_index: int
    ) -> List[CommandResult]:
        """Roll and move for an agent seat until its turn passes or the game ends."""
        results: List[CommandResult] = []
        while True:
            rolled = self.roll(room_id, player_index)
            results.append(rolled)
            if not rolled.ok:
                return results
            if rolled.no_legal_moves:
                if not rolled.roll_again:
                    return results
                continue
            piece = agent.decide_piece(rolled.state, player_index)
            moved = self.move(room_id, player_index, piece)
            results.append(moved)
            if not moved.ok or moved.winner is not None or not moved.roll_again:
                return results
