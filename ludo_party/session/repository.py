from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from ludo_party.engine.config import config
from ludo_party.engine.serialization import state_from_dict, state_to_dict
from ludo_party.engine.types import GameState, GameStatus


@dataclass(slots=True)
class Room:
    """Who sits in a room and whether its game has begun."""

    room_id: str
    players: List[str] = field(default_factory=list)
    host: Optional[str] = None
    status: GameStatus = GameStatus.WAITING
    max_players: int = config.MAX_PLAYERS

    def copy(self) -> "Room":
        return Room(
            room_id=self.room_id,
            players=list(self.players),
            host=self.host,
            status=self.status,
            max_players=self.max_players,
        )


class GameRepository(Protocol):
    def get_room(self, room_id: str) -> Optional[Room]:
        ...

    def save_room(self, room: Room) -> None:
        ...

    def delete_room(self, room_id: str) -> None:
        ...

    def get_state(self, room_id: str) -> Optional[GameState]:
        ...

    def save_state(self, room_id: str, state: GameState) -> None:
        ...

    def delete_state(self, room_id: str) -> None:
        ...

    def list_rooms(self) -> List[str]:
        ...


@dataclass(slots=True)
class InMemoryRepository:
    """Keeps copies of rooms and serialized snapshots, so callers never alias stored data."""

    _rooms: Dict[str, Room] = field(default_factory=dict, repr=False)
    _states: Dict[str, Dict[str, Any]] = field(default_factory=dict, repr=False)

    # --- Rooms ---
    def get_room(self, room_id: str) -> Optional[Room]:
        room = self._rooms.get(room_id.upper())
        return room.copy() if room is not None else None

    def save_room(self, room: Room) -> None:
        stored = room.copy()
        stored.room_id = room.room_id.upper()
        self._rooms[stored.room_id] = stored

    def delete_room(self, room_id: str) -> None:
        self._rooms.pop(room_id.upper(), None)

    # --- Game states ---
    def get_state(self, room_id: str) -> Optional[GameState]:
        data = self._states.get(room_id.upper())
        return state_from_dict(data) if data is not None else None

    def save_state(self, room_id: str, state: GameState) -> None:
        self._states[room_id.upper()] = state_to_dict(state)

    def delete_state(self, room_id: str) -> None:
        self._states.pop(room_id.upper(), None)

    def list_rooms(self) -> List[str]:
        return sorted(set(self._rooms) | set(self._states))
