"""Dict/JSON representation of :class:`GameState`.

Keys follow the wire vocabulary used by clients (``currentPlayer``,
``diceValue``, ``moveCompleted`` ...). ``state_from_dict`` is the boundary
where untrusted snapshots are validated.
"""

from __future__ import annotations

import json
from typing import Any

from ..errors import InvalidGameState
from . import board
from .config import config
from .types import Color, GameState, GameStatus, Player


def player_to_dict(player: Player) -> dict[str, Any]:
    return {
        "id": player.id,
        "name": player.name,
        "color": player.color.label,
        "pieces": list(player.pieces),
        "isActive": player.is_active,
    }


def state_to_dict(state: GameState) -> dict[str, Any]:
    return {
        "players": [player_to_dict(p) for p in state.players],
        "currentPlayer": state.current_player,
        "diceValue": state.dice_value,
        "gameStatus": state.game_status.value,
        "winner": state.winner,
        "canRollAgain": state.can_roll_again,
        "moveCompleted": state.move_completed,
        "lastRoll": state.last_roll,
    }


def _flag(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise InvalidGameState(f"{key} must be true or false, got {value!r}")
    return value


def _player_from_dict(data: dict[str, Any], index: int) -> Player:
    try:
        color = Color.from_label(str(data["color"]))
        pieces = [int(p) for p in data["pieces"]]
        name = str(data["name"])
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidGameState(f"Malformed player {index}: {e}") from e
    if len(pieces) != config.PIECES_PER_PLAYER:
        raise InvalidGameState(
            f"Player {index} has {len(pieces)} pieces, expected {config.PIECES_PER_PLAYER}"
        )
    bad = [p for p in pieces if not board.is_valid_position(p)]
    if bad:
        raise InvalidGameState(f"Player {index} has out-of-range positions {bad}")
    return Player(
        id=str(data.get("id", f"player_{index}")),
        name=name,
        color=color,
        pieces=pieces,
        is_active=_flag(data, "isActive", True),
    )


def state_from_dict(data: dict[str, Any]) -> GameState:
    raw_players = data.get("players")
    if not isinstance(raw_players, list):
        raise InvalidGameState("Snapshot has no player list")
    if not config.MIN_PLAYERS <= len(raw_players) <= config.MAX_PLAYERS:
        raise InvalidGameState(f"Snapshot has {len(raw_players)} players")
    players = [_player_from_dict(p, i) for i, p in enumerate(raw_players)]
    if len({p.color for p in players}) != len(players):
        raise InvalidGameState("Two players share a colour")

    try:
        current = int(data.get("currentPlayer", 0))
        dice = int(data.get("diceValue", 0))
        status = GameStatus(data.get("gameStatus", GameStatus.PLAYING.value))
        last_roll = data.get("lastRoll")
        last_roll = int(last_roll) if last_roll is not None else None
    except (TypeError, ValueError) as e:
        raise InvalidGameState(f"Malformed snapshot: {e}") from e
    if not 0 <= current < len(players):
        raise InvalidGameState(f"currentPlayer {current} out of range")
    if not 0 <= dice <= config.DICE_FACES:
        raise InvalidGameState(f"diceValue {dice} out of range")

    winner = data.get("winner")
    if (winner is not None) != (status == GameStatus.FINISHED):
        raise InvalidGameState("winner must be set exactly when the game is finished")

    return GameState(
        players=players,
        current_player=current,
        dice_value=dice,
        game_status=status,
        winner=winner,
        can_roll_again=_flag(data, "canRollAgain", False),
        move_completed=_flag(data, "moveCompleted", True),
        last_roll=last_roll,
    )


def dumps(state: GameState) -> str:
    return json.dumps(state_to_dict(state))


def loads(payload: str) -> GameState:
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise InvalidGameState(f"Snapshot is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidGameState("Snapshot must be a JSON object")
    return state_from_dict(data)
