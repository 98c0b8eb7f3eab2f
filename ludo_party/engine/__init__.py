from . import board
from .config import agent_config, config
from .rules import (
    apply_move,
    apply_roll,
    can_move_piece,
    can_player_roll,
    create_initial_state,
    get_valid_moves,
    has_valid_moves,
    move_piece,
    resolve_captures,
    resolve_no_legal_moves,
    roll_dice,
    validate_roll,
)
from .serialization import dumps, loads, state_from_dict, state_to_dict
from .types import Color, GameState, GameStatus, MoveEvents, MoveResult, Player

__all__ = [
    "board",
    "config",
    "agent_config",
    "Color",
    "GameState",
    "GameStatus",
    "MoveEvents",
    "MoveResult",
    "Player",
    "create_initial_state",
    "roll_dice",
    "validate_roll",
    "can_player_roll",
    "apply_roll",
    "can_move_piece",
    "get_valid_moves",
    "has_valid_moves",
    "apply_move",
    "move_piece",
    "resolve_captures",
    "resolve_no_legal_moves",
    "state_to_dict",
    "state_from_dict",
    "dumps",
    "loads",
]
