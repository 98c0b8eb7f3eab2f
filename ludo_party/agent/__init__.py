"""Computer opponent built on the shared rule engine."""

from .agent import OpponentAgent
from .difficulty import available, get_profile, select_move
from .features import build_move_options, score_move
from .types import MoveOption

__all__ = [
    "MoveOption",
    "OpponentAgent",
    "available",
    "build_move_options",
    "get_profile",
    "score_move",
    "select_move",
]
