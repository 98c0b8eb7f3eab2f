"""Four-player Ludo: rule engine, computer opponent and session commands."""

from .agent import OpponentAgent
from .engine import GameState, GameStatus, create_initial_state
from .session import GameSession, InMemoryRepository

__version__ = "0.1.0"

__all__ = [
    "GameSession",
    "GameState",
    "GameStatus",
    "InMemoryRepository",
    "OpponentAgent",
    "create_initial_state",
]
