from .orchestrator import CommandResult, GameSession
from .repository import GameRepository, InMemoryRepository, Room

__all__ = ["CommandResult", "GameRepository", "GameSession", "InMemoryRepository", "Room"]
