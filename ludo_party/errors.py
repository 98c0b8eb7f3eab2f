# Specific exception types for rejected commands and bad snapshots
class LudoError(Exception):
    """Base exception for rule-engine and session errors."""

    pass


class InvalidPlayerCount(LudoError):
    """Raised when a game is created with fewer than 2 or more than 4 players."""

    pass


class NotYourTurn(LudoError):
    """Raised when a roll or move comes from a player other than the current one."""

    pass


class RollNotAllowed(LudoError):
    """Raised when a roll is requested while a roll is live or the game is not playing."""

    pass


class InvalidMove(LudoError):
    """Raised when the requested piece cannot move with the live dice value."""

    pass


class NoLegalMoves(LudoError):
    """Informational: the live roll has no legal move and must be resolved."""

    pass


class InvalidGameState(LudoError):
    """Raised when an external snapshot does not describe a valid game."""

    pass


class GameNotFound(LudoError):
    """Raised when no game is stored for the requested room."""

    pass


class GameInProgress(LudoError):
    """Raised when a game is started in a room whose current game has not finished."""

    pass
