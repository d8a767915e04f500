"""
uno_engine/exceptions.py
Custom exceptions for the UNO engine and its game store.
"""

from .constants import NOT_PARTICIPANT_MESSAGE, NOT_YOUR_TURN_MESSAGE


class UnoEngineError(Exception):
    """Base class for all engine and store errors."""


class NotFoundError(UnoEngineError, KeyError):
    """Raised when a game or player id does not resolve."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class GameNotFoundError(NotFoundError):
    def __init__(self, game_id: str):
        super().__init__(f"Game '{game_id}' not found")
        self.game_id = game_id


class PlayerNotFoundError(NotFoundError):
    def __init__(self, player_id: str):
        super().__init__(f"Player '{player_id}' not found")
        self.player_id = player_id


class NotParticipantError(UnoEngineError):
    """Raised when a player acts in a game they have not joined."""

    def __init__(self, message: str = NOT_PARTICIPANT_MESSAGE):
        super().__init__(message)


class NotYourTurnError(UnoEngineError):
    """Raised when a participant acts while another player holds the turn."""

    def __init__(self, message: str = NOT_YOUR_TURN_MESSAGE):
        super().__init__(message)


class AlreadyJoinedError(UnoEngineError):
    """Raised when a player joins a game twice."""


class EmptyGameError(UnoEngineError):
    """Raised when an operation needs at least one seated player."""


class EmptyDrawPileError(UnoEngineError):
    """Raised when a raw draw finds no card to take."""
