"""Game logic."""

from .interactor import TurnInteractor
from .response import build_response
from .setup import build_players, create_game, create_session
from .validator import MoveValidator, ValidationResult

__all__ = [
    "MoveValidator",
    "TurnInteractor",
    "ValidationResult",
    "build_players",
    "build_response",
    "create_game",
    "create_session",
]
