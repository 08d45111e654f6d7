"""Game models."""

from .card import Card, Rank, Suit, create_full_deck
from .deck import Deck
from .game import Game
from .messages import (
    ActionResult,
    ActionStatus,
    RejectReason,
    TurnAction,
    TurnRequest,
    TurnResponse,
)
from .observers import ObserverHandle, ObserverRegistry
from .player import ComputerPlayer, HumanPlayer, Player, PlayerKind

__all__ = [
    "ActionResult",
    "ActionStatus",
    "Card",
    "ComputerPlayer",
    "Deck",
    "Game",
    "HumanPlayer",
    "ObserverHandle",
    "ObserverRegistry",
    "Player",
    "PlayerKind",
    "Rank",
    "RejectReason",
    "Suit",
    "TurnAction",
    "TurnRequest",
    "TurnResponse",
    "create_full_deck",
]
