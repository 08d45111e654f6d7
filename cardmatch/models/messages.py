"""Request and response shapes exchanged with the display layer."""

from enum import Enum

from pydantic import BaseModel, Field

from .card import Card


class TurnAction(str, Enum):
    """Action requested by a player."""

    PLAY = "play"
    DRAW = "draw"
    SKIP = "skip"
    START = "start"  # Populate the first view without acting


class TurnRequest(BaseModel, frozen=True):
    """A single intent submitted by the display layer."""

    player_name: str | None = None
    card: Card | None = None
    action: TurnAction


class ActionStatus(str, Enum):
    """Whether the requested action changed the game."""

    APPLIED = "applied"
    REJECTED = "rejected"


class RejectReason(str, Enum):
    """Why a request was ignored."""

    PLAYER_NOT_FOUND = "player_not_found"
    NOT_YOUR_TURN = "not_your_turn"
    GAME_OVER = "game_over"
    NO_CARD_SELECTED = "no_card_selected"
    CARD_NOT_IN_HAND = "card_not_in_hand"
    INVALID_CARD = "invalid_card"  # Matches neither suit nor rank
    ALREADY_DRAWN = "already_drawn"
    MUST_DRAW_FIRST = "must_draw_first"
    HAS_VALID_CARD = "has_valid_card"
    AUTOMATED_PLAYER = "automated_player"  # Computers only act through the engine
    REENTRANT_REQUEST = "reentrant_request"  # Submitted from an observer


class ActionResult(BaseModel, frozen=True):
    """Outcome of a request."""

    status: ActionStatus
    reason: RejectReason | None = None

    @classmethod
    def applied(cls) -> "ActionResult":
        return cls(status=ActionStatus.APPLIED)

    @classmethod
    def rejected(cls, reason: RejectReason) -> "ActionResult":
        return cls(status=ActionStatus.REJECTED, reason=reason)

    @property
    def is_applied(self) -> bool:
        return self.status == ActionStatus.APPLIED


class TurnResponse(BaseModel, frozen=True):
    """Point-in-time snapshot of a game for display."""

    current_player_name: str
    current_player_hand: tuple[Card, ...]
    top_card: Card
    player_name_to_hand_size: dict[str, int] = Field(default_factory=dict)
    has_winner: bool = False
    winner_name: str | None = None
    result: ActionResult = Field(default_factory=ActionResult.applied)
