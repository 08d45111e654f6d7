"""Move validation for turn requests."""

from dataclasses import dataclass

from cardmatch.models.card import Card
from cardmatch.models.game import Game
from cardmatch.models.messages import RejectReason
from cardmatch.models.player import Player


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    reason: RejectReason | None = None

    @property
    def error_message(self) -> str:
        return self.reason.value if self.reason else ""


VALID = ValidationResult(is_valid=True)


def _reject(reason: RejectReason) -> ValidationResult:
    return ValidationResult(is_valid=False, reason=reason)


class MoveValidator:
    """Checks whether the current player may play, draw, or skip.

    Validation never changes the game.
    """

    def validate_turn(self, game: Game, player: Player | None) -> ValidationResult:
        """Check that a request may act on the game at all.

        Args:
            game: Current game
            player: Player resolved from the request (None if unknown)

        Returns:
            ValidationResult
        """
        if player is None:
            return _reject(RejectReason.PLAYER_NOT_FOUND)
        if game.has_winner:
            return _reject(RejectReason.GAME_OVER)
        if player.is_automated:
            return _reject(RejectReason.AUTOMATED_PLAYER)
        if player is not game.current_player():
            return _reject(RejectReason.NOT_YOUR_TURN)
        return VALID

    def validate_play(
        self, game: Game, player: Player, card: Card | None
    ) -> ValidationResult:
        """Check that the player may put down the card.

        Args:
            game: Current game
            player: Current player
            card: Card requested to play

        Returns:
            ValidationResult
        """
        if card is None:
            return _reject(RejectReason.NO_CARD_SELECTED)
        if not player.has_card(card):
            return _reject(RejectReason.CARD_NOT_IN_HAND)
        if not game.is_valid_card(card):
            return _reject(RejectReason.INVALID_CARD)
        return VALID

    def validate_draw(self, game: Game) -> ValidationResult:
        """Check that the current player has not drawn this turn."""
        if game.current_turn_has_drawn:
            return _reject(RejectReason.ALREADY_DRAWN)
        return VALID

    def validate_skip(self, game: Game, player: Player) -> ValidationResult:
        """Check that the player drew this turn and still cannot play."""
        if not game.current_turn_has_drawn:
            return _reject(RejectReason.MUST_DRAW_FIRST)
        if game.has_valid_card(player):
            return _reject(RejectReason.HAS_VALID_CARD)
        return VALID
