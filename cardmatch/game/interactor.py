"""Turn resolution.

The interactor takes one request at a time, applies it to the game if the
rules allow it, then plays the computer players' turns until a human is to
move or someone has won. Rejected requests leave the game untouched and do
not notify observers.
"""

from __future__ import annotations

import logging
from typing import Callable

from cardmatch.logging import GameLogger
from cardmatch.models.card import Card
from cardmatch.models.game import Game
from cardmatch.models.messages import (
    ActionResult,
    RejectReason,
    TurnAction,
    TurnRequest,
    TurnResponse,
)
from cardmatch.models.player import ComputerPlayer, Player

from .response import build_response
from .validator import MoveValidator, ValidationResult

logger = logging.getLogger(__name__)


class TurnInteractor:
    """Applies turn requests to a single game."""

    def __init__(
        self,
        game: Game,
        game_logger: GameLogger | None = None,
        max_automated_turns: int | None = None,
        validator: MoveValidator | None = None,
    ):
        """Initialize interactor.

        Args:
            game: Game to act on
            game_logger: GameLogger instance for recording applied actions
            max_automated_turns: Upper bound on computer turns resolved per
                request (defaults to the number of players)
            validator: MoveValidator instance (creates one if not provided)
        """
        self.game = game
        self.game_logger = game_logger
        self.max_automated_turns = max_automated_turns or len(game.players)
        self.validator = validator or MoveValidator()

        self._handling = False
        self._actions: dict[TurnAction, Callable[[Player, Card | None], ActionResult]] = {
            TurnAction.PLAY: self._play,
            TurnAction.DRAW: self._draw,
            TurnAction.SKIP: self._skip,
        }

    def handle(self, request: TurnRequest) -> TurnResponse:
        """Resolve a request and return the resulting game snapshot.

        Args:
            request: Player intent from the display layer

        Returns:
            TurnResponse describing the game after the request and any
            computer turns that followed it.
        """
        if self._handling or self.game.is_notifying:
            logger.warning(f"Ignoring {request.action.value} request submitted during notification")
            return build_response(
                self.game, ActionResult.rejected(RejectReason.REENTRANT_REQUEST)
            )

        self._handling = True
        try:
            result = self._dispatch(request)
            if result.is_applied:
                self._resolve_automated_turns()
            return build_response(self.game, result)
        finally:
            self._handling = False

    def _dispatch(self, request: TurnRequest) -> ActionResult:
        if request.action == TurnAction.START:
            logger.debug(f"Start requested: {self.game}")
            self.game.notify_observers()
            return ActionResult.applied()

        player = self.game.find_player(request.player_name)
        check = self.validator.validate_turn(self.game, player)
        if not check.is_valid:
            return self._rejected(request, check)

        result = self._actions[request.action](player, request.card)
        if not result.is_applied:
            logger.debug(
                f"Rejected {request.action.value} from {player.name}: {result.reason.value}"
            )
        return result

    def _rejected(self, request: TurnRequest, check: ValidationResult) -> ActionResult:
        logger.debug(
            f"Rejected {request.action.value} from {request.player_name!r}: {check.error_message}"
        )
        return ActionResult.rejected(check.reason)

    # Human actions

    def _play(self, player: Player, card: Card | None) -> ActionResult:
        check = self.validator.validate_play(self.game, player, card)
        if not check.is_valid:
            return ActionResult.rejected(check.reason)
        self._play_card(player, card)
        return ActionResult.applied()

    def _draw(self, player: Player, card: Card | None = None) -> ActionResult:
        check = self.validator.validate_draw(self.game)
        if not check.is_valid:
            return ActionResult.rejected(check.reason)
        self._pick_up_card(player)
        return ActionResult.applied()

    def _skip(self, player: Player, card: Card | None = None) -> ActionResult:
        check = self.validator.validate_skip(self.game, player)
        if not check.is_valid:
            return ActionResult.rejected(check.reason)
        self._skip_turn(player)
        return ActionResult.applied()

    # State changes

    def _play_card(self, player: Player, card: Card) -> None:
        """Put a card down, then either end the game or pass the turn."""
        turn_number = self.game.turn_number
        player.play_card(self.game, card)
        logger.debug(f"{player.name} played {card}")
        self._log_turn(turn_number, player, "play", card)

        if not player.hand:
            self._win(player)
            return

        self.game.advance_turn()
        self.game.notify_observers()

    def _pick_up_card(self, player: Player) -> None:
        card = player.pick_up_card(self.game)
        if card is None:
            logger.debug(f"{player.name} tried to draw from an empty pile")
        else:
            logger.debug(f"{player.name} drew a card ({len(self.game.draw_pile)} left)")
        self._log_turn(self.game.turn_number, player, "draw", card)
        self.game.notify_observers()

    def _skip_turn(self, player: Player) -> None:
        turn_number = self.game.turn_number
        self.game.advance_turn()
        logger.debug(f"{player.name} skipped")
        self._log_turn(turn_number, player, "skip", None)
        self.game.notify_observers()

    def _log_turn(
        self, turn_number: int, player: Player, action: str, card: Card | None
    ) -> None:
        if self.game_logger:
            self.game_logger.log_turn(
                turn_number,
                player,
                action,
                card,
                self.game.top_card,
                self.game.hand_sizes(),
            )

    def _win(self, winner: Player) -> None:
        """Record the winner and update every human's statistics."""
        self.game.set_winner(winner)
        for human in self.game.humans():
            if human is winner:
                human.increment_wins()
            else:
                human.increment_losses()
        logger.info(f"{winner.name} wins on turn {self.game.turn_number}")
        self.game.notify_observers()

    # Computer turns

    def _resolve_automated_turns(self) -> None:
        """Play computer turns until a human must act or the game is won."""
        for _ in range(self.max_automated_turns):
            player = self.game.current_player()
            if self.game.has_winner or not player.is_automated:
                return
            self._play_automated_turn(player)

        if not self.game.has_winner and self.game.current_player().is_automated:
            logger.warning(
                f"Stopped after {self.max_automated_turns} computer turns; "
                f"{self.game.current_player().name} is still to move"
            )

    def _play_automated_turn(self, player: ComputerPlayer) -> None:
        """Play a card if possible, else draw once and retry, else skip."""
        card = player.select_card(self.game)
        if card is None:
            self._pick_up_card(player)
            card = player.select_card(self.game)

        if card is None:
            self._skip_turn(player)
        else:
            self._play_card(player, card)
