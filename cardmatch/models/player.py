"""Player models."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from cardmatch.strategy import FirstMatchStrategy, Strategy

from .card import Card

if TYPE_CHECKING:
    from .game import Game


class PlayerKind(str, Enum):
    """Who chooses the player's actions."""

    HUMAN = "human"  # Driven by external requests
    COMPUTER = "computer"  # Driven by the engine's strategy


class Player(BaseModel):
    """Player state shared by every kind of player."""

    name: str
    kind: PlayerKind
    hand: list[Card] = Field(default_factory=list)

    @property
    def is_automated(self) -> bool:
        """Check if the engine plays this player's turns."""
        return self.kind == PlayerKind.COMPUTER

    def has_card(self, card: Card) -> bool:
        """Check if the card is in hand."""
        return card in self.hand

    def play_card(self, game: Game, card: Card) -> None:
        """Move a card from hand to the top of the discard pile.

        The caller is responsible for checking that the card is in hand and
        valid to play.
        """
        self.hand.remove(card)
        game.place_on_top(card)

    def pick_up_card(self, game: Game) -> Card | None:
        """Draw one card from the game's draw pile into hand.

        The turn's draw flag is set even when the pile is empty.

        Returns:
            The drawn card, or None if nothing could be drawn.
        """
        card = game.draw_card()
        if card is not None:
            self.hand.append(card)
        game.current_turn_has_drawn = True
        return card

    def reset_hand(self) -> None:
        """Discard the whole hand (called before dealing a new game)."""
        self.hand.clear()

    def __str__(self) -> str:
        return f"{self.name} ({len(self.hand)} cards)"


class HumanPlayer(Player):
    """Player controlled by requests from outside the engine."""

    kind: Literal[PlayerKind.HUMAN] = PlayerKind.HUMAN

    # Session statistics, kept in memory only
    wins: int = 0
    losses: int = 0

    def increment_wins(self) -> None:
        self.wins += 1

    def increment_losses(self) -> None:
        self.losses += 1


class ComputerPlayer(Player):
    """Player whose turns are resolved by the engine."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal[PlayerKind.COMPUTER] = PlayerKind.COMPUTER
    strategy: Strategy = Field(default_factory=FirstMatchStrategy)

    def select_card(self, game: Game) -> Card | None:
        """Choose a valid card from hand using this player's strategy."""
        return self.strategy.select_card(self.hand, game)
