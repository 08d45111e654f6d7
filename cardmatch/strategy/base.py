"""Base strategy class for computer players.

Defines the interface that every card-selection policy must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cardmatch.models.card import Card
    from cardmatch.models.game import Game


class Strategy(ABC):
    """Abstract base class for card-selection policies."""

    @abstractmethod
    def select_card(self, hand: list[Card], game: Game) -> Card | None:
        """Select a card to play.

        Args:
            hand: The computer player's hand
            game: Current game

        Returns:
            A card from ``hand`` that is valid to play, or None if the
            player has nothing to play.
        """
        pass
