"""First-match strategy.

Plays the first card in hand order that matches the top card. The outcome
is fully determined by hand order, which keeps computer turns reproducible.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cardmatch.strategy.base import Strategy

if TYPE_CHECKING:
    from cardmatch.models.card import Card
    from cardmatch.models.game import Game


class FirstMatchStrategy(Strategy):
    """Pick the first valid card in hand order."""

    def select_card(self, hand: list[Card], game: Game) -> Card | None:
        for card in hand:
            if game.is_valid_card(card):
                return card
        return None
