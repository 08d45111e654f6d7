"""Game aggregate."""

from __future__ import annotations

import logging
import random

from .card import Card
from .deck import Deck
from .observers import Observer, ObserverHandle, ObserverRegistry
from .player import HumanPlayer, Player, PlayerKind

logger = logging.getLogger(__name__)


class Game:
    """A game in progress.

    Holds the players in turn order, the turn pointer, the draw pile, the
    top card with the discard pile underneath it, and the winner. Turn
    order is circular.
    """

    def __init__(
        self,
        players: list[Player],
        draw_pile: Deck,
        top_card: Card,
        reshuffle_discards: bool = False,
        rng: random.Random | None = None,
    ):
        """Initialize game.

        Args:
            players: Players in turn order (at least one)
            draw_pile: Deck to draw from
            top_card: Initial card to match against
            reshuffle_discards: If True, an exhausted draw pile is refilled
                from the discard pile
            rng: Random source used when reshuffling discards
        """
        if not players:
            raise ValueError("A game needs at least one player")

        self.players = players
        self.draw_pile = draw_pile
        self.top_card = top_card
        self.discard_pile: list[Card] = []  # Cards under the top card
        self.reshuffle_discards = reshuffle_discards
        self.rng = rng

        self.current_turn_index = 0
        self.current_turn_has_drawn = False
        self.turn_number = 1
        self.winner: Player | None = None

        self._observers = ObserverRegistry()

    # Rules

    def is_valid_card(self, card: Card) -> bool:
        """Check if the card matches the top card by suit or rank."""
        return card.matches(self.top_card)

    def has_valid_card(self, player: Player) -> bool:
        """Check if any card in the player's hand is valid to play."""
        return any(self.is_valid_card(card) for card in player.hand)

    # Turn state

    def current_player(self) -> Player:
        """Get the player whose turn it is."""
        return self.players[self.current_turn_index]

    def advance_turn(self) -> None:
        """Pass the turn to the next player (wraps around)."""
        self.current_turn_index = (self.current_turn_index + 1) % len(self.players)
        self.current_turn_has_drawn = False
        self.turn_number += 1

    def humans(self) -> list[HumanPlayer]:
        """Get the human players, in turn order."""
        return [p for p in self.players if p.kind == PlayerKind.HUMAN]

    def find_player(self, name: str | None) -> Player | None:
        """Find a player by name (first match)."""
        for player in self.players:
            if player.name == name:
                return player
        return None

    @property
    def has_winner(self) -> bool:
        return self.winner is not None

    def set_winner(self, player: Player) -> None:
        """Record the winner. A game can only be won once."""
        if self.winner is not None:
            raise ValueError(f"Game already won by {self.winner.name}")
        self.winner = player

    # Cards

    def place_on_top(self, card: Card) -> None:
        """Make a card the new top card, discarding the previous one."""
        self.discard_pile.append(self.top_card)
        self.top_card = card

    def draw_card(self) -> Card | None:
        """Draw from the draw pile.

        When the pile is empty and reshuffling is enabled, the discard pile
        is shuffled back into the draw pile first.

        Returns:
            The drawn card, or None if no card is available.
        """
        if self.draw_pile.is_empty() and self.reshuffle_discards and self.discard_pile:
            logger.debug(f"Draw pile empty, reshuffling {len(self.discard_pile)} discards")
            self.draw_pile.extend(self.discard_pile)
            self.discard_pile.clear()
            self.draw_pile.shuffle(self.rng)
        return self.draw_pile.draw()

    def is_blocked(self) -> bool:
        """Check if no player can ever play again.

        True when nothing can be drawn and no hand holds a valid card, so
        the top card can no longer change.
        """
        if not self.draw_pile.is_empty():
            return False
        if self.reshuffle_discards and self.discard_pile:
            return False
        return not any(self.has_valid_card(p) for p in self.players)

    def hand_sizes(self) -> dict[str, int]:
        """Get hand size per player name, in turn order."""
        sizes: dict[str, int] = {}
        for player in self.players:
            # Duplicate names resolve to the first player, as in find_player
            sizes.setdefault(player.name, len(player.hand))
        return sizes

    # Observers

    def register_observer(self, observer: Observer) -> ObserverHandle:
        """Register a zero-argument callback invoked after each change."""
        return self._observers.register(observer)

    def unregister_observer(self, handle: ObserverHandle) -> bool:
        return self._observers.unregister(handle)

    def notify_observers(self) -> None:
        """Tell every observer that the game changed."""
        self._observers.notify()

    @property
    def is_notifying(self) -> bool:
        return self._observers.is_notifying

    def __str__(self) -> str:
        parts = [f"Turn {self.turn_number}", f"top {self.top_card}"]
        if self.winner is not None:
            parts.append(f"[WON by {self.winner.name}]")
        else:
            parts.append(f"{self.current_player().name}'s turn")
        return " ".join(parts)
