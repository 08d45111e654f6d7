"""Draw pile model."""

import random
from typing import Iterable, Iterator

from .card import Card, create_full_deck


class Deck:
    """Stack of cards drawn from the top (last in, first out)."""

    def __init__(self, cards: Iterable[Card] | None = None):
        """Initialize deck.

        Args:
            cards: Initial cards, bottom first. The last card is the top.
        """
        self._cards: list[Card] = list(cards) if cards else []

    @classmethod
    def standard(cls, rng: random.Random | None = None) -> "Deck":
        """Create a shuffled 52-card deck.

        Args:
            rng: Random source (module-level random if not provided)

        Returns:
            New Deck instance.
        """
        deck = cls(create_full_deck())
        deck.shuffle(rng)
        return deck

    def draw(self) -> Card | None:
        """Remove and return the top card, or None if the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def insert(self, card: Card) -> None:
        """Put a card on top of the deck."""
        self._cards.append(card)

    def extend(self, cards: Iterable[Card]) -> None:
        """Put several cards on top of the deck, in order."""
        self._cards.extend(cards)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the deck in place."""
        (rng or random).shuffle(self._cards)

    def snapshot(self) -> list[Card]:
        """Get a copy of the cards, bottom first."""
        return list(self._cards)

    def is_empty(self) -> bool:
        """Check if the deck has no cards left."""
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
