"""Formatters for game log output."""

from typing import Iterable

from cardmatch.models.card import RANK_NAMES, Card, Rank, Suit
from cardmatch.models.player import Player

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.SPADE: "S",
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
    Suit.CLUB: "C",
}

# Rank codes for log output (same as the display names)
RANK_CODES: dict[Rank, str] = dict(RANK_NAMES)

_SUITS_BY_CODE = {code: suit for suit, code in SUIT_CODES.items()}
_RANKS_BY_CODE = {code: rank for rank, code in RANK_CODES.items()}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "S7" for Spade 7, "H10" for Heart 10).
    """
    return f"{SUIT_CODES[card.suit]}{RANK_CODES[card.rank]}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string, keeping their order.

    Returns:
        Comma-separated card strings (e.g., "S8,H8,D8").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_hands(players: list[Player]) -> dict[str, str]:
    """Format all players' hands to a dict keyed by player name."""
    return {p.name: format_cards(p.hand) for p in players}


def parse_card(text: str) -> Card:
    """Parse a card written the way format_card writes it.

    Args:
        text: Card text such as "S7", "h10" or "DQ".

    Returns:
        The parsed Card.

    Raises:
        ValueError: If the text is not a card.
    """
    code = text.strip().upper()
    if len(code) < 2:
        raise ValueError(f"Not a card: {text!r}")

    suit = _SUITS_BY_CODE.get(code[0])
    rank = _RANKS_BY_CODE.get(code[1:])
    if suit is None or rank is None:
        raise ValueError(f"Not a card: {text!r}")
    return Card(suit=suit, rank=rank)
