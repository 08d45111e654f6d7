"""Shared fixtures."""

import pytest

from cardmatch.logging import parse_card
from cardmatch.models.card import Card
from cardmatch.models.deck import Deck
from cardmatch.models.game import Game
from cardmatch.models.player import ComputerPlayer, HumanPlayer, Player


def cards(*codes: str) -> list[Card]:
    """Build cards from short codes such as "S7" or "H10"."""
    return [parse_card(code) for code in codes]


@pytest.fixture
def make_game():
    """Factory for games with fixed hands, draw pile and top card.

    Seats are given as (name, "human" | "computer", [card codes]).
    The draw pile is listed bottom first, so its last card is drawn first.
    """

    def _make(
        seats: list[tuple[str, str, list[str]]],
        top: str,
        draw_pile: list[str] | None = None,
        reshuffle_discards: bool = False,
    ) -> Game:
        players: list[Player] = []
        for name, kind, hand in seats:
            if kind == "computer":
                players.append(ComputerPlayer(name=name, hand=cards(*hand)))
            else:
                players.append(HumanPlayer(name=name, hand=cards(*hand)))
        return Game(
            players,
            Deck(cards(*(draw_pile or []))),
            parse_card(top),
            reshuffle_discards=reshuffle_discards,
        )

    return _make
