"""Game creation: seating players and dealing cards."""

import logging
import random

from cardmatch.config import Config, GameConfig, PlayerConfig
from cardmatch.models.card import create_full_deck
from cardmatch.models.deck import Deck
from cardmatch.models.game import Game
from cardmatch.models.player import ComputerPlayer, HumanPlayer, Player, PlayerKind

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2


def build_players(configs: list[PlayerConfig]) -> list[Player]:
    """Create players from seat configuration.

    Args:
        configs: Seat configuration in turn order

    Returns:
        List of HumanPlayer / ComputerPlayer instances.
    """
    players: list[Player] = []
    for seat in configs:
        if seat.kind == PlayerKind.COMPUTER:
            players.append(ComputerPlayer(name=seat.name))
        else:
            players.append(HumanPlayer(name=seat.name))

    names = [p.name for p in players]
    if len(set(names)) != len(names):
        logger.warning(f"Duplicate player names {names}; requests resolve to the first match")
    return players


def create_game(
    players: list[Player],
    config: GameConfig | None = None,
    rng: random.Random | None = None,
) -> Game:
    """Deal a new game.

    Every hand is emptied, a shuffled deck is dealt round-robin starting with
    the first player, and the next card becomes the top card. The first
    player takes the first turn.

    Args:
        players: Players in turn order (reused across games of a session)
        config: Game configuration (uses defaults if not provided)
        rng: Random source for shuffling

    Returns:
        New Game instance.

    Raises:
        ValueError: If there are too few players or not enough cards.
    """
    config = config or GameConfig()

    if len(players) < MIN_PLAYERS:
        raise ValueError(f"Need at least {MIN_PLAYERS} players, got {len(players)}")

    needed = config.hand_size * len(players) + 1
    available = len(create_full_deck())
    if needed > available:
        raise ValueError(
            f"Cannot deal {config.hand_size} cards to {len(players)} players "
            f"from a {available}-card deck"
        )

    deck = Deck.standard(rng)
    for player in players:
        player.reset_hand()

    for _ in range(config.hand_size):
        for player in players:
            player.hand.append(deck.draw())

    top_card = deck.draw()

    game = Game(
        players,
        deck,
        top_card,
        reshuffle_discards=config.reshuffle_discards,
        rng=rng,
    )
    logger.info(
        f"New game: {len(players)} players, {config.hand_size} cards each, "
        f"top card {top_card}, {len(deck)} left to draw"
    )
    return game


def create_session(config: Config) -> tuple[list[Player], random.Random]:
    """Build the players and random source shared by a session's games."""
    return build_players(config.players), random.Random(config.game.seed)
