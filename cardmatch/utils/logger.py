"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cardmatch.models.messages import TurnResponse
    from cardmatch.models.player import HumanPlayer


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class GameDisplay:
    """Display game state to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to show every player's hand size
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_game_start(self, game_number: int, num_games: int) -> None:
        """Print game start message."""
        self.print_separator()
        print(f"GAME {game_number}/{num_games}")
        self.print_separator()

    def print_state(self, response: "TurnResponse") -> None:
        """Print the snapshot the player acts on."""
        print(f"\nTop card: {response.top_card}")
        if self.show_hands:
            counts = [
                f"{name}:{size}"
                for name, size in response.player_name_to_hand_size.items()
            ]
            print(f"Hand counts: {' | '.join(counts)}")

        if response.has_winner:
            return

        hand = " ".join(str(c) for c in response.current_player_hand)
        print(f"{response.current_player_name}'s turn. Hand: {hand}")

    def print_rejection(self, response: "TurnResponse") -> None:
        """Print why the last request was ignored."""
        reason = response.result.reason
        if reason is not None:
            print(f"  -> Not allowed: {reason.value.replace('_', ' ')}")

    def print_help(self) -> None:
        print("Commands: play <card> (e.g. play S7, play H10), draw, skip, quit")

    def print_game_end(self, game_number: int, winner_name: str | None) -> None:
        """Print game end results."""
        print(f"\nGame {game_number} finished! Winner: {winner_name}")

    def print_final_results(self, humans: list["HumanPlayer"]) -> None:
        """Print session statistics for human players."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()

        for player in sorted(humans, key=lambda p: p.wins, reverse=True):
            print(f"  {player.name}: {player.wins} wins, {player.losses} losses")
