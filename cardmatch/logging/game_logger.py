"""Game logger for recording game events."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from cardmatch.models.card import Card
from cardmatch.models.player import HumanPlayer, Player

from .formatters import format_card, format_hands


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(
        self,
        game_num: int,
        players: list[Player],
        top_card: Card,
        draw_pile_size: int,
    ) -> None:
        """Log game start with the dealt hands.

        Args:
            game_num: Game number within the session.
            players: Players in turn order.
            top_card: Initial top card.
            draw_pile_size: Cards left in the draw pile after dealing.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "game": game_num,
            "players": [
                {"name": p.name, "kind": p.kind.value}
                for p in players
            ],
            "hands": format_hands(players),
            "top_card": format_card(top_card),
            "draw_pile": draw_pile_size,
        })

    def log_turn(
        self,
        turn_num: int,
        player: Player,
        action: str,
        card: Card | None,
        top_card: Card,
        hand_sizes: dict[str, int],
    ) -> None:
        """Log a single applied action.

        Args:
            turn_num: Turn number within the game.
            player: Player who took the action.
            action: "play", "draw" or "skip".
            card: Card played or drawn (None if none).
            top_card: Top card after the action.
            hand_sizes: Hand size per player after the action.
        """
        self._write({
            "type": "turn",
            "turn": turn_num,
            "player": player.name,
            "automated": player.is_automated,
            "action": action,
            "card": format_card(card) if card else "",
            "top_card": format_card(top_card),
            "hand_sizes": hand_sizes,
        })

    def log_game_end(
        self,
        game_num: int,
        winner: Player | None,
        humans: list[HumanPlayer],
    ) -> None:
        """Log game end with the winner and session statistics.

        Args:
            game_num: Game number within the session.
            winner: Player who emptied their hand (None if the game was
                abandoned with no possible move).
            humans: Human players with their session statistics.
        """
        self._write({
            "type": "game_end",
            "game": game_num,
            "winner": winner.name if winner else None,
            "stats": {
                p.name: {"wins": p.wins, "losses": p.losses}
                for p in humans
            },
        })
