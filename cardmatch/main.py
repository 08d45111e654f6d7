"""Main entry point for playing in a terminal."""

import argparse
import logging
import random
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable

from cardmatch.config import Config, load_config
from cardmatch.game import TurnInteractor, create_game, create_session
from cardmatch.logging import GameLogConfig, GameLogger, parse_card
from cardmatch.models.messages import TurnAction, TurnRequest, TurnResponse
from cardmatch.models.player import Player
from cardmatch.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


class QuitSession(Exception):
    """Raised when the player asks to stop."""


def generate_log_filename(log_dir: str, players: list[Player]) -> str:
    """Generate log filename with timestamp and player names.

    Format: {ISO timestamp}_{player1}_{player2}_..._{playerN}.jsonl
    Player names are sorted alphabetically.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    sorted_names = sorted(p.name.replace(" ", "") for p in players)
    filename = f"{timestamp}_{'_'.join(sorted_names)}.jsonl"
    return str(Path(log_dir) / filename)


def parse_command(line: str, player_name: str) -> TurnRequest | None:
    """Turn a line of input into a request for the current player.

    Returns:
        TurnRequest, or None for an empty line or help.

    Raises:
        ValueError: If the command or card is not recognised.
        QuitSession: On "quit".
    """
    words = line.split()
    if not words or words[0] in ("help", "?"):
        return None

    command = words[0].lower()
    if command in ("quit", "exit", "q"):
        raise QuitSession()
    if command in ("play", "p"):
        if len(words) != 2:
            raise ValueError("Usage: play <card>")
        card = parse_card(words[1])
        return TurnRequest(player_name=player_name, card=card, action=TurnAction.PLAY)
    if command in ("draw", "d"):
        return TurnRequest(player_name=player_name, action=TurnAction.DRAW)
    if command in ("skip", "s"):
        return TurnRequest(player_name=player_name, action=TurnAction.SKIP)
    raise ValueError(f"Unknown command: {command}")


def play_game(
    game_num: int,
    players: list[Player],
    config: Config,
    rng: random.Random,
    display: GameDisplay,
    game_logger: GameLogger,
    read_line: Callable[[str], str] = input,
) -> str | None:
    """Play one game to the end.

    Returns:
        Winner name, or None if the game ended with no possible move.
    """
    game = create_game(players, config.game, rng)
    game_logger.log_game_start(game_num, players, game.top_card, len(game.draw_pile))
    game.register_observer(lambda: logger.debug(f"Game updated: {game}"))

    interactor = TurnInteractor(game, game_logger)
    response: TurnResponse = interactor.handle(TurnRequest(action=TurnAction.START))

    while not response.has_winner:
        if game.is_blocked():
            logger.info("No player can move; game abandoned")
            game_logger.log_game_end(game_num, None, game.humans())
            return None

        if game.current_player().is_automated:
            # Only computers left to move (no human seated)
            response = interactor.handle(TurnRequest(action=TurnAction.START))
            continue

        display.print_state(response)
        try:
            request = parse_command(read_line("> "), response.current_player_name)
        except ValueError as e:
            print(f"  -> {e}")
            continue
        if request is None:
            display.print_help()
            continue

        response = interactor.handle(request)
        if not response.result.is_applied:
            display.print_rejection(response)

    display.print_state(response)
    game_logger.log_game_end(game_num, game.winner, game.humans())
    return response.winner_name


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Suit-or-rank matching card game against computer players"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--num-games",
        type=int,
        help="Number of games to play (overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible deals (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show every player's hand size",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args()

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.num_games:
        config.game.num_games = args.num_games
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True

    game_log_enabled = args.game_log is not None or config.game_log.enabled

    setup_logging(config.logging.level)
    display = GameDisplay(show_hands=config.logging.show_hands)

    try:
        players, rng = create_session(config)

        if game_log_enabled:
            log_dir = str(args.game_log) if args.game_log else str(
                Path(config.game_log.output_path).parent
            )
            log_path = generate_log_filename(log_dir, players)
            game_log_config = GameLogConfig(enabled=True, output_path=log_path)
            print(f"Game log: {log_path}")
        else:
            game_log_config = GameLogConfig(enabled=False)

        display.print_help()
        with GameLogger(game_log_config) as game_logger:
            humans = [p for p in players if not p.is_automated]
            try:
                for game_num in range(1, config.game.num_games + 1):
                    display.print_game_start(game_num, config.game.num_games)
                    winner = play_game(
                        game_num, players, config, rng, display, game_logger
                    )
                    display.print_game_end(game_num, winner)
            except QuitSession:
                print("Quitting.")

            display.print_final_results(humans)
        return 0

    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
