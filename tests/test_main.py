"""Tests for the terminal front-end."""

import json
import random

import pytest

from cardmatch.config import Config, GameConfig, PlayerConfig
from cardmatch.game.setup import build_players
from cardmatch.logging import GameLogConfig, GameLogger, parse_card
from cardmatch.main import QuitSession, generate_log_filename, parse_command, play_game
from cardmatch.models.messages import TurnAction
from cardmatch.models.player import PlayerKind
from cardmatch.utils.logger import GameDisplay


class TestParseCommand:
    """Tests for parse_command function."""

    def test_play(self):
        request = parse_command("play h10", "Alice")
        assert request.action == TurnAction.PLAY
        assert request.card == parse_card("H10")
        assert request.player_name == "Alice"

    def test_draw_and_skip(self):
        assert parse_command("draw", "Alice").action == TurnAction.DRAW
        assert parse_command("s", "Alice").action == TurnAction.SKIP

    def test_help(self):
        assert parse_command("", "Alice") is None
        assert parse_command("help", "Alice") is None

    def test_quit(self):
        with pytest.raises(QuitSession):
            parse_command("quit", "Alice")

    @pytest.mark.parametrize("line", ["play", "play Z9", "dance"])
    def test_bad_input(self, line):
        with pytest.raises(ValueError):
            parse_command(line, "Alice")


class TestPlayGame:
    """Tests for play_game function."""

    def make_config(self, kinds):
        return Config(
            game=GameConfig(hand_size=3),
            players=[
                PlayerConfig(name=f"P{i}", kind=kind) for i, kind in enumerate(kinds)
            ],
        )

    def test_computers_only(self, capsys):
        config = self.make_config([PlayerKind.COMPUTER, PlayerKind.COMPUTER])
        players = build_players(config.players)

        winner = play_game(
            1, players, config, random.Random(11), GameDisplay(), GameLogger()
        )

        if winner is None:
            assert not any(p.hand == [] for p in players)
        else:
            assert [p.name for p in players if not p.hand] == [winner]

    def test_quit(self):
        config = self.make_config([PlayerKind.HUMAN, PlayerKind.COMPUTER])
        players = build_players(config.players)

        with pytest.raises(QuitSession):
            play_game(
                1,
                players,
                config,
                random.Random(2),
                GameDisplay(),
                GameLogger(),
                read_line=lambda prompt: "quit",
            )

    def test_blocked_game_logs_end(self, tmp_path, make_game, monkeypatch):
        """Test that a game nobody can move in still records its end."""
        game = make_game(
            [("Alice", "human", ["C3"]), ("CPU", "computer", ["D4"])], top="H7"
        )
        monkeypatch.setattr("cardmatch.main.create_game", lambda *args: game)
        path = tmp_path / "game.jsonl"
        config = self.make_config([PlayerKind.HUMAN, PlayerKind.COMPUTER])

        with GameLogger(GameLogConfig(enabled=True, output_path=str(path))) as log:
            winner = play_game(
                1, game.players, config, random.Random(0), GameDisplay(), log
            )

        events = [json.loads(line) for line in path.read_text().splitlines()]
        assert winner is None
        assert events[0]["type"] == "game_start"
        assert events[-1] == {
            "type": "game_end",
            "game": 1,
            "winner": None,
            "stats": {"Alice": {"wins": 0, "losses": 0}},
        }


def test_generate_log_filename(tmp_path):
    players = build_players([
        PlayerConfig(name="Zed"),
        PlayerConfig(name="CPU 1", kind=PlayerKind.COMPUTER),
    ])
    path = generate_log_filename(str(tmp_path), players)
    assert path.startswith(str(tmp_path))
    assert path.endswith("_CPU1_Zed.jsonl")
