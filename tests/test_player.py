"""Tests for player models and strategies."""

from cardmatch.logging import parse_card
from cardmatch.models.player import ComputerPlayer, HumanPlayer, PlayerKind
from cardmatch.strategy import FirstMatchStrategy, Strategy


class LastMatchStrategy(Strategy):
    """Picks the last valid card, to check strategies are pluggable."""

    def select_card(self, hand, game):
        valid = [c for c in hand if game.is_valid_card(c)]
        return valid[-1] if valid else None


class TestPlayerKinds:
    """Tests for player kind dispatch."""

    def test_human_player(self):
        player = HumanPlayer(name="Alice")
        assert player.kind == PlayerKind.HUMAN
        assert not player.is_automated
        assert player.wins == 0
        assert player.losses == 0

    def test_computer_player(self):
        player = ComputerPlayer(name="CPU")
        assert player.kind == PlayerKind.COMPUTER
        assert player.is_automated
        assert isinstance(player.strategy, FirstMatchStrategy)

    def test_counters(self):
        """Test that win and loss counters only increase."""
        player = HumanPlayer(name="Alice")
        player.increment_wins()
        player.increment_wins()
        player.increment_losses()

        assert player.wins == 2
        assert player.losses == 1


class TestPlayerActions:
    """Tests for playing and drawing cards."""

    def test_play_card(self, make_game):
        """Test that a played card becomes the top card."""
        game = make_game([("Alice", "human", ["H2", "D9"])], top="H7")
        alice = game.players[0]

        alice.play_card(game, parse_card("H2"))

        assert alice.hand == [parse_card("D9")]
        assert game.top_card == parse_card("H2")
        assert game.discard_pile == [parse_card("H7")]

    def test_pick_up_card(self, make_game):
        """Test that drawing moves the top of the pile into hand."""
        game = make_game([("Alice", "human", ["C3"])], top="H7", draw_pile=["SA", "DK"])
        alice = game.players[0]

        card = alice.pick_up_card(game)

        assert card == parse_card("DK")
        assert alice.hand == [parse_card("C3"), parse_card("DK")]
        assert game.current_turn_has_drawn
        assert len(game.draw_pile) == 1

    def test_pick_up_from_empty_pile(self, make_game):
        """Test that drawing from an empty pile still sets the draw flag."""
        game = make_game([("Alice", "human", ["C3"])], top="H7")
        alice = game.players[0]

        assert alice.pick_up_card(game) is None
        assert alice.hand == [parse_card("C3")]
        assert game.current_turn_has_drawn

    def test_reset_hand(self):
        player = HumanPlayer(name="Alice", hand=[parse_card("C3")])
        player.reset_hand()
        assert player.hand == []


class TestComputerSelection:
    """Tests for computer card selection."""

    def test_first_valid_card_in_hand_order(self, make_game):
        """Test that the first matching card is chosen."""
        game = make_game([("CPU", "computer", ["C3", "S7", "H2"])], top="H7")
        assert game.players[0].select_card(game) == parse_card("S7")

    def test_selection_is_deterministic(self, make_game):
        """Test that selection does not vary between calls."""
        game = make_game([("CPU", "computer", ["H2", "S7", "HK"])], top="H7")
        cpu = game.players[0]
        picks = {cpu.select_card(game) for _ in range(10)}
        assert picks == {parse_card("H2")}

    def test_no_valid_card(self, make_game):
        """Test that None is returned when nothing matches."""
        game = make_game([("CPU", "computer", ["C3", "D4"])], top="H7")
        assert game.players[0].select_card(game) is None

    def test_custom_strategy(self, make_game):
        """Test that a computer player uses its own strategy."""
        game = make_game([("CPU", "computer", ["H2", "S7", "HK"])], top="H7")
        cpu = game.players[0]
        cpu.strategy = LastMatchStrategy()
        assert cpu.select_card(game) == parse_card("HK")
