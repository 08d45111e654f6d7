"""Response assembly."""

from cardmatch.models.game import Game
from cardmatch.models.messages import ActionResult, TurnResponse


def build_response(game: Game, result: ActionResult | None = None) -> TurnResponse:
    """Take a snapshot of the game for the display layer.

    Args:
        game: Game to snapshot
        result: Outcome of the request being answered (applied if omitted)

    Returns:
        Immutable TurnResponse; later changes to the game do not affect it.
    """
    current = game.current_player()
    return TurnResponse(
        current_player_name=current.name,
        current_player_hand=tuple(current.hand),
        top_card=game.top_card,
        player_name_to_hand_size=game.hand_sizes(),
        has_winner=game.has_winner,
        winner_name=game.winner.name if game.winner else None,
        result=result or ActionResult.applied(),
    )
