"""
Move logging for the TicTacToe API.
Wraps an API so every move is reported before it is played.
"""

from dataclasses import replace
from typing import Callable

from .api import TicTacToeAPI
from .game_state import Player
from .geometry import Position

MoveSink = Callable[[Player, Position], None]


def print_move(player: Player, pos: Position) -> None:
    """Default sink: print the move to the console."""
    print(f"{player} played {pos}")


def inject_logging(api: TicTacToeAPI, sink: MoveSink = print_move) -> TicTacToeAPI:
    """
    Wrap the move operations of an API with a logging call.

    The sink runs first, then the original operation. Results and
    exceptions from the original pass through untouched.

    Args:
        api: The API to wrap. It is not modified.
        sink: Called with (player, position) for every submitted move.

    Returns:
        A new TicTacToeAPI with logged player_x_moves / player_o_moves.
    """
    def player_x_moves(game_state, move):
        sink(move.player, move.pos)
        return api.player_x_moves(game_state, move)

    def player_o_moves(game_state, move):
        sink(move.player, move.pos)
        return api.player_o_moves(game_state, move)

    return replace(api, player_x_moves=player_x_moves, player_o_moves=player_o_moves)
