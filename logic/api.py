"""
Public API for TicTacToe.

Everything outside the logic package (console, logging) talks to the
game through a TicTacToeAPI value and nothing else.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .engine import TicTacToeEngine
from .game_state import Cell, GameState, PlayerOPos, PlayerXPos, TurnResult

NewGame = Callable[[], Tuple[GameState, TurnResult]]
PlayerXMoves = Callable[[GameState, PlayerXPos], Tuple[GameState, TurnResult]]
PlayerOMoves = Callable[[GameState, PlayerOPos], Tuple[GameState, TurnResult]]
GetCells = Callable[[GameState], List[Cell]]


@dataclass(frozen=True)
class TicTacToeAPI:
    """The four operations a caller can drive a game with."""
    new_game: NewGame
    player_x_moves: PlayerXMoves
    player_o_moves: PlayerOMoves
    get_cells: GetCells


def create_api(strict: Optional[bool] = None) -> TicTacToeAPI:
    """
    Build an API backed by a fresh TicTacToeEngine.

    Args:
        strict: Passed to the engine; None uses GameConfig.REJECT_OCCUPIED.
    """
    engine = TicTacToeEngine(strict=strict)
    return TicTacToeAPI(
        new_game=engine.new_game,
        player_x_moves=engine.player_x_moved,
        player_o_moves=engine.player_o_moved,
        get_cells=engine.get_cells,
    )
