"""
Logic module for TicTacToe.
Handles board geometry, game state, rules, and the public API.
"""

from .geometry import Horizontal, Vertical, Position, Line, ALL_POSITIONS, WINNING_LINES
from .game_state import (
    Player, Empty, Played, EMPTY, Cell, GameState,
    PlayerXPos, PlayerOPos, PlayerXToMove, PlayerOToMove, GameWon, GameTied,
    is_terminal,
)
from .errors import IllegalMoveError, WrongPlayerError
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .engine import TicTacToeEngine
from .api import TicTacToeAPI, create_api
from .move_logger import inject_logging, print_move
