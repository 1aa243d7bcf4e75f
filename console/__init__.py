"""
Console module for TicTacToe.
Text display and the interactive game loop.
"""

from .config import ConsoleConfig
from .display import cell_to_str, format_cells, display_cells, display_available_moves
from .game_loop import ConsoleGame
