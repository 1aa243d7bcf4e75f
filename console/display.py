"""
Board and move display for the console.
"""

from typing import Callable, Iterable, List, Sequence

from logic.game_state import Cell, Played
from logic.geometry import ALL_HORIZ, ALL_VERT

from .config import ConsoleConfig


def cell_to_str(cell: Cell, config=ConsoleConfig) -> str:
    """Symbol for one cell: '-' when empty, else the player's mark."""
    if isinstance(cell.state, Played):
        return config.PLAYER_SYMBOLS[cell.state.player.value]
    return config.EMPTY_SYMBOL


def format_cells(cells: Iterable[Cell], config=ConsoleConfig) -> List[str]:
    """
    Lay out cells as three text rows.

    Cells are grouped by vertical band (Top, VCenter, Bottom) and each
    row is ordered Left, HCenter, Right, whatever order they come in.

    Returns:
        One string per row, e.g. "|X|-|O|".
    """
    by_pos = {cell.pos: cell for cell in cells}
    sep = config.CELL_SEPARATOR
    rows = []
    for vert in ALL_VERT:
        row_cells = [cell for cell in by_pos.values() if cell.pos.vert == vert]
        row_cells.sort(key=lambda cell: ALL_HORIZ.index(cell.pos.horiz))
        symbols = sep.join(cell_to_str(cell, config) for cell in row_cells)
        rows.append(f"{sep}{symbols}{sep}")
    return rows


def display_cells(cells: Iterable[Cell], output_fn: Callable = print, config=ConsoleConfig) -> None:
    """
    Print the board as three rows followed by a blank line.

    Args:
        cells: The cells to show, in any order.
        output_fn: Writes one line of output.
        config: Display settings.
    """
    for row in format_cells(cells, config):
        output_fn(row)
    output_fn("")


def display_available_moves(moves: Sequence, output_fn: Callable = print) -> None:
    """Print each move with the index the player types to choose it."""
    for i, move in enumerate(moves):
        output_fn(f"{i}) {move}")
