"""
Board geometry for TicTacToe.
The fixed 3x3 coordinate space and the 8 lines that win the game.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, List, Tuple


class Horizontal(Enum):
    """Column of a cell, left to right."""
    LEFT = "Left"
    HCENTER = "HCenter"
    RIGHT = "Right"


class Vertical(Enum):
    """Row of a cell, top to bottom."""
    TOP = "Top"
    VCENTER = "VCenter"
    BOTTOM = "Bottom"


@dataclass(frozen=True)
class Position:
    """A cell position on the board."""
    horiz: Horizontal
    vert: Vertical

    def __str__(self) -> str:
        return f"({self.horiz.value}, {self.vert.value})"


@dataclass(frozen=True)
class Line:
    """Three positions that win the game when one player owns all of them."""
    positions: Tuple[Position, Position, Position]


ALL_HORIZ = list(Horizontal)
ALL_VERT = list(Vertical)

# Column by column: (Left, Top), (Left, VCenter), (Left, Bottom), (HCenter, Top), ...
ALL_POSITIONS: Tuple[Position, ...] = tuple(
    Position(h, v) for h in ALL_HORIZ for v in ALL_VERT
)

# Index of each position in ALL_POSITIONS, used for O(1) cell lookup
POSITION_INDEX: Dict[Position, int] = {
    pos: i for i, pos in enumerate(ALL_POSITIONS)
}


def _make_lines() -> List[Line]:
    # Rows
    lines = [Line(tuple(Position(h, v) for h in ALL_HORIZ)) for v in ALL_VERT]
    # Columns
    lines += [Line(tuple(Position(h, v) for v in ALL_VERT)) for h in ALL_HORIZ]
    # Diagonals
    lines.append(Line((
        Position(Horizontal.LEFT, Vertical.TOP),
        Position(Horizontal.HCENTER, Vertical.VCENTER),
        Position(Horizontal.RIGHT, Vertical.BOTTOM),
    )))
    lines.append(Line((
        Position(Horizontal.LEFT, Vertical.BOTTOM),
        Position(Horizontal.HCENTER, Vertical.VCENTER),
        Position(Horizontal.RIGHT, Vertical.TOP),
    )))
    return lines


WINNING_LINES: Tuple[Line, ...] = tuple(_make_lines())
