"""
Game state for TicTacToe.
Players, cells, typed moves and the results of a turn.

Everything here is immutable: a move never changes a GameState,
it produces a new one.
"""

from enum import Enum
from typing import List, Tuple, Union
from dataclasses import dataclass

from .geometry import ALL_POSITIONS, POSITION_INDEX, Position


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value


# ==================== CELL STATE ====================

@dataclass(frozen=True)
class Empty:
    """Nobody has played in the cell."""

    def __str__(self) -> str:
        return "Empty"


@dataclass(frozen=True)
class Played:
    """The cell holds a mark of `player`."""
    player: Player

    def __str__(self) -> str:
        return f"Played {self.player}"


EMPTY = Empty()

CellState = Union[Empty, Played]


@dataclass(frozen=True)
class Cell:
    """One square of the board."""
    pos: Position
    state: CellState = EMPTY

    @property
    def is_empty(self) -> bool:
        """True if nobody has played in this cell."""
        return isinstance(self.state, Empty)

    def played_by(self, player: Player) -> bool:
        """True if `player` has a mark in this cell."""
        return isinstance(self.state, Played) and self.state.player == player


# ==================== MOVES ====================
# X moves and O moves are separate types over the same position, so a
# move handed out for one player can't be played through the other
# player's entry point.

@dataclass(frozen=True)
class PlayerXPos:
    """A move that player X may make."""
    pos: Position
    player = Player.X

    def __str__(self) -> str:
        return str(self.pos)


@dataclass(frozen=True)
class PlayerOPos:
    """A move that player O may make."""
    pos: Position
    player = Player.O

    def __str__(self) -> str:
        return str(self.pos)


PlayerMove = Union[PlayerXPos, PlayerOPos]


# ==================== TURN RESULT ====================

@dataclass(frozen=True)
class PlayerXToMove:
    """X is next; `valid_moves` lists every cell X may take."""
    valid_moves: Tuple[PlayerXPos, ...]


@dataclass(frozen=True)
class PlayerOToMove:
    """O is next; `valid_moves` lists every cell O may take."""
    valid_moves: Tuple[PlayerOPos, ...]


@dataclass(frozen=True)
class GameWon:
    """`player` owns a full line. Terminal."""
    player: Player


@dataclass(frozen=True)
class GameTied:
    """Board is full and nobody won. Terminal."""


TurnResult = Union[PlayerXToMove, PlayerOToMove, GameWon, GameTied]


def is_terminal(result: TurnResult) -> bool:
    """True if no further move can follow this result."""
    return isinstance(result, (GameWon, GameTied))


# ==================== GAME STATE ====================

@dataclass(frozen=True)
class GameState:
    """
    The complete state of a TicTacToe board.

    `cells` holds exactly one Cell per position, in the order of
    ALL_POSITIONS, so a position's cell is found by index instead of
    by searching.
    """

    cells: Tuple[Cell, ...] = tuple(Cell(pos) for pos in ALL_POSITIONS)

    def __post_init__(self):
        positions = tuple(cell.pos for cell in self.cells)
        if positions != ALL_POSITIONS:
            raise ValueError(
                "GameState needs exactly one cell per position, in board order"
            )

    def get_cell(self, pos: Position) -> Cell:
        """Get the cell at a position."""
        return self.cells[POSITION_INDEX[pos]]

    def update_cell(self, new_cell: Cell) -> "GameState":
        """
        Return a copy of this state with one cell replaced.

        Args:
            new_cell: The replacement; its position picks the cell.

        Returns:
            A new GameState. The other eight cells are shared as-is.
        """
        i = POSITION_INDEX[new_cell.pos]
        return GameState(self.cells[:i] + (new_cell,) + self.cells[i + 1:])

    def get_empty_cells(self) -> List[Position]:
        """Positions that nobody has played yet, in board order."""
        return [cell.pos for cell in self.cells if cell.is_empty]

    def is_full(self) -> bool:
        """
        Check if every cell has been played.

        Returns:
            True if no cell is Empty.
        """
        return not any(cell.is_empty for cell in self.cells)
