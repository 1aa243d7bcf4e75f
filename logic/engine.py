"""
Rules engine for TicTacToe.
Creates games, applies moves and decides what happens next.
"""

from typing import List, Optional, Tuple, Type

from .config import GameConfig
from .errors import IllegalMoveError, WrongPlayerError
from .game_state import (
    Cell, GameState, GameTied, GameWon, Played, Player, PlayerMove,
    PlayerOPos, PlayerOToMove, PlayerXPos, PlayerXToMove, TurnResult,
)
from .geometry import ALL_POSITIONS
from .move_validator import MoveValidator
from .win_checker import WinChecker


class TicTacToeEngine:
    """
    The TicTacToe rules.

    Turn flow after each move:
    1. Mark the cell for the player who moved
    2. If that player owns a full line -> GameWon
    3. Else if every cell is played -> GameTied
    4. Else the opponent moves, offered every empty cell

    Players only ever need to play moves from the latest TurnResult.
    With `strict` on, a move out of turn, onto an occupied cell or after
    the game has ended raises IllegalMoveError. With it off, none of these
    are checked and the move silently overwrites the cell.
    """

    def __init__(self, strict: Optional[bool] = None):
        """
        Initialize the engine.

        Args:
            strict: Reject moves out of turn, on occupied cells or after
                the game has ended.
                Defaults to GameConfig.REJECT_OCCUPIED.
        """
        self.strict = GameConfig.REJECT_OCCUPIED if strict is None else strict
        self.win_checker = WinChecker()
        self.validator = MoveValidator(self.win_checker)

    def new_game(self) -> Tuple[GameState, TurnResult]:
        """Start a game: empty board, X to move anywhere."""
        valid_moves = tuple(PlayerXPos(pos) for pos in ALL_POSITIONS)
        return GameState(), PlayerXToMove(valid_moves)

    def player_x_moved(self, game_state: GameState, move: PlayerXPos) -> Tuple[GameState, TurnResult]:
        """Apply a move by X."""
        return self._play(game_state, move, PlayerXPos, PlayerOPos, PlayerOToMove)

    def player_o_moved(self, game_state: GameState, move: PlayerOPos) -> Tuple[GameState, TurnResult]:
        """Apply a move by O."""
        return self._play(game_state, move, PlayerOPos, PlayerXPos, PlayerXToMove)

    def get_cells(self, game_state: GameState) -> List[Cell]:
        """
        Get every cell of the board.

        Args:
            game_state: The state to read.

        Returns:
            The 9 cells, in the order of ALL_POSITIONS.
        """
        return list(game_state.cells)

    def _play(
        self,
        game_state: GameState,
        move: PlayerMove,
        move_type: Type,
        opponent_move_type: Type,
        opponent_to_move: Type,
    ) -> Tuple[GameState, TurnResult]:
        if not isinstance(move, move_type):
            raise WrongPlayerError(
                f"Expected a {move_type.__name__}, got {type(move).__name__}"
            )

        player: Player = move.player

        if self.strict:
            result = self.validator.validate_move(game_state, move.pos, player)
            if not result.is_valid:
                raise IllegalMoveError(result.error_message)

        new_state = game_state.update_cell(Cell(move.pos, Played(player)))

        if self.win_checker.is_game_won_by(new_state, player):
            return new_state, GameWon(player)
        if self.win_checker.is_game_tied(new_state):
            return new_state, GameTied()

        remaining = tuple(opponent_move_type(pos) for pos in new_state.get_empty_cells())
        return new_state, opponent_to_move(remaining)
