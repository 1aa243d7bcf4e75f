"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional
from dataclasses import dataclass

from .game_state import GameState, Played, Player
from .geometry import Position
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Players take turns, X first
    3. Can only play on empty cells
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def is_game_over(self, game_state: GameState) -> bool:
        """
        Check if the game has ended.

        Args:
            game_state: Current game state.

        Returns:
            True if a player owns a full line or every cell is played.
        """
        return (
            self.win_checker.check_winner(game_state) is not None
            or self.win_checker.is_game_tied(game_state)
        )

    def player_to_move(self, game_state: GameState) -> Player:
        """
        Work out whose turn it is from the marks on the board.

        X moves when both players have the same number of marks,
        O moves when X has one more.
        """
        x_count = sum(1 for cell in game_state.cells if cell.played_by(Player.X))
        o_count = sum(1 for cell in game_state.cells if cell.played_by(Player.O))
        return Player.X if x_count == o_count else Player.O

    def validate_move(
        self,
        game_state: GameState,
        pos: Position,
        player: Player
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            pos: Position to play.
            player: Player making the move.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if self.is_game_over(game_state):
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if it's this player's turn
        if self.player_to_move(game_state) != player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {player}'s turn!"
            )

        # Check if cell is empty
        state = game_state.get_cell(pos).state
        if isinstance(state, Played):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {pos} is already occupied by {state.player}"
            )

        return ValidationResult(is_valid=True)
