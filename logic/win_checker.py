"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a tie.
"""

from typing import Optional

from .game_state import GameState, Player
from .geometry import Line, WINNING_LINES


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def is_game_won_by(self, game_state: GameState, player: Player) -> bool:
        """
        Check if `player` owns any full line.

        Args:
            game_state: The current game state.
            player: The player to check for.

        Returns:
            True if at least one line is all `player`.
        """
        return any(
            self._line_played_by(game_state, line, player)
            for line in self.WINNING_LINES
        )

    def check_winner(self, game_state: GameState) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in Player:
            if self.is_game_won_by(game_state, player):
                return player
        return None

    def _line_played_by(self, game_state: GameState, line: Line, player: Player) -> bool:
        return all(game_state.get_cell(pos).played_by(player) for pos in line.positions)

    def is_game_tied(self, game_state: GameState) -> bool:
        """
        Check if every cell has been played.

        This does not look for a winner; callers check for a win first,
        so a move that fills the board and completes a line is a win.
        """
        return game_state.is_full()
