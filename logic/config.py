"""
Rules configuration for TicTacToe.
"""


class GameConfig:
    """
    Configuration for the rules engine.
    """

    # ==================== MOVE CHECKS ====================
    # When True, playing out of turn, on an occupied cell or after the game
    # has ended raises IllegalMoveError. When False, the move overwrites the cell.
    REJECT_OCCUPIED = True
