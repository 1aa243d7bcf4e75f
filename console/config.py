"""
Console configuration for TicTacToe.
Symbols and prompts used by the text interface.
"""


class ConsoleConfig:
    """
    Configuration for the console interface.
    """

    # ==================== BOARD DISPLAY ====================
    EMPTY_SYMBOL = "-"
    PLAYER_SYMBOLS = {
        "X": "X",
        "O": "O",
    }
    CELL_SEPARATOR = "|"

    # Printed between turns
    TURN_SEPARATOR = "\n------------------------------\n"

    # ==================== INPUT ====================
    QUIT_KEY = "q"
    YES_ANSWER = "y"
    NO_ANSWER = "n"
