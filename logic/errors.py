"""
Exceptions raised by the rules engine.
"""


class IllegalMoveError(ValueError):
    """A move targets an occupied cell or a finished game."""


class WrongPlayerError(TypeError):
    """A move made for one player was submitted for the other."""
