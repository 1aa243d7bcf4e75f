"""
Interactive console game for TicTacToe.

Drives a TicTacToeAPI from typed input. All input mistakes (not a
number, no such move) are handled here with a retry prompt; the engine
only ever sees moves picked from the list it handed out.
"""

from typing import Callable, Optional, Sequence, Tuple

from logic.api import TicTacToeAPI
from logic.game_state import (
    GameState, GameWon, PlayerOToMove, PlayerXToMove, TurnResult, is_terminal,
)

from .config import ConsoleConfig
from .display import display_available_moves, display_cells

# (state, result) to keep playing with, or None to exit
UserAction = Optional[Tuple[GameState, TurnResult]]


class ConsoleGame:
    """
    Text-mode TicTacToe session.

    Game flow:
    1. Show the board
    2. If the game is over, show the result and offer a new game
    3. Otherwise list the legal moves and read an index (or 'q')
    4. Play the chosen move through the API and repeat
    """

    def __init__(
        self,
        api: TicTacToeAPI,
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], None] = print,
        config=ConsoleConfig,
    ):
        """
        Initialize the console game.

        Args:
            api: The game API to drive.
            input_fn: Reads one line of user input.
            output_fn: Writes one line of output.
            config: Display and input settings.
        """
        self.api = api
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.config = config

    def start(self) -> None:
        """Start a new game and play until the user exits."""
        self.game_loop(self.api.new_game())

    def game_loop(self, user_action: UserAction) -> None:
        """Main game loop."""
        while True:
            self.output_fn(self.config.TURN_SEPARATOR)

            if user_action is None:
                self.output_fn("Exiting game.")
                return

            game_state, result = user_action
            display_cells(self.api.get_cells(game_state), self.output_fn, self.config)

            if is_terminal(result):
                if isinstance(result, GameWon):
                    self.output_fn(f"GAME WON by {result.player}")
                else:
                    self.output_fn("GAME OVER - Tie")
                self.output_fn("")
                user_action = self.ask_to_play_again()
            elif isinstance(result, PlayerOToMove):
                self.output_fn("Player O to move")
                display_available_moves(result.valid_moves, self.output_fn)
                user_action = self.process_input(
                    game_state, result.valid_moves, self.api.player_o_moves
                )
            elif isinstance(result, PlayerXToMove):
                self.output_fn("Player X to move")
                display_available_moves(result.valid_moves, self.output_fn)
                user_action = self.process_input(
                    game_state, result.valid_moves, self.api.player_x_moves
                )
            else:
                raise TypeError(f"Unknown turn result: {result!r}")

    def process_input(
        self,
        game_state: GameState,
        available_moves: Sequence,
        make_move: Callable,
    ) -> UserAction:
        """
        Read a move index until it is valid, then play it.

        Returns:
            The (state, result) after the move, or None if the user quit.
        """
        while True:
            self.output_fn(
                f"Enter an int corresponding to a displayed move "
                f"or {self.config.QUIT_KEY} to quit:"
            )
            input_str = self.input_fn().strip()
            if input_str == self.config.QUIT_KEY:
                return None

            try:
                move_index = int(input_str)
            except ValueError:
                self.output_fn("...Please enter an int corresponding to a displayed move.")
                continue

            if not 0 <= move_index < len(available_moves):
                self.output_fn(f"...No move found for inputIndex {move_index}. Try again")
                continue

            return make_move(game_state, available_moves[move_index])

    def ask_to_play_again(self) -> UserAction:
        """Ask y/n until answered. 'y' starts a new game, 'n' exits."""
        while True:
            self.output_fn("Would you like to play again (y/n)?")
            answer = self.input_fn().strip()
            if answer == self.config.YES_ANSWER:
                return self.api.new_game()
            if answer == self.config.NO_ANSWER:
                return None
