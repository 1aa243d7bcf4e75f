"""
Main entry point for console TicTacToe.

This script ties together:
- Logic (rules engine behind the TicTacToe API)
- Move logging (wraps the API's move operations)
- Console (board display and input loop)

Run this script to play TicTacToe in a terminal.
"""

from typing import List, Optional

from logic.api import TicTacToeAPI, create_api
from logic.move_logger import inject_logging
from console.game_loop import ConsoleGame


def build_api(log_moves: bool = True, strict: bool = True) -> TicTacToeAPI:
    """
    Assemble the API the console plays against.

    Args:
        log_moves: Print every move before it is played.
        strict: Reject moves out of turn, on occupied cells or after
            the game has ended.
    """
    api = create_api(strict=strict)
    if log_moves:
        api = inject_logging(api)
    return api


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-log",
        action="store_true",
        help="Don't print each move as it is played"
    )
    parser.add_argument(
        "--permissive",
        action="store_true",
        help="Skip the move checks (turn order, occupied cell, game over)"
    )

    args = parser.parse_args(argv)

    api = build_api(log_moves=not args.no_log, strict=not args.permissive)
    game = ConsoleGame(api)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
