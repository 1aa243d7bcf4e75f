"""
Tests for the board geometry, game state and rule checkers.
"""

import pytest

from logic.geometry import (
    ALL_POSITIONS, POSITION_INDEX, WINNING_LINES, Horizontal, Position, Vertical,
)
from logic.game_state import (
    EMPTY, Cell, GameState, GameTied, GameWon, Played, Player,
    PlayerOPos, PlayerXPos, PlayerXToMove, is_terminal,
)
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker

H, V = Horizontal, Vertical


def board(*rows):
    """Build a GameState from three strings like 'XO-', top row first."""
    state = GameState()
    for vert, row in zip(V, rows):
        for horiz, ch in zip(H, row):
            if ch != "-":
                state = state.update_cell(Cell(Position(horiz, vert), Played(Player(ch))))
    return state


class TestGeometry:

    def test_nine_distinct_positions(self):
        assert len(ALL_POSITIONS) == 9
        assert len(set(ALL_POSITIONS)) == 9
        assert set(ALL_POSITIONS) == {Position(h, v) for h in H for v in V}

    def test_position_index_matches_order(self):
        for i, pos in enumerate(ALL_POSITIONS):
            assert POSITION_INDEX[pos] == i

    def test_eight_winning_lines(self):
        assert len(WINNING_LINES) == 8
        assert len(set(WINNING_LINES)) == 8
        for line in WINNING_LINES:
            assert len(set(line.positions)) == 3

    def test_lines_cover_rows_columns_and_diagonals(self):
        line_sets = [set(line.positions) for line in WINNING_LINES]
        for v in V:
            assert {Position(h, v) for h in H} in line_sets
        for h in H:
            assert {Position(h, v) for v in V} in line_sets
        assert {Position(H.LEFT, V.TOP), Position(H.HCENTER, V.VCENTER),
                Position(H.RIGHT, V.BOTTOM)} in line_sets
        assert {Position(H.LEFT, V.BOTTOM), Position(H.HCENTER, V.VCENTER),
                Position(H.RIGHT, V.TOP)} in line_sets

    def test_position_str(self):
        assert str(Position(H.HCENTER, V.TOP)) == "(HCenter, Top)"


class TestGameState:

    def test_default_state_is_empty(self):
        state = GameState()
        assert [cell.pos for cell in state.cells] == list(ALL_POSITIONS)
        assert all(cell.state == EMPTY for cell in state.cells)
        assert state.get_empty_cells() == list(ALL_POSITIONS)
        assert not state.is_full()

    def test_update_cell_returns_new_state(self):
        state = GameState()
        pos = Position(H.RIGHT, V.VCENTER)
        new_state = state.update_cell(Cell(pos, Played(Player.O)))

        assert state.get_cell(pos).is_empty
        assert new_state.get_cell(pos).played_by(Player.O)
        changed = [
            (old, new) for old, new in zip(state.cells, new_state.cells) if old != new
        ]
        assert len(changed) == 1
        assert new_state.get_empty_cells() == [p for p in ALL_POSITIONS if p != pos]

    def test_state_is_frozen(self):
        state = GameState()
        with pytest.raises(AttributeError):
            state.cells = ()

    def test_rejects_missing_cells(self):
        with pytest.raises(ValueError):
            GameState(tuple(Cell(pos) for pos in ALL_POSITIONS[:8]))

    def test_rejects_duplicate_cells(self):
        cells = tuple(Cell(pos) for pos in ALL_POSITIONS[:8]) + (Cell(ALL_POSITIONS[0]),)
        with pytest.raises(ValueError):
            GameState(cells)

    def test_played_by(self):
        cell = Cell(ALL_POSITIONS[0], Played(Player.X))
        assert cell.played_by(Player.X)
        assert not cell.played_by(Player.O)
        assert not Cell(ALL_POSITIONS[0]).played_by(Player.X)


class TestMovesAndResults:

    def test_move_types_carry_their_player(self):
        pos = ALL_POSITIONS[4]
        assert PlayerXPos(pos).player == Player.X
        assert PlayerOPos(pos).player == Player.O
        assert PlayerXPos(pos) != PlayerOPos(pos)

    def test_terminal_results(self):
        assert is_terminal(GameWon(Player.X))
        assert is_terminal(GameTied())
        assert not is_terminal(PlayerXToMove(()))


class TestWinChecker:

    def setup_method(self):
        self.checker = WinChecker()

    def test_horizontal_win(self):
        state = board("XXX", "-O-", "O--")
        assert self.checker.is_game_won_by(state, Player.X)
        assert not self.checker.is_game_won_by(state, Player.O)
        assert self.checker.check_winner(state) == Player.X

    def test_vertical_win(self):
        state = board("OX-", "OX-", "O--")
        assert self.checker.check_winner(state) == Player.O

    def test_diagonal_wins(self):
        assert self.checker.check_winner(board("XO-", "-XO", "--X")) == Player.X
        assert self.checker.check_winner(board("X-O", "XO-", "O--")) == Player.O

    def test_no_winner(self):
        state = board("XO-", "-O-", "---")
        assert self.checker.check_winner(state) is None
        assert not self.checker.is_game_tied(state)

    def test_full_board_is_tied(self):
        state = board("XOX", "XOO", "OXX")
        assert self.checker.check_winner(state) is None
        assert self.checker.is_game_tied(state)


class TestMoveValidator:

    def setup_method(self):
        self.validator = MoveValidator()

    def test_empty_cell_is_valid(self):
        result = self.validator.validate_move(GameState(), ALL_POSITIONS[0], Player.X)
        assert result.is_valid
        assert result.error_message is None

    def test_occupied_cell_is_invalid(self):
        state = board("X--", "---", "---")
        result = self.validator.validate_move(state, Position(H.LEFT, V.TOP), Player.O)
        assert not result.is_valid
        assert result.error_message == "Cell (Left, Top) is already occupied by X"

    def test_finished_game_is_invalid(self):
        state = board("XXX", "OO-", "---")
        result = self.validator.validate_move(state, Position(H.RIGHT, V.BOTTOM), Player.O)
        assert not result.is_valid
        assert result.error_message == "Game is already over!"

    def test_player_to_move_follows_mark_counts(self):
        assert self.validator.player_to_move(GameState()) == Player.X
        assert self.validator.player_to_move(board("X--", "---", "---")) == Player.O
        assert self.validator.player_to_move(board("XO-", "---", "---")) == Player.X

    def test_out_of_turn_is_invalid(self):
        state = board("X--", "---", "---")
        result = self.validator.validate_move(state, Position(H.RIGHT, V.BOTTOM), Player.X)
        assert not result.is_valid
        assert result.error_message == "It's not X's turn!"

    def test_o_cannot_open(self):
        result = self.validator.validate_move(GameState(), ALL_POSITIONS[0], Player.O)
        assert not result.is_valid
        assert result.error_message == "It's not O's turn!"
