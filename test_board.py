"""
Tests for the Othello board rules.
"""
import random

import numpy as np
import pytest

from src.othello.board import Board, Cell, DIRECTIONS
from src.othello.exceptions import BoardFormatError

# Only black discs, so neither color can ever capture anything
BLOCKED = """
  abcdefgh
a BBBBBBBB
b BBBBBBBB
c BB......
d ........
e ........
f ........
g ........
h .......B
"""


def expected_flips(board, row, col, mover):
    """Reference scan: every ray of opponent discs closed by a mover disc."""
    flips = set()
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        line = []
        while 0 <= r < 8 and 0 <= c < 8 and board.cell(r, c) == mover.opposite():
            line.append((r, c))
            r += dr
            c += dc
        if line and 0 <= r < 8 and 0 <= c < 8 and board.cell(r, c) == mover:
            flips.update(line)
    return flips


def test_initial_board():
    """Test the initial board setup."""
    board = Board()
    state = board.get_board_state()

    assert state.shape == (8, 8), "Board should be 8x8"
    assert board.cell(3, 3) == Cell.WHITE
    assert board.cell(4, 4) == Cell.WHITE
    assert board.cell(3, 4) == Cell.BLACK
    assert board.cell(4, 3) == Cell.BLACK
    assert np.sum(state == Cell.EMPTY) == 60, "Should have 60 empty squares initially"
    assert board.count_pieces() == (2, 2)


def test_only_8x8_supported():
    with pytest.raises(ValueError):
        Board(6)


def test_opposite():
    assert Cell.BLACK.opposite() == Cell.WHITE
    assert Cell.WHITE.opposite() == Cell.BLACK
    assert Cell.EMPTY.opposite() == Cell.EMPTY


def test_directions_table():
    assert len(DIRECTIONS) == 8
    assert len(set(DIRECTIONS)) == 8
    assert (0, 0) not in DIRECTIONS
    assert all(dr in (-1, 0, 1) and dc in (-1, 0, 1) for dr, dc in DIRECTIONS)


def test_initial_legal_moves():
    """Black's valid moves in the initial position."""
    board = Board()
    assert set(board.legal_moves(Cell.BLACK)) == {(2, 3), (3, 2), (4, 5), (5, 4)}
    assert set(board.legal_moves(Cell.WHITE)) == {(2, 4), (3, 5), (4, 2), (5, 3)}


def test_occupied_cells_are_never_legal():
    board = Board()
    for row in range(8):
        for col in range(8):
            if board.cell(row, col) != Cell.EMPTY:
                assert not board.is_legal(row, col, Cell.BLACK)
                assert not board.is_legal(row, col, Cell.WHITE)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (8, 0), (0, 8), (-9, -9), (10**9, 3), (3, -10**9)])
def test_out_of_range_is_illegal(row, col):
    board = Board()
    assert not board.is_legal(row, col, Cell.BLACK)
    assert board.captures(row, col, Cell.BLACK) == []


def test_corner_is_illegal_on_initial_board():
    assert not Board().is_legal(0, 0, Cell.BLACK)


def test_adjacent_own_disc_does_not_validate():
    """A mover disc with no opponent discs before it is not a capture line."""
    board = Board.from_string("""
a BBW.....
b ........
c ........
d ........
e ........
f ........
g ........
h ........
""")
    assert not board.is_legal(0, 3, Cell.WHITE)
    assert board.captures(0, 3, Cell.WHITE) == []
    assert board.is_legal(0, 3, Cell.BLACK)
    assert board.captures(0, 3, Cell.BLACK) == [(0, 2)]


def test_line_ending_at_edge_does_not_capture():
    board = Board.from_string("""
a .WWWWWWW
b B.......
c ........
d ........
e ........
f ........
g ........
h ........
""")
    assert not board.is_legal(0, 0, Cell.BLACK)


def test_apply_move_flips_captured_disc():
    """Black at (2,3) on the initial board flips (3,3)."""
    board = Board()
    flipped = board.apply_move(2, 3, Cell.BLACK)

    assert flipped == [(3, 3)]
    assert board.cell(2, 3) == Cell.BLACK
    assert board.cell(3, 3) == Cell.BLACK
    assert board.count_pieces() == (4, 1)


def test_apply_move_flips_several_directions():
    board = Board.from_string("""
a B.B.B...
b .WWW....
c BW.WB...
d .WWW....
e B.B.B...
f ........
g ........
h ........
""")
    flipped = board.apply_move(2, 2, Cell.BLACK)
    assert set(flipped) == {(1, 1), (1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2), (3, 3)}
    assert board.count_pieces() == (17, 0)


def test_apply_move_ignores_unclosed_direction():
    board = Board.from_string("""
a ........
b ....B...
c ....W...
d ..WW....
e ........
f ........
g ........
h ........
""")
    assert board.is_legal(3, 4, Cell.BLACK)
    flipped = board.apply_move(3, 4, Cell.BLACK)

    assert flipped == [(2, 4)]
    # The row to the west runs into an empty cell, so it stays white
    assert board.cell(3, 2) == Cell.WHITE
    assert board.cell(3, 3) == Cell.WHITE


def test_no_moves_on_blocked_board():
    board = Board.from_string(BLOCKED)
    assert not board.has_any_legal_move(Cell.BLACK)
    assert not board.has_any_legal_move(Cell.WHITE)
    assert board.legal_moves(Cell.BLACK) == []


def test_random_games_keep_invariants():
    """Random legal play: flips match the ray rule and the piece total grows by one per move."""
    rng = random.Random(1234)
    for _ in range(5):
        board = Board()
        player = Cell.BLACK
        moves = 0
        while board.has_any_legal_move(Cell.BLACK) or board.has_any_legal_move(Cell.WHITE):
            legal = board.legal_moves(player)
            if not legal:
                player = player.opposite()
                continue
            row, col = rng.choice(legal)
            expected = expected_flips(board, row, col, player)
            assert set(board.captures(row, col, player)) == expected

            before = board.count_pieces()[player - 1]
            before_state = board.get_board_state()
            flipped = board.apply_move(row, col, player)
            moves += 1

            changed = set(zip(*np.nonzero(board.get_board_state() != before_state)))
            changed = {(int(r), int(c)) for r, c in changed}
            assert set(flipped) == expected
            assert changed == expected | {(row, col)}
            assert board.cell(row, col) == player
            assert board.count_pieces()[player - 1] > before
            assert sum(board.count_pieces()) == 4 + moves
            player = player.opposite()


def test_render():
    expected = "\n".join([
        "  abcdefgh",
        "a ........",
        "b ........",
        "c ........",
        "d ...WB...",
        "e ...BW...",
        "f ........",
        "g ........",
        "h ........",
    ])
    assert str(Board()) == expected


def test_render_round_trip():
    board = Board()
    board.apply_move(2, 3, Cell.BLACK)
    board.apply_move(2, 2, Cell.WHITE)
    parsed = Board.from_string(str(board))
    assert np.array_equal(parsed.get_board_state(), board.get_board_state())

    glyphs = {Cell.EMPTY: '-', Cell.BLACK: 'X', Cell.WHITE: 'O'}
    parsed = Board.from_string(board.render(glyphs), glyphs)
    assert np.array_equal(parsed.get_board_state(), board.get_board_state())


@pytest.mark.parametrize("text", [
    "",
    "  abcdefgh\na ........",
    str(Board()).replace("d ...WB...", "d ...WB.."),
    str(Board()).replace("d ...WB...", "x ...WB..."),
    str(Board()).replace("d ...WB...", "d ...WZ..."),
])
def test_from_string_rejects_bad_text(text):
    with pytest.raises(BoardFormatError):
        Board.from_string(text)


if __name__ == "__main__":
    pytest.main([__file__])
