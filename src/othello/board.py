"""
Board module for Othello.
Handles the grid of cells, move legality, capture propagation and piece counting.
"""
import logging
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np

from .exceptions import BoardFormatError

logger = logging.getLogger(__name__)

# Row and column labels, also the move notation alphabet
LABELS = "abcdefgh"

# All eight scan directions as (dr, dc)
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class Cell(IntEnum):
    """State of a single square."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opposite(self) -> 'Cell':
        """Return the other player's color. EMPTY maps to itself."""
        if self is Cell.BLACK:
            return Cell.WHITE
        if self is Cell.WHITE:
            return Cell.BLACK
        return Cell.EMPTY

    @property
    def label(self) -> str:
        return self.name.capitalize()


DEFAULT_GLYPHS: Dict[Cell, str] = {Cell.EMPTY: '.', Cell.BLACK: 'B', Cell.WHITE: 'W'}


class Board:
    """
    Represents the Othello game board as an 8x8 numpy grid of Cell values.

    The board only knows the rules of a single move. Whose turn it is and
    when the game ends is decided by the controller in game.py.
    """

    SIZE = 8

    def __init__(self, size: int = 8):
        """Initialize a new board with the standard starting position."""
        if size != self.SIZE:
            raise ValueError("Only 8x8 board is supported")

        self._grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        self._grid[3, 3] = Cell.WHITE
        self._grid[4, 4] = Cell.WHITE
        self._grid[3, 4] = Cell.BLACK
        self._grid[4, 3] = Cell.BLACK

    @classmethod
    def empty(cls) -> 'Board':
        """Create a board with no pieces on it."""
        board = cls()
        board._grid.fill(Cell.EMPTY)
        return board

    @classmethod
    def in_bounds(cls, row: int, col: int) -> bool:
        return 0 <= row < cls.SIZE and 0 <= col < cls.SIZE

    def cell(self, row: int, col: int) -> Cell:
        """Return the cell at (row, col)."""
        if not self.in_bounds(row, col):
            raise IndexError(f"({row}, {col}) is off the board")
        return Cell(int(self._grid[row, col]))

    def _capture_line(self, row: int, col: int, dr: int, dc: int, mover: Cell) -> List[Tuple[int, int]]:
        """
        Walk one ray from (row, col) and collect the opponent cells it would capture.

        The ray counts only if one or more opponent cells are closed by a cell
        of the mover. Running off the board or into an empty cell yields nothing.
        """
        opponent = mover.opposite()
        line = []
        r, c = row + dr, col + dc
        while self.in_bounds(r, c):
            value = self._grid[r, c]
            if value == opponent:
                line.append((r, c))
            elif value == mover:
                return line
            else:
                break
            r += dr
            c += dc
        return []

    def captures(self, row: int, col: int, mover: Cell) -> List[Tuple[int, int]]:
        """
        Get the cells that placing mover at (row, col) would flip.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)
            mover: Color making the move

        Returns:
            List of (row, col) tuples, empty when the move captures nothing
        """
        if not self.in_bounds(row, col) or self._grid[row, col] != Cell.EMPTY:
            return []
        flipped = []
        for dr, dc in DIRECTIONS:
            flipped.extend(self._capture_line(row, col, dr, dc, mover))
        return flipped

    def is_legal(self, row: int, col: int, mover: Cell) -> bool:
        """Check if mover may place a disc at (row, col). Never raises for any int."""
        if not self.in_bounds(row, col) or self._grid[row, col] != Cell.EMPTY:
            return False
        for dr, dc in DIRECTIONS:
            if self._capture_line(row, col, dr, dc, mover):
                return True
        return False

    def apply_move(self, row: int, col: int, mover: Cell) -> List[Tuple[int, int]]:
        """
        Place a disc and flip every captured line.

        The caller must have checked is_legal first. Applying an illegal move
        is a contract violation and leaves the board in an unspecified state.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)
            mover: Color making the move

        Returns:
            List of (row, col) tuples that were flipped
        """
        self._grid[row, col] = mover

        flipped = []
        for dr, dc in DIRECTIONS:
            line = self._capture_line(row, col, dr, dc, mover)
            for r, c in line:
                self._grid[r, c] = mover
            flipped.extend(line)

        logger.debug("%s played %s%s, flipped %d", mover.label, LABELS[row], LABELS[col], len(flipped))
        return flipped

    def legal_moves(self, color: Cell) -> List[Tuple[int, int]]:
        """All legal moves for color in row-major order."""
        return [(r, c) for r in range(self.SIZE) for c in range(self.SIZE)
                if self.is_legal(r, c, color)]

    def has_any_legal_move(self, color: Cell) -> bool:
        """Check if color has at least one legal move."""
        for r in range(self.SIZE):
            for c in range(self.SIZE):
                if self.is_legal(r, c, color):
                    return True
        return False

    def count_pieces(self) -> Tuple[int, int]:
        """
        Get the current piece counts.

        Returns:
            Tuple of (black_count, white_count)
        """
        black_count = int(np.count_nonzero(self._grid == Cell.BLACK))
        white_count = int(np.count_nonzero(self._grid == Cell.WHITE))
        return black_count, white_count

    def get_board_state(self) -> np.ndarray:
        """Return a copy of the grid as a numpy array."""
        return self._grid.copy()

    def render(self, glyphs: Optional[Dict[Cell, str]] = None) -> str:
        """Render the grid with a column header and a row label on every line."""
        glyphs = glyphs or DEFAULT_GLYPHS
        lines = ["  " + LABELS]
        for i in range(self.SIZE):
            row = ''.join(glyphs[Cell(int(v))] for v in self._grid[i])
            lines.append(f"{LABELS[i]} {row}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def from_string(cls, text: str, glyphs: Optional[Dict[Cell, str]] = None) -> 'Board':
        """
        Parse a grid produced by render() back into a board.

        The column header is optional. Every row must carry its row label
        followed by exactly eight glyphs.

        Raises:
            BoardFormatError: if the text is not a rendered board
        """
        glyphs = glyphs or DEFAULT_GLYPHS
        lookup = {glyph: cell for cell, glyph in glyphs.items()}

        lines = [line.strip() for line in text.splitlines() if line.strip()]
        if lines and lines[0] == LABELS:
            lines = lines[1:]
        if len(lines) != cls.SIZE:
            raise BoardFormatError(f"Expected {cls.SIZE} rows, got {len(lines)}")

        board = cls.empty()
        for i, line in enumerate(lines):
            label, _, cells = line.partition(' ')
            if label != LABELS[i]:
                raise BoardFormatError(f"Row {i} should be labelled {LABELS[i]!r}, got {label!r}")
            if len(cells) != cls.SIZE:
                raise BoardFormatError(f"Row {label} has {len(cells)} cells")
            for j, glyph in enumerate(cells):
                if glyph not in lookup:
                    raise BoardFormatError(f"Unknown glyph {glyph!r} in row {label}")
                board._grid[i, j] = lookup[glyph]
        return board
