"""
Two-letter move notation: row letter then column letter, 'a'..'h'.
"""
import string
from typing import Tuple

from .board import LABELS
from .exceptions import MalformedInputError


def parse_move(text: str) -> Tuple[int, int]:
    """
    Decode an input line such as "cd" into a (row, col) pair.

    Letters are decoded by their offset from 'a', so "ai" gives (0, 8).
    Whether the pair is on the board is for the board to decide.

    Args:
        text: One line of user input, surrounding whitespace is ignored

    Returns:
        (row, col) tuple of offsets from 'a'

    Raises:
        MalformedInputError: if the line is not exactly two lowercase letters
    """
    move = text.strip()
    if len(move) != 2:
        raise MalformedInputError(f"Expected two letters, got {move!r}")

    # Case-sensitive: 'A' is not 'a'
    if move[0] not in string.ascii_lowercase or move[1] not in string.ascii_lowercase:
        raise MalformedInputError(f"Coordinates must be lowercase letters, got {move!r}")

    return ord(move[0]) - ord('a'), ord(move[1]) - ord('a')


def format_move(row: int, col: int) -> str:
    """Encode an on-board (row, col) pair, the inverse of parse_move."""
    if not (0 <= row < len(LABELS) and 0 <= col < len(LABELS)):
        raise ValueError(f"({row}, {col}) is off the board")
    return LABELS[row] + LABELS[col]
