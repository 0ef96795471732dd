"""
Othello game module.
Handles turn order, forfeits, termination and scoring.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .board import Board, Cell
from .config import Config, get_default_config
from .exceptions import (
    IllegalMoveError,
    InputExhaustedError,
    MalformedInputError,
)
from .notation import format_move, parse_move

logger = logging.getLogger(__name__)


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class GameResult:
    """Final piece counts and what they mean."""
    black: int
    white: int

    @property
    def winner(self) -> Optional[Cell]:
        """The color with strictly more pieces, None for a draw."""
        if self.black > self.white:
            return Cell.BLACK
        if self.white > self.black:
            return Cell.WHITE
        return None

    @property
    def margin(self) -> int:
        return abs(self.black - self.white)

    @property
    def message(self) -> str:
        if self.winner is None:
            return "Draw!"
        return f"{self.winner.label} wins by {self.margin} points!"


class OthelloGame:
    """
    Main game class for Othello that drives the turn loop.

    Moves come from read_line, which is called with the prompt and must
    return one line of text. Everything the player should see goes to write.
    """

    def __init__(self,
                 board: Optional[Board] = None,
                 config: Optional[Config] = None,
                 read_line: Callable[[str], str] = input,
                 write: Callable[[str], None] = print):
        """
        Initialize a new game.

        Args:
            board: Starting position (default: the standard opening)
            config: Configuration object (default: get_default_config())
            read_line: Input collaborator, raises EOFError when input runs out
            write: Output collaborator
        """
        self.config = config or get_default_config()
        self.board = board if board is not None else Board()
        self.current_player = self.config.game.starting_cell()
        self.move_history: List[Tuple[Cell, Optional[Tuple[int, int]]]] = []
        self.glyphs = self.config.display.glyphs()
        self.read_line = read_line
        self.write = write

    @property
    def moves_played(self) -> int:
        """Number of discs placed, passes excluded."""
        return sum(1 for _, move in self.move_history if move is not None)

    @property
    def state(self) -> GameState:
        """Derived fresh from both players' mobility on every call."""
        if (self.board.has_any_legal_move(Cell.BLACK)
                or self.board.has_any_legal_move(Cell.WHITE)):
            return GameState.IN_PROGRESS
        return GameState.TERMINAL

    def is_game_over(self) -> bool:
        return self.state is GameState.TERMINAL

    def result(self) -> GameResult:
        """Score the board as it stands."""
        black, white = self.board.count_pieces()
        return GameResult(black, white)

    def _switch_player(self):
        self.current_player = self.current_player.opposite()

    def play_move(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Make a move for the current player.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            List of (row, col) tuples that were flipped

        Raises:
            IllegalMoveError: if the move is not legal; nothing changes
        """
        if not self.board.is_legal(row, col, self.current_player):
            raise IllegalMoveError(
                f"{self.current_player.label} cannot play at ({row}, {col})")

        flipped = self.board.apply_move(row, col, self.current_player)
        self.move_history.append((self.current_player, (row, col)))
        self._switch_player()
        return flipped

    def submit(self, text: str) -> List[Tuple[int, int]]:
        """Decode one line of input and play it. See parse_move and play_move."""
        row, col = parse_move(text)
        return self.play_move(row, col)

    def forfeit_if_blocked(self) -> bool:
        """
        Pass the turn if the current player is stuck but the opponent is not.

        Only the blocked player is reported. No input is consumed.

        Returns:
            bool: True if the turn was passed
        """
        if self.board.has_any_legal_move(self.current_player):
            return False
        if not self.board.has_any_legal_move(self.current_player.opposite()):
            return False

        logger.info("%s has no legal move, passing", self.current_player.label)
        self.write(f"{self.glyphs[self.current_player]} player has no valid move.")
        self.move_history.append((self.current_player, None))
        self._switch_player()
        return True

    def _read_move(self) -> str:
        prompt = f"Enter move for colour {self.glyphs[self.current_player]} (RowCol): "
        try:
            return self.read_line(prompt)
        except EOFError as e:
            raise InputExhaustedError("Input ended before the game finished") from e
        except OSError as e:
            raise InputExhaustedError(f"Could not read input: {e}") from e

    def _show(self):
        self.write(self.board.render(self.glyphs))
        if self.config.display.show_tally:
            black, white = self.board.count_pieces()
            self.write(f"{Cell.BLACK.label}: {black}, {Cell.WHITE.label}: {white}")

    def step(self) -> bool:
        """
        Run one iteration of the game loop.

        Returns:
            bool: False once the game has reached its terminal state
        """
        self._show()

        if self.is_game_over():
            # Both players are blocked, current player first
            for color in (self.current_player, self.current_player.opposite()):
                self.write(f"{self.glyphs[color]} player has no valid move.")
            return False

        if self.forfeit_if_blocked():
            return True

        text = self._read_move()
        try:
            self.submit(text)
        except MalformedInputError as e:
            logger.info("Rejected input: %s", e)
            self.write("Invalid input. Try again.")
        except IllegalMoveError as e:
            logger.info("Rejected move: %s", e)
            self.write("Invalid move. Try again.")
        return True

    def play(self) -> GameResult:
        """
        Play until neither player can move.

        Returns:
            The final GameResult

        Raises:
            InputExhaustedError: if input runs out before the game ends
        """
        while self.step():
            pass

        result = self.result()
        logger.info("Game over: %s", result.message)
        self.write(result.message)
        return result

    def __str__(self) -> str:
        """String representation of the game state."""
        lines = [self.board.render(self.glyphs)]
        if self.is_game_over():
            lines.append(self.result().message)
        else:
            lines.append(f"Current player: {self.current_player.label}")
        history = ' '.join(format_move(*move) if move else '--' for _, move in self.move_history)
        if history:
            lines.append(f"Moves: {history}")
        return "\n".join(lines)
