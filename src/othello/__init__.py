"""
Othello rules engine.
This package contains the board rules and the game loop controller for Othello.
"""

from .board import Board, Cell, DIRECTIONS
from .game import GameResult, GameState, OthelloGame
from .notation import format_move, parse_move

__all__ = ['Board', 'Cell', 'DIRECTIONS', 'GameResult', 'GameState', 'OthelloGame',
           'format_move', 'parse_move']
