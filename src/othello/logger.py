"""
Logging utilities for Othello.
"""
import os
import json
import logging
from datetime import datetime
from typing import Optional

from .config import Config
from .game import GameResult

class Logger:
    """Sets up console and file logging for one run and records its outcome."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir).
                No log file is written when neither is set.
        """
        self.handlers = []
        self.logger = logging.getLogger()
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_dir = None

        level = logging.getLevelName(config.logging.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {config.logging.log_level!r}")
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Console goes to stderr so it never mixes with the board on stdout
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        self.handlers.append(console)

        if self.log_dir:
            run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
            self.run_dir = os.path.join(self.log_dir, run_name)
            os.makedirs(self.run_dir, exist_ok=True)

            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'othello.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

        if self.run_dir:
            self.save_config()

    def save_config(self):
        """Save the configuration next to the log file."""
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)

    def log_result(self, result: GameResult, moves_played: int):
        """Log the final score of a finished game."""
        self.logger.info(
            "Game over after %d moves: black=%d white=%d (%s)",
            moves_played, result.black, result.white, result.message,
        )

    def close(self):
        """Detach and close the handlers added by this logger."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []

    def __del__(self):
        """Ensure resources are properly released."""
        self.close()


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
