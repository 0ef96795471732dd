"""
Main script to play a game of Othello in the terminal.
"""
import os
import sys
import logging
from dataclasses import replace
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.othello.config import Config, get_default_config
from src.othello.exceptions import InputExhaustedError
from src.othello.game import OthelloGame
from src.othello.logger import setup_logger

logger = logging.getLogger(__name__)

def load_config(args) -> Config:
    """Build the configuration from the config file and command line overrides."""
    if args.config and os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.log_level:
        config.logging.log_level = args.log_level
    if args.log_dir:
        config.logging.log_dir = args.log_dir
    glyphs = {}
    if args.black_glyph:
        glyphs["black_glyph"] = args.black_glyph
    if args.white_glyph:
        glyphs["white_glyph"] = args.white_glyph
    # replace() re-runs the glyph validation
    config.display = replace(config.display, **glyphs)
    return config

def main(argv=None) -> int:
    """Play one game reading moves from stdin. Returns the exit status."""
    import argparse

    parser = argparse.ArgumentParser(description='Play Othello in the terminal')
    parser.add_argument('--config', type=str, default='config.json',
                      help='Path to config file')
    parser.add_argument('--log-level', type=str, default=None,
                      help='Logging level (DEBUG, INFO, WARNING, ...)')
    parser.add_argument('--log-dir', type=str, default=None,
                      help='Directory for log files')
    parser.add_argument('--black-glyph', type=str, default=None,
                      help='Character used for black discs')
    parser.add_argument('--white-glyph', type=str, default=None,
                      help='Character used for white discs')
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
        run_logger = setup_logger(config)
    except (ValueError, TypeError, OSError) as e:
        parser.error(str(e))

    if args.config and not os.path.exists(args.config):
        logger.debug("Config file %s not found, using default configuration", args.config)

    game = OthelloGame(config=config)
    try:
        result = game.play()
        run_logger.log_result(result, game.moves_played)
    except InputExhaustedError as e:
        logger.error("%s", e)
        return 1
    finally:
        run_logger.close()
    return 0

if __name__ == "__main__":
    sys.exit(main())
