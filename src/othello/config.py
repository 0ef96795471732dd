"""
Configuration parameters for Othello.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json

from .board import Cell

@dataclass
class GameConfig:
    """Configuration for the game controller."""
    first_player: str = "black"

    def __post_init__(self):
        if self.first_player not in ("black", "white"):
            raise ValueError(f"first_player must be 'black' or 'white', got {self.first_player!r}")

    def starting_cell(self) -> Cell:
        return Cell.BLACK if self.first_player == "black" else Cell.WHITE

@dataclass
class DisplayConfig:
    """Configuration for rendering the board."""
    empty_glyph: str = "."
    black_glyph: str = "B"
    white_glyph: str = "W"
    show_tally: bool = True

    def __post_init__(self):
        glyphs = (self.empty_glyph, self.black_glyph, self.white_glyph)
        for glyph in glyphs:
            if len(glyph) != 1 or glyph.isspace():
                raise ValueError(f"Glyphs must be single visible characters, got {glyph!r}")
        if len(set(glyphs)) != len(glyphs):
            raise ValueError(f"Glyphs must be distinct, got {glyphs}")

    def glyphs(self) -> Dict[Cell, str]:
        """Map every cell state to its glyph."""
        return {
            Cell.EMPTY: self.empty_glyph,
            Cell.BLACK: self.black_glyph,
            Cell.WHITE: self.white_glyph,
        }

@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: Optional[str] = None  # No log file when unset
    log_level: str = "WARNING"

@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            game=GameConfig(**config_dict.get('game', {})),
            display=DisplayConfig(**config_dict.get('display', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
