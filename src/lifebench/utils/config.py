"""Configuration constants for the Game of Life benchmark."""
import logging
from dataclasses import dataclass


@dataclass
class Config:
    """Application configuration."""

    # Field settings
    DEFAULT_FIELD_WIDTH: int = 25
    DEFAULT_FIELD_HEIGHT: int = 25

    # Simulation settings
    DEFAULT_GENERATIONS: int = 10
    DEFAULT_STEPS_PER_CALL: int = 1
    DEFAULT_ALIVE_PERCENT: int = 50
    DEFAULT_THRESHOLD: float = DEFAULT_ALIVE_PERCENT / 100.0

    # Console rendering
    ALIVE_GLYPH: str = "[]"
    DEAD_GLYPH: str = "  "

    # Logging
    LOG_LEVEL: int = logging.INFO
    LOG_FORMAT: str = '%(levelname)s: %(message)s'
