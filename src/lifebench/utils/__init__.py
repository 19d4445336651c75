"""Utilities: configuration and timing."""
from .config import Config
from .stopwatch import Stopwatch

__all__ = ['Config', 'Stopwatch']
