"""Conway's Game of Life - serial benchmark."""

__version__ = "0.1.0"

from .core.board import Board
from .core.errors import LifeError
from .utils.stopwatch import Stopwatch

__all__ = ['Board', 'LifeError', 'Stopwatch', '__version__']
