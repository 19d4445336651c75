"""Timed simulation run: randomize a board and step it to a target generation."""
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .board import Board
from ..utils.config import Config
from ..utils.stopwatch import Stopwatch

# Global logger
LOG = logging.getLogger(__name__)
LOG.setLevel(Config.LOG_LEVEL)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
LOG.addHandler(handler)


@dataclass
class BenchmarkSettings:
    """Parameters of one benchmark run."""

    generations: int = Config.DEFAULT_GENERATIONS
    width: int = Config.DEFAULT_FIELD_WIDTH
    height: int = Config.DEFAULT_FIELD_HEIGHT
    alive_percent: int = Config.DEFAULT_ALIVE_PERCENT
    seed: Optional[int] = None

    def __post_init__(self):
        if not 0 <= self.alive_percent <= 100:
            raise ValueError(f"alive_percent must be within 0..100, got {self.alive_percent}")
        if self.generations < 0:
            raise ValueError(f"generations must be non-negative, got {self.generations}")

    @property
    def threshold(self) -> float:
        """Live-cell probability passed to ``Board.randomize``."""
        return self.alive_percent / 100.0


@dataclass
class BenchmarkResult:
    board: Board
    elapsed: float


def run_benchmark(settings: BenchmarkSettings,
                  stopwatch: Optional[Stopwatch] = None) -> BenchmarkResult:
    """Randomize a board and time stepping it to ``settings.generations``.

    Args:
        settings: Run parameters
        stopwatch: Stopwatch to time with, a fresh one by default

    Returns:
        The final board and the elapsed seconds
    """
    board = Board(settings.width, settings.height,
                  rng=np.random.default_rng(settings.seed))
    board.randomize(settings.threshold)
    LOG.info(f"Running {settings.generations} generations on a "
             f"{board.width}x{board.height} board, {board.live_count()} cells alive")

    if stopwatch is None:
        stopwatch = Stopwatch()

    stopwatch.start()
    while board.generation < settings.generations:
        board.step()
    stopwatch.stop()

    elapsed = stopwatch.elapsed()
    LOG.info(f"Finished at generation {board.generation}: "
             f"{board.live_count()} cells alive, {elapsed:.6f}s")
    return BenchmarkResult(board=board, elapsed=elapsed)
