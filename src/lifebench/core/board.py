"""Bounded Game of Life board with a double-buffered generation update."""
import copy
import logging
import sys
from typing import Optional, TextIO

import numpy as np

from .errors import OutOfBounds
from .rules import CONWAY_TABLE, MAX_NEIGHBORS, next_state
from ..utils.config import Config

# Global logger
LOG = logging.getLogger(__name__)
LOG.setLevel(Config.LOG_LEVEL)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
LOG.addHandler(handler)

# (dy, dx) offsets into the zero-padded grid, centre excluded
_NEIGHBOR_OFFSETS = tuple((dy, dx) for dy in range(3) for dx in range(3)
                          if (dy, dx) != (1, 1))


class Board:
    """Game of Life board on a bounded grid (no wraparound).

    Cells are addressed as ``(x, y)`` with ``x`` the column in ``[0, width)``
    and ``y`` the row in ``[0, height)``. Two flat buffers of ``width * height``
    booleans hold the current and the next generation; ``step`` computes into
    the back buffer and flips the current index.
    """

    def __init__(self, width: int = Config.DEFAULT_FIELD_WIDTH,
                 height: int = Config.DEFAULT_FIELD_HEIGHT,
                 rng: Optional[np.random.Generator] = None):
        """Initialize an all-dead board.

        Args:
            width: Field width in cells
            height: Field height in cells
            rng: Default random source for ``randomize``
        """
        if width < 0 or height < 0:
            raise ValueError(f"Board dimensions must be non-negative, got {width}x{height}")

        self.width = int(width)
        self.height = int(height)
        self._generation = 0
        self._rng = rng

        # Double buffer, flat and addressed as y * width + x
        self._current = 0
        self._buffers = [
            np.zeros(self.width * self.height, dtype=np.bool_),
            np.zeros(self.width * self.height, dtype=np.bool_)
        ]

        # Scratch space for the vectorised update, border of _padded stays 0
        self._padded = np.zeros((self.height + 2, self.width + 2), dtype=np.uint8)
        self._counts = np.zeros((self.height, self.width), dtype=np.uint8)
        self._index = np.zeros((self.height, self.width), dtype=np.uint8)

        LOG.debug(f"Board created: {self.width}x{self.height}")

    @classmethod
    def from_board(cls, other: 'Board') -> 'Board':
        """Copy-construct a board: dimensions, cells and generation."""
        board = cls(other.width, other.height, rng=other._rng)
        np.copyto(board._buffers[0], other._buffers[other._current])
        board._generation = other._generation
        return board

    def copy(self) -> 'Board':
        """Deep copy of this board: cells, dimensions and generation."""
        return Board.from_board(self)

    def __copy__(self) -> 'Board':
        return Board.from_board(self)

    def __deepcopy__(self, memo) -> 'Board':
        board = Board.from_board(self)
        board._rng = copy.deepcopy(self._rng, memo)
        return board

    def __repr__(self) -> str:
        return (f"Board(width={self.width}, height={self.height}, "
                f"generation={self._generation})")

    @property
    def x_size(self) -> int:
        return self.width

    @property
    def y_size(self) -> int:
        return self.height

    @property
    def generation(self) -> int:
        """Number of completed ``step`` calls since the last reset."""
        return self._generation

    def reset_generation(self) -> None:
        """Zero the generation counter without touching the cells."""
        self._generation = 0

    @property
    def current_field(self) -> np.ndarray:
        """Read-only ``(height, width)`` view of the current buffer."""
        view = self._grid(self._current).view()
        view.flags.writeable = False
        return view

    def _grid(self, buffer: int) -> np.ndarray:
        return self._buffers[buffer].reshape(self.height, self.width)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(x, y, self.width, self.height)

    def get_cell(self, x: int, y: int) -> bool:
        """Whether the cell at column ``x``, row ``y`` is alive."""
        self._check_bounds(x, y)
        return bool(self._buffers[self._current][y * self.width + x])

    def set_cell(self, alive: bool, x: int, y: int) -> None:
        """Set the cell at column ``x``, row ``y`` alive or dead."""
        self._check_bounds(x, y)
        self._buffers[self._current][y * self.width + x] = bool(alive)

    def toggle_cell(self, x: int, y: int) -> None:
        """Flip the cell at column ``x``, row ``y``."""
        self._check_bounds(x, y)
        cells = self._buffers[self._current]
        idx = y * self.width + x
        cells[idx] = not cells[idx]

    def randomize(self, threshold: float = Config.DEFAULT_THRESHOLD,
                  rng: Optional[np.random.Generator] = None) -> None:
        """Set every cell alive with probability ``threshold``.

        Args:
            threshold: Probability of a cell being alive (0.0 to 1.0)
            rng: Random source; falls back to the board's own, then a fresh one
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"Threshold must be within [0, 1], got {threshold}")

        if rng is None:
            rng = self._rng if self._rng is not None else np.random.default_rng()

        # random() draws from [0, 1), so 0.0 kills every cell and 1.0 fills the board
        cells = self._buffers[self._current]
        np.less(rng.random(cells.size), threshold, out=cells)

    def clear(self) -> None:
        """Kill every cell. The generation counter is kept."""
        self._buffers[self._current].fill(False)

    def live_count(self) -> int:
        """Number of live cells in the current generation."""
        return int(np.count_nonzero(self._buffers[self._current]))

    def get_field(self) -> np.ndarray:
        """Get a ``(height, width)`` copy of the current cells."""
        return self._grid(self._current).copy()

    def set_field(self, field) -> None:
        """Replace the current cells.

        Args:
            field: Boolean-like array of shape (height, width)
        """
        field = np.asarray(field, dtype=np.bool_)
        if field.shape != (self.height, self.width):
            raise ValueError(f"Field shape {field.shape} doesn't match board size "
                             f"({self.height}, {self.width})")
        np.copyto(self._grid(self._current), field)

    def get_neighbors(self, x: int, y: int) -> int:
        """Count live cells around ``(x, y)``, clamped at the board edges."""
        self._check_bounds(x, y)
        grid = self._grid(self._current)
        block = grid[max(y - 1, 0):min(y + 2, self.height),
                     max(x - 1, 0):min(x + 2, self.width)]
        return int(np.count_nonzero(block)) - int(grid[y, x])

    def get_next_state(self, x: int, y: int) -> bool:
        """State of ``(x, y)`` in the next generation under B3/S23."""
        return next_state(self.get_cell(x, y), self.get_neighbors(x, y))

    def get_next_generation(self) -> np.ndarray:
        """Compute the next generation into the back buffer.

        The current buffer is only read. Returns a ``(height, width)`` view of
        the back buffer, which is overwritten by the next call.
        """
        h, w = self.height, self.width
        current = self._grid(self._current)
        following = self._grid(1 - self._current)

        padded = self._padded
        padded[1:h + 1, 1:w + 1] = current

        counts = self._counts
        counts.fill(0)
        for dy, dx in _NEIGHBOR_OFFSETS:
            np.add(counts, padded[dy:dy + h, dx:dx + w], out=counts)

        # Rule table index: alive * 9 + neighbours
        index = self._index
        np.copyto(index, current)
        np.multiply(index, np.uint8(MAX_NEIGHBORS + 1), out=index)
        np.add(index, counts, out=index)
        np.take(CONWAY_TABLE, index, out=following)
        return following

    def step(self, generations: int = Config.DEFAULT_STEPS_PER_CALL) -> None:
        """Advance the board ``generations`` times.

        The generation counter goes up by one per call, however many
        generations are computed.

        Args:
            generations: Number of buffer updates to perform
        """
        for _ in range(generations):
            self.get_next_generation()
            # Swap buffers
            self._current = 1 - self._current
        self._generation += 1

        if LOG.isEnabledFor(logging.DEBUG):
            LOG.debug(f"Step {self._generation}: live_cells={self.live_count()}")

    def render(self) -> str:
        """Render the board, two characters per cell and one line per row."""
        lines = []
        for row in self._grid(self._current):
            lines.append("".join(Config.ALIVE_GLYPH if cell else Config.DEAD_GLYPH
                                 for cell in row))
            lines.append("\n")
        return "".join(lines)

    def print_board(self, file: Optional[TextIO] = None) -> None:
        """Write ``render()`` to ``file``, stdout by default."""
        if file is None:
            file = sys.stdout
        file.write(self.render())
