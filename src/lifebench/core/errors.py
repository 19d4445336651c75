"""Error kinds raised by the board and the stopwatch."""
from enum import IntEnum


class ErrorKind(IntEnum):
    """Kinds of precondition violations."""
    OUT_OF_BOUNDS = 0      # Cell accessor outside the grid
    ALREADY_STARTED = 1    # Stopwatch started twice
    NOT_STARTED = 2        # Stopwatch stopped while idle
    INVALID_INTERVAL = 3   # Elapsed time zero or negative


class LifeError(Exception):
    """Base class for all lifebench errors."""

    kind: ErrorKind


class OutOfBounds(LifeError, IndexError):
    """A cell coordinate fell outside ``[0, width) x [0, height)``."""

    kind = ErrorKind.OUT_OF_BOUNDS

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"Cell ({x}, {y}) is outside the {width}x{height} board")


class StopwatchError(LifeError, RuntimeError):
    """Stopwatch used out of sequence."""


class AlreadyStarted(StopwatchError):
    kind = ErrorKind.ALREADY_STARTED

    def __init__(self):
        super().__init__("Stopwatch is already running. Call stop() first.")


class NotStarted(StopwatchError):
    kind = ErrorKind.NOT_STARTED

    def __init__(self):
        super().__init__("Stopwatch is not running. Call start() first.")


class InvalidInterval(StopwatchError):
    kind = ErrorKind.INVALID_INTERVAL

    def __init__(self, micros: int):
        self.micros = micros
        if micros == 0:
            reason = "no time elapsed"
        else:
            reason = "stop time precedes start time"
        super().__init__(f"Invalid interval of {micros} us: {reason}")
