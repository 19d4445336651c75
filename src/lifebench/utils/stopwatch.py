"""Wall-clock stopwatch used to time benchmark runs."""
import time
from typing import Callable, Optional

from ..core.errors import AlreadyStarted, InvalidInterval, NotStarted

MICROS_PER_SECOND = 1_000_000


def wall_clock_micros() -> int:
    """Current wall-clock time in whole microseconds."""
    return time.time_ns() // 1000


class Stopwatch:
    """Measures the interval between a ``start`` and a ``stop``.

    ``start`` and ``stop`` must alternate. ``elapsed`` rejects intervals that
    are zero or negative instead of returning them.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        """Initialize a stopped stopwatch with begin == end == now.

        Args:
            clock: Zero-argument callable returning integer microseconds
        """
        self._clock = clock if clock is not None else wall_clock_micros
        self._started = False
        self._begin = self._clock()
        self._end = self._begin

    @property
    def started(self) -> bool:
        """Whether the stopwatch is running."""
        return self._started

    def start(self) -> None:
        """Record the begin time.

        Raises:
            AlreadyStarted: If the stopwatch is already running
        """
        if self._started:
            raise AlreadyStarted()
        self._begin = self._clock()
        self._started = True

    def stop(self) -> None:
        """Record the end time.

        Raises:
            NotStarted: If the stopwatch is not running
        """
        if not self._started:
            raise NotStarted()
        self._end = self._clock()
        self._started = False

    def elapsed(self) -> float:
        """Seconds between the last start and stop.

        Raises:
            InvalidInterval: If no time elapsed or stop precedes start
        """
        micros = self._end - self._begin
        if micros <= 0:
            raise InvalidInterval(micros)
        return micros / float(MICROS_PER_SECOND)

    def __enter__(self) -> 'Stopwatch':
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
