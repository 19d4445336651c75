"""Main entry point for the Game of Life benchmark."""
import argparse
import logging
import sys

from .core.benchmark import BenchmarkSettings, run_benchmark
from .core.errors import LifeError
from .utils.config import Config

# Global logger
LOG = logging.getLogger(__name__)
LOG.setLevel(Config.LOG_LEVEL)
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter(Config.LOG_FORMAT))
LOG.addHandler(handler)


def _percent(value: str) -> int:
    percent = int(value)
    if not 0 <= percent <= 100:
        raise argparse.ArgumentTypeError(f"percent must be within 0..100, got {percent}")
    return percent


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lifebench',
        description="Time Conway's Game of Life on a bounded grid.")
    parser.add_argument('-n', dest='generations', type=_non_negative,
                        default=Config.DEFAULT_GENERATIONS,
                        help='number of generations to run (default: %(default)s)')
    parser.add_argument('-x', dest='width', type=_non_negative,
                        default=Config.DEFAULT_FIELD_WIDTH,
                        help='grid width in cells (default: %(default)s)')
    parser.add_argument('-y', dest='height', type=_non_negative,
                        default=Config.DEFAULT_FIELD_HEIGHT,
                        help='grid height in cells (default: %(default)s)')
    parser.add_argument('-p', dest='alive_percent', type=_percent,
                        default=Config.DEFAULT_ALIVE_PERCENT,
                        help='percent of cells initially alive, 0-100 (default: %(default)s)')
    parser.add_argument('-s', '--seed', type=int, default=None,
                        help='seed for the random initial board')
    parser.add_argument('--show', action='store_true',
                        help='print the final board')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log every generation')
    return parser


def _enable_debug_logging() -> None:
    for name in list(logging.root.manager.loggerDict):
        if name == 'lifebench' or name.startswith('lifebench.'):
            logging.getLogger(name).setLevel(logging.DEBUG)


def main(argv=None) -> int:
    """Run the benchmark and print the elapsed time."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        _enable_debug_logging()

    settings = BenchmarkSettings(generations=args.generations,
                                 width=args.width,
                                 height=args.height,
                                 alive_percent=args.alive_percent,
                                 seed=args.seed)
    try:
        result = run_benchmark(settings)
    except LifeError as e:
        LOG.error(f"Benchmark failed: {e}")
        return 1

    if args.show:
        result.board.print_board()
    print(f"This took: {result.elapsed:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
