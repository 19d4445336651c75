"""Core module for the bounded Game of Life engine."""
from .errors import (ErrorKind, LifeError, OutOfBounds, StopwatchError,
                     AlreadyStarted, NotStarted, InvalidInterval)
from .board import Board
from .benchmark import BenchmarkSettings, BenchmarkResult, run_benchmark

__all__ = ['Board', 'BenchmarkSettings', 'BenchmarkResult', 'run_benchmark',
           'ErrorKind', 'LifeError', 'OutOfBounds', 'StopwatchError',
           'AlreadyStarted', 'NotStarted', 'InvalidInterval']
