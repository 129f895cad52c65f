"""solutions package."""

from .base import (
    REGISTRY,
    Solution,
    SolutionContext,
    SolutionError,
    SolutionInfo,
    SolutionParseError,
    create_context,
    solution,
)
from .loader import discover
from .runner import BenchmarkResult, RunResult, benchmark, input_path, read_input, run

__all__ = [
    "REGISTRY",
    "BenchmarkResult",
    "RunResult",
    "Solution",
    "SolutionContext",
    "SolutionError",
    "SolutionInfo",
    "SolutionParseError",
    "benchmark",
    "create_context",
    "discover",
    "input_path",
    "read_input",
    "run",
    "solution",
]
