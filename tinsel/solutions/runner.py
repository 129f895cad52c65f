"""Run solutions against local input and time them."""

from __future__ import annotations

import logging
import statistics
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional, Type

from ..config import CONFIG, RunnerConfig
from .base import Solution, SolutionContext, create_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartResult:
    """Answer and wall-clock duration of one part."""

    answer: Any
    seconds: float


@dataclass(frozen=True)
class RunResult:
    """Outcome of running both parts of a solution once."""

    name: str
    parse_seconds: float
    part_one: PartResult
    part_two: PartResult


@dataclass(frozen=True)
class TimingSummary:
    mean: float
    minimum: float
    maximum: float

    @classmethod
    def from_samples(cls, samples: List[float]) -> "TimingSummary":
        return cls(statistics.fmean(samples), min(samples), max(samples))


@dataclass(frozen=True)
class BenchmarkResult:
    """Aggregate timings over several runs."""

    name: str
    iterations: int
    part_one: TimingSummary
    part_two: TimingSummary


def input_path(config: RunnerConfig, year: int, day: int) -> Path:
    """Return where the input for ``year``/``day`` is expected, e.g. ``inputs/2022/day05.txt``."""

    return Path(config.inputs_dir) / str(year) / f"day{day:02d}.txt"


def read_input(path: str | Path) -> str:
    """Return the contents of the input file at ``path``."""

    return Path(path).read_text(encoding="utf-8").rstrip("\r\n")


def _timed_part(part: Callable[[SolutionContext], Any], context: SolutionContext) -> PartResult:
    start = time.perf_counter()
    answer = part(context)
    return PartResult(answer=answer, seconds=time.perf_counter() - start)


def run(solution_cls: Type[Solution], raw: str) -> RunResult:
    """Parse ``raw`` and run both parts of ``solution_cls``.

    Each part receives its own freshly parsed context so that one part
    mutating its input cannot affect the other.
    """

    instance = solution_cls()
    info = getattr(solution_cls, "info", None)
    label = info.name if info is not None else solution_cls.__name__

    start = time.perf_counter()
    context = create_context(instance, raw)
    parse_seconds = time.perf_counter() - start

    one = _timed_part(instance.part_one, context)
    two = _timed_part(instance.part_two, create_context(instance, raw))
    logger.info(
        "%s: part one %r (%.3f ms), part two %r (%.3f ms)",
        label, one.answer, one.seconds * 1000, two.answer, two.seconds * 1000,
    )
    return RunResult(name=label, parse_seconds=parse_seconds, part_one=one, part_two=two)


def benchmark(
    solution_cls: Type[Solution],
    raw: str,
    iterations: Optional[int] = None,
    config: Optional[RunnerConfig] = None,
) -> BenchmarkResult:
    """Run ``solution_cls`` ``iterations`` times and summarise the timings.

    ``iterations`` defaults to ``benchmark_iterations`` from ``config``, which
    in turn defaults to the loaded runner configuration.
    """

    if iterations is None:
        iterations = (config or CONFIG.runner).benchmark_iterations
    if iterations <= 0:
        raise ValueError("iterations must be positive")

    runs = [run(solution_cls, raw) for _ in range(iterations)]
    result = BenchmarkResult(
        name=runs[0].name,
        iterations=iterations,
        part_one=TimingSummary.from_samples([r.part_one.seconds for r in runs]),
        part_two=TimingSummary.from_samples([r.part_two.seconds for r in runs]),
    )
    logger.info(
        "%s over %d runs: part one mean %.3f ms, part two mean %.3f ms",
        result.name, iterations, result.part_one.mean * 1000, result.part_two.mean * 1000,
    )
    return result


__all__ = [
    "BenchmarkResult",
    "PartResult",
    "RunResult",
    "TimingSummary",
    "benchmark",
    "input_path",
    "read_input",
    "run",
]
