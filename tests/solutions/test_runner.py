from pathlib import Path

import pytest

from tinsel.config import RunnerConfig
from tinsel.graphs.grid import Grid
from tinsel.pathfinding.algorithms import PathFinder
from tinsel.pathfinding.heuristics import manhattan
from tinsel.solutions import Solution, benchmark, input_path, read_input, run, solution


class Calories(Solution):
    """Blank-line separated groups of numbers."""

    def parse(self, raw):
        return [[int(x) for x in block.split()] for block in raw.split("\n\n")]

    def part_one(self, context):
        return max(sum(group) for group in context.input)

    def part_two(self, context):
        totals = sorted((sum(g) for g in context.input), reverse=True)
        return sum(totals[:3])


class Climbing(Solution):
    """Shortest climb from S to E moving up at most one level per step."""

    def parse(self, raw):
        return Grid.from_lines(raw.splitlines(), convert=str)

    @staticmethod
    def _height(mark: str) -> int:
        return ord({"S": "a", "E": "z"}.get(mark, mark))

    def _climb(self, grid, start):
        def climbable(current, neighbor, cost):
            return self._height(grid[neighbor]) - self._height(grid[current]) <= 1

        return PathFinder(default_heuristic=manhattan).find(
            grid, climbable, start, grid.find("E")
        )

    def part_one(self, context):
        grid = context.as_type(Grid)
        return self._climb(grid, grid.find("S")).cost

    def part_two(self, context):
        grid = context.as_type(Grid)
        results = [self._climb(grid, cell) for cell in grid.cells() if grid[cell] in "aS"]
        return min(r.cost for r in results if r)


RAW_CALORIES = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000"

RAW_HILL = "Sabqponm\nabcryxxl\naccszExk\nacctuvwj\nabdefghi"


def test_run_both_parts():
    result = run(Calories, RAW_CALORIES)
    assert result.name == "Calories"
    assert result.part_one.answer == 24000
    assert result.part_two.answer == 45000
    assert result.part_one.seconds >= 0
    assert result.parse_seconds >= 0


def test_run_uses_registered_name(clean_registry):
    solution("Hill Climbing Algorithm", 2022, 12)(Climbing)
    result = run(Climbing, RAW_HILL)
    assert result.name == "Hill Climbing Algorithm"
    assert result.part_one.answer == 31
    assert result.part_two.answer == 29


def test_benchmark_summarises_runs():
    result = benchmark(Calories, RAW_CALORIES, iterations=3)
    assert result.iterations == 3
    for summary in (result.part_one, result.part_two):
        assert summary.minimum <= summary.mean <= summary.maximum


def test_benchmark_requires_iterations():
    with pytest.raises(ValueError):
        benchmark(Calories, RAW_CALORIES, iterations=0)


def test_read_input_strips_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "day01.txt"
    path.write_text("1\n2\n\n", encoding="utf-8")
    assert read_input(path) == "1\n2"


def test_input_path_layout() -> None:
    cfg = RunnerConfig(inputs_dir="data")
    assert input_path(cfg, 2022, 5) == Path("data") / "2022" / "day05.txt"


def test_benchmark_iterations_come_from_config():
    result = benchmark(Calories, RAW_CALORIES, config=RunnerConfig(benchmark_iterations=2))
    assert result.iterations == 2
    # an explicit count still wins
    explicit = benchmark(
        Calories, RAW_CALORIES, iterations=1, config=RunnerConfig(benchmark_iterations=2)
    )
    assert explicit.iterations == 1
