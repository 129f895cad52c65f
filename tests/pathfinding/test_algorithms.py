import pytest

from tinsel.config import SearchConfig
from tinsel.pathfinding.algorithms import PathFinder, PathFindingAlgorithm, create_algorithm
from tinsel.pathfinding.errors import SearchTimeoutError, UnsupportedAlgorithmError
from tinsel.pathfinding.heuristics import manhattan


def test_create_known_algorithms():
    assert create_algorithm("astar").algorithm is PathFindingAlgorithm.ASTAR
    assert create_algorithm(PathFindingAlgorithm.DIJKSTRA).algorithm is PathFindingAlgorithm.DIJKSTRA


def test_unknown_algorithm_rejected():
    with pytest.raises(UnsupportedAlgorithmError, match="Unknown algorithm bfs"):
        create_algorithm("bfs")
    with pytest.raises(ValueError):
        create_algorithm("bfs")


def test_dijkstra_ignores_heuristic(line_graph):
    def misleading(node, goal):
        return 100 if node == 1 else 0

    finder = create_algorithm("dijkstra")
    result = finder.find(line_graph, None, 0, 3, heuristic=misleading)
    assert result.path == [0, 1, 2, 3]
    assert result.cost == 7


def test_astar_uses_default_heuristic(open_grid):
    finder = PathFinder(default_heuristic=manhattan)
    result = finder.find(open_grid(10, 10), None, (0, 0), (0, 9))
    assert result.expansions == 9


def test_from_config_applies_limits(open_grid):
    finder = PathFinder.from_config(
        SearchConfig(algorithm="astar", max_expansions=3), default_heuristic=manhattan
    )
    assert finder.max_expansions == 3
    with pytest.raises(SearchTimeoutError):
        finder.find(open_grid(10, 10), None, (0, 0), (0, 9))


def test_cancellation_reaches_search(open_grid):
    finder = PathFinder(default_heuristic=manhattan)
    with pytest.raises(SearchTimeoutError):
        finder.find(open_grid(10, 10), None, (0, 0), (9, 9), should_cancel=lambda: True)
    result = finder.find(open_grid(10, 10), None, (0, 0), (0, 9), should_cancel=lambda: False)
    assert result.cost == 9
