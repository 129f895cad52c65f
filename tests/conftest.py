# tests/conftest.py
import logging

import pytest

from tinsel.graphs.grid import Grid
from tinsel.graphs.weighted_graph import WeightedGraph
from tinsel.solutions import base as solutions_base


@pytest.fixture
def line_graph() -> WeightedGraph:
    """0 - 1 - 2 - 3 with weights 1, 5, 1 plus a direct but dearer 0 - 3 link."""
    graph = WeightedGraph()
    graph.add_undirected_edge((0, 1), 1)
    graph.add_undirected_edge((1, 2), 5)
    graph.add_undirected_edge((2, 3), 1)
    graph.add_undirected_edge((0, 3), 8)
    return graph


@pytest.fixture
def open_grid():
    def build(width: int, height: int) -> Grid[int]:
        return Grid([[0] * width for _ in range(height)])

    return build


@pytest.fixture
def clean_registry():
    saved = dict(solutions_base.REGISTRY)
    solutions_base.REGISTRY.clear()
    yield solutions_base.REGISTRY
    solutions_base.REGISTRY.clear()
    solutions_base.REGISTRY.update(saved)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
