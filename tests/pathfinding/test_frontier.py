import pytest

from tinsel.pathfinding.frontier import Frontier


def test_pops_lowest_priority_first():
    frontier = Frontier()
    frontier.push("c", 3)
    frontier.push("a", 1)
    frontier.push("b", 2)
    assert [frontier.pop() for _ in range(3)] == ["a", "b", "c"]
    assert frontier.is_empty()


def test_ties_broken_by_lowest_identifier():
    frontier = Frontier()
    frontier.push((2, 0), 5)
    frontier.push((0, 3), 5)
    frontier.push((1, 1), 5)
    assert frontier.peek() == (0, 3)
    assert [frontier.pop() for _ in range(3)] == [(0, 3), (1, 1), (2, 0)]


def test_decrease_key_visible_on_next_pop():
    frontier = Frontier()
    frontier.push("x", 5)
    frontier.push("y", 3)
    frontier.push("x", 1)
    assert len(frontier) == 2
    assert frontier.priority("x") == 1
    assert frontier.pop() == "x"
    assert frontier.pop() == "y"
    assert frontier.is_empty()


def test_increase_key_skips_stale_entry():
    frontier = Frontier()
    frontier.push("x", 1)
    frontier.push("y", 2)
    frontier.push("x", 3)
    assert frontier.pop() == "y"
    assert frontier.pop() == "x"
    assert len(frontier) == 0


def test_reinsert_after_pop():
    frontier = Frontier()
    frontier.push(1, 4)
    assert frontier.pop() == 1
    assert 1 not in frontier
    frontier.push(1, 4)
    assert 1 in frontier
    assert frontier.pop() == 1


def test_empty_frontier_raises():
    frontier = Frontier()
    with pytest.raises(IndexError):
        frontier.pop()
    with pytest.raises(IndexError):
        frontier.peek()
