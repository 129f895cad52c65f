import pytest

from tinsel.structures.priority import PriorityQueue, PriorityStack


def test_queue_is_fifo_within_priority():
    queue = PriorityQueue()
    queue.enqueue("a", 3)
    queue.enqueue("b", 1)
    queue.enqueue("c", 3)
    queue.enqueue("d", 1)
    assert queue.peek() == "b"
    assert [queue.dequeue() for _ in range(4)] == ["b", "d", "a", "c"]
    assert not queue


def test_stack_is_lifo_within_priority():
    stack = PriorityStack()
    stack.push("a", 3)
    stack.push("b", 1)
    stack.push("c", 3)
    stack.push("d", 1)
    assert stack.peek() == "d"
    assert [stack.pop() for _ in range(4)] == ["d", "b", "c", "a"]
    assert len(stack) == 0


def test_initial_values():
    queue = PriorityQueue([("x", 2), ("y", 1)])
    assert len(queue) == 2
    assert queue.dequeue() == "y"


def test_unorderable_values_are_fine():
    queue = PriorityQueue()
    queue.enqueue({"k": 1}, 0)
    queue.enqueue({"k": 2}, 0)
    assert queue.dequeue() == {"k": 1}


def test_empty_containers_raise():
    with pytest.raises(IndexError):
        PriorityQueue().dequeue()
    with pytest.raises(IndexError):
        PriorityStack().peek()
