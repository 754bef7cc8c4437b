import pytest

from dsaconcepts.queues import (
    CircularQueue,
    LinearQueue,
    QueueEmptyError,
    QueueFullError,
    ShiftingQueue,
)

SOURCE_VALUES = [111, 110, 11011, 11001, 100001]


def test_circular_queue_holds_one_less_than_size():
    queue = CircularQueue(5)
    for value in SOURCE_VALUES[:4]:
        queue.enqueue(value)
    with pytest.raises(QueueFullError):
        queue.enqueue(SOURCE_VALUES[4])
    assert list(queue) == SOURCE_VALUES[:4]
    assert len(queue) == 4


def test_circular_queue_display():
    queue = CircularQueue(5)
    for value in SOURCE_VALUES[:4]:
        queue.enqueue(value)
    assert queue.display() == "111  110  11011  11001  "


def test_circular_queue_fifo_order():
    queue = CircularQueue(5)
    for value in SOURCE_VALUES[:4]:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(4)] == SOURCE_VALUES[:4]
    assert len(queue) == 0


def test_circular_queue_wraps_around():
    queue = CircularQueue(4)
    for value in "abc":
        queue.enqueue(value)
    assert queue.dequeue() == "a"
    assert queue.dequeue() == "b"
    queue.enqueue("d")
    queue.enqueue("e")
    assert list(queue) == ["c", "d", "e"]
    with pytest.raises(QueueFullError):
        queue.enqueue("f")


def test_circular_queue_empty():
    queue = CircularQueue(5)
    assert queue.display() == "Queue is empty"
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    queue.enqueue(10)
    assert list(queue) == [10]


def test_circular_queue_rejects_zero_size():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_linear_queue_source_scenario():
    queue = LinearQueue(2)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    queue.enqueue(2)
    queue.enqueue(4)
    with pytest.raises(QueueFullError):
        queue.enqueue(6)
    assert queue.dequeue() == 2
    assert queue.display() == "4 "


def test_linear_queue_does_not_reuse_front_slots_until_empty():
    queue = LinearQueue(2)
    queue.enqueue("a")
    queue.enqueue("b")
    assert queue.dequeue() == "a"
    with pytest.raises(QueueFullError):
        queue.enqueue("c")
    assert queue.dequeue() == "b"
    assert queue.is_empty()
    queue.enqueue("c")
    assert list(queue) == ["c"]


def test_linear_queue_empty_state():
    queue = LinearQueue(3)
    assert queue.is_empty()
    assert list(queue) == []
    assert queue.display() == "Queue is empty"
    queue.enqueue(1)
    assert not queue.is_empty()
    assert len(queue) == 1


def test_shifting_queue_source_scenario():
    queue = ShiftingQueue(4)
    assert queue.display() == "Queue is empty"
    for value in [20, 30, 40, 50]:
        queue.enqueue(value)
    with pytest.raises(QueueFullError):
        queue.enqueue(60)
    assert queue.dequeue() == 20
    assert queue.dequeue() == 30
    assert list(queue) == [40, 50]
    assert queue.front() == 40
    assert queue.display() == "40 <- 50 <- "


def test_shifting_queue_frees_capacity_on_dequeue():
    queue = ShiftingQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    queue.dequeue()
    queue.enqueue(3)
    assert list(queue) == [2, 3]
    assert len(queue) == 2


def test_shifting_queue_empty_errors():
    queue = ShiftingQueue(1)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    with pytest.raises(QueueEmptyError):
        queue.front()