import pytest

from qsmc.send_queue import SendQueue, SendQueueEntry


def test_push_and_len():
    queue = SendQueue()
    queue.push(3, 10)
    queue.push(4, 11)
    assert len(queue) == 2


def test_get_tuple_returns_pushed_values():
    queue = SendQueue()
    queue.push(5, 17)
    entry = queue.get_tuple(0)
    assert entry == SendQueueEntry(neighbor=5, particle_index=17)


def test_neighbor_size_counts_matching_entries():
    queue = SendQueue()
    for neighbor, index in [(1, 0), (2, 1), (1, 2), (1, 3)]:
        queue.push(neighbor, index)
    assert queue.neighbor_size(1) == 3
    assert queue.neighbor_size(2) == 1
    assert queue.neighbor_size(9) == 0


def test_clear_empties_queue():
    queue = SendQueue()
    queue.push(1, 1)
    queue.clear()
    assert len(queue) == 0
    assert queue.neighbor_size(1) == 0


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_get_tuple_out_of_range(index):
    queue = SendQueue()
    queue.push(1, 1)
    with pytest.raises(IndexError):
        queue.get_tuple(index)


def test_iteration_preserves_order():
    queue = SendQueue()
    queue.push(2, 7)
    queue.push(3, 8)
    assert [e.particle_index for e in queue] == [7, 8]