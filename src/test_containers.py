import pytest

from containers import Queue, Stack
from crime_list import CrimeList


def test_queue_fifo():
    q = Queue()
    assert q.is_empty()
    for item in ("a", "b", "c"):
        q.enqueue(item)
    assert len(q) == 3
    assert [q.dequeue(), q.dequeue()] == ["a", "b"]
    q.enqueue("d")
    assert [q.dequeue(), q.dequeue()] == ["c", "d"]
    assert q.is_empty()
    with pytest.raises(IndexError):
        q.dequeue()


def test_stack_lifo():
    s = Stack()
    assert s.is_empty()
    for item in (1, 2, 3):
        s.push(item)
    assert len(s) == 3
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]
    with pytest.raises(IndexError):
        s.pop()


def test_crime_list_keeps_insertion_order():
    crimes = CrimeList()
    assert len(crimes) == 0
    assert crimes.format_lines() == ["Found 0 crimes."]

    for c in ("robbery", "larceny", "robbery"):
        crimes.add_crime(c)

    assert list(crimes) == ["robbery", "larceny", "robbery"]
    assert crimes[1] == "larceny"
    assert crimes.format_lines() == ["robbery", "larceny", "robbery", "Found 3 crimes."]

    #to to_list den dinei prosvasi stin esoteriki lista
    copy = crimes.to_list()
    copy.append("arson")
    assert len(crimes) == 3
