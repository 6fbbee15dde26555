import pytest

from fractview.lists import LinkedList


def test_construction_keeps_order():
    items = [1, 2, 3]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert list(lst) == []
    assert len(lst) == 0


def test_push_front_puts_item_first():
    lst = LinkedList(["b", "c"])
    lst.push_front("a")
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_pop_front_returns_head_and_calls_delete():
    seen = []
    lst = LinkedList(["x", "y"])
    assert lst.pop_front(seen.append) == "x"
    assert seen == ["x"]
    assert list(lst) == ["y"]
    assert len(lst) == 1


def test_pop_front_without_delete():
    lst = LinkedList([5])
    assert lst.pop_front() == 5
    assert len(lst) == 0


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_tail_first():
    items = [1, 2, 3]
    seen = []
    lst = LinkedList(items)
    lst.clear(seen.append)
    assert seen == list(reversed(items))
    assert list(lst) == []
    assert len(lst) == 0


def test_for_each_visits_in_order():
    items = ["a", "b", "c"]
    seen = []
    LinkedList(items).for_each(seen.append)
    assert seen == items


def test_map_builds_new_list():
    items = [1, 2, 3]
    original = LinkedList(items)
    mapped = original.map(str)
    assert list(mapped) == [str(i) for i in items]
    assert list(original) == items
    assert mapped is not original


def test_map_empty():
    assert len(LinkedList().map(str)) == 0


def test_push_pop_round_trip():
    lst = LinkedList()
    for item in ["p", "q", "r"]:
        lst.push_front(item)
    popped = [lst.pop_front() for _ in range(len(lst))]
    assert popped == ["r", "q", "p"]
    assert len(lst) == 0


def test_repr_shows_contents():
    assert repr(LinkedList([1, 2])) == "LinkedList([1, 2])"