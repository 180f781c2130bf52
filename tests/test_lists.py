import pytest

from pushswap.lists import LinkedList, Node


def test_empty_list_has_no_length_and_no_last():
    items = LinkedList()
    assert len(items) == 0
    assert items.last() is None
    assert list(items) == []


def test_constructor_keeps_order():
    items = LinkedList(["a", "b", "c"])
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_add_front_prepends():
    items = LinkedList(["b"])
    node = items.add_front("a")
    assert items.head is node
    assert list(items) == ["a", "b"]


def test_add_back_appends_and_last_is_new_node():
    items = LinkedList()
    first = items.add_back(1)
    assert items.head is first
    second = items.add_back(2)
    assert items.last() is second
    assert second.next is None
    assert list(items) == [1, 2]


def test_node_defaults_to_no_next():
    node = Node("x")
    assert node.next is None
    assert node.content == "x"


def test_clear_calls_delete_in_order_and_empties():
    seen = []
    items = LinkedList(["x", "y", "z"])
    items.clear(seen.append)
    assert seen == ["x", "y", "z"]
    assert len(items) == 0
    assert items.head is None


def test_clear_without_delete_empties():
    items = LinkedList([1, 2])
    items.clear()
    assert list(items) == []


def test_for_each_visits_every_content():
    seen = []
    items = LinkedList([3, 1, 2])
    items.for_each(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list_and_leaves_original():
    items = LinkedList(["ab", "c"])
    mapped = items.map(str.upper)
    assert list(mapped) == ["AB", "C"]
    assert list(items) == ["ab", "c"]
    assert mapped is not items


def test_map_failure_deletes_produced_contents():
    deleted = []

    def func(value):
        if value == "boom":
            raise RuntimeError("bad")
        return value * 2

    items = LinkedList(["a", "b", "boom", "c"])
    with pytest.raises(RuntimeError):
        items.map(func, deleted.append)
    assert deleted == ["aa", "bb"]


def test_len_matches_iteration():
    items = LinkedList(range(10))
    items.add_front(-1)
    assert len(items) == len(list(items))