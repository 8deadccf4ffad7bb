import pytest

from ftkit.lists import LinkedList, Node, delete_node


def test_build_and_iterate_round_trip():
    items = [1, "two", 3.0, None]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_len_matches_items():
    assert len(LinkedList(range(7))) == 7


def test_last_holds_final_item():
    lst = LinkedList(["a", "b", "c"])
    assert lst.last().content == "c"
    assert lst.last().next is None


def test_add_front():
    lst = LinkedList([2, 3])
    lst.add_front(Node(1))
    assert list(lst) == [1, 2, 3]


def test_add_front_to_empty():
    lst = LinkedList()
    node = Node("x")
    lst.add_front(node)
    assert lst.head is node
    assert list(lst) == ["x"]


def test_add_back():
    lst = LinkedList([1, 2])
    node = Node(3)
    lst.add_back(node)
    assert list(lst) == [1, 2, 3]
    assert lst.last() is node


def test_add_back_to_empty():
    lst = LinkedList()
    lst.add_back(Node("only"))
    assert list(lst) == ["only"]


def test_add_none_is_ignored():
    lst = LinkedList([1])
    lst.add_front(None)
    lst.add_back(None)
    assert list(lst) == [1]


def test_add_rejects_non_node():
    lst = LinkedList()
    with pytest.raises(TypeError):
        lst.add_back(5)
    with pytest.raises(TypeError):
        lst.add_front("x")


def test_clear_deletes_every_content_in_order():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == items
    assert lst.head is None
    assert len(lst) == 0


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_each_content():
    items = [4, 5, 6]
    seen = []
    LinkedList(items).iterate(seen.append)
    assert seen == items


def test_iterate_with_none_does_nothing():
    lst = LinkedList([1, 2])
    lst.iterate(None)
    assert list(lst) == [1, 2]


def test_map_builds_new_list():
    items = ["ab", "cde", ""]
    lst = LinkedList(items)
    mapped = lst.map(len, None)
    assert list(mapped) == [len(s) for s in items]
    assert list(lst) == items
    assert mapped.head is not lst.head


def test_map_failure_deletes_partial_contents():
    def f(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    deleted = []
    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [10, 20]


def test_map_empty_list():
    assert len(LinkedList().map(str, None)) == 0


def test_delete_node_passes_content_and_detaches():
    second = Node("b")
    first = Node("a", second)
    deleted = []
    delete_node(first, deleted.append)
    assert deleted == ["a"]
    assert first.next is None


def test_delete_node_none_is_ignored():
    deleted = []
    delete_node(None, deleted.append)
    assert deleted == []