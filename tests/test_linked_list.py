from gtkmarkup.linked_list import LinkedList


def _make(*items):
    lst = LinkedList()
    for item in items:
        lst.insert_at_end(item)
    return lst


def test_new_list_is_empty():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []


def test_insert_at_end_and_beginning():
    lst = _make("b", "c")
    lst.insert_at_beginning("a")
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_insert_at_position_middle_and_edges():
    lst = _make("a", "c")
    lst.insert_at_position("b", 1)
    lst.insert_at_position("start", 0)
    lst.insert_at_position("end", 4)
    assert list(lst) == ["start", "a", "b", "c", "end"]


def test_insert_at_invalid_position_is_ignored():
    lst = _make("a")
    lst.insert_at_position("x", 5)
    lst.insert_at_position("y", -1)
    assert list(lst) == ["a"]


def test_delete_at_beginning_and_end():
    lst = _make("a", "b", "c")
    assert lst.delete_at_beginning() == "a"
    assert lst.delete_at_end() == "c"
    assert list(lst) == ["b"]


def test_delete_on_empty_list():
    lst = LinkedList()
    assert lst.delete_at_beginning() is None
    assert lst.delete_at_end() is None
    assert len(lst) == 0


def test_delete_at_position():
    lst = _make("a", "b", "c", "d")
    assert lst.delete_at_position(2) == "c"
    assert lst.delete_at_position(0) == "a"
    assert lst.delete_at_position(1) == "d"
    assert list(lst) == ["b"]


def test_delete_at_invalid_position_is_ignored():
    lst = _make("a", "b")
    assert lst.delete_at_position(2) is None
    assert lst.delete_at_position(-1) is None
    assert list(lst) == ["a", "b"]


def test_size_tracks_operations():
    lst = LinkedList()
    for i in range(5):
        lst.insert_at_end(i)
    lst.delete_at_position(3)
    lst.insert_at_position(99, 2)
    assert len(lst) == 5
    assert list(lst) == [0, 1, 99, 2, 4]