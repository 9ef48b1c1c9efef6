import pytest

from containerkit.linked_list import LinkedList


def test_construct_from_items_keeps_order():
    items = [1, 2, 3, 4, 5]
    assert list(LinkedList(items)) == items
    assert len(LinkedList(items)) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []


def test_filled_with_default():
    lst = LinkedList.filled(5)
    assert len(lst) == 5
    assert all(value is None for value in lst)


def test_filled_with_value():
    lst = LinkedList.filled(3, 0)
    assert list(lst) == [0, 0, 0]


def test_filled_negative_count():
    with pytest.raises(ValueError):
        LinkedList.filled(-1)


def test_append_and_appendleft():
    lst = LinkedList([2, 3])
    lst.append(4)
    lst.appendleft(1)
    assert list(lst) == [1, 2, 3, 4]
    assert len(lst) == 4


def test_reversed_mirrors_iteration():
    items = ["a", "b", "c", "d"]
    lst = LinkedList(items)
    assert list(reversed(lst)) == list(reversed(items))


def test_getitem_and_setitem():
    items = [10, 20, 30, 40, 50]
    lst = LinkedList(items)
    for position, value in enumerate(items):
        assert lst[position] == value
    lst[3] = 63
    assert lst[3] == 63
    assert list(lst) == [10, 20, 30, 63, 50]


@pytest.mark.parametrize("index", [5, 100, -1])
def test_index_out_of_range(index):
    lst = LinkedList([1, 2, 3, 4, 5])
    with pytest.raises(IndexError):
        lst[index]
    with pytest.raises(IndexError):
        lst[index] = 0
    assert list(lst) == [1, 2, 3, 4, 5]
    assert len(lst) == 5


def test_pop_and_popleft():
    lst = LinkedList([1, 2, 3])
    assert lst.pop() == 3
    assert lst.popleft() == 1
    assert list(lst) == [2]
    assert lst.pop() == 2
    assert len(lst) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop()
    with pytest.raises(IndexError):
        LinkedList().popleft()


def test_list_usable_after_draining():
    lst = LinkedList([1])
    lst.pop()
    lst.append(7)
    lst.appendleft(6)
    assert list(lst) == [6, 7]
    assert list(reversed(lst)) == [7, 6]


def test_insert_before_element():
    lst = LinkedList([1, 2, 3])
    lst.insert(1, 42)
    assert list(lst) == [1, 42, 2, 3]


def test_insert_at_front_and_before_last():
    lst = LinkedList([1, 2, 3])
    lst.insert(0, 0)
    lst.insert(len(lst) - 1, 9)
    assert list(lst) == [0, 1, 2, 9, 3]
    assert list(reversed(lst)) == [3, 9, 2, 1, 0]


def test_insert_invalid_position():
    lst = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lst.insert(3, 4)
    with pytest.raises(IndexError):
        LinkedList().insert(0, 1)


def test_erase_returns_removed_value():
    lst = LinkedList([1, 2, 3])
    assert lst.erase(1) == 2
    assert list(lst) == [1, 3]


def test_erase_ends():
    lst = LinkedList([1, 2, 3, 4])
    assert lst.erase(0) == 1
    assert lst.erase(len(lst) - 1) == 4
    assert list(lst) == [2, 3]
    assert list(reversed(lst)) == [3, 2]


def test_erase_invalid_position():
    with pytest.raises(IndexError):
        LinkedList([1]).erase(1)


def test_erase_range_worked_example():
    lst = LinkedList([1, 2, 3, 4, 5])
    lst.erase_range(1, 3)
    assert list(lst) == [1, 4, 5]
    assert str(lst) == "1 4 5"


def test_erase_range_everything_and_nothing():
    lst = LinkedList([1, 2, 3])
    lst.erase_range(1, 1)
    assert list(lst) == [1, 2, 3]
    lst.erase_range(0, len(lst))
    assert len(lst) == 0
    assert list(reversed(lst)) == []


@pytest.mark.parametrize("start, stop", [(2, 1), (0, 4), (-1, 2)])
def test_erase_range_invalid(start, stop):
    lst = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lst.erase_range(start, stop)
    assert list(lst) == [1, 2, 3]


def test_copy_is_independent():
    original = LinkedList([1, 2, 3])
    copied = original.copy()
    copied.append(4)
    copied[0] = 100
    assert list(original) == [1, 2, 3]
    assert list(copied) == [100, 2, 3, 4]


def test_repr_round_trip_contents():
    lst = LinkedList([1, "x"])
    assert repr(lst) == "LinkedList([1, 'x'])"