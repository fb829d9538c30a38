import pytest

from coursealgos.linked_list import SinglyLinkedList


def test_source_sequence():
    lst = SinglyLinkedList()
    lst.insert_start(1)
    lst.insert_start(2)
    lst.insert_start(3)
    lst.insert_end(5)
    lst.insert_at(3, 8)
    assert list(lst) == [3, 2, 8, 1, 5]
    assert len(lst) == 5


def test_insert_start_reverses_order():
    lst = SinglyLinkedList()
    for value in range(5):
        lst.insert_start(value)
    assert list(lst) == list(reversed(range(5)))


def test_insert_end_keeps_order_from_empty():
    lst = SinglyLinkedList()
    for value in "abc":
        lst.insert_end(value)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_at_places_value_at_position(position):
    lst = SinglyLinkedList()
    for value in (10, 20, 30):
        lst.insert_end(value)
    lst.insert_at(position, 99)
    values = list(lst)
    assert values[position - 1] == 99
    assert [v for v in values if v != 99] == [10, 20, 30]
    assert len(lst) == 4


@pytest.mark.parametrize("position", [0, -1, 5])
def test_insert_at_out_of_range(position):
    lst = SinglyLinkedList()
    for value in (1, 2, 3):
        lst.insert_end(value)
    with pytest.raises(IndexError):
        lst.insert_at(position, 7)
    assert list(lst) == [1, 2, 3]


def test_empty_list_has_no_items():
    lst = SinglyLinkedList()
    assert list(lst) == []
    assert len(lst) == 0