import pytest

from algokit.linked_list import DoublyLinkedList, SinglyLinkedList


def test_singly_push_front_order():
    lst = SinglyLinkedList()
    for value in range(1, 8):
        lst.push_front(value)
    assert list(lst) == list(range(7, 0, -1))
    assert len(lst) == 7


def test_singly_reverse():
    lst = SinglyLinkedList(range(1, 8))
    before = list(lst)
    lst.reverse()
    assert list(lst) == before[::-1]
    lst.reverse()
    assert list(lst) == before


@pytest.mark.parametrize("count", [0, 1, 2])
def test_singly_reverse_small(count):
    lst = SinglyLinkedList(range(count))
    before = list(lst)
    lst.reverse()
    assert list(lst) == before[::-1]
    assert len(lst) == count


def test_singly_render():
    lst = SinglyLinkedList([1, 2, 3])
    assert lst.render() == "[head]->[3]->[2]->[1]->[head]"


def test_singly_render_empty():
    assert SinglyLinkedList().render() == "[head]->[head]"


def test_singly_push_after_reverse():
    lst = SinglyLinkedList([1, 2])
    lst.reverse()
    lst.push_front(9)
    assert list(lst)[0] == 9
    assert list(lst)[1:] == [1, 2]
    assert len(lst) == 3


def test_doubly_add_goes_to_front():
    lst = DoublyLinkedList()
    for value in ["a", "b", "c"]:
        lst.add(value)
    assert list(lst) == ["c", "b", "a"]
    assert len(lst) == 3


def test_doubly_add_tail_goes_to_back():
    lst = DoublyLinkedList()
    for value in ["a", "b", "c"]:
        lst.add_tail(value)
    assert list(lst) == ["a", "b", "c"]


def test_doubly_reversed_matches_forward():
    lst = DoublyLinkedList(range(10))
    lst.add(-1)
    lst.add_tail(99)
    assert list(reversed(lst)) == list(lst)[::-1]
    assert len(lst) == 12


def test_doubly_render_records():
    lst = DoublyLinkedList()
    lst.add(("주몽", 34))
    lst.add(("대소", 37))
    assert lst.render() == "[head]<->[대소, 37]<->[주몽, 34]<->[head]"


def test_doubly_empty():
    lst = DoublyLinkedList()
    assert list(lst) == []
    assert list(reversed(lst)) == []
    assert len(lst) == 0