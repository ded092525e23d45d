import pytest

from dsworkbench.template_list import DoublyLinkedList, main, reverse


def test_add_to_front_and_back():
    lst = DoublyLinkedList()
    lst.add_to_back("one(1)")
    lst.add_to_front("nine(9)")
    lst.add_to_back("eight(8)")
    assert list(lst) == ["nine(9)", "one(1)", "eight(8)"]
    assert len(lst) == 3


def test_add_methods_return_the_list():
    lst = DoublyLinkedList()
    assert lst.add_to_back(1) is lst
    assert lst.add_to_front(0) is lst
    assert list(lst) == [0, 1]


def test_get_first_leaves_element():
    lst = DoublyLinkedList(["a", "b"])
    assert lst.get_first() == "a"
    assert len(lst) == 2


def test_get_rest_is_a_copy():
    lst = DoublyLinkedList([1, 2, 3])
    rest = lst.get_rest()
    assert list(rest) == [2, 3]
    rest.add_to_back(4)
    assert list(lst) == [1, 2, 3]


def test_get_rest_of_single_element_is_empty():
    assert len(DoublyLinkedList(["x"]).get_rest()) == 0


def test_empty_list_errors():
    lst = DoublyLinkedList()
    with pytest.raises(IndexError):
        lst.get_first()
    with pytest.raises(IndexError):
        lst.get_rest()


def test_show_format():
    lst = DoublyLinkedList(["nine(9)", "one(1)", "eight(8)"])
    assert lst.show() == "List of 3 elements: nine(9) one(1) eight(8) \n"
    assert DoublyLinkedList().show() == "List of 0 elements: \n"


def test_reverse():
    lst = DoublyLinkedList([1, 2, 3, 4])
    result = reverse(lst)
    assert list(result) == [4, 3, 2, 1]
    assert list(lst) == [1, 2, 3, 4]


def test_reverse_empty():
    assert len(reverse(DoublyLinkedList())) == 0


def test_reverse_twice_round_trips():
    values = list(range(2000))
    assert list(reverse(reverse(DoublyLinkedList(values)))) == values


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "\nBUILD ORIGINAL---------------------------\n"
        "List of 3 elements: nine(9) one(1) eight(8) \n"
        "\nREVERSE ORIGINAL---------------------------\n"
        "\nNew: List of 3 elements: eight(8) one(1) nine(9) \n"
    )