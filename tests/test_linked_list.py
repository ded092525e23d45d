from dsworkbench.linked_list import IntList


def build(*values):
    lst = IntList()
    for value in values:
        lst.insert(value)
    return lst


def test_insert_goes_to_head():
    lst = build(1, 2, 3)
    assert list(lst) == [3, 2, 1]
    assert len(lst) == 3


def test_constructor_inserts_each_value():
    assert list(IntList([1, 2, 3])) == list(build(1, 2, 3))


def test_remove_takes_head():
    lst = build(1, 2, 3)
    assert lst.remove() == 3
    assert list(lst) == [2, 1]
    assert len(lst) == 2


def test_remove_on_empty_is_harmless():
    lst = IntList()
    assert lst.remove() is None
    assert len(lst) == 0


def test_show_format():
    assert build(1, 2, 3).show() == "List of 3 elements: 3 2 1 \n"
    assert IntList().show() == "List of 0 elements: \n"


def test_extract_largest():
    lst = build(5, 9, 2, 7)
    assert lst.extract_largest() == 9
    assert sorted(lst) == [2, 5, 7]
    assert len(lst) == 3


def test_extract_largest_empty():
    assert IntList().extract_largest() is None


def test_split_odd_even():
    lst = build(1, 2, 3, 4, 5, 6)
    odd = lst.split_odd_even()
    assert list(lst) == [6, 4, 2]
    assert list(odd) == [1, 3, 5]


def test_split_odd_even_no_odds():
    lst = build(2, 4)
    odd = lst.split_odd_even()
    assert len(odd) == 0
    assert list(lst) == [4, 2]


def test_split_odd_even_empty():
    lst = IntList()
    assert len(lst.split_odd_even()) == 0


def test_split_big_small_odd_count():
    values = [5, 1, 4, 2, 3]
    lst = build(*values)
    big = lst.split_big_small()
    assert len(big) == len(lst) - 1
    assert list(big) == sorted(values)[-2:]
    assert sorted(lst) == sorted(values)[:3]


def test_split_big_small_even_count_keeps_all_values():
    values = [8, 3, 6, 1]
    lst = build(*values)
    big = lst.split_big_small()
    assert len(big) == len(lst)
    assert sorted(list(big) + list(lst)) == sorted(values)
    assert min(big) >= max(lst)


def test_split_big_small_empty():
    assert len(IntList().split_big_small()) == 0