import pytest

from labworks.float_list import FloatList


def test_add_and_getitem():
    lst = FloatList()
    lst.add(1.5)
    lst.add(2)
    assert len(lst) == 2
    assert lst[0] == 1.5
    assert lst[1] == 2.0


def test_initial_values():
    lst = FloatList([3, 4, 5])
    assert list(lst) == [3.0, 4.0, 5.0]


def test_getitem_out_of_range():
    lst = FloatList([1.0])
    assert lst[0] == 1.0
    with pytest.raises(IndexError):
        _ = lst[1]
    with pytest.raises(IndexError):
        _ = lst[-1]
    assert len(lst) == 1
    assert list(lst) == [1.0]


def test_setitem():
    lst = FloatList([1.0, 2.0])
    lst[1] = 7.0
    assert list(lst) == [1.0, 7.0]
    with pytest.raises(IndexError):
        lst[2] = 3.0


def test_insert_shifts_right():
    lst = FloatList([1.0, 2.0, 3.0])
    lst.insert(1, 9.0)
    assert list(lst) == [1.0, 9.0, 2.0, 3.0]


def test_insert_requires_existing_position():
    lst = FloatList([1.0])
    with pytest.raises(IndexError):
        lst.insert(1, 2.0)
    with pytest.raises(IndexError):
        FloatList().insert(0, 2.0)
    assert list(lst) == [1.0]


def test_remove_at_and_remove():
    lst = FloatList([1.0, 2.0, 3.0, 2.0])
    lst.remove_at(0)
    assert list(lst) == [2.0, 3.0, 2.0]
    lst.remove(2.0)
    assert list(lst) == [3.0, 2.0]
    with pytest.raises(IndexError):
        lst.remove_at(5)


def test_remove_missing_raises():
    lst = FloatList([1.0])
    with pytest.raises(ValueError):
        lst.remove(4.0)
    assert list(lst) == [1.0]


def test_index_of_and_contains():
    lst = FloatList([5.0, 6.0, 5.0])
    assert lst.index_of(5.0) == 0
    assert lst.index_of(6.0) == 1
    assert 6.0 in lst
    assert 8.0 not in lst
    with pytest.raises(ValueError):
        lst.index_of(8.0)


def test_clear():
    lst = FloatList([1.0, 2.0])
    lst.clear()
    assert len(lst) == 0
    assert list(lst) == []


def test_format():
    assert FloatList([1.0, 2.5]).format() == "1.000 -> 2.500"
    assert FloatList().format() == ""


def test_move_large_to_front_is_stable_partition():
    values = [1.0, 12.0, -3.0, -15.0, 10.0, 11.5]
    lst = FloatList(values)
    lst.move_large_to_front()
    result = list(lst)
    assert sorted(result) == sorted(values)
    large = [v for v in values if abs(v) > 10]
    small = [v for v in values if abs(v) <= 10]
    assert result == large + small