import pytest

from labworks.bstree import BSTree, record_key
from labworks.sorted_map import StrStrMap


def rec(key, name="x"):
    return StrStrMap({"id": str(key), "name": name})


def build(keys):
    tree = BSTree()
    for key in keys:
        tree.insert(rec(key, f"n{key}"))
    return tree


def test_record_key_reads_leading_digits():
    assert record_key({"id": "831"}) == 831
    assert record_key({"id": "abc"}) == 0
    assert record_key(rec(12)) == 12


def test_insert_and_search():
    tree = build([34, 831, 12, 1023, 2])
    assert len(tree) == 5
    for key in [34, 831, 12, 1023, 2]:
        assert key in tree
        assert tree.search(key)["name"] == f"n{key}"
    assert tree.search(7) is None
    assert 7 not in tree


def test_duplicate_key_rejected():
    tree = build([5])
    with pytest.raises(ValueError):
        tree.insert(rec(5))
    assert len(tree) == 1


def test_delete_missing_raises():
    tree = build([5, 3])
    with pytest.raises(KeyError):
        tree.delete(9)
    assert len(tree) == 2


@pytest.mark.parametrize("victim", [50, 30, 70, 20, 40, 60, 80, 65])
def test_delete_keeps_other_keys(victim):
    keys = [50, 30, 70, 20, 40, 60, 80, 65]
    tree = build(keys)
    removed = tree.delete(victim)
    assert removed["name"] == f"n{victim}"
    assert victim not in tree
    assert len(tree) == len(keys) - 1
    for key in keys:
        if key != victim:
            assert tree.search(key)["name"] == f"n{key}"


def test_delete_everything_empties_tree():
    keys = [4, 2, 6, 1, 3, 5, 7]
    tree = build(keys)
    for key in keys:
        tree.delete(key)
    assert len(tree) == 0
    assert tree.format() == "||+: NULL\n"


def test_format_balanced():
    tree = build([2, 1, 3])
    assert tree.format() == "....||R:  3\n||+:  2\n....||L:  1\n"


def test_format_shows_missing_child():
    tree = build([2, 3])
    assert tree.format() == "....||R:  3\n||+:  2\n....||L: NULL\n"


def test_clear():
    tree = build([1, 2, 3])
    tree.clear()
    assert len(tree) == 0
    assert 2 not in tree