import random

import pytest

from algonotes.bplus_tree import BPlusTree


def _source_tree():
    tree = BPlusTree()
    for key in [5, 3, 8, 1, 9]:
        tree.insert(key)
    return tree


def test_source_example_layout():
    assert _source_tree().preorder_keys() == [5, 1, 3, 5, 8, 9]


def test_source_example_search():
    tree = _source_tree()
    assert tree.search(5) is True
    assert tree.search(7) is False


def test_empty_tree():
    tree = BPlusTree()
    assert tree.search(1) is False
    assert tree.preorder_keys() == []
    assert list(tree) == []


def test_single_key():
    tree = BPlusTree()
    tree.insert(42)
    assert tree.preorder_keys() == [42]
    assert 42 in tree


@pytest.mark.parametrize("order", [1, 2, 3, 4, 7])
def test_many_keys_in_order_and_found(order):
    rng = random.Random(order)
    keys = rng.sample(range(10_000), 500)
    tree = BPlusTree(order)
    for key in keys:
        tree.insert(key)
    assert list(tree) == sorted(keys)
    assert all(tree.search(key) for key in keys)
    missing = set(range(10_000)) - set(keys)
    assert not any(tree.search(key) for key in list(missing)[:200])


def test_ascending_and_descending_inserts():
    for keys in (list(range(100)), list(range(100, 0, -1))):
        tree = BPlusTree()
        for key in keys:
            tree.insert(key)
        assert list(tree) == sorted(keys)
        assert all(key in tree for key in keys)


def test_duplicates_are_kept():
    tree = BPlusTree()
    keys = [4, 4, 2, 4, 2, 9, 9, 1]
    for key in keys:
        tree.insert(key)
    assert list(tree) == sorted(keys)
    assert all(tree.search(key) for key in keys)
    assert not tree.search(3)


def test_preorder_holds_every_key():
    tree = BPlusTree()
    keys = list(range(0, 60, 3))
    for key in keys:
        tree.insert(key)
    assert set(keys) <= set(tree.preorder_keys())


def test_invalid_order_rejected():
    with pytest.raises(ValueError):
        BPlusTree(0)