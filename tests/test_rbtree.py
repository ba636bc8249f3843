import random

import pytest

from cccontainers.rbtree import Color, RBError, RBTree


def _build(keys, cmp=None):
    tree = RBTree(cmp)
    for key in keys:
        tree.insert(key, f"v{key}")
    return tree


def _shuffled(count, seed):
    keys = list(range(count))
    random.Random(seed).shuffle(keys)
    return keys


def test_empty_tree():
    tree = RBTree()
    assert len(tree) == 0
    assert tree.minimum() is None
    assert tree.maximum() is None
    assert tree.find(1) is None
    assert tree.root is None
    assert tree.check() is RBError.OK


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_insert_keeps_invariants_and_order(seed):
    keys = _shuffled(200, seed)
    tree = RBTree()
    for key in keys:
        tree.insert(key, key * 10)
        assert tree.check() is RBError.OK
    assert len(tree) == 200
    assert [n.key for n in tree.nodes()] == sorted(keys)
    assert all(n.value == n.key * 10 for n in tree.nodes())


def test_insert_existing_key_replaces_value():
    tree = _build([5, 3, 8])
    first = tree.find(3)
    again = tree.insert(3, "new")
    assert again is first
    assert len(tree) == 3
    assert tree.find(3).value == "new"


def test_find_returns_node_or_none():
    tree = _build([10, 20, 30])
    assert tree.find(20).value == "v20"
    assert tree.find(25) is None


def test_minimum_and_maximum():
    keys = _shuffled(50, 7)
    tree = _build(keys)
    assert tree.minimum().key == min(keys)
    assert tree.maximum().key == max(keys)


def test_successor_and_predecessor_walk():
    keys = _shuffled(40, 11)
    tree = _build(keys)
    ordered = sorted(keys)
    for lower, upper in zip(ordered, ordered[1:]):
        assert tree.successor(tree.find(lower)).key == upper
        assert tree.predecessor(tree.find(upper)).key == lower
    assert tree.successor(tree.maximum()) is None
    assert tree.predecessor(tree.minimum()) is None
    assert tree.successor(None) is None
    assert tree.predecessor(None) is None


@pytest.mark.parametrize("seed", [4, 5])
def test_delete_keeps_invariants(seed):
    keys = _shuffled(150, seed)
    tree = _build(keys)
    removal = list(keys)
    random.Random(seed + 100).shuffle(removal)
    remaining = set(keys)
    for key in removal:
        tree.delete(tree.find(key))
        remaining.discard(key)
        assert tree.check() is RBError.OK
        assert len(tree) == len(remaining)
        assert tree.find(key) is None
    assert [n.key for n in tree.nodes()] == []
    assert tree.root is None


def test_delete_partial_preserves_others():
    tree = _build(range(30))
    for key in range(0, 30, 3):
        tree.delete(tree.find(key))
    expected = [k for k in range(30) if k % 3]
    assert [n.key for n in tree.nodes()] == expected
    assert tree.check() is RBError.OK


def test_delete_rejects_missing_node():
    tree = _build([1, 2])
    with pytest.raises(ValueError):
        tree.delete(None)


def test_nodes_allows_deleting_current():
    tree = _build(range(20))
    for node in tree.nodes():
        if node.key % 2:
            tree.delete(node)
    assert [n.key for n in tree.nodes()] == list(range(0, 20, 2))
    assert tree.check() is RBError.OK


def test_custom_comparator_reverses_order():
    tree = _build(_shuffled(25, 9), cmp=lambda a, b: b - a)
    assert [n.key for n in tree.nodes()] == sorted(range(25), reverse=True)
    assert tree.minimum().key == 24
    assert tree.check() is RBError.OK


def test_clear_empties_tree():
    tree = _build(range(10))
    tree.clear()
    assert len(tree) == 0
    assert list(tree.nodes()) == []
    tree.insert(3, "x")
    assert [n.key for n in tree.nodes()] == [3]
    assert tree.check() is RBError.OK


def test_root_is_black():
    tree = _build(_shuffled(60, 13))
    assert tree.root.color == Color.BLACK


def test_check_detects_bad_order():
    tree = _build(range(10))
    low, high = tree.minimum(), tree.maximum()
    low.key, high.key = high.key, low.key
    assert tree.check() is RBError.TREE_STRUCTURE


def test_check_detects_consecutive_red():
    tree = _build(range(10))
    child = next(n for n in tree.nodes() if n is not tree.root)
    child.color = Color.RED
    child.parent.color = Color.RED
    assert tree.check() is RBError.CONSECUTIVE_RED


def test_check_detects_black_height_mismatch():
    tree = _build(range(3))
    red = [n for n in tree.nodes() if n.color == Color.RED]
    assert red
    red[0].color = Color.BLACK
    assert tree.check() is RBError.BLACK_HEIGHT