import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.btree import BTree, BTreeStats


def _check_structure(tree):
    leaf_depths = set()

    def visit(node, depth, is_root):
        assert len(node.keys) <= tree.max_keys
        assert node.keys == sorted(node.keys)
        if not is_root:
            assert len(node.keys) >= tree.max_keys // 2
        if node.leaf:
            assert node.children == []
            leaf_depths.add(depth)
        else:
            assert len(node.children) == len(node.keys) + 1
            for child in node.children:
                visit(child, depth + 1, False)

    visit(tree.root, 0, True)
    assert len(leaf_depths) == 1
    return leaf_depths.pop()


def test_invalid_max_keys():
    with pytest.raises(ValueError):
        BTree(4)
    with pytest.raises(ValueError):
        BTree(1)


def test_empty_tree_stats():
    tree = BTree()
    assert tree.stats() == BTreeStats(total_nodes=1, total_keys=0, height=0)
    assert list(tree) == []
    assert tree.search(7) is None


def test_root_split_worked_example():
    tree = BTree(3)
    for key in [1, 2, 3, 4]:
        tree.insert(key)
    assert tree.levels() == [(0, [2]), (1, [1]), (1, [3, 4])]


def test_search_finds_inserted_keys():
    tree = BTree()
    keys = [50, 20, 70, 10, 30, 60, 80, 25, 35, 65]
    for key in keys:
        tree.insert(key)
    height = tree.stats().height
    for key in keys:
        depth = tree.search(key)
        assert depth is not None
        assert 1 <= depth <= height + 1
    assert tree.search(999) is None
    assert tree.search(-5) is None


def test_root_keys_found_at_depth_one():
    tree = BTree()
    for key in range(20):
        tree.insert(key)
    for key in tree.root.keys:
        assert tree.search(key) == 1


def test_duplicates_are_kept():
    tree = BTree()
    for _ in range(3):
        tree.insert(5)
    assert list(tree) == [5, 5, 5]
    assert tree.stats().total_keys == 3


def test_levels_start_with_root():
    tree = BTree()
    for key in range(10):
        tree.insert(key)
    level, keys = tree.levels()[0]
    assert level == 0
    assert keys == tree.root.keys


def test_stats_average():
    tree = BTree()
    for key in range(30):
        tree.insert(key)
    stats = tree.stats()
    assert stats.total_keys == 30
    assert stats.average_keys == stats.total_keys / stats.total_nodes
    assert stats.height == _check_structure(tree)


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=200))
def test_order_and_structure(keys):
    tree = BTree()
    for key in keys:
        tree.insert(key)
    assert list(tree) == sorted(keys)
    assert tree.stats().total_keys == len(keys)
    _check_structure(tree)


@given(
    st.sampled_from([3, 5, 7]),
    st.lists(st.integers(min_value=0, max_value=500), max_size=150),
)
def test_other_orders(max_keys, keys):
    tree = BTree(max_keys)
    for key in keys:
        tree.insert(key)
    assert list(tree) == sorted(keys)
    depth = _check_structure(tree)
    assert tree.stats().height == depth
    for key in keys:
        assert tree.search(key) is not None