from hypothesis import given
from hypothesis import strategies as st

from algodrills.trees import (
    TreeNode,
    binary_tree_paths,
    diameter_of_binary_tree,
    is_balanced,
    is_same_tree,
    max_depth,
    path_sum,
    tree_from_list,
)

level_orders = st.lists(
    st.one_of(st.none(), st.integers(min_value=-5, max_value=5)), max_size=15
)


def _chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, left=root)
    return root


def _count_leaves(node):
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return _count_leaves(node.left) + _count_leaves(node.right)


def test_tree_from_list_shape():
    root = tree_from_list([1, 2, 3, None, 4])
    assert root.val == 1
    assert root.left.val == 2
    assert root.right.val == 3
    assert root.left.left is None
    assert root.left.right.val == 4
    assert root.right.left is None and root.right.right is None


def test_tree_from_list_empty_and_null_root():
    assert tree_from_list([]) is None
    assert tree_from_list([None, 1]) is None


def test_is_same_tree_cases():
    assert is_same_tree(None, None) is True
    assert is_same_tree(tree_from_list([1, 2, 3]), tree_from_list([1, 2, 3])) is True
    assert is_same_tree(tree_from_list([1, 2]), tree_from_list([1, None, 2])) is False
    assert is_same_tree(tree_from_list([1, 2, 1]), tree_from_list([1, 1, 2])) is False
    assert is_same_tree(tree_from_list([1]), None) is False


@given(level_orders)
def test_is_same_tree_reflexive(values):
    assert is_same_tree(tree_from_list(values), tree_from_list(values)) is True


def test_max_depth_of_chain():
    values = [4, 7, 1, 9, 2]
    assert max_depth(_chain(values)) == len(values)
    assert max_depth(None) == 0


def test_is_balanced_cases():
    assert is_balanced(None) is True
    assert is_balanced(tree_from_list([1, 2, 3, 4, 5, 6, 7])) is True
    assert is_balanced(_chain([1, 2, 3])) is False


@given(level_orders)
def test_is_balanced_root_heights(values):
    root = tree_from_list(values)
    if root is not None and is_balanced(root):
        assert abs(max_depth(root.left) - max_depth(root.right)) <= 1
        assert is_balanced(root.left) and is_balanced(root.right)


def test_path_sum_worked_example():
    root = tree_from_list([5, 4, 8, 11, None, 13, 4, 7, 2, None, None, 5, 1])
    assert path_sum(root, 22) == [[5, 4, 11, 2], [5, 8, 4, 5]]


def test_path_sum_empty_tree():
    assert path_sum(None, 0) == []


@given(level_orders, st.integers(min_value=-10, max_value=10))
def test_path_sum_paths_sum_to_target(values, target):
    root = tree_from_list(values)
    result = path_sum(root, target)
    assert all(sum(path) == target for path in result)
    assert all(path[0] == root.val for path in result)
    assert len(result) <= _count_leaves(root)


def test_binary_tree_paths_worked_example():
    assert binary_tree_paths(tree_from_list([1, 2, 3, None, 5])) == ["1->2->5", "1->3"]


def test_binary_tree_paths_empty_tree():
    assert binary_tree_paths(None) == []


@given(level_orders)
def test_binary_tree_paths_one_per_leaf(values):
    root = tree_from_list(values)
    paths = binary_tree_paths(root)
    assert len(paths) == _count_leaves(root)
    if root is not None:
        assert all(p.split("->")[0] == str(root.val) for p in paths)
        assert max(len(p.split("->")) for p in paths) == max_depth(root)


def test_diameter_worked_example():
    assert diameter_of_binary_tree(tree_from_list([1, 2, 3, 4, 5])) == 3


def test_diameter_of_chain_and_empty():
    values = [3, 1, 4, 1, 5, 9]
    assert diameter_of_binary_tree(_chain(values)) == len(values) - 1
    assert diameter_of_binary_tree(None) == 0


@given(level_orders)
def test_diameter_bounds(values):
    root = tree_from_list(values)
    if root is None:
        assert diameter_of_binary_tree(root) == 0
    else:
        depth = max_depth(root)
        diameter = diameter_of_binary_tree(root)
        assert depth - 1 <= diameter <= 2 * (depth - 1)