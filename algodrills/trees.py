"""Binary-tree exercises: comparison, balance, paths and diameter."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def tree_from_list(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, ``None`` marking an absent child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            value = next(items, _END)
            if value is _END:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def _balanced_height(node: TreeNode | None) -> int | None:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def _root_to_leaf(node: TreeNode | None, prefix: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
    if node is None:
        return
    path = (*prefix, node.val)
    if node.left is None and node.right is None:
        yield path
        return
    yield from _root_to_leaf(node.left, path)
    yield from _root_to_leaf(node.right, path)


def path_sum(root: TreeNode | None, target_sum: int) -> list[list[int]]:
    """Return the values of every root-to-leaf path summing to ``target_sum``."""
    return [list(path) for path in _root_to_leaf(root, ()) if sum(path) == target_sum]


def binary_tree_paths(root: TreeNode | None) -> list[str]:
    """Return every root-to-leaf path written as ``"a->b->c"``, left paths first."""
    return ["->".join(map(str, path)) for path in _root_to_leaf(root, ())]


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between any two nodes."""

    def measure(node: TreeNode | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_height, left_best = measure(node.left)
        right_height, right_best = measure(node.right)
        best = max(left_best, right_best, left_height + right_height)
        return max(left_height, right_height) + 1, best

    return measure(root)[1]