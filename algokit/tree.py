"""Binary tree nodes and algorithms over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.val!r})"


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, ``None`` marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        parent = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(parent, side, child)
                pending.append(child)
    return root


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Return whether both trees have the same shape and values."""
    if p is None or q is None:
        return p is q
    return (
        p.val == q.val
        and is_same_tree(p.right, q.right)
        and is_same_tree(p.left, q.left)
    )


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Return the values of each level, top to bottom, left to right."""
    levels: list[list[int]] = []
    level = [root] if root is not None else []
    while level:
        levels.append([node.val for node in level])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def _balance(root: TreeNode | None) -> tuple[bool, int]:
    if root is None:
        return True, 0
    left_ok, left_height = _balance(root.left)
    right_ok, right_height = _balance(root.right)
    balanced = left_ok and right_ok and abs(left_height - right_height) < 2
    return balanced, 1 + max(left_height, right_height)


def is_balanced(root: TreeNode | None) -> bool:
    """Return whether every node's subtrees differ in height by at most one."""
    return _balance(root)[0]


def right_side_view(root: TreeNode | None) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    return [level[-1] for level in level_order(root)]


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree(root.left)
        invert_tree(root.right)
    return root


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the lowest node of a binary search tree splitting ``p`` and ``q``."""
    while root is not None:
        if p.val < root.val and q.val < root.val:
            root = root.left
        elif p.val > root.val and q.val > root.val:
            root = root.right
        else:
            return root
    return None


def diameter_of_binary_tree(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def height(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left, right = height(node.left), height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    height(root)
    return best


def is_subtree(root: TreeNode | None, sub_root: TreeNode | None) -> bool:
    """Return whether some node of ``root`` starts a copy of ``sub_root``."""
    if sub_root is None:
        return True
    if root is None:
        return False
    return (
        is_same_tree(root, sub_root)
        or is_subtree(root.left, sub_root)
        or is_subtree(root.right, sub_root)
    )


def good_nodes(root: TreeNode | None) -> int:
    """Count nodes whose value is at least every value on the path from the root."""

    def count(node: TreeNode | None, highest: float) -> int:
        if node is None:
            return 0
        good = 1 if node.val >= highest else 0
        highest = max(highest, node.val)
        return good + count(node.left, highest) + count(node.right, highest)

    return count(root, float("-inf"))