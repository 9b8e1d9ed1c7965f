"""Binary tree problems: depth, balance, diameter, path sums, width and traversals."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

_END = object()


@dataclass
class TreeNode:
    """A binary tree node."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def build_tree(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from level-order values, with None for missing children."""
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


def _children(node: TreeNode) -> list[TreeNode]:
    return [child for child in (node.left, node.right) if child is not None]


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def is_balanced(root: TreeNode | None) -> bool:
    """Return True if no node's subtree heights differ by more than one."""

    def height(node: TreeNode | None) -> int:
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        if left < 0 or right < 0 or abs(left - right) > 1:
            return -1
        return 1 + max(left, right)

    return height(root) >= 0


def diameter(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest path between any two nodes."""
    best = 0

    def height(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        best = max(best, left + right + 1)
        return 1 + max(left, right)

    height(root)
    return best


def max_path_sum(root: TreeNode | None) -> int:
    """Return the largest sum of values along any non-empty path in the tree."""
    if root is None:
        raise ValueError("an empty tree has no paths")
    best = -math.inf

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, left + right + node.val)
        return node.val + max(left, right)

    gain(root)
    return best


def max_leaf_path_sum(root: TreeNode | None) -> int:
    """Return the largest sum along a path joining two leaves.

    Only paths that pass through a node with both children count.
    """
    best = -math.inf

    def gain(node: TreeNode | None) -> float:
        nonlocal best
        if node is None:
            return -math.inf
        if node.left is None and node.right is None:
            return node.val
        left = gain(node.left)
        right = gain(node.right)
        best = max(best, left + right + node.val)
        return node.val + max(left, right)

    gain(root)
    if best == -math.inf:
        raise ValueError("tree has no node with two children")
    return best


def width_of_binary_tree(root: TreeNode | None) -> int:
    """Return the widest level, counting the gaps between its end nodes."""
    if root is None:
        return 0
    best = 1
    level = [(root, 0)]
    while level:
        first = level[0][1]
        best = max(best, level[-1][1] - first + 1)
        level = [
            (child, 2 * (position - first) + offset)
            for node, position in level
            for child, offset in ((node.left, 1), (node.right, 2))
            if child is not None
        ]
    return best


def path_to_node(root: TreeNode | None, target: Any) -> list[Any]:
    """Return the values from the root to the first node holding ``target``.

    The search is pre-order, left before right. An empty list means no node
    holds the target.
    """
    path: list[Any] = []

    def search(node: TreeNode | None) -> bool:
        if node is None:
            return False
        path.append(node.val)
        if node.val == target or search(node.left) or search(node.right):
            return True
        path.pop()
        return False

    search(root)
    return path


def root_to_leaf_paths(root: TreeNode | None) -> list[list[Any]]:
    """Return the values along every root-to-leaf path, left to right."""
    paths: list[list[Any]] = []
    current: list[Any] = []

    def walk(node: TreeNode) -> None:
        current.append(node.val)
        children = _children(node)
        if not children:
            paths.append(list(current))
        for child in children:
            walk(child)
        current.pop()

    if root is not None:
        walk(root)
    return paths


def zigzag_level_order(root: TreeNode | None) -> list[list[Any]]:
    """Return the values level by level, alternating left-to-right and back."""
    levels: list[list[Any]] = []
    level = [root] if root is not None else []
    backwards = False
    while level:
        values = [node.val for node in level]
        levels.append(values[::-1] if backwards else values)
        backwards = not backwards
        level = [child for node in level for child in _children(node)]
    return levels