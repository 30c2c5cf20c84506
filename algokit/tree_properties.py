"""Structural properties of binary trees: heights, balance, paths and ancestors."""

from __future__ import annotations

import math
from collections import deque
from typing import Any

from algokit.binary_tree import TreeNode


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtree heights differ by at most one.

    Recomputes heights at every node.
    """
    if root is None:
        return True
    if abs(height(root.left) - height(root.right)) > 1:
        return False
    return is_balanced(root.left) and is_balanced(root.right)


def _balanced_height(root: TreeNode | None) -> int:
    """Height of the tree, or -1 as soon as an unbalanced node is found."""
    if root is None:
        return 0
    left = _balanced_height(root.left)
    if left < 0:
        return -1
    right = _balanced_height(root.right)
    if right < 0 or abs(left - right) > 1:
        return -1
    return 1 + max(left, right)


def is_balanced_fast(root: TreeNode | None) -> bool:
    """Same as :func:`is_balanced` in a single bottom-up pass."""
    return _balanced_height(root) >= 0


def is_same_tree(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.val == second.val
        and is_same_tree(first.left, second.left)
        and is_same_tree(first.right, second.right)
    )


def _mirrored(left: TreeNode | None, right: TreeNode | None) -> bool:
    if left is None and right is None:
        return True
    if left is None or right is None:
        return False
    return (
        left.val == right.val
        and _mirrored(left.left, right.right)
        and _mirrored(left.right, right.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    return _mirrored(root, root)


def max_depth(root: TreeNode | None) -> int:
    """Depth of the deepest node, counting the root as 1."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def max_path_sum(root: TreeNode | None) -> int:
    """Largest sum of values along any path between two nodes."""
    if root is None:
        raise ValueError("max_path_sum() needs a non-empty tree")
    best = -math.inf

    def gain(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, node.val + left + right)
        return node.val + max(left, right)

    gain(root)
    return best


def _edge_height(node: TreeNode | None, go_left: bool) -> int:
    count = 0
    while node is not None:
        count += 1
        node = node.left if go_left else node.right
    return count


def count_complete_nodes(root: TreeNode | None) -> int:
    """Number of nodes in a complete binary tree, skipping perfect subtrees."""
    if root is None:
        return 0
    left = _edge_height(root, True)
    if left == _edge_height(root, False):
        return (1 << left) - 1
    return 1 + count_complete_nodes(root.left) + count_complete_nodes(root.right)


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Deepest node having both ``p`` and ``q`` as descendants (a node descends from itself)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def _node_path(root: TreeNode | None, target: TreeNode) -> list[TreeNode] | None:
    if root is None:
        return None
    if root is target:
        return [root]
    for child in (root.left, root.right):
        below = _node_path(child, target)
        if below is not None:
            return [root, *below]
    return None


def lowest_common_ancestor_paths(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Lowest common ancestor found by comparing the root paths to ``p`` and ``q``.

    Falls back to the root when a node is missing.
    """
    on_p_path = set(_node_path(root, p) or ())
    for node in reversed(_node_path(root, q) or ()):
        if node in on_p_path:
            return node
    return root


def path_to_value(root: TreeNode | None, target: Any) -> list:
    """Values from the root down to the first node holding target; empty if absent."""
    reversed_path: list = []

    def find(node: TreeNode | None) -> bool:
        if node is None:
            return False
        if node.val == target or find(node.left) or find(node.right):
            reversed_path.append(node.val)
            return True
        return False

    find(root)
    reversed_path.reverse()
    return reversed_path


def path_to_value_backtracking(root: TreeNode | None, target: Any) -> list:
    """Same as :func:`path_to_value`, building the path forward and backtracking."""
    path: list = []

    def find(node: TreeNode | None) -> bool:
        if node is None:
            return False
        path.append(node.val)
        if node.val == target or find(node.left) or find(node.right):
            return True
        path.pop()
        return False

    find(root)
    return path


def nodes_at_distance(root: TreeNode | None, target: TreeNode, k: int) -> list:
    """Values of all nodes exactly ``k`` edges away from ``target``."""
    if root is None or k < 0:
        return []
    parent: dict[TreeNode, TreeNode] = {}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is not None:
                parent[child] = node
                queue.append(child)

    seen = {target}
    frontier = [target]
    for _ in range(k):
        following = []
        for node in frontier:
            for neighbour in (node.left, node.right, parent.get(node)):
                if neighbour is not None and neighbour not in seen:
                    seen.add(neighbour)
                    following.append(neighbour)
        frontier = following
        if not frontier:
            break
    else:
        return [node.val for node in frontier]
    return []


def max_width(root: TreeNode | None) -> int:
    """Widest level, counting the gaps between its outermost nodes as in a full tree."""
    if root is None:
        return 0
    best = 1
    level = [(root, 1)]
    while level:
        best = max(best, level[-1][1] - level[0][1] + 1)
        following = []
        for node, index in level:
            if node.left is not None:
                following.append((node.left, 2 * index))
            if node.right is not None:
                following.append((node.right, 2 * index + 1))
        level = following
    return best