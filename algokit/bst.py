"""Binary search tree construction, queries, repair and validation."""

from __future__ import annotations

import math
from typing import Any, Iterable, Iterator

from algokit.binary_tree import TreeNode


def _node(value: Any) -> TreeNode:
    node = TreeNode(value)
    node.left = None
    node.right = None
    return node


def bst_from_preorder(preorder: Iterable[Any]) -> TreeNode | None:
    """Build the binary search tree whose preorder traversal is given."""
    values = list(preorder)
    index = 0

    def build(low: float, high: float) -> TreeNode | None:
        nonlocal index
        if index >= len(values) or not low <= values[index] <= high:
            return None
        node = _node(values[index])
        index += 1
        node.left = build(low, node.val)
        node.right = build(node.val, high)
        return node

    root = build(-math.inf, math.inf)
    if index != len(values):
        raise ValueError("values are not the preorder of a binary search tree")
    return root


def bst_ceil(root: TreeNode | None, x: Any) -> Any:
    """Smallest value not less than ``x``, or None if there is none."""
    best = None
    node = root
    while node is not None:
        if node.val == x:
            return x
        if node.val > x:
            best = node.val
            node = node.left
        else:
            node = node.right
    return best


def bst_floor(root: TreeNode | None, x: Any) -> Any:
    """Largest value not greater than ``x``, or None if there is none."""
    best = None
    node = root
    while node is not None:
        if node.val == x:
            return x
        if node.val > x:
            node = node.left
        else:
            best = node.val
            node = node.right
    return best


def bst_insert(root: TreeNode | None, key: Any) -> TreeNode:
    """Insert ``key`` and return the root; a key already present is left alone."""
    new = _node(key)
    if root is None:
        return new
    node = root
    while True:
        if key < node.val:
            if node.left is None:
                node.left = new
                break
            node = node.left
        elif key > node.val:
            if node.right is None:
                node.right = new
                break
            node = node.right
        else:
            break
    return root


def bst_min(root: TreeNode | None) -> TreeNode:
    """Node holding the smallest value."""
    if root is None:
        raise ValueError("bst_min() needs a non-empty tree")
    node = root
    while node.left is not None:
        node = node.left
    return node


def bst_delete(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Remove ``key`` if present and return the new root."""
    if root is None:
        return None
    if key < root.val:
        root.left = bst_delete(root.left, key)
    elif key > root.val:
        root.right = bst_delete(root.right, key)
    elif root.left is None:
        return root.right
    elif root.right is None:
        return root.left
    else:
        smallest = bst_min(root.right)
        root.val = smallest.val
        root.right = bst_delete(root.right, smallest.val)
    return root


def successor(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Node with the smallest value greater than ``key``, or None."""
    found = None
    node = root
    while node is not None:
        if node.val <= key:
            node = node.right
        else:
            found = node
            node = node.left
    return found


def predecessor(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Node with the largest value less than ``key``, or None."""
    found = None
    node = root
    while node is not None:
        if node.val < key:
            found = node
            node = node.right
        else:
            node = node.left
    return found


def predecessor_successor(
    root: TreeNode | None, key: Any
) -> tuple[TreeNode | None, TreeNode | None]:
    """Inorder predecessor and successor of ``key`` in one descent."""
    before = after = None
    node = root
    while node is not None and node.val != key:
        if node.val > key:
            after = node
            node = node.left
        else:
            before = node
            node = node.right
    if node is not None:
        probe = node.left
        while probe is not None:
            before = probe
            probe = probe.right
        probe = node.right
        while probe is not None:
            after = probe
            probe = probe.left
    return before, after


def largest_bst_size(root: TreeNode | None) -> int:
    """Number of nodes in the largest subtree that is a binary search tree."""
    if root is None:
        return 0
    best = 1

    def visit(node: TreeNode | None) -> tuple[bool, int, float, float]:
        nonlocal best
        if node is None:
            return True, 0, math.inf, -math.inf
        left_ok, left_size, left_low, left_high = visit(node.left)
        right_ok, right_size, right_low, right_high = visit(node.right)
        if not (left_ok and right_ok and left_high < node.val < right_low):
            return False, 0, 0, 0
        size = 1 + left_size + right_size
        best = max(best, size)
        return True, size, min(node.val, left_low), max(node.val, right_high)

    visit(root)
    return best


def bst_lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Lowest common ancestor of ``p`` and ``q``, steering by value."""
    node = root
    while node is not None:
        if p.val < node.val and q.val < node.val:
            node = node.left
        elif p.val > node.val and q.val > node.val:
            node = node.right
        else:
            return node
    return None


def _search_path(root: TreeNode | None, target: TreeNode) -> list[TreeNode]:
    path = []
    node = root
    while node is not None:
        path.append(node)
        if node is target:
            break
        node = node.left if node.val > target.val else node.right
    return path


def bst_lowest_common_ancestor_paths(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Lowest common ancestor found by comparing the search paths to ``p`` and ``q``."""
    answer = root
    for a, b in zip(_search_path(root, p), _search_path(root, q)):
        if a.val != b.val:
            break
        answer = a
    return answer


def _inorder_nodes(root: TreeNode | None) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def recover_bst(root: TreeNode | None) -> None:
    """Swap back, in place, the values of two nodes exchanged by mistake."""
    first = second = previous = None
    for node in _inorder_nodes(root):
        if previous is not None and node.val < previous.val:
            if first is None:
                first = previous
            second = node
        previous = node
    if first is not None:
        first.val, second.val = second.val, first.val


class BSTBidirectionalIterator:
    """Walks a binary search tree upward from the smallest and downward from the largest."""

    def __init__(self, root: TreeNode | None) -> None:
        self._ascending: list[TreeNode] = []
        self._descending: list[TreeNode] = []
        self._push_left(root)
        self._push_right(root)

    def _push_left(self, node: TreeNode | None) -> None:
        while node is not None:
            self._ascending.append(node)
            node = node.left

    def _push_right(self, node: TreeNode | None) -> None:
        while node is not None:
            self._descending.append(node)
            node = node.right

    def next(self) -> Any:
        """Next value in ascending order."""
        if not self._ascending:
            raise StopIteration
        node = self._ascending.pop()
        self._push_left(node.right)
        return node.val

    def before(self) -> Any:
        """Next value in descending order."""
        if not self._descending:
            raise StopIteration
        node = self._descending.pop()
        self._push_right(node.left)
        return node.val


def two_sum_bst(root: TreeNode | None, k: Any) -> bool:
    """Tell whether two different nodes hold values summing to ``k``."""
    if root is None:
        return False
    walker = BSTBidirectionalIterator(root)
    low, high = walker.next(), walker.before()
    while low < high:
        total = low + high
        if total == k:
            return True
        if total < k:
            low = walker.next()
        else:
            high = walker.before()
    return False


def is_valid_bst(root: TreeNode | None) -> bool:
    """Tell whether every left value is smaller and every right value larger than its ancestor."""

    def check(node: TreeNode | None, low: float, high: float) -> bool:
        if node is None:
            return True
        if not low < node.val < high:
            return False
        return check(node.left, low, node.val) and check(node.right, node.val, high)

    return check(root, -math.inf, math.inf)