"""Binary tree nodes and the classic depth-first and breadth-first traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare and hash by identity."""

    val: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


_MISSING = object()


def from_level_order(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from level-order values where None marks an absent child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        value = next(items, _MISSING)
        if value is _MISSING:
            break
        if value is not None:
            node.left = TreeNode(value)
            queue.append(node.left)
        value = next(items, _MISSING)
        if value is _MISSING:
            break
        if value is not None:
            node.right = TreeNode(value)
            queue.append(node.right)
    return root


def inorder(root: TreeNode | None) -> list:
    """Values in left, node, right order."""
    if root is None:
        return []
    return inorder(root.left) + [root.val] + inorder(root.right)


def preorder(root: TreeNode | None) -> list:
    """Values in node, left, right order."""
    if root is None:
        return []
    return [root.val] + preorder(root.left) + preorder(root.right)


def postorder(root: TreeNode | None) -> list:
    """Values in left, right, node order."""
    if root is None:
        return []
    return postorder(root.left) + postorder(root.right) + [root.val]


def inorder_iterative(root: TreeNode | None) -> list:
    """Inorder traversal with an explicit stack."""
    result = []
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
        else:
            current = stack.pop()
            result.append(current.val)
            current = current.right
    return result


def preorder_iterative(root: TreeNode | None) -> list:
    """Preorder traversal with an explicit stack."""
    if root is None:
        return []
    result = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder_two_stacks(root: TreeNode | None) -> list:
    """Postorder traversal: node, right, left order reversed."""
    if root is None:
        return []
    reversed_order = []
    stack = [root]
    while stack:
        node = stack.pop()
        reversed_order.append(node.val)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    reversed_order.reverse()
    return reversed_order


def postorder_one_stack(root: TreeNode | None) -> list:
    """Postorder traversal with a single stack and the last visited node."""
    result = []
    stack: list[TreeNode] = []
    current = root
    last_visited: TreeNode | None = None
    while stack or current is not None:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        top = stack[-1]
        if top.right is not None and last_visited is not top.right:
            current = top.right
        else:
            result.append(top.val)
            last_visited = stack.pop()
    return result


def level_order(root: TreeNode | None) -> list:
    """Values level by level, left to right."""
    return [value for level in levels(root) for value in level]


def levels(root: TreeNode | None) -> list[list]:
    """Values grouped by depth, each level left to right."""
    result: list[list] = []
    if root is None:
        return result
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        result.append(level)
    return result