"""Building binary trees from traversals and encoding them as text."""

from __future__ import annotations

import re
from collections import Counter, deque
from typing import Any, Sequence

from algokit.binary_tree import TreeNode

_DASHED = re.compile(r"\d+(?:-+\d+)*")
_DEPTH_AND_VALUE = re.compile(r"(-*)(\d+)")


def _node(value: Any) -> TreeNode:
    node = TreeNode(value)
    node.left = None
    node.right = None
    return node


def _check_traversals(first: list, second: list) -> None:
    if len(first) != len(second):
        raise ValueError("traversals must have the same length")
    if Counter(first) != Counter(second):
        raise ValueError("traversals must hold the same values")


def build_from_preorder_inorder(
    preorder: Sequence[Any], inorder: Sequence[Any]
) -> TreeNode | None:
    """Rebuild a tree of distinct values from its preorder and inorder traversals."""
    pre, ino = list(preorder), list(inorder)
    _check_traversals(pre, ino)
    position = {value: index for index, value in enumerate(ino)}

    def build(pre_start: int, in_start: int, size: int) -> TreeNode | None:
        if size <= 0:
            return None
        value = pre[pre_start]
        split = position[value]
        left_size = split - in_start
        if not 0 <= left_size < size:
            raise ValueError("traversals do not describe the same tree")
        node = _node(value)
        node.left = build(pre_start + 1, in_start, left_size)
        node.right = build(pre_start + left_size + 1, split + 1, size - left_size - 1)
        return node

    return build(0, 0, len(pre))


def build_from_postorder_inorder(
    inorder: Sequence[Any], postorder: Sequence[Any]
) -> TreeNode | None:
    """Rebuild a tree of distinct values from its inorder and postorder traversals."""
    ino, post = list(inorder), list(postorder)
    _check_traversals(ino, post)
    position = {value: index for index, value in enumerate(ino)}

    def build(post_end: int, in_start: int, size: int) -> TreeNode | None:
        if size <= 0:
            return None
        value = post[post_end]
        split = position[value]
        left_size = split - in_start
        if not 0 <= left_size < size:
            raise ValueError("traversals do not describe the same tree")
        right_size = size - left_size - 1
        node = _node(value)
        node.right = build(post_end - 1, split + 1, right_size)
        node.left = build(post_end - 1 - right_size, in_start, left_size)
        return node

    return build(len(post) - 1, 0, len(post))


def recover_from_preorder(text: str) -> TreeNode | None:
    """Rebuild a tree from a preorder listing where dashes give each node's depth.

    A node with a single child has it on the left.
    """
    if not text:
        return None
    if not _DASHED.fullmatch(text):
        raise ValueError(f"malformed preorder text: {text!r}")
    root: TreeNode | None = None
    stack: list[TreeNode] = []
    for match in _DEPTH_AND_VALUE.finditer(text):
        depth = len(match.group(1))
        node = _node(int(match.group(2)))
        if root is None:
            root = node
            stack.append(node)
            continue
        if not 1 <= depth <= len(stack):
            raise ValueError(f"node {node.val} at depth {depth} has no parent")
        del stack[depth:]
        parent = stack[-1]
        if parent.left is None:
            parent.left = node
        elif parent.right is None:
            parent.right = node
        else:
            raise ValueError(f"node {parent.val} would get a third child")
        stack.append(node)
    return root


def serialize(root: TreeNode | None) -> str:
    """Encode a tree level by level as comma-terminated values, ``#`` for gaps."""
    parts: list[str] = []
    queue: deque[TreeNode | None] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            parts.append("#")
            continue
        parts.append(str(node.val))
        queue.append(node.left)
        queue.append(node.right)
    return "".join(f"{part}," for part in parts)


def _parse(field: str) -> int:
    try:
        return int(field)
    except ValueError:
        raise ValueError(f"bad value in encoded tree: {field!r}") from None


def deserialize(data: str) -> TreeNode | None:
    """Decode the text written by :func:`serialize` back into a tree."""
    fields = data.split(",")
    if fields and fields[-1] == "":
        fields.pop()
    if not fields or fields[0] == "#":
        return None
    values = iter(fields)
    root = _node(_parse(next(values)))
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            field = next(values, None)
            if field is None:
                return root
            if field != "#":
                child = _node(_parse(field))
                setattr(node, side, child)
                queue.append(child)
    return root