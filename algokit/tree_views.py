"""Views of a binary tree: boundary, side, top and vertical orders, and flattening."""

from __future__ import annotations

from collections import defaultdict, deque

from algokit.binary_tree import TreeNode


def boundary_traversal(root: TreeNode | None) -> list:
    """Left edge, then leaves left to right, then the right edge back up to the root.

    The walk closes the loop, so the root value appears first and last when the
    tree has more than one node.
    """
    if root is None:
        return []
    result = []
    node: TreeNode | None = root
    while node is not None:
        result.append(node.val)
        node = node.left if node.left is not None else node.right
    result.pop()

    def leaves(current: TreeNode | None) -> None:
        if current is None:
            return
        if current.left is None and current.right is None:
            result.append(current.val)
        leaves(current.left)
        leaves(current.right)

    leaves(root)

    right_edge = []
    node = root
    while node is not None:
        right_edge.append(node.val)
        node = node.right if node.right is not None else node.left
    right_edge.pop()
    result.extend(reversed(right_edge))
    return result


def flatten(root: TreeNode | None) -> None:
    """Rearrange the tree in place into a right-going chain in preorder."""
    following: TreeNode | None = None

    def visit(node: TreeNode | None) -> None:
        nonlocal following
        if node is None:
            return
        visit(node.right)
        visit(node.left)
        node.right = following
        node.left = None
        following = node

    visit(root)


def flatten_in_place(root: TreeNode | None) -> None:
    """Same as :func:`flatten` using constant extra space."""
    current = root
    while current is not None:
        if current.left is not None:
            rightmost = current.left
            while rightmost.right is not None:
                rightmost = rightmost.right
            rightmost.right = current.right
            current.right = current.left
            current.left = None
        current = current.right


def _morris(root: TreeNode | None, preorder: bool) -> list:
    result = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.val)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            if preorder:
                result.append(current.val)
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            if not preorder:
                result.append(current.val)
            current = current.right
    return result


def morris_inorder(root: TreeNode | None) -> list:
    """Inorder values using temporary threads instead of a stack; the tree is restored."""
    return _morris(root, preorder=False)


def morris_preorder(root: TreeNode | None) -> list:
    """Preorder values using temporary threads instead of a stack; the tree is restored."""
    return _morris(root, preorder=True)


def right_view(root: TreeNode | None) -> list:
    """Rightmost value of every level, top to bottom."""
    result = []
    if root is None:
        return result
    queue = deque([root])
    while queue:
        result.append(queue[0].val)
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.right is not None:
                queue.append(node.right)
            if node.left is not None:
                queue.append(node.left)
    return result


def top_view(root: TreeNode | None) -> list:
    """Values seen from above, one per column, left to right."""
    if root is None:
        return []
    first_seen: dict[int, object] = {}
    queue = deque([(root, 0)])
    while queue:
        node, column = queue.popleft()
        first_seen.setdefault(column, node.val)
        if node.left is not None:
            queue.append((node.left, column - 1))
        if node.right is not None:
            queue.append((node.right, column + 1))
    return [first_seen[column] for column in sorted(first_seen)]


def vertical_traversal(root: TreeNode | None) -> list[list]:
    """Values column by column; within a column by depth, ties broken by value."""
    columns: defaultdict[int, defaultdict[int, list]] = defaultdict(lambda: defaultdict(list))

    def visit(node: TreeNode | None, column: int, depth: int) -> None:
        if node is None:
            return
        visit(node.left, column - 1, depth + 1)
        visit(node.right, column + 1, depth + 1)
        columns[column][depth].append(node.val)

    visit(root, 0, 0)
    return [
        [value for depth in sorted(columns[column]) for value in sorted(columns[column][depth])]
        for column in sorted(columns)
    ]