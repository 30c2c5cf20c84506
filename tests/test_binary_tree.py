import pytest

from algokit.binary_tree import (
    TreeNode,
    from_level_order,
    inorder,
    inorder_iterative,
    level_order,
    levels,
    postorder,
    postorder_one_stack,
    postorder_two_stacks,
    preorder,
    preorder_iterative,
)

SHAPES = [
    [1, 2, 3, 4, 5, 6, 7],
    [1, None, 2, 3],
    [5, 3, 8, 1, None, 7, 9, None, 2],
    [1, 2, None, 3, None, 4],
    [42],
]


def test_full_tree_inorder():
    root = from_level_order([1, 2, 3, 4, 5, 6, 7])
    assert inorder(root) == [4, 2, 5, 1, 6, 3, 7]


def test_full_tree_levels():
    root = from_level_order([1, 2, 3, 4, 5, 6, 7])
    assert levels(root) == [[1], [2, 3], [4, 5, 6, 7]]


def test_from_level_order_skips_holes():
    root = from_level_order([1, None, 2, 3])
    assert root.left is None
    assert root.right.val == 2
    assert root.right.left.val == 3
    assert root.right.right is None


def test_from_level_order_empty():
    assert from_level_order([]) is None
    assert from_level_order([None, 1]) is None


def test_manual_tree():
    root = TreeNode(2, TreeNode(1), TreeNode(3))
    assert preorder(root) == [root.val, root.left.val, root.right.val]
    assert postorder(root) == [root.left.val, root.right.val, root.val]


def test_bst_inorder_is_sorted():
    values = [4, 2, 6, 1, 3, 5, 7]
    root = from_level_order(values)
    assert inorder(root) == sorted(values)
    assert inorder_iterative(root) == sorted(values)


@pytest.mark.parametrize("shape", SHAPES)
def test_iterative_matches_recursive(shape):
    root = from_level_order(shape)
    assert inorder_iterative(root) == inorder(root)
    assert preorder_iterative(root) == preorder(root)
    assert postorder_two_stacks(root) == postorder(root)
    assert postorder_one_stack(root) == postorder(root)


@pytest.mark.parametrize("shape", SHAPES)
def test_traversals_visit_every_value_once(shape):
    root = from_level_order(shape)
    expected = sorted(v for v in shape if v is not None)
    for traversal in (inorder, preorder, postorder, level_order):
        assert sorted(traversal(root)) == expected


@pytest.mark.parametrize("shape", SHAPES)
def test_root_positions(shape):
    root = from_level_order(shape)
    assert preorder(root)[0] == root.val
    assert postorder(root)[-1] == root.val
    assert levels(root)[0] == [root.val]


@pytest.mark.parametrize("shape", SHAPES)
def test_level_order_flattens_levels(shape):
    root = from_level_order(shape)
    assert level_order(root) == [v for level in levels(root) for v in level]


def test_empty_tree_traversals():
    for traversal in (
        inorder,
        preorder,
        postorder,
        inorder_iterative,
        preorder_iterative,
        postorder_two_stacks,
        postorder_one_stack,
        level_order,
        levels,
    ):
        assert traversal(None) == []


def test_nodes_hash_by_identity():
    first, second = TreeNode(1), TreeNode(1)
    assert first != second
    assert len({first, second}) == 2