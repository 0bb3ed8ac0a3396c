import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.avl import (
    AVLNode,
    balance_factor,
    delete,
    height,
    inorder,
    insert,
    left_rotate,
    min_node,
    right_rotate,
)

int_lists = st.lists(st.integers(min_value=-200, max_value=200), max_size=60)


def build(values):
    root = None
    for value in values:
        root = insert(root, value)
    return root


def true_height(node):
    if node is None:
        return 0
    return max(true_height(node.left), true_height(node.right)) + 1


def check_avl(node):
    if node is None:
        return
    assert node.height == true_height(node)
    assert abs(balance_factor(node)) <= 1
    check_avl(node.left)
    check_avl(node.right)


def test_source_example_sorted():
    values = [4, 7, 6, 0, 2, 1, 8]
    root = build(values)
    assert inorder(root) == sorted(values)
    check_avl(root)


@given(int_lists)
def test_insert_keeps_avl_invariants(values):
    root = build(values)
    assert inorder(root) == sorted(set(values))
    check_avl(root)


def test_ascending_inserts_rotate_left():
    root = build([1, 2, 3])
    assert root.data == 2
    assert root.left.data == 1
    assert root.right.data == 3


def test_descending_inserts_rotate_right():
    root = build([3, 2, 1])
    assert root.data == 2
    check_avl(root)


def test_double_rotations():
    assert build([3, 1, 2]).data == 2
    assert build([1, 3, 2]).data == 2


def test_height_and_balance_of_none():
    assert height(None) == 0
    assert balance_factor(None) == 0


def test_manual_rotations_round_trip():
    root = AVLNode(1, right=AVLNode(2), height=2)
    rotated = left_rotate(root)
    assert rotated.data == 2
    assert rotated.left.data == 1
    assert rotated.height == true_height(rotated)
    back = right_rotate(rotated)
    assert back.data == 1
    assert back.right.data == 2
    assert back.height == true_height(back)


def test_rotation_without_child_raises():
    with pytest.raises(ValueError):
        left_rotate(AVLNode(1))
    with pytest.raises(ValueError):
        right_rotate(AVLNode(1))


@given(int_lists)
def test_min_node_is_minimum(values):
    root = build(values)
    node = min_node(root)
    if values:
        assert node.data == min(values)
    else:
        assert node is None


@given(int_lists, st.data())
def test_delete_removes_values(values, data):
    root = build(values)
    doomed = data.draw(st.lists(st.sampled_from(values), unique=True)) if values else []
    for value in doomed:
        root = delete(root, value)
    assert inorder(root) == sorted(set(values) - set(doomed))


def test_delete_missing_value_leaves_tree():
    values = [5, 3, 8]
    root = build(values)
    root = delete(root, 42)
    assert inorder(root) == sorted(values)
    assert delete(None, 1) is None


def test_delete_node_with_two_children_uses_successor():
    root = build([5, 3, 8, 7, 9])
    root = delete(root, 5)
    assert root.data == 7
    assert inorder(root) == [3, 7, 8, 9]