import pytest

from coursealgos.trees import (
    ArrayTree,
    LinkedArrayTree,
    TreeError,
    TreeNode,
    array_inorder,
    array_postorder,
    array_preorder,
    balanced_tree_array,
    inorder,
    postorder,
    preorder,
)


def _sample_tree():
    root = TreeNode(0)
    a = root.set_left(1)
    b = root.set_right(2)
    a.set_left(3)
    a.set_right(4)
    b.set_left(5)
    b.set_right(6)
    return root


def _sample_array_tree():
    tree = ArrayTree(0)
    a = tree.set_left(ArrayTree.ROOT, 1)
    b = tree.set_right(ArrayTree.ROOT, 2)
    tree.set_left(a, 3)
    tree.set_right(a, 4)
    tree.set_left(b, 5)
    tree.set_right(b, 6)
    return tree


def _sample_linked_array_tree():
    tree = LinkedArrayTree(0)
    a = tree.set_left(LinkedArrayTree.ROOT, 1)
    b = tree.set_right(LinkedArrayTree.ROOT, 2)
    tree.set_left(a, 3)
    tree.set_right(a, 4)
    tree.set_left(b, 5)
    tree.set_right(b, 6)
    return tree


def test_linked_tree_traversals():
    root = _sample_tree()
    assert preorder(root) == [0, 1, 3, 4, 2, 5, 6]
    assert inorder(root) == [3, 1, 4, 0, 5, 2, 6]


def test_postorder_ends_with_root_and_covers_all():
    root = _sample_tree()
    result = postorder(root)
    assert result[-1] == 0
    assert sorted(result) == sorted(preorder(root))
    assert result[:3] == [inorder(root)[0], inorder(root)[2], inorder(root)[1]]


def test_empty_tree_traversals():
    assert preorder(None) == []
    assert inorder(None) == []
    assert postorder(None) == []


def test_set_left_twice_raises():
    root = TreeNode(1)
    root.set_left(2)
    with pytest.raises(TreeError):
        root.set_left(3)


def test_set_right_twice_raises():
    root = TreeNode(1)
    root.set_right(2)
    with pytest.raises(TreeError):
        root.set_right(3)


def test_set_left_returns_attached_child():
    root = TreeNode(1)
    child = root.set_left(2)
    assert root.left is child
    assert child.value == 2


def test_array_tree_matches_linked_tree():
    assert _sample_array_tree().inorder() == inorder(_sample_tree())


def test_array_tree_slots():
    tree = ArrayTree(9)
    assert tree.set_left(0, 1) == 1
    assert tree.set_right(0, 2) == 2
    assert tree.set_right(2, 6) == 6


def test_array_tree_missing_parent_raises():
    tree = ArrayTree(9)
    with pytest.raises(TreeError):
        tree.set_left(1, 5)


def test_array_tree_taken_slot_raises():
    tree = ArrayTree(9)
    tree.set_right(0, 2)
    with pytest.raises(TreeError):
        tree.set_right(0, 3)


def test_array_tree_beyond_size_raises():
    tree = ArrayTree(9, size=2)
    tree.set_left(0, 1)
    with pytest.raises(TreeError):
        tree.set_right(0, 2)


def test_linked_array_tree_matches_linked_tree():
    assert _sample_linked_array_tree().inorder() == inorder(_sample_tree())


def test_linked_array_tree_indices_are_handed_out_in_order():
    tree = LinkedArrayTree(0)
    first = tree.set_left(LinkedArrayTree.ROOT, 1)
    second = tree.set_right(LinkedArrayTree.ROOT, 2)
    assert second == first + 1


def test_linked_array_tree_null_parent_raises():
    tree = LinkedArrayTree(0)
    with pytest.raises(TreeError):
        tree.set_left(0, 1)


def test_linked_array_tree_duplicate_child_raises():
    tree = LinkedArrayTree(0)
    tree.set_left(LinkedArrayTree.ROOT, 1)
    with pytest.raises(TreeError):
        tree.set_left(LinkedArrayTree.ROOT, 2)
    tree.set_right(LinkedArrayTree.ROOT, 3)
    with pytest.raises(TreeError):
        tree.set_right(LinkedArrayTree.ROOT, 4)


def test_linked_array_tree_full_raises():
    tree = LinkedArrayTree(0, size=3)
    tree.set_left(LinkedArrayTree.ROOT, 1)
    with pytest.raises(TreeError):
        tree.set_right(LinkedArrayTree.ROOT, 2)


def test_balanced_tree_array_seven_values():
    values = [1, 2, 3, 4, 5, 6, 7]
    array = balanced_tree_array(values)
    assert array == [4, 2, 6, 1, 3, 5, 7]


@pytest.mark.parametrize("count", range(0, 16))
def test_balanced_tree_inorder_is_sorted_input(count):
    values = list(range(10, 10 + count))
    array = balanced_tree_array(values)
    assert array_inorder(array) == values
    assert sorted(array_preorder(array)) == values
    assert sorted(array_postorder(array)) == values


@pytest.mark.parametrize("count", range(1, 16))
def test_balanced_tree_root_is_upper_middle(count):
    values = list(range(count))
    array = balanced_tree_array(values)
    assert array[0] == values[count // 2]
    assert array_preorder(array)[0] == array[0]
    assert array_postorder(array)[-1] == array[0]


def test_balanced_tree_rejects_unsorted():
    with pytest.raises(ValueError):
        balanced_tree_array([3, 1, 2])


def test_array_traversals_skip_holes():
    array = [5, None, 8, None, None, 7]
    assert array_inorder(array) == [5, 7, 8]
    assert array_preorder(array) == [5, 8, 7]
    assert array_postorder(array) == [7, 8, 5]