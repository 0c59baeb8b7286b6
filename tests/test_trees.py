import pytest
from hypothesis import given
from hypothesis import strategies as st

from drills.trees import (
    TreeNode,
    diameter,
    has_path_sum,
    inorder_traversal,
    invert_tree,
    is_same_tree,
    is_subtree,
    lowest_common_ancestor_bst,
    merge_trees,
    render_tree,
    tree_to_str,
)


def build(spec):
    """Build a tree from nested (val, left, right) tuples or None."""
    if spec is None:
        return None
    val, left, right = spec
    return TreeNode(val, build(left), build(right))


def copy_tree(node):
    if node is None:
        return None
    return TreeNode(node.val, copy_tree(node.left), copy_tree(node.right))


def count_nodes(node):
    if node is None:
        return 0
    return 1 + count_nodes(node.left) + count_nodes(node.right)


def parse(text):
    """Read the parenthesised form back into a tree."""
    pos = 0

    def node():
        nonlocal pos
        start = pos
        while pos < len(text) and (text[pos].isdigit() or text[pos] == "-"):
            pos += 1
        if start == pos:
            return None
        result = TreeNode(int(text[start:pos]))
        if pos < len(text) and text[pos] == "(":
            pos += 1
            result.left = node()
            pos += 1
            if pos < len(text) and text[pos] == "(":
                pos += 1
                result.right = node()
                pos += 1
        return result

    return node()


specs = st.recursive(
    st.none(),
    lambda children: st.tuples(st.integers(-50, 50), children, children),
    max_leaves=20,
)
nonempty_specs = st.tuples(st.integers(-50, 50), specs, specs)


def test_inorder_source_example():
    root = build((1, None, (2, (3, None, None), None)))
    assert inorder_traversal(root) == [1, 3, 2]


def test_inorder_empty():
    assert inorder_traversal(None) == []


@given(specs)
def test_inorder_of_inverted_is_reversed(spec):
    root = build(spec)
    forward = inorder_traversal(root)
    assert inorder_traversal(invert_tree(root)) == forward[::-1]


@given(specs)
def test_invert_twice_restores(spec):
    original = build(spec)
    root = copy_tree(original)
    assert is_same_tree(invert_tree(invert_tree(root)), original)


def test_invert_returns_same_root():
    root = build((4, (2, None, None), (7, None, None)))
    assert invert_tree(root) is root
    assert root.left.val == 7 and root.right.val == 2


def test_diameter_source_example():
    root = build((1, (2, (4, None, None), (5, None, None)), (3, None, None)))
    assert diameter(root) == 3


@pytest.mark.parametrize("n", [1, 2, 5, 10])
def test_diameter_of_path(n):
    root = None
    for value in range(n):
        root = TreeNode(value, root)
    assert diameter(root) == n - 1


def test_diameter_empty():
    assert diameter(None) == 0


@given(specs)
def test_diameter_bounded_by_node_count(spec):
    root = build(spec)
    assert 0 <= diameter(root) <= max(count_nodes(root) - 1, 0)


def _bst():
    return build(
        (
            6,
            (2, (0, None, None), (4, None, None)),
            (8, (7, None, None), (9, None, None)),
        )
    )


def test_lca_across_root():
    root = _bst()
    assert lowest_common_ancestor_bst(root, root.left.right, root.right.left) is root


def test_lca_in_left_subtree():
    root = _bst()
    assert lowest_common_ancestor_bst(root, root.left.left, root.left.right) is root.left


def test_lca_node_is_own_ancestor():
    root = _bst()
    assert lowest_common_ancestor_bst(root, root.left, root.left.right) is root.left


def test_lca_empty_tree():
    p = TreeNode(1)
    assert lowest_common_ancestor_bst(None, p, p) is None


def test_merge_source_example():
    root1 = build((1, (3, None, None), (2, None, None)))
    root2 = build((2, (1, None, None), (3, None, None)))
    merged = merge_trees(root1, root2)
    assert inorder_traversal(merged) == [a + b for a, b in zip(
        inorder_traversal(root1), inorder_traversal(root2))]


def test_merge_with_empty():
    root = build((1, None, None))
    assert merge_trees(root, None) is root
    assert merge_trees(None, root) is root


@given(specs)
def test_merge_with_self_doubles(spec):
    root = build(spec)
    merged = merge_trees(root, copy_tree(root))
    assert inorder_traversal(merged) == [2 * v for v in inorder_traversal(root)]


def test_path_sum_source_example():
    root = build(
        (
            5,
            (4, (11, (7, None, None), (2, None, None)), None),
            (8, (13, None, None), (4, None, (1, None, None))),
        )
    )
    assert has_path_sum(root, 22) is True
    assert has_path_sum(root, 5) is False


def test_path_sum_empty():
    assert has_path_sum(None, 0) is False


@given(nonempty_specs)
def test_path_sum_leftmost_path(spec):
    root = build(spec)
    total = 0
    node = root
    while node is not None:
        total += node.val
        node = node.left if node.left is not None else node.right
    assert has_path_sum(root, total) is True


def test_tree_to_str_source_example():
    root = build((1, (2, None, None), (3, (4, None, None), None)))
    assert tree_to_str(root) == "1(2)(3(4))"


def test_tree_to_str_empty_left():
    root = build((1, None, (3, None, None)))
    assert tree_to_str(root) == "1()(3)"


def test_tree_to_str_empty_raises():
    with pytest.raises(ValueError):
        tree_to_str(None)


@given(nonempty_specs)
def test_tree_to_str_round_trip(spec):
    root = build(spec)
    assert is_same_tree(parse(tree_to_str(root)), root)


def test_is_same_tree_differs_in_value():
    a = build((1, (2, None, None), None))
    b = build((1, (3, None, None), None))
    assert is_same_tree(a, b) is False
    assert is_same_tree(None, None) is True


def test_is_subtree_source_example():
    root1 = build((1, (4, (1, None, None), (2, None, None)), (7, None, None)))
    root2 = build((4, (1, None, None), (2, None, None)))
    assert is_subtree(root1, root2) is True
    root2.right.val = 3
    assert is_subtree(root1, root2) is False


def test_is_subtree_edges():
    assert is_subtree(None, None) is True
    assert is_subtree(None, TreeNode(1)) is False


@given(specs)
def test_tree_is_subtree_of_itself(spec):
    root = build(spec)
    assert is_subtree(root, copy_tree(root)) is True


def test_render_tree_indents():
    root = build((4, (2, None, None), (7, None, None)))
    assert render_tree(root) == "4\n  2\n  7\n"


def test_render_tree_empty():
    assert render_tree(None) == ""


@given(specs)
def test_render_tree_one_line_per_node(spec):
    root = build(spec)
    assert len(render_tree(root).splitlines()) == count_nodes(root)