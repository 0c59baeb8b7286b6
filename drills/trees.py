"""Binary trees and the classic exercises on them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.val
    yield from _inorder(node.right)


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values of the tree in left, node, right order."""
    return list(_inorder(root))


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between two nodes."""
    longest = 0

    def height(node: TreeNode | None) -> int:
        nonlocal longest
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        longest = max(longest, left + right)
        return max(left, right) + 1

    height(root)
    return longest


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    if root is None:
        return None
    root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def lowest_common_ancestor_bst(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Return the lowest common ancestor of ``p`` and ``q`` in a search tree."""
    node = root
    while node is not None and node is not p and node is not q:
        if (p.val < node.val < q.val) or (q.val < node.val < p.val):
            return node
        node = node.left if p.val < node.val else node.right
    return node


def merge_trees(root1: TreeNode | None, root2: TreeNode | None) -> TreeNode | None:
    """Overlay two trees, summing values where both have a node.

    Where only one tree has a subtree, that subtree is shared, not copied.
    """
    if root1 is None:
        return root2
    if root2 is None:
        return root1
    return TreeNode(
        root1.val + root2.val,
        merge_trees(root1.left, root2.left),
        merge_trees(root1.right, root2.right),
    )


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return root.val == target_sum
    rest = target_sum - root.val
    return has_path_sum(root.left, rest) or has_path_sum(root.right, rest)


def tree_to_str(root: TreeNode | None) -> str:
    """Write the tree in preorder with parentheses, e.g. ``1(2)(3(4))``.

    An empty left child is written as ``()`` when a right child follows.
    Raises ValueError for an empty tree.
    """
    if root is None:
        raise ValueError("cannot render an empty tree")

    def render(node: TreeNode) -> str:
        text = str(node.val)
        if node.left is None and node.right is None:
            return text
        text += f"({render(node.left)})" if node.left is not None else "()"
        if node.right is not None:
            text += f"({render(node.right)})"
        return text

    return render(root)


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def is_subtree(root: TreeNode | None, sub_root: TreeNode | None) -> bool:
    """Tell whether ``sub_root`` equals some subtree of ``root``."""
    if sub_root is None:
        return True
    if root is None:
        return False
    return (
        is_same_tree(root, sub_root)
        or is_subtree(root.left, sub_root)
        or is_subtree(root.right, sub_root)
    )


def render_tree(root: TreeNode | None) -> str:
    """Return one line per node in preorder, indented two spaces per level."""
    lines: list[str] = []

    def walk(node: TreeNode | None, level: int) -> None:
        if node is None:
            return
        lines.append(f"{'  ' * level}{node.val}\n")
        walk(node.left, level + 1)
        walk(node.right, level + 1)

    walk(root, 0)
    return "".join(lines)