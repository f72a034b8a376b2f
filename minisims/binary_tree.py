"""Binary trees of nodes carrying a string and a number."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """A tree node with a text label, a number and optional children."""

    text: str
    num: int
    left: Node | None = None
    right: Node | None = None

    def increment(self) -> None:
        """Add one to ``num``."""
        self.num += 1

    @staticmethod
    def merge_nodes(left_node: Node, right_node: Node) -> Node:
        """Return a new parent of the two nodes with joined text and summed num."""
        return Node(
            left_node.text + right_node.text,
            left_node.num + right_node.num,
            left_node,
            right_node,
        )


def _find_path(node: Node, s: str, path: str) -> str | None:
    if node.text == s:
        return path
    for child, step in ((node.left, "0"), (node.right, "1")):
        if child is not None:
            found = _find_path(child, s, path + step)
            if found is not None:
                return found
    return None


def _sum(node: Node | None) -> int:
    if node is None:
        return 0
    return node.num + _sum(node.left) + _sum(node.right)


def _depth(node: Node | None) -> int:
    if node is None:
        return 0
    return 1 + max(_depth(node.left), _depth(node.right))


def _preorder(node: Node | None) -> Iterator[Node]:
    if node is not None:
        yield node
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Node | None) -> Iterator[Node]:
    if node is not None:
        yield from _inorder(node.left)
        yield node
        yield from _inorder(node.right)


def _postorder(node: Node | None) -> Iterator[Node]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node


def _all_paths_greater(node: Node, total: int) -> bool:
    # A node missing either child ends the path here.
    if node.left is None or node.right is None:
        return total < node.num
    remaining = total - node.num
    return _all_paths_greater(node.left, remaining) and _all_paths_greater(
        node.right, remaining
    )


def _covered(node: Node | None, other: Node | None) -> bool:
    if node is None:
        return True
    if other is None:
        return False
    return (
        node.num == other.num
        and _covered(node.left, other.left)
        and _covered(node.right, other.right)
    )


def _copy(node: Node | None) -> Node | None:
    if node is None:
        return None
    return Node(node.text, node.num, _copy(node.left), _copy(node.right))


class BinaryTree:
    """A binary tree rooted at ``root``, which may be None for an empty tree."""

    def __init__(self, root: Node | None = None) -> None:
        self.root = root

    def find_path(self, s: str) -> str | None:
        """Return the 0/1 path to the node whose text is ``s``, or None if absent.

        ``"0"`` steps left and ``"1"`` steps right; the root's path is ``""``.
        """
        if self.root is None:
            return None
        return _find_path(self.root, s, "")

    def sum(self) -> int:
        """Sum of every node's num; 0 for an empty tree."""
        return _sum(self.root)

    def depth(self) -> int:
        """Number of layers of nodes; 0 for an empty tree."""
        return _depth(self.root)

    def preorder_num(self) -> list[int]:
        """Node numbers in pre-order."""
        return [node.num for node in _preorder(self.root)]

    def inorder_str(self) -> list[str]:
        """Node texts in in-order."""
        return [node.text for node in _inorder(self.root)]

    def postorder_num(self) -> list[int]:
        """Node numbers in post-order."""
        return [node.num for node in _postorder(self.root)]

    def all_path_sum_greater(self, total: int) -> bool:
        """True if every root-to-leaf path sums to more than ``total``."""
        if self.root is None:
            raise ValueError("tree is empty")
        return _all_paths_greater(self.root, total)

    def covered_by(self, tree: BinaryTree) -> bool:
        """True if this tree's nums match ``tree`` from the root down."""
        return _covered(self.root, tree.root)

    def contained_by(self, tree: BinaryTree) -> bool:
        """True if this tree is covered by ``tree`` or by one of its root's children."""
        if _covered(self.root, tree.root):
            return True
        if tree.root is None:
            return False
        return _covered(self.root, tree.root.left) or _covered(
            self.root, tree.root.right
        )

    def copy(self) -> BinaryTree:
        """Return a deep copy of the tree."""
        return BinaryTree(_copy(self.root))