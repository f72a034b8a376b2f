"""Huffman trees and their comma-separated, row-per-level text format."""

from __future__ import annotations

import re
import string
from collections.abc import Iterable
from os import PathLike

from .binary_tree import BinaryTree, Node

_LEADING_NUMBER = re.compile(r"\d+")
_ABSENT = "-"


def _split_row(line: str) -> list[str]:
    fields = line.rstrip("\n").split(",")
    if fields[-1] == "":
        fields.pop()
    return fields


def _build(rows: list[list[str]], row: int, pos: int) -> Node:
    try:
        token = rows[row][pos]
    except IndexError:
        raise ValueError(f"tree description has no entry at row {row}, position {pos}") from None
    if token and token[0] in string.digits:
        match = _LEADING_NUMBER.match(token)
        assert match is not None
        left = _build(rows, row + 1, 2 * pos)
        right = _build(rows, row + 1, 2 * pos + 1)
        return Node("", int(match.group()), left, right)
    if len(token) == 2:
        return Node("\n", 0)
    return Node(token, 0)


def _label(node: Node | None) -> str:
    if node is None:
        return _ABSENT
    if len(node.text) != 1:
        return str(node.num)
    if node.text == "\n":
        return "\\n"
    return node.text


class HuffmanTree(BinaryTree):
    """A binary tree whose leaves hold characters and inner nodes frequencies.

    In the text format each line lists one level of the tree filled out to a
    complete binary tree, every entry followed by a comma. Inner nodes are
    written as their number, leaves as their character (a newline as the two
    characters backslash and n) and empty positions as ``-``.
    """

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> HuffmanTree:
        """Build a tree from the lines of its text format."""
        rows = [_split_row(line) for line in lines]
        if not rows:
            return cls()
        return cls(_build(rows, 0, 0))

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> HuffmanTree:
        """Build a tree from a file in the text format."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_lines(handle)

    def format_tree(self) -> list[str]:
        """Return the tree in its text format, one string per level."""
        depth = self.depth()
        lines: list[str] = []
        row: list[Node | None] = [self.root]
        for level in range(depth):
            lines.append("".join(_label(node) + "," for node in row))
            if level < depth - 1:
                row = [
                    child
                    for node in row
                    for child in ((node.left, node.right) if node else (None, None))
                ]
        return lines