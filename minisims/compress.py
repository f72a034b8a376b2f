"""Build a Huffman tree for a text and encode the text with it."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Sequence

from .binary_tree import Node
from .huffman_tree import HuffmanTree


def count_frequencies(text: str) -> dict[str, int]:
    """Count each character, keyed in order of first appearance."""
    return dict(Counter(text))


def _rank(node: Node) -> tuple[int, int]:
    return node.num, ord(node.text[0])


def build_tree(text: str) -> HuffmanTree:
    """Build the Huffman tree for ``text``; an empty text gives an empty tree.

    Nodes are kept in descending order of count, ties broken by descending
    first character; the two last nodes are merged, the larger on the left.
    """
    nodes = sorted(
        (Node(ch, count) for ch, count in count_frequencies(text).items()),
        key=_rank,
        reverse=True,
    )
    while len(nodes) > 1:
        right = nodes.pop()
        left = nodes.pop()
        nodes.append(Node.merge_nodes(left, right))
        nodes.sort(key=_rank, reverse=True)
    return HuffmanTree(nodes[0] if nodes else None)


def encode(text: str, tree: HuffmanTree) -> str:
    """Return the code of every character of ``text``, each followed by a space."""
    parts = []
    for ch in text:
        path = tree.find_path(ch)
        if path is None:
            raise ValueError(f"character {ch!r} is not in the tree")
        parts.append(path + " ")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the Huffman tree of a file, or the file's encoding."""
    parser = argparse.ArgumentParser(description="Huffman-encode a text file.")
    parser.add_argument("-tree", dest="tree", action="store_true", help="print the tree")
    parser.add_argument("file")
    args = parser.parse_args(argv)
    with open(args.file, encoding="utf-8", newline="") as handle:
        text = handle.read()
    tree = build_tree(text)
    if args.tree:
        for line in tree.format_tree():
            print(line)
    else:
        sys.stdout.write(encode(text, tree))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())