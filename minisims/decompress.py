"""Decode Huffman codes back into text."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .huffman_tree import HuffmanTree


def decode(tree: HuffmanTree, codes: str) -> str:
    """Decode whitespace-separated 0/1 codes by walking ``tree`` from its root."""
    out = []
    for token in codes.split():
        node = tree.root
        for step in token:
            if node is None:
                break
            node = node.left if step == "0" else node.right
        if node is None:
            raise ValueError(f"no character for the code {token!r}")
        out.append(node.text)
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Decode a code file using a tree file and print the text."""
    parser = argparse.ArgumentParser(description="Decode a Huffman-encoded file.")
    parser.add_argument("treefile")
    parser.add_argument("codefile")
    args = parser.parse_args(argv)
    tree = HuffmanTree.from_file(args.treefile)
    with open(args.codefile, encoding="utf-8") as handle:
        codes = handle.read()
    try:
        text = decode(tree, codes)
    except ValueError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())