import pytest

from minisims.binary_tree import Node
from minisims.huffman_tree import HuffmanTree

EXAMPLE = ["8,", "a,4,", "-,-,b,c,"]


def test_example_formats_back_to_its_lines():
    tree = HuffmanTree.from_lines(EXAMPLE)
    assert tree.format_tree() == EXAMPLE


def test_example_paths():
    tree = HuffmanTree.from_lines(EXAMPLE)
    assert tree.find_path("a") == "0"
    assert tree.find_path("b") == "10"
    assert tree.find_path("c") == "11"


def test_trailing_newlines_are_ignored():
    tree = HuffmanTree.from_lines(line + "\n" for line in EXAMPLE)
    assert tree.format_tree() == EXAMPLE


def test_parsed_inner_nodes_have_no_text_and_leaves_no_count():
    tree = HuffmanTree.from_lines(EXAMPLE)
    assert tree.root.text == ""
    assert tree.root.left.num == 0
    assert tree.root.left.left is None


def test_newline_and_space_leaves_round_trip():
    inner = Node("", 2, Node(" ", 0), Node("x", 0))
    tree = HuffmanTree(Node("", 3, Node("\n", 0), inner))
    lines = tree.format_tree()
    assert "\\n," in lines[1]
    parsed = HuffmanTree.from_lines(lines)
    assert parsed.format_tree() == lines
    for ch in ("\n", " ", "x"):
        assert parsed.find_path(ch) == tree.find_path(ch)


def test_merged_nodes_are_written_as_numbers():
    tree = HuffmanTree(Node.merge_nodes(Node("x", 2), Node("y", 1)))
    lines = tree.format_tree()
    assert lines[0] == f"{tree.root.num},"
    assert lines[1] == "x,y,"


def test_line_count_matches_depth():
    tree = HuffmanTree.from_lines(EXAMPLE)
    assert len(tree.format_tree()) == tree.depth()


def test_empty_description_gives_empty_tree():
    tree = HuffmanTree.from_lines([])
    assert tree.root is None
    assert tree.format_tree() == []


def test_missing_level_is_rejected():
    with pytest.raises(ValueError):
        HuffmanTree.from_lines(["8,"])


def test_from_file_matches_from_lines(tmp_path):
    path = tmp_path / "tree.txt"
    path.write_text("\n".join(EXAMPLE) + "\n", encoding="utf-8")
    tree = HuffmanTree.from_file(path)
    assert tree.format_tree() == EXAMPLE


def test_from_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert HuffmanTree.from_file(path).root is None