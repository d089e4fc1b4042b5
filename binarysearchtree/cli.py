"""Command that exercises the trees and writes their Graphviz files."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from .bst import BstNode, tree_delete, tree_insert
from .dot import generate_dotfile
from .tree import Node

_PathLike = Union[str, "os.PathLike[str]"]

_INSERT_KEYS = (6, 18, 3, 7, 17, 20, 2, 4, 13, 9)
_SEARCH_KEYS = (15, 9, 22)
_SUCCESSOR_KEYS = (2, 20, 15, 13, 9, 7, 22)


def build_sample_bst() -> BstNode:
    """Build the sample search tree by attaching children directly."""
    root = BstNode(15)
    left = root.add_left_child(6)
    right = root.add_right_child(18)

    right.add_left_child(17)
    right.add_right_child(20)

    three = left.add_left_child(3)
    seven = left.add_right_child(7)
    three.add_left_child(2)
    three.add_right_child(4)

    thirteen = seven.add_right_child(13)
    thirteen.add_left_child(9)
    return root


def build_sample_tree() -> Node:
    """Build the sample plain binary tree."""
    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    return root


def _key_or_not_found(node: Optional[BstNode]) -> str:
    return "not found" if node is None else str(node.key)


def run_bst_demo(out: TextIO, directory: _PathLike) -> list[Path]:
    """Run the search tree demonstration, reporting to ``out``.

    Dot files are written into ``directory``; their paths are returned.
    """
    directory = Path(directory)
    written: list[Path] = []
    root = build_sample_bst()

    num = 3
    node = root.tree_search(num)
    if node is not None:
        print(f"predecessor of node ({num}) is {_key_or_not_found(node.predecessor())}", file=out)
    else:
        print(f"node with key of {num} does not exist, failed to get successor", file=out)

    graph_path = directory / "bst_graph.dot"
    generate_dotfile(root, graph_path)
    written.append(graph_path)

    for key in _SEARCH_KEYS:
        found = root.tree_search(key)
        result = "not found" if found is None else f"found -> {found.key}"
        print(f"tree search result of key {key} is {result}", file=out)

    min_node = root.minimum()
    print(f"minimum result {min_node.key}", file=out)
    max_node = root.maximum()
    print(f"maximum result {max_node.key}", file=out)
    print(f"root node {max_node.root().key}", file=out)

    for key in _SUCCESSOR_KEYS:
        found = root.tree_search(key)
        if found is None:
            print(f"node with key of {key} does not exist, failed to get successor", file=out)
        else:
            successor = found.successor_simpler()
            print(f"successor of node ({key}) is {_key_or_not_found(successor)}", file=out)

    inserted = tree_insert(None, 15)
    for key in _INSERT_KEYS:
        inserted = tree_insert(inserted, key)
    insert_path = directory / "bst.dot"
    generate_dotfile(inserted, insert_path)
    written.append(insert_path)

    replacement = tree_delete(inserted)
    delete_path = directory / "bst_delete_root.dot"
    generate_dotfile(replacement, delete_path)
    written.append(delete_path)
    return written


def run_tree_demo(out: TextIO, directory: _PathLike) -> list[Path]:
    """Run the plain binary tree demonstration, reporting to ``out``.

    Dot files are written into ``directory``; their paths are returned.
    """
    directory = Path(directory)
    written: list[Path] = []

    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    first_path = directory / "prime.dot"
    generate_dotfile(root, first_path)
    written.append(first_path)

    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    second_path = directory / "prime_t2.dot"
    generate_dotfile(root, second_path)
    written.append(second_path)

    print(f"Current tree depth: {root.tree_depth()}", file=out)
    print(f"Amount of nodes in current tree: {root.count_nodes()}", file=out)
    print(f"Amount of nodes in current subtree: {right.count_nodes()}", file=out)

    left.sibling()

    by_value = root.node_by_value(3)
    print(f"left subtree seek by value {by_value!r}", file=out)
    if by_value is not None:
        by_property = root.node_by_full_property(by_value)
        print(f"left subtree seek by full property {by_property!r}", file=out)

    trimmed = root.copy()
    flag = trimmed.discard_node_by_value(3)
    print(f"status of node deletion: {flag}", file=out)

    third_path = directory / "prime_t3.dot"
    generate_dotfile(trimmed, third_path)
    written.append(third_path)

    print(f"Depth after discard {trimmed.tree_depth()}", file=out)
    print(f"Count nodes after discard {trimmed.count_nodes()}", file=out)

    fourth_path = directory / "prime_t4.dot"
    generate_dotfile(root, fourth_path)
    written.append(fourth_path)
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstrations from the command line."""
    parser = argparse.ArgumentParser(
        prog="binarysearchtree",
        description="Exercise the binary search tree and write Graphviz files.",
    )
    parser.add_argument(
        "-d",
        "--directory",
        default=".",
        help="directory for the generated .dot files (default: current directory)",
    )
    parser.add_argument(
        "--binary-tree",
        action="store_true",
        help="also run the plain binary tree demonstration",
    )
    args = parser.parse_args(argv)

    directory = Path(args.directory)
    directory.mkdir(parents=True, exist_ok=True)
    if args.binary_tree:
        run_tree_demo(sys.stdout, directory)
    run_bst_demo(sys.stdout, directory)
    return 0


if __name__ == "__main__":
    sys.exit(main())