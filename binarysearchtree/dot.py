"""Graphviz output for binary trees."""

from __future__ import annotations

import os
from typing import Iterator, Optional, Protocol, Union


class _TreeNode(Protocol):
    left: Optional["_TreeNode"]
    right: Optional["_TreeNode"]

    def label(self) -> str: ...


_PREAMBLE = "graph tree{\n"
_EPILOGUE = "}"


def _edges(node: _TreeNode) -> Iterator[str]:
    """Yield one edge line per child, parents before their descendants."""
    children = [child for child in (node.left, node.right) if child is not None]
    for child in children:
        yield f"\t{node.label()}--{child.label()};\n"
    for child in children:
        yield from _edges(child)


def dot_text(root: _TreeNode) -> str:
    """Return the undirected Graphviz description of the tree under ``root``."""
    return _PREAMBLE + "".join(_edges(root)) + _EPILOGUE


def generate_dotfile(root: _TreeNode, output_path: Union[str, "os.PathLike[str]"]) -> None:
    """Write the Graphviz description of the tree under ``root`` to ``output_path``."""
    with open(output_path, "w", encoding="utf-8") as output:
        output.write(dot_text(root))