"""A plain binary tree whose nodes know their parent."""

from __future__ import annotations

from typing import Optional


def _same_value(first: Optional["Node"], second: Optional["Node"]) -> bool:
    """True if both are absent, or both are present with equal values."""
    if first is None or second is None:
        return first is None and second is None
    return first.value == second.value


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional["Node"] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.value
        left = None if self.left is None else self.left.value
        right = None if self.right is None else self.right.value
        return f"Node(value={self.value!r}, parent={parent!r}, left={left!r}, right={right!r})"

    def add_left_child(self, value: int) -> "Node":
        """Attach a new left child with this node as its parent and return it."""
        self.left = Node(value, self)
        return self.left

    def add_right_child(self, value: int) -> "Node":
        """Attach a new right child with this node as its parent and return it."""
        self.right = Node(value, self)
        return self.right

    def copy(self) -> "Node":
        """Return a shallow copy sharing this node's parent and children."""
        duplicate = Node(self.value, self.parent)
        duplicate.left = self.left
        duplicate.right = self.right
        return duplicate

    def node_by_value(self, value: int) -> Optional["Node"]:
        """Return a copy of the node holding ``value``.

        The search follows the left child whenever one exists and only
        looks right when there is no left child.
        """
        if self.value == value:
            return self.copy()
        if self.left is not None:
            return self.left.node_by_value(value)
        if self.right is not None:
            return self.right.node_by_value(value)
        return None

    def node_by_full_property(self, node: "Node") -> Optional["Node"]:
        """Return a copy of the node matching ``node`` in value, parent and children.

        Like :meth:`node_by_value`, the search descends left when possible,
        otherwise right.
        """
        if (
            self.value == node.value
            and _same_value(node.parent, self.parent)
            and _same_value(node.left, self.left)
            and _same_value(node.right, self.right)
        ):
            return self.copy()
        if self.left is not None:
            return self.left.node_by_full_property(node)
        if self.right is not None:
            return self.right.node_by_full_property(node)
        return None

    def discard_node_by_value(self, value: int) -> bool:
        """Cut off the subtree holding ``value``.

        The matching node loses its parent link and every node on the path
        to it loses the child link it was reached through. Returns whether
        a matching node was found.
        """
        if self.value == value:
            self.parent = None
            return True
        if self.left is not None:
            found = self.left.discard_node_by_value(value)
            self.left = None
            return found
        if self.right is not None:
            found = self.right.discard_node_by_value(value)
            self.right = None
            return found
        return False

    def count_nodes(self) -> int:
        """Number of nodes in the subtree rooted here, this node included."""
        return 1 + sum(child.count_nodes() for child in (self.left, self.right) if child is not None)

    def tree_depth(self) -> int:
        """Longest path, in edges, from this node down to a leaf."""
        return max(
            (child.tree_depth() + 1 for child in (self.left, self.right) if child is not None),
            default=0,
        )

    def sibling(self) -> Optional["Node"]:
        """The other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left

    def label(self) -> str:
        """Text used for this node in graph output."""
        return str(self.value)