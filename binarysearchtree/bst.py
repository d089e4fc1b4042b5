"""A binary search tree whose nodes know their parent."""

from __future__ import annotations

from typing import Iterator, Optional


def _same_key(first: Optional["BstNode"], second: Optional["BstNode"]) -> bool:
    """True if both are absent, or both are present with equal keys."""
    if first is None or second is None:
        return first is None and second is None
    return first.key == second.key


def _is_nil(node: Optional["BstNode"]) -> bool:
    """True if the node is absent or lacks a parent or either child."""
    if node is None:
        return True
    return node.parent is None or node.left is None or node.right is None


def _ancestors(node: "BstNode") -> Iterator[tuple["BstNode", "BstNode"]]:
    """Yield (child, parent) pairs walking from ``node`` up to the root."""
    current = node
    while current.parent is not None:
        yield current, current.parent
        current = current.parent


class BstNode:
    """A binary search tree node holding an integer key."""

    __slots__ = ("key", "parent", "left", "right")

    def __init__(self, key: int, parent: Optional["BstNode"] = None) -> None:
        self.key = key
        self.parent = parent
        self.left: Optional[BstNode] = None
        self.right: Optional[BstNode] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.key
        left = None if self.left is None else self.left.key
        right = None if self.right is None else self.right.key
        return f"BstNode(key={self.key!r}, parent={parent!r}, left={left!r}, right={right!r})"

    def add_left_child(self, key: int) -> "BstNode":
        """Attach a new left child with this node as its parent and return it."""
        self.left = BstNode(key, self)
        return self.left

    def add_right_child(self, key: int) -> "BstNode":
        """Attach a new right child with this node as its parent and return it."""
        self.right = BstNode(key, self)
        return self.right

    def copy(self) -> "BstNode":
        """Return a shallow copy sharing this node's parent and children."""
        duplicate = BstNode(self.key, self.parent)
        duplicate.left = self.left
        duplicate.right = self.right
        return duplicate

    def tree_search(self, key: int) -> Optional["BstNode"]:
        """Return a copy of the node holding ``key``, or None.

        When ``key`` is smaller but there is no left child, the search
        continues into the right subtree.
        """
        node: Optional[BstNode] = self
        while node is not None:
            if node.key == key:
                return node.copy()
            if key < node.key and node.left is not None:
                node = node.left
            else:
                node = node.right
        return None

    def minimum(self) -> "BstNode":
        """Return a copy of the node with the smallest key in this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node.copy()

    def maximum(self) -> "BstNode":
        """Return a copy of the node with the largest key in this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node.copy()

    def root(self) -> "BstNode":
        """Follow parent links to the top of the tree."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def successor(self) -> Optional["BstNode"]:
        """The node with the next larger key, or None if this is the largest."""
        if self.right is not None:
            return self.right.minimum()
        for child, parent in _ancestors(self):
            if parent.left is not None and _same_key(parent.left, child):
                return parent
        return None

    def successor_simpler(self) -> Optional["BstNode"]:
        """Alternative successor search built on the nil check.

        Raises ValueError when the walk needs a parent that does not exist.
        """
        right = self.right
        if not _is_nil(right):
            assert right is not None
            return right.minimum()
        node = self
        ancestor = node.parent
        if ancestor is None:
            raise ValueError(f"node {self.key} has no parent")
        ancestor_right = ancestor.right
        while _is_nil(ancestor) and _same_key(node, ancestor_right):
            node = ancestor
            if ancestor.parent is None:
                raise ValueError(f"node {ancestor.key} has no parent")
            ancestor = ancestor.parent
        if _same_key(ancestor, node.root()):
            return None
        return ancestor

    def predecessor(self) -> Optional["BstNode"]:
        """The node with the next smaller key, or None if this is the smallest."""
        if self.left is not None:
            return self.left.maximum()
        for child, parent in _ancestors(self):
            if parent.right is not None and _same_key(parent.right, child):
                return parent
        return None

    def add_node(self, target: "BstNode", key: int) -> bool:
        """Add ``key`` as a child of ``target`` if ``target`` is in this subtree.

        The child goes left when ``key`` is smaller than the target's key,
        right otherwise, and only into an empty slot. Returns whether a
        child was added.
        """
        if _same_key(self, target):
            if key < target.key:
                if target.left is None:
                    target.add_left_child(key)
                    return True
            elif target.right is None:
                target.add_right_child(key)
                return True
            return False
        return any(
            child.add_node(target, key) for child in (self.left, self.right) if child is not None
        )

    def label(self) -> str:
        """Text used for this node in graph output."""
        return str(self.key)


def tree_insert(node: Optional[BstNode], key: int) -> BstNode:
    """Insert ``key`` below ``node`` and return the root of the tree.

    With no node, a new single-node tree is returned. Equal keys go left.
    """
    if node is None:
        return BstNode(key)
    current = node
    while True:
        if current.key < key:
            if current.right is None:
                current.add_right_child(key)
                break
            current = current.right
        else:
            if current.left is None:
                current.add_left_child(key)
                break
            current = current.left
    return node.root()


def _transplant(old: BstNode, new: BstNode) -> BstNode:
    """Put ``new`` where ``old`` hangs from its parent and return ``new``."""
    parent = old.parent
    if parent is not None:
        if parent.left is None:
            raise ValueError(f"parent {parent.key} of node {old.key} has no left child")
        if _same_key(parent.left, old):
            parent.left = new
        else:
            parent.right = new
        new.parent = parent
    return new


def tree_delete(node: BstNode) -> BstNode:
    """Remove ``node`` from its tree and return the node that took its place.

    Raises ValueError for a node without children.
    """
    if node.right is None:
        if node.left is None:
            raise ValueError(f"node {node.key} has no children to replace it")
        return _transplant(node, node.left)
    if node.left is None:
        return _transplant(node, node.right)

    replacement = node.right.minimum()
    replacement_parent = replacement.parent
    if not _same_key(replacement_parent, node):
        if replacement.right is not None:
            replacement = _transplant(replacement, replacement.right)
        else:
            assert replacement_parent is not None
            replacement_parent.left = None
        node.right.parent = replacement
        replacement.right = node.right

    replacement = _transplant(node, replacement)
    node.left.parent = replacement
    replacement.left = node.left
    node.right.parent = replacement
    replacement.right = node.right
    return replacement