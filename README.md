# binarysearchtree

Binary trees and binary search trees whose nodes hold links to their
parent. The package answers the usual queries (search, minimum, maximum,
successor, predecessor, root), supports insertion and deletion, and writes
trees out as Graphviz `dot` text.

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Binary search trees

`binarysearchtree.bst` holds the `BstNode` class and the functions
`tree_insert` and `tree_delete`.

```python
from binarysearchtree.bst import tree_insert, tree_delete

root = None
for key in [15, 6, 18, 3, 7, 17, 20, 2, 4, 13, 9]:
    root = tree_insert(root, key)

node = root.tree_search(13)
print(node.successor().key)                # 15
print(root.minimum().key, root.maximum().key)  # 2 20

replacement = tree_delete(root)            # remove the root, get the node in its place
print(replacement.key)                     # 17
```

- `tree_insert(node, key)` adds `key` below `node` and returns the root of
  the tree; with `None` it starts a new one-node tree. Equal keys go left.
- `tree_delete(node)` unlinks `node` and returns the node that took its
  place. It raises `ValueError` for a node that has no children.
- `BstNode.add_left_child` and `BstNode.add_right_child` link a new child
  by hand and return it.
- `BstNode.tree_search`, `minimum` and `maximum` return copies of the nodes
  they find, as `BstNode.copy` does: a copy shares the original's parent
  and children. `tree_search` returns `None` when the key is absent.
- `BstNode.successor` and `BstNode.predecessor` return the neighbouring
  node in key order, or `None` at either end. `BstNode.root` follows the
  parent links to the top.
- `BstNode.successor_simpler` is an alternative successor search that
  stops at ancestors lacking a parent or a child; it does not always agree
  with `successor`, and raises `ValueError` when its walk needs a parent
  that does not exist.
- `BstNode.add_node(target, key)` finds a node with the same key as
  `target` in the subtree and, if the matching side of `target` is empty,
  adds `key` there; it returns whether a child was added.

## Plain binary trees

`binarysearchtree.tree.Node` is a binary tree without ordering, built with
`add_left_child` and `add_right_child`. It offers:

- `count_nodes()`: the number of nodes in the subtree, the node included.
- `tree_depth()`: the longest path, in edges, down to a leaf (0 for a
  single node).
- `sibling()`: the other child of the node's parent, or `None`.
- `node_by_value(value)` and `node_by_full_property(node)`: return a copy
  of a matching node. Both descend into the left child whenever one exists
  and only look right when there is none.
- `discard_node_by_value(value)`: cuts the links along the path to the
  matching node and returns whether it was found.
- `copy()`: a copy sharing the node's parent and children.

## Graphviz output

```python
from binarysearchtree.dot import dot_text, generate_dotfile

print(dot_text(root))
generate_dotfile(root, "bst.dot")
```

The output is an undirected graph named `tree` with one `parent--child;`
edge per line. It works with both kinds of node. The package only writes
the text; rendering it to an image is left to Graphviz itself.

## Command line

```
binarysearchtree
```

This builds the sample search tree, prints predecessor, search, minimum,
maximum, root and successor results, and writes `bst_graph.dot` (the
sample tree), `bst.dot` (the same keys added with `tree_insert`) and
`bst_delete_root.dot` (that tree after its root is deleted).

Options:

- `-d DIRECTORY`, `--directory DIRECTORY`: where to write the dot files
  (default: the current directory; created if missing).
- `--binary-tree`: first run the plain binary tree demonstration, which
  prints depth and node counts and writes `prime.dot`, `prime_t2.dot`,
  `prime_t3.dot` and `prime_t4.dot`.