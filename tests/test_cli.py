import io

from binarysearchtree.bst import tree_insert
from binarysearchtree.cli import (
    build_sample_bst,
    build_sample_tree,
    main,
    run_bst_demo,
    run_tree_demo,
)
from binarysearchtree.dot import dot_text

SAMPLE_KEYS = [15, 6, 18, 17, 20, 3, 7, 2, 4, 13, 9]


def _in_order(node):
    if node is None:
        return []
    return _in_order(node.left) + [node.key] + _in_order(node.right)


def _bst_output(tmp_path):
    out = io.StringIO()
    paths = run_bst_demo(out, tmp_path)
    return out.getvalue().splitlines(), paths


def test_sample_bst_is_ordered():
    keys = _in_order(build_sample_bst())
    assert keys == sorted(SAMPLE_KEYS)


def test_sample_bst_parent_links():
    root = build_sample_bst()
    stack = [root]
    while stack:
        node = stack.pop()
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
                stack.append(child)
    assert root.parent is None


def test_sample_tree_shape():
    root = build_sample_tree()
    assert root.count_nodes() == 6
    assert root.tree_depth() == 2


def test_bst_demo_writes_files(tmp_path):
    _, paths = _bst_output(tmp_path)
    assert [p.name for p in paths] == ["bst_graph.dot", "bst.dot", "bst_delete_root.dot"]
    assert all(p.exists() for p in paths)


def test_bst_demo_graph_matches_sample(tmp_path):
    _bst_output(tmp_path)
    text = (tmp_path / "bst_graph.dot").read_text(encoding="utf-8")
    assert text == dot_text(build_sample_bst())


def test_bst_demo_insert_graph_matches_inserted_tree(tmp_path):
    _bst_output(tmp_path)
    root = None
    for key in SAMPLE_KEYS:
        root = tree_insert(root, key)
    text = (tmp_path / "bst.dot").read_text(encoding="utf-8")
    assert text == dot_text(root)


def test_bst_demo_search_results(tmp_path):
    lines, _ = _bst_output(tmp_path)
    assert "tree search result of key 15 is found -> 15" in lines
    assert "tree search result of key 9 is found -> 9" in lines
    assert "tree search result of key 22 is not found" in lines


def test_bst_demo_extremes(tmp_path):
    lines, _ = _bst_output(tmp_path)
    assert f"minimum result {min(SAMPLE_KEYS)}" in lines
    assert f"maximum result {max(SAMPLE_KEYS)}" in lines
    assert f"root node {SAMPLE_KEYS[0]}" in lines


def test_bst_demo_successors(tmp_path):
    lines, _ = _bst_output(tmp_path)
    assert "successor of node (2) is 3" in lines
    assert "successor of node (15) is 17" in lines
    assert "node with key of 22 does not exist, failed to get successor" in lines


def test_bst_demo_predecessor(tmp_path):
    lines, _ = _bst_output(tmp_path)
    assert lines[0] == "predecessor of node (3) is 2"


def test_tree_demo_reports_counts(tmp_path):
    out = io.StringIO()
    run_tree_demo(out, tmp_path)
    lines = out.getvalue().splitlines()
    root = build_sample_tree()
    assert f"Current tree depth: {root.tree_depth()}" in lines
    assert f"Amount of nodes in current tree: {root.count_nodes()}" in lines
    assert f"Amount of nodes in current subtree: {root.right.count_nodes()}" in lines
    assert "status of node deletion: True" in lines


def test_tree_demo_files(tmp_path):
    paths = run_tree_demo(io.StringIO(), tmp_path)
    assert [p.name for p in paths] == ["prime.dot", "prime_t2.dot", "prime_t3.dot", "prime_t4.dot"]
    full = (tmp_path / "prime_t2.dot").read_text(encoding="utf-8")
    assert full == dot_text(build_sample_tree())
    assert (tmp_path / "prime_t4.dot").read_text(encoding="utf-8") == full
    trimmed = (tmp_path / "prime_t3.dot").read_text(encoding="utf-8")
    assert "5--3" not in trimmed
    assert "5--7" in trimmed


def test_main_runs_bst_demo(tmp_path, capsys):
    assert main(["--directory", str(tmp_path)]) == 0
    captured = capsys.readouterr().out
    assert "tree search result of key 22 is not found" in captured
    assert (tmp_path / "bst_delete_root.dot").exists()
    assert not (tmp_path / "prime.dot").exists()


def test_main_binary_tree_flag(tmp_path, capsys):
    assert main(["-d", str(tmp_path), "--binary-tree"]) == 0
    captured = capsys.readouterr().out
    assert "status of node deletion: True" in captured
    assert (tmp_path / "prime_t4.dot").exists()
    assert (tmp_path / "bst.dot").exists()