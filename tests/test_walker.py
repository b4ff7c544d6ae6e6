import os

import pytest

from logs_scanner.errors import NotFoundError
from logs_scanner.walker import walk_tree


def build_tree(root):
    (root / "a" / "c").mkdir(parents=True)
    (root / "a" / "z.log").write_text("z")
    (root / "b.txt").write_text("b")
    (root / "c.txt").write_text("c")


def test_visits_in_deterministic_preorder(tmp_path):
    build_tree(tmp_path)
    visited = []

    walk_tree(tmp_path, lambda path, is_dir: visited.append((path.relative_to(tmp_path).as_posix(), is_dir)))

    assert visited == [
        (".", True),
        ("a", True),
        ("a/c", True),
        ("a/z.log", False),
        ("b.txt", False),
        ("c.txt", False),
    ]


def test_order_is_stable_across_runs(tmp_path):
    build_tree(tmp_path)
    first, second = [], []

    walk_tree(tmp_path, lambda path, is_dir: first.append(path))
    walk_tree(tmp_path, lambda path, is_dir: second.append(path))

    assert first == second


def test_missing_root_raises_before_any_visit(tmp_path):
    visited = []

    with pytest.raises(NotFoundError):
        walk_tree(tmp_path / "missing", lambda path, is_dir: visited.append(path))

    assert visited == []


def test_visit_failure_aborts_walk(tmp_path):
    build_tree(tmp_path)
    visited = []

    def visit(path, is_dir):
        visited.append(path.name)
        if path.name == "z.log":
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        walk_tree(tmp_path, visit)

    assert "b.txt" not in visited
    assert visited[-1] == "z.log"


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_symlinked_directories_are_not_followed(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    (target / "inner.log").write_text("x")
    root = tmp_path / "root"
    root.mkdir()
    (root / "link").symlink_to(target, target_is_directory=True)
    visited = []

    walk_tree(root, lambda path, is_dir: visited.append((path.name, is_dir)))

    assert visited == [("root", True), ("link", False)]
