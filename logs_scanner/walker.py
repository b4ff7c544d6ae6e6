"""Deterministic pre-order traversal of a directory tree."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from .errors import NotFoundError

Visitor = Callable[[Path, bool], None]


def walk_tree(root: os.PathLike | str, visit: Visitor) -> None:
    """Call ``visit(path, is_dir)`` for ``root`` and every descendant.

    Directories are visited before their children and siblings in lexical
    filename order. Symlinks are reported as files and never followed. Any
    exception raised by ``visit`` stops the walk and propagates.
    """

    root = Path(root)
    if not root.exists():
        raise NotFoundError(f"Directory does not exist: {root}")

    stack = [root]
    while stack:
        path = stack.pop()
        is_dir = path.is_dir() and not path.is_symlink()
        visit(path, is_dir)
        if is_dir:
            children = sorted(path.iterdir(), key=lambda child: child.name)
            stack.extend(reversed(children))
