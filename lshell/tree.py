"""Build and draw a directory tree."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Iterator, Sequence

_BRANCH = "|-----"
_PIPE = "|     "


@dataclass
class TreeNode:
    """A file or directory; directories carry their entries as children."""

    name: str
    is_dir: bool = False
    children: list[TreeNode] = field(default_factory=list)


def _scan(path: str) -> list[TreeNode]:
    try:
        with os.scandir(path) as entries:
            ordered = sorted(entries, key=lambda entry: entry.name)
    except OSError:
        return []
    nodes = []
    for entry in ordered:
        if entry.is_dir(follow_symlinks=False):
            nodes.append(TreeNode(entry.name, True, _scan(entry.path)))
        else:
            nodes.append(TreeNode(entry.name))
    return nodes


def build_tree(path: str | os.PathLike[str]) -> TreeNode:
    """Return a root node named "." holding the tree under ``path``.

    Directories that cannot be opened contribute no children.
    """
    return TreeNode(".", True, _scan(os.fspath(path)))


def _lines(node: TreeNode, depth: int) -> Iterator[str]:
    prefix = _PIPE * (depth - 1) + (_BRANCH if depth > 0 else "")
    yield prefix + node.name
    if node.is_dir:
        for child in node.children:
            yield from _lines(child, depth + 1)


def render_tree(root: TreeNode) -> str:
    """Draw the tree, each node on its own line preceded by a newline."""
    return "".join("\n" + line for line in _lines(root, 0))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the tree of the given path, or of the current directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        print("\n USAGE : ./a.out [PATH]", end="")
        return 0
    path = args[0] if args else os.getcwd()
    print(render_tree(build_tree(path)))
    return 0