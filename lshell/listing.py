"""List the entries of a directory."""

from __future__ import annotations

import os
import sys
from typing import Sequence


def list_directory(path: str | os.PathLike[str]) -> list[str]:
    """Return ".", ".." and the directory's entries in name order.

    Raises OSError when the directory cannot be opened.
    """
    return [".", "..", *sorted(os.listdir(path))]


def main(argv: Sequence[str] | None = None) -> int:
    """Show the working directory, then list the named directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        cwd = os.getcwd()
    except OSError as exc:
        print(f"getcwd() error: {exc.strerror}", file=sys.stderr)
        return 1
    print(f"Current working dir: {cwd}")
    print("Enter directory name")
    if args:
        name = args[0]
    else:
        try:
            words = input().split()
        except EOFError:
            words = []
        name = words[0] if words else ""
    try:
        names = list_directory(name)
    except OSError as exc:
        print(f"Cannot find directory: {exc.strerror}", file=sys.stderr)
        return 255
    for entry in names:
        print(f"{entry}\t")
    return 0