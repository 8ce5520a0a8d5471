"""Character statistics and word-frequency reports for text files."""

from __future__ import annotations

import string
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class CharStats:
    """Counts of characters, spaces, words and lines in a text."""

    character_count: int = 0
    space_count: int = 0
    word_count: int = 0
    line_count: int = 0


def count_stats(text: str) -> CharStats:
    """Count characters, spaces and lines; every space or newline ends a word."""
    spaces = text.count(" ")
    lines = text.count("\n")
    return CharStats(
        character_count=len(text),
        space_count=spaces,
        word_count=spaces + lines,
        line_count=lines,
    )


def word_frequencies(text: str) -> dict[str, int]:
    """Count whitespace-separated words, dropping one trailing punctuation mark.

    Words keep the order in which they first appear.
    """
    counts: dict[str, int] = {}
    for word in text.split():
        if word[-1] in string.punctuation:
            word = word[:-1]
        counts[word] = counts.get(word, 0) + 1
    return counts


def top_words(text: str, limit: int = DEFAULT_LIMIT) -> list[tuple[str, int]]:
    """Return the most frequent words, most frequent first; ties keep text order."""
    ranked = sorted(word_frequencies(text).items(), key=lambda pair: -pair[1])
    return ranked[:limit]


def format_frequencies(pairs: Iterable[tuple[str, int]]) -> str:
    """Render word/count pairs as left-aligned report lines."""
    return "".join(f"{word:<15} => {count}\n" for word, count in pairs)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the ten most frequent words of a file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        path = args[0]
    else:
        try:
            path = input("Enter file path: ").strip()
        except EOFError:
            path = ""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        print("Unable to open file.")
        print("Please check you have read previleges.")
        return 1
    print("\nOccurrences of all distinct words in file: ")
    sys.stdout.write(format_frequencies(top_words(text, DEFAULT_LIMIT)))
    return 0