"""A fixed-size command history and a prompt that records it."""

from __future__ import annotations

import sys
from collections import deque
from typing import Sequence

HISTORY_COUNT = 20


class CommandHistory:
    """Keeps the most recent commands, oldest first."""

    def __init__(self, capacity: int = HISTORY_COUNT) -> None:
        self._commands: deque[str] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._commands)

    def add(self, command: str) -> None:
        """Record a command, forgetting the oldest one when full."""
        self._commands.append(command)

    def entries(self) -> list[str]:
        """Return the recorded commands, oldest first."""
        return list(self._commands)

    def format(self) -> str:
        """Render the history as numbered lines."""
        return "".join(
            f"{number:4d}  {command}\n"
            for number, command in enumerate(self._commands, start=1)
        )

    def clear(self) -> None:
        """Forget every recorded command."""
        self._commands.clear()


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands until "quit"; "history" lists them and "hc" clears them."""
    history = CommandHistory()
    while True:
        try:
            command = input("user@shell # ")
        except EOFError:
            break
        history.add(command)
        if command == "history":
            sys.stdout.write(history.format())
        elif command == "hc":
            history.clear()
        elif command == "quit":
            break
    history.clear()
    return 0