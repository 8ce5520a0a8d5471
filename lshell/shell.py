"""A minimal interactive shell with a few built-in commands."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from typing import Callable, Sequence, TextIO

from lshell.textcount import count_stats

PROMPT = "> "
_DELIMITERS = re.compile(r"[ \t\r\n\a]+")


def split_line(line: str) -> list[str]:
    """Split a command line on spaces, tabs, carriage returns, newlines and bells."""
    return [token for token in _DELIMITERS.split(line) if token]


def _file_descriptor(stream: TextIO) -> int | None:
    try:
        return stream.fileno()
    except (OSError, ValueError, AttributeError):
        return None


class Shell:
    """Runs built-in commands itself and starts every other command as a program."""

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        self._stdout = stdout
        self._stderr = stderr
        self.running = True
        self._builtins: dict[str, Callable[[Sequence[str]], bool]] = {
            "cd": self._cd,
            "help": self._help,
            "exit": self._exit,
            "cw": self._cw,
        }

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @stdout.setter
    def stdout(self, stream: TextIO | None) -> None:
        self._stdout = stream

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def _error(self, message: str) -> None:
        self.stderr.write(f"lsh: {message}\n")

    def _cd(self, args: Sequence[str]) -> bool:
        if len(args) < 2:
            self.stderr.write('lsh: expected argument to "cd"\n')
            return True
        try:
            os.chdir(args[1])
        except OSError as exc:
            self._error(exc.strerror or str(exc))
        return True

    def _help(self, args: Sequence[str]) -> bool:
        self.stdout.write(self.help_text())
        return True

    def _exit(self, args: Sequence[str]) -> bool:
        self.running = False
        return self.running

    def _cw(self, args: Sequence[str]) -> bool:
        if len(args) < 2:
            self.stderr.write('lsh: expected argument to "cw"\n')
            return True
        try:
            with open(args[1], encoding="utf-8", errors="replace", newline="") as handle:
                text = handle.read()
        except OSError as exc:
            self._error(f"{args[1]}: {exc.strerror or exc}")
            return True
        stats = count_stats(text)
        self.stdout.write(
            f"character_count = {stats.character_count}\n"
            f"space_count = {stats.space_count}\n"
            f"word_count = {stats.word_count}\n"
            f"line_count = {stats.line_count}\n"
        )
        self.stdout.write(text)
        return True

    def help_text(self) -> str:
        """Return the help message listing the built-in commands."""
        names = "".join(f"  {name}\n" for name in self._builtins)
        return (
            "Type program names and arguments, and hit enter.\n"
            "The following are built in:\n"
            f"{names}"
            "Use the man command for information on other programs.\n"
        )

    def execute(self, args: Sequence[str]) -> bool:
        """Run one command; return False when the shell should stop."""
        if not args:
            return True
        builtin = self._builtins.get(args[0])
        if builtin is not None:
            return builtin(args)
        return self.launch(args)

    def launch(self, args: Sequence[str]) -> bool:
        """Start a program and wait for it to finish; always keeps the shell going."""
        out_fd = _file_descriptor(self.stdout)
        err_fd = _file_descriptor(self.stderr)
        self.stdout.flush()
        self.stderr.flush()
        try:
            result = subprocess.run(
                list(args),
                stdout=out_fd if out_fd is not None else subprocess.PIPE,
                stderr=err_fd if err_fd is not None else subprocess.PIPE,
            )
        except OSError as exc:
            self._error(f"{args[0]}: {exc.strerror or exc}")
            return True
        if result.stdout:
            self.stdout.write(result.stdout.decode("utf-8", errors="replace"))
        if result.stderr:
            self.stderr.write(result.stderr.decode("utf-8", errors="replace"))
        return True

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Prompt, read and execute lines until "exit" or end of input."""
        source = stdin if stdin is not None else sys.stdin
        if stdout is not None:
            self.stdout = stdout
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = source.readline()
            if not line:
                break
            if not self.execute(split_line(line)):
                break


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive shell on the standard streams."""
    Shell().run()
    return 0


__all__ = ["Shell", "split_line", "main", "PROMPT"]