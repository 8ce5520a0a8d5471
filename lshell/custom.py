"""An extended interactive shell with a larger set of custom commands."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Sequence, TextIO

from lshell.commands import HostResolutionError, download_image, replace_line, resolve_host, to_hex
from lshell.history import CommandHistory
from lshell.shell import Shell, split_line
from lshell.textcount import DEFAULT_LIMIT, format_frequencies, top_words
from lshell.tree import build_tree, render_tree

PROMPT = "--> "
DEFAULT_WORD_FILE = "goldenball.txt"
_RULE = "-" * 61


class CustomShell(Shell):
    """A shell whose built-ins cover file, network and helper-program commands."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        super().__init__(stdout=stdout, stderr=stderr)
        self._stdin = stdin
        self.history = CommandHistory()
        self._builtins = {
            "dc": self._dc,
            "help": self._help,
            "exit": self._exit,
            "cw": self._cw,
            "ip": self._ip,
            "repl": self._repl,
            "hex": self._hex,
            "client": self._client,
            "tree": self._tree,
            "web": self._web,
            "game": self._game,
            "graphics": self._graphics,
            "history": self._history,
            "img": self._img,
            "word": self._word,
        }

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def _read_line(self) -> str:
        self.stdout.flush()
        return self.stdin.readline().rstrip("\n")

    def help_text(self) -> str:
        """Return the help message listing the custom commands."""
        names = "".join(f"  {name}\n" for name in self._builtins)
        return (
            "My Custom Shell\n"
            "----------------------------------------------------\n"
            "Type program names and arguments, and hit enter.\n"
            "The following are my custom commands:\n"
            f"{names}"
            "Use the man command for information on other programs.\n"
        )

    def execute(self, args: Sequence[str]) -> bool:
        """Record and run one command; return False when the shell should stop."""
        if args:
            self.history.add(" ".join(args))
        return super().execute(args)

    def _dc(self, args: Sequence[str]) -> bool:
        if len(args) < 2:
            self.stderr.write('lsh: expected argument to "dc"\n')
            return True
        try:
            os.chdir(args[1])
        except OSError as exc:
            self._error(exc.strerror or str(exc))
        return True

    def _ip(self, args: Sequence[str]) -> bool:
        hostname = args[1] if len(args) > 1 else ""
        try:
            address = resolve_host(hostname)
        except (HostResolutionError, ValueError):
            self.stderr.write(f"Error in resolving hostname {hostname}\n")
            return False
        self.stdout.write(f"Address for {hostname} is {address}\n")
        return False

    def _hex(self, args: Sequence[str]) -> bool:
        self.stdout.write("Enter string: ")
        text = self._read_line()
        self.stdout.write(f"Hexadecimal converted string is: \n{to_hex(text)}\n")
        return True

    def _repl(self, args: Sequence[str]) -> bool:
        self.stdout.write(
            "\n\n Replace a specific line in a text file with a new text :\n"
            f"{_RULE}\n"
            " Input the file name to be opened : "
        )
        name = self._read_line()
        try:
            with open(name, encoding="utf-8"):
                pass
        except OSError:
            self.stdout.write("Unable to open the input file!!\n")
            return False
        self.stdout.write(" Input the content of the new line : ")
        new_line = self._read_line()
        self.stdout.write(" Input the line no you want to replace : ")
        raw_number = self._read_line().strip()
        try:
            line_number = int(raw_number)
        except ValueError:
            self._error(f"invalid line number: {raw_number!r}")
            return True
        try:
            replace_line(name, line_number, new_line)
        except OSError as exc:
            self._error(f"{name}: {exc.strerror or exc}")
            return True
        self.stdout.write(" Replacement did successfully..!! \n")
        return True

    def _tree(self, args: Sequence[str]) -> bool:
        if len(args) > 2:
            self.stdout.write("\n USAGE : ./a.out [PATH]")
            return False
        path = args[1] if len(args) == 2 else os.getcwd()
        self.stdout.write(render_tree(build_tree(path)) + "\n")
        return True

    def _history(self, args: Sequence[str]) -> bool:
        self.stdout.write(self.history.format())
        return True

    def _word(self, args: Sequence[str]) -> bool:
        path = args[1] if len(args) > 1 else DEFAULT_WORD_FILE
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                text = handle.read()
        except OSError:
            self.stdout.write("Unable to open file.\nPlease check you have read previleges.\n")
            return True
        self.stdout.write("\nOccurrences of all distinct words in file: \n")
        self.stdout.write(format_frequencies(top_words(text, DEFAULT_LIMIT)))
        return True

    def _img(self, args: Sequence[str]) -> bool:
        if len(args) < 2:
            self.stderr.write('lsh: expected argument to "img"\n')
            return True
        self.stdout.flush()
        try:
            download_image(args[1])
        except FileNotFoundError:
            self._error("wget: command not found")
        except subprocess.CalledProcessError as exc:
            self._error(f"wget exited with status {exc.returncode}")
        return True

    def _client(self, args: Sequence[str]) -> bool:
        return self.launch(["java", "UDPClientcopy_.java"])

    def _web(self, args: Sequence[str]) -> bool:
        return self.launch(["w3m", *args[1:]])

    def _game(self, args: Sequence[str]) -> bool:
        return self.launch(["./ball"])

    def _graphics(self, args: Sequence[str]) -> bool:
        return self.launch(["./graphics"])

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Prompt, read and execute lines until a command stops the shell or input ends."""
        if stdin is not None:
            self._stdin = stdin
        if stdout is not None:
            self.stdout = stdout
        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                break
            if not self.execute(split_line(line)):
                break


def main(argv: Sequence[str] | None = None) -> int:
    """Start the custom shell on the standard streams."""
    CustomShell().run()
    return 0