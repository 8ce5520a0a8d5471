# lshell

A small interactive command shell. It reads a line, splits it on spaces,
tabs, carriage returns, newlines and bell characters, runs a built-in command
when the first word names one, and otherwise launches the named program and
waits for it to finish. The package also ships a few stand-alone text and
directory utilities and a first-person camera class.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

| Command            | What it does                                                      |
|--------------------|-------------------------------------------------------------------|
| `lshell`           | The basic shell with the `cd`, `help`, `exit` and `cw` built-ins. |
| `lshell-custom`    | The extended shell with its larger set of custom built-ins.       |
| `lshell-tree`      | Prints a directory as a tree (current directory by default).      |
| `lshell-history`   | A prompt that keeps the last 20 commands.                         |
| `lshell-ls`        | Shows the working directory, then lists the directory you name.   |
| `lshell-wordcount` | Shows the ten most frequent words in a file.                      |

### The shell

```
$ lshell
> help
> cd /tmp
> ls -l
> exit
```

Built-ins:

- `cd DIR`: change the working directory.
- `help`: list the built-in commands.
- `exit`: leave the shell.
- `cw FILE`: print character, space, word and line counts for a file, then
  the file itself. Every space and every newline counts as the end of a word.

Anything else is run as an external program, with the rest of the words as
its arguments. The shell also stops at end of input.

### The custom shell

`lshell-custom` prompts with `--> ` and records every command it runs. Its
built-ins:

- `dc DIR`: change the working directory.
- `help`: list the built-in commands.
- `exit`: leave the shell.
- `cw FILE`: the same counts as in `lshell`.
- `ip HOST`: print the first IPv4 address of a host name. The shell stops
  after this command, whether or not the name resolved.
- `repl`: asks for a file name, the new line and a line number (counted from
  zero), then replaces that line in the file. If the file cannot be opened
  the shell stops.
- `hex`: reads a line and prints its UTF-8 bytes as upper-case hexadecimal.
- `tree [PATH]`: print a directory tree; with more than one argument it prints
  a usage line and stops the shell.
- `history`: print the recorded commands, numbered, oldest first.
- `word [FILE]`: the ten most frequent words of a file (`goldenball.txt` by
  default).
- `img URL`: download the URL to `Naruto.png` with `wget`.
- `web ARGS...`: run `w3m` with the given arguments.
- `client`, `game`, `graphics`: run `java UDPClientcopy_.java`, `./ball` and
  `./graphics` respectively.

### Directory tree

```
$ lshell-tree path/to/dir
```

With no argument it prints the current working directory. The first line is
`.`; entries are sorted by name, each level of nesting adds `|     `, and
each entry is marked with `|-----`. Directories that cannot be opened are
shown without children.

### Command history

```
$ lshell-history
user@shell # ls
user@shell # history
user@shell # hc
user@shell # quit
```

`history` prints the stored commands, oldest first (including the `history`
command itself); `hc` clears them; `quit` leaves.

### Directory listing and word counts

`lshell-ls [DIR]` prints the working directory, then `.`, `..` and the
entries of `DIR` in name order; without an argument it reads the directory
name from standard input.

`lshell-wordcount [FILE]` prints the ten most frequent words of a file. One
trailing punctuation mark is removed from each word; words with equal counts
keep the order in which they first appear. Without an argument it asks for
the path.

## Library use

```python
from lshell.textcount import count_stats, top_words, format_frequencies
from lshell.tree import build_tree, render_tree
from lshell.history import CommandHistory
from lshell.commands import to_hex, replace_line, resolve_host
from lshell.shell import Shell, split_line

stats = count_stats("hello world\n")
print(format_frequencies(top_words("a b a c a b", 10)))
print(render_tree(build_tree(".")))
print(to_hex("AB"))  # "4142"

history = CommandHistory()
history.add("ls")
print(history.format())

Shell().execute(split_line("help"))
```

`lshell.camera.Camera` is a first-person camera: it keeps a position and
yaw/pitch angles in degrees, moves with `key_control` (a container of key
codes for W, A, S and D, and a time step), turns with `mouse_control` (pitch
is held within ±89 degrees) and gives a 4×4 view matrix from `view_matrix`.
`lshell.camera.look_at` builds such a matrix directly.

## What it does not do

- The camera only computes positions and matrices. There is no window, no
  drawing, no meshes, shaders or textures.
- `client`, `game`, `graphics`, `web` and `img` only start outside programs
  (`java`, `./ball`, `./graphics`, `w3m`, `wget`); none of these come with the
  package, and the commands report an error if the program is missing.
- The shells have no pipes, redirection, quoting or job control.