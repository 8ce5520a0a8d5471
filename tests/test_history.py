import io
import sys

from lshell.history import HISTORY_COUNT, CommandHistory, main


def test_add_and_entries():
    history = CommandHistory()
    for command in ["ls", "pwd", "cd /"]:
        history.add(command)
    assert history.entries() == ["ls", "pwd", "cd /"]
    assert len(history) == 3


def test_capacity_drops_oldest():
    history = CommandHistory()
    commands = [f"cmd{i}" for i in range(HISTORY_COUNT + 5)]
    for command in commands:
        history.add(command)
    assert history.entries() == commands[-HISTORY_COUNT:]


def test_format_numbering():
    history = CommandHistory()
    history.add("ls")
    history.add("pwd")
    assert history.format() == "   1  ls\n   2  pwd\n"


def test_clear_then_add():
    history = CommandHistory()
    history.add("one")
    history.clear()
    assert history.entries() == []
    assert history.format() == ""
    history.add("two")
    assert history.entries() == ["two"]


def test_main_lists_history(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ls\nhistory\nquit\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "   1  ls\n" in out
    assert "   2  history\n" in out


def test_main_clear_command(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("ls\nhc\nhistory\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "ls\n" not in out.replace("user@shell # ", "")
    assert "   1  history\n" in out