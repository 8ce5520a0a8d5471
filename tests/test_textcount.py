import pytest

from lshell.textcount import (
    CharStats,
    count_stats,
    format_frequencies,
    main,
    top_words,
    word_frequencies,
)


def test_count_stats_invariants():
    text = "one two\nthree four five\nsix"
    stats = count_stats(text)
    assert stats.character_count == len(text)
    assert stats.word_count == stats.space_count + stats.line_count
    assert stats.space_count == text.count(" ")
    assert stats.line_count == text.count("\n")


def test_count_stats_empty_text_is_all_zero():
    assert count_stats("") == CharStats()


def test_word_frequencies_strips_trailing_punctuation():
    freqs = word_frequencies("Hello, world. hello world!")
    assert freqs == {"Hello": 1, "world": 2, "hello": 1}


def test_word_frequencies_strips_only_last_mark():
    assert list(word_frequencies("wow!!")) == ["wow!"]


def test_word_frequencies_keeps_first_occurrence_order():
    assert list(word_frequencies("b a b c a")) == ["b", "a", "c"]


def test_top_words_is_sorted_and_complete():
    text = "x y y z z z w"
    ranked = top_words(text, 10)
    counts = [count for _, count in ranked]
    assert counts == sorted(counts, reverse=True)
    assert dict(ranked) == word_frequencies(text)


def test_top_words_respects_limit():
    ranked = top_words("a b c d e f", 2)
    assert [word for word, _ in ranked] == ["a", "b"]


def test_top_words_ties_keep_text_order():
    assert [word for word, _ in top_words("p q r", 10)] == ["p", "q", "r"]


def test_format_frequencies_layout():
    assert format_frequencies([("cat", 3)]) == "cat" + " " * 12 + " => 3\n"


def test_format_frequencies_empty():
    assert format_frequencies([]) == ""


def test_main_reports_words(tmp_path, capsys):
    text = "red blue red green red blue"
    path = tmp_path / "words.txt"
    path.write_text(text)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Occurrences of all distinct words in file:" in out
    assert format_frequencies(top_words(text, 10)) in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Unable to open file." in capsys.readouterr().out


@pytest.mark.parametrize("text", ["solo", "solo."])
def test_single_word_round_trip(text):
    assert word_frequencies(text) == {"solo": 1}