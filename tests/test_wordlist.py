import pytest

from prefixtrie import wordlist
from prefixtrie.constants import BUILTIN_WORDS
from prefixtrie.wordlist import WordList


@pytest.fixture(autouse=True)
def no_default_paths(monkeypatch):
    monkeypatch.setattr(wordlist, "WORDLIST_SEARCH_PATHS", [])


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# sample list\nApple\napp\n\n  apply  \nbanana\napp\n", encoding="utf-8")
    return path


def test_load_from_path(words_file, caplog):
    with caplog.at_level("INFO", logger="prefixtrie"):
        words = WordList(str(words_file))
    assert words.source == str(words_file)
    assert len(words) == 4
    assert "apply" in words
    assert "Apple" in words
    assert "apple" not in words
    assert "# sample list" not in words
    assert f"Loaded 4 words from {words_file}" in caplog.text


def test_casefold(words_file):
    words = WordList(str(words_file), casefold=True)
    assert len(words) == 4
    assert "APPLE" in words
    assert words.complete("AP") == ["app", "apple", "apply"]


def test_complete(words_file):
    words = WordList(str(words_file))
    assert words.complete("app") == ["app", "apply"]
    assert words.complete("app", limit=1) == ["app"]
    assert words.complete("cherry") == []


def test_empty_word_is_not_valid(words_file):
    words = WordList(str(words_file))
    assert not words.is_valid("")
    assert not words.is_valid("   ")


def test_missing_path_falls_back_to_builtin(tmp_path, caplog):
    with caplog.at_level("WARNING", logger="prefixtrie"):
        words = WordList(str(tmp_path / "nope.txt"))
    assert words.source is None
    assert len(words) == len(BUILTIN_WORDS)
    assert "dog" in words
    assert "built-in" in caplog.text


def test_missing_path_strict(tmp_path):
    with pytest.raises(FileNotFoundError):
        WordList(str(tmp_path / "nope.txt"), strict=True)


def test_empty_file_is_skipped(tmp_path, words_file, monkeypatch):
    empty = tmp_path / "empty.txt"
    empty.write_text("# nothing here\n\n", encoding="utf-8")
    monkeypatch.setattr(wordlist, "WORDLIST_SEARCH_PATHS", [str(words_file)])
    words = WordList(str(empty))
    assert words.source == str(words_file)
    assert len(words) == 4


def test_unreadable_file_is_skipped(tmp_path, words_file, monkeypatch, caplog):
    bad = tmp_path / "latin1.txt"
    bad.write_bytes(b"alpha\nbeta\ncaf\xe9\n")
    monkeypatch.setattr(wordlist, "WORDLIST_SEARCH_PATHS", [str(tmp_path), str(words_file)])
    with caplog.at_level("WARNING", logger="prefixtrie"):
        words = WordList(str(bad))
    assert words.source == str(words_file)
    assert len(words) == 4
    assert "alpha" not in words
    assert f"Could not read word list {bad}" in caplog.text
    assert f"Could not read word list {tmp_path}:" in caplog.text


def test_unreadable_file_falls_back_to_builtin(tmp_path):
    bad = tmp_path / "latin1.txt"
    bad.write_bytes(b"alpha\ncaf\xe9\n")
    words = WordList(str(bad))
    assert words.source is None
    assert len(words) == len(BUILTIN_WORDS)
    assert "alpha" not in words


def test_remove_through_trie(words_file):
    words = WordList(str(words_file))
    assert words.trie.remove("apply")
    assert "apply" not in words
    assert words.complete("app") == ["app"]
