import pytest

from src.spellchecker.dictionary import Dictionary

VOCABULARY = ["cat", "cap", "car", "dog", "hello", "world", "the", "Don't"]


@pytest.fixture
def vocabulary_file(tmp_path):
    """Write a small vocabulary file, several words per line."""
    file_path = tmp_path / "dictionary.txt"
    file_path.write_text(
        "cat cap car\ndog\n  hello   world\nthe Don't\n",
        encoding="utf-8",
    )
    return file_path


@pytest.fixture
def dictionary():
    """A dictionary built from VOCABULARY."""
    words = Dictionary()
    words.add_words(VOCABULARY)
    return words
