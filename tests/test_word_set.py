from src.custom_data_structures.word_set.word_set import WordSet


def test_build_and_contains():
    word_set = WordSet.build(["cat", "dog", "hello"])
    assert word_set.contains("cat") is True
    assert word_set.contains("hello") is True
    assert word_set.contains("bird") is False
    assert len(word_set) == 3


def test_duplicates_are_idempotent():
    word_set = WordSet.build(["cat", "cat", "cat"])
    assert len(word_set) == 1
    assert "cat" in word_set


def test_empty_words_are_skipped():
    word_set = WordSet.build(["", "a", ""])
    assert len(word_set) == 1
    assert word_set.contains("") is False


def test_no_prefix_artifacts():
    word_set = WordSet.build(["hello"])
    assert word_set.contains("hell") is False
    assert word_set.contains("helloo") is False
