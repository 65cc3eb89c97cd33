"""Hash-set backed index for exact word membership checks."""

from collections.abc import Iterable


class WordSet:
    """A set of canonical words answering membership in O(1)."""

    def __init__(self) -> None:
        """Initialize an empty word set."""
        self._words: set[str] = set()

    @classmethod
    def build(cls, words: Iterable[str]) -> "WordSet":
        """Create a WordSet from already-normalized words.

        Args:
            words (Iterable[str]): The words to index. Empty strings
            are skipped.

        Returns:
            WordSet: The populated index.

        """
        word_set = cls()
        for word in words:
            word_set.add(word)
        return word_set

    def add(self, word: str) -> None:
        """Add a single word. Adding an existing or empty word is a no-op."""
        if word:
            self._words.add(word)

    def contains(self, word: str) -> bool:
        """Check whether `word` is in the set.

        Args:
            word (str): The canonical word to look up.

        Returns:
            bool: True if the word was added before, False otherwise.

        """
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)
