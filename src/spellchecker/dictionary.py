"""The vocabulary index answering exact and fuzzy word lookups."""

import logging
import time
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from src.custom_data_structures.edit_distance.edit_distance import (
    LENGTH_GAP_THRESHOLD,
)
from src.custom_data_structures.Trie.Trie import (
    DEFAULT_SUGGESTIONS_CAP,
    StringTrie,
)
from src.custom_data_structures.word_set.word_set import WordSet

from .config import DEFAULT_DISTANCE, CheckerConfig
from .logger import log
from .normalizer import normalize


class DictionaryLoadError(Exception):
    """Raised when the vocabulary source can't be opened or read."""


class Dictionary:
    """Known words held in a hash set for exact checks and in a trie
    for suggestions.

    Build it once at startup and pass it to whatever needs lookups;
    after loading it is only read.
    """

    def __init__(
        self,
        max_suggestions: int = DEFAULT_SUGGESTIONS_CAP,
        default_distance: int = DEFAULT_DISTANCE,
        length_gap_threshold: int = LENGTH_GAP_THRESHOLD,
        log_queries: bool = False,
    ) -> None:
        """Initialize an empty dictionary.

        Args:
            max_suggestions (int): Cap on suggestions per word.
            default_distance (int): Edit distance used by `suggest`
            when none is given.
            length_gap_threshold (int): Length gap past which edit
            distances are short-circuited.
            log_queries (bool): Whether `lookup` logs every word.

        """
        self.max_suggestions = max_suggestions
        self.default_distance = default_distance
        self.length_gap_threshold = length_gap_threshold
        self.log_queries = log_queries
        self.word_set = WordSet()
        self.trie = StringTrie()

    @classmethod
    def from_config(cls, config: CheckerConfig) -> "Dictionary":
        """Build a dictionary from the settings and vocabulary file
        named in `config`.

        Raises:
            DictionaryLoadError: If the vocabulary file can't be read.

        """
        dictionary = cls(
            max_suggestions=config.max_suggestions,
            default_distance=config.default_distance,
            length_gap_threshold=config.length_gap_threshold,
            log_queries=config.log_queries,
        )
        dictionary.load_file(config.dictionary_path)
        return dictionary

    def add(self, raw_word: str) -> None:
        """Normalize `raw_word` and index it, skipping empty results."""
        word = normalize(raw_word)
        if word:
            self.word_set.add(word)
            self.trie.insert(word)

    def add_words(self, raw_words: Iterable[str]) -> None:
        """Index every token in `raw_words`."""
        for raw_word in raw_words:
            self.add(raw_word)

    def load_file(self, path: Path) -> None:
        """Read whitespace separated words from a file into the dictionary.

        Args:
            path (Path): The vocabulary file.

        Raises:
            DictionaryLoadError: If the file doesn't exist or can't be read.

        """
        try:
            with path.open("r", encoding="utf-8") as file:
                for line in file:
                    self.add_words(line.split())
        except OSError as e:
            logging.error(f"Cannot open dictionary file '{path}': {e}")
            raise DictionaryLoadError(
                f"Cannot open dictionary file '{path}'.",
            ) from e
        except UnicodeDecodeError as e:
            logging.error(f"Dictionary file '{path}' is not valid UTF-8.")
            raise DictionaryLoadError(
                f"Dictionary file '{path}' is not valid UTF-8.",
            ) from e

        logging.info(f"Loaded {len(self.word_set)} words from '{path}'")

    def contains(self, word: str) -> bool:
        """Check whether the canonical `word` is a known word."""
        return self.word_set.contains(word)

    def contains_exact(self, word: str) -> bool:
        """Check `word` by walking the trie instead of the hash set."""
        return self.trie.contains_exact(word)

    def suggest(
        self,
        word: str,
        max_distance: Optional[int] = None,
    ) -> list[str]:
        """Return known words close to the canonical `word`.

        Args:
            word (str): The normalized word.
            max_distance (Optional[int]): The accepted edit distance,
            `default_distance` when omitted.

        Returns:
            list[str]: Up to `max_suggestions` words in trie traversal
            order.

        """
        if max_distance is None:
            max_distance = self.default_distance
        return self.trie.suggest(
            word,
            max_distance,
            cap=self.max_suggestions,
            length_gap_threshold=self.length_gap_threshold,
        )

    def lookup(self, raw_word: str) -> tuple[bool, list[str]]:
        """Check a raw token and fetch suggestions when it's unknown.

        Tokens without any letters count as correct since there is
        nothing to check.

        Args:
            raw_word (str): The token as it appears in the text.

        Returns:
            tuple[bool, list[str]]: Whether the word is correct, and the
            suggestions (empty when it is).

        """
        start_time = time.perf_counter()
        word = normalize(raw_word)

        is_correct = not word or self.contains(word)
        suggestions = [] if is_correct else self.suggest(word)

        if self.log_queries:
            duration = (time.perf_counter() - start_time) * 1000
            log(word, is_correct, suggestions, duration)

        return is_correct, suggestions

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self.word_set)
