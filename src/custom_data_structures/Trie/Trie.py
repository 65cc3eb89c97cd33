"""This module represents the implementation of a Trie structure that's
used for exact word lookups and for fuzzy (edit distance bounded)
suggestions over a vocabulary.
"""

from src.custom_data_structures.edit_distance.edit_distance import (
    LENGTH_GAP_THRESHOLD,
    bounded_edit_distance,
)

DEFAULT_SUGGESTIONS_CAP = 10


class TrieNode:
    """Represent a node in the trie structure."""

    __slots__ = ("children", "is_the_end_of_word")

    def __init__(self) -> None:
        """Initialize a new Trie node.

        Attributes:
            children (dict): A dictionary mapping characters to
            their corresponding child TrieNode instances.
            is_the_end_of_word (bool): Indicates whether this
            node marks the end of a valid word in the Trie.

        """
        self.children: dict[str, TrieNode] = {}
        self.is_the_end_of_word = False


class StringTrie:
    """Represents the string trie data structure."""

    def __init__(self) -> None:
        """Initialize the root node of the Trie."""
        self.root = TrieNode()

    def insert(self, word: str) -> None:
        """Insert a new word into the String Trie structure.

        Empty words are ignored so the root never marks a word.

        Args:
            word (str): The word to be inserted into the Trie structure.

        """
        if not word:
            return

        node = self.root
        for char in word:
            # If the character is not already a child, add a new TrieNode
            if char not in node.children:
                node.children[char] = TrieNode()
            node = node.children[char]
        node.is_the_end_of_word = True

    def contains_exact(self, word: str) -> bool:
        """Check for the existence of a given word in the String
        Trie structure.

        Args:
            word (str): The word to search for in the Trie structure.

        Returns:
            bool: True if the exact `word` is present
            in the trie as a complete word, False otherwise.

        """
        node = self.root
        for char in word:
            # If the character is not found, the word does not exist
            if char not in node.children:
                return False
            node = node.children[char]
        return node.is_the_end_of_word

    def suggest(
        self,
        target: str,
        max_distance: int,
        cap: int = DEFAULT_SUGGESTIONS_CAP,
        length_gap_threshold: int = LENGTH_GAP_THRESHOLD,
    ) -> list[str]:
        """Collect stored words within `max_distance` edits of `target`.

        The trie is walked depth first with an explicit stack, so very
        long words don't hit the recursion limit. Branches whose path is
        already longer than `len(target) + max_distance` are not
        descended, and the walk stops as soon as `cap` words were found.
        Words come back in traversal order, not sorted by distance.

        Args:
            target (str): The normalized word to find neighbours for.
            max_distance (int): The largest accepted edit distance.
            cap (int): The maximum number of words to return.
            length_gap_threshold (int): Length gap past which the edit
            distance is not computed exactly. It is widened to
            `max_distance` when that is larger.

        Returns:
            list[str]: At most `cap` words, each within `max_distance`
            edits of `target`.

        """
        suggestions: list[str] = []
        max_length = len(target) + max_distance
        if cap <= 0 or max_distance < 0 or max_length == 0:
            return suggestions

        max_gap = max(length_gap_threshold, max_distance)

        # stack[i] iterates the children of the node reached by path[:i]
        path: list[str] = []
        stack = [iter(self.root.children.items())]
        while stack and len(suggestions) < cap:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                if path:
                    path.pop()
                continue

            char, child = entry
            path.append(char)
            if child.is_the_end_of_word:
                candidate = "".join(path)
                distance = bounded_edit_distance(candidate, target, max_gap)
                if distance <= max_distance:
                    suggestions.append(candidate)

            # No descendant can get back within the bound
            if len(path) < max_length:
                stack.append(iter(child.children.items()))
            else:
                path.pop()

        return suggestions
