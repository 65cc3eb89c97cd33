"""Turn raw tokens into the canonical form used for dictionary lookups."""

import string

# Only the single-byte ASCII alphabet counts as letters
LETTERS = frozenset(string.ascii_letters)


def is_letter(char: str) -> bool:
    """Return True if `char` is an ASCII letter."""
    return char in LETTERS


def normalize(raw: str) -> str:
    """Keep the ASCII letters of `raw`, lowercased and in order.

    Digits, punctuation and whitespace are dropped, so "Don't!" becomes
    "dont". An empty result means the token is not a checkable word.

    Args:
        raw (str): The raw token.

    Returns:
        str: The canonical lookup key.

    """
    return "".join(char.lower() for char in raw if char in LETTERS)
