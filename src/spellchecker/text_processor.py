"""Find misspelled words in a text, highlight them and rewrite them."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Optional

from .dictionary import Dictionary
from .normalizer import is_letter, normalize

# ANSI color codes
RED_COLOR = "\033[31m"
RESET_COLOR = "\033[0m"

IGNORE_CHOICE = "i"
CUSTOM_CHOICE = "c"


class WordSpan:
    """A run of letters in the text and whether it is spelled correctly."""

    __slots__ = ("word", "start", "end", "is_correct")

    def __init__(self, word: str, start: int, end: int, is_correct: bool):
        self.word = word
        self.start = start
        self.end = end
        self.is_correct = is_correct

    def __repr__(self) -> str:
        return (
            f"WordSpan(word={self.word!r}, start={self.start}, "
            f"end={self.end}, is_correct={self.is_correct})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordSpan):
            return NotImplemented
        return (self.word, self.start, self.end, self.is_correct) == (
            other.word,
            other.start,
            other.end,
            other.is_correct,
        )


def tokenize(text: str, dictionary: Dictionary) -> list[WordSpan]:
    """Split `text` into maximal runs of ASCII letters and check each one.

    Args:
        text (str): The text to scan.
        dictionary (Dictionary): The dictionary the words are checked
        against.

    Returns:
        list[WordSpan]: The words in order of appearance.

    """
    spans: list[WordSpan] = []
    i = 0
    while i < len(text):
        if not is_letter(text[i]):
            i += 1
            continue

        start = i
        while i < len(text) and is_letter(text[i]):
            i += 1

        word = text[start:i]
        canonical = normalize(word)
        is_correct = not canonical or dictionary.contains(canonical)
        spans.append(WordSpan(word, start, i, is_correct))
    return spans


def highlight(
    text: str,
    spans: list[WordSpan],
    color: Optional[str] = RED_COLOR,
) -> str:
    """Wrap every misspelled span of `text` in an ANSI color.

    Args:
        text (str): The original text.
        spans (list[WordSpan]): The spans produced by `tokenize`.
        color (Optional[str]): The escape code to use, or None to
        leave the text uncolored.

    Returns:
        str: The text with incorrect words highlighted.

    """
    if color is None:
        return text

    parts = []
    position = 0
    for span in spans:
        parts.append(text[position : span.start])
        if span.is_correct:
            parts.append(span.word)
        else:
            parts.append(f"{color}{span.word}{RESET_COLOR}")
        position = span.end
    parts.append(text[position:])
    return "".join(parts)


def collect_replacements(
    spans: list[WordSpan],
    dictionary: Dictionary,
    prompt: Optional[Callable[[str], str]] = None,
    output: Optional[Callable[[str], None]] = None,
) -> dict[str, str]:
    """Ask for a correction of every distinct misspelled word.

    For each word the suggestions are listed and the answer may be a
    suggestion number, 'c' to type a custom replacement or 'i' to keep
    the word. Numbers out of range and unknown answers keep the word.

    Args:
        spans (list[WordSpan]): The spans produced by `tokenize`.
        dictionary (Dictionary): Source of the suggestions.
        prompt (Optional[Callable[[str], str]]): Reads one answer,
        `input` by default.
        output (Optional[Callable[[str], None]]): Writes one line for the
        user, `print` by default.

    Returns:
        dict[str, str]: Misspelled word to its replacement.

    """
    prompt = prompt or input
    output = output or print
    replacements: dict[str, str] = {}
    processed: set[str] = set()

    for span in spans:
        if span.is_correct or span.word in processed:
            continue
        processed.add(span.word)

        output(f"\nIncorrect word: {span.word}")
        _, suggestions = dictionary.lookup(span.word)

        if suggestions:
            output("Suggestions:")
            for index, suggestion in enumerate(suggestions):
                output(f"{index}. {suggestion}")
            choice = prompt(
                "Enter choice (number), 'c' for custom, 'i' to ignore: ",
            ).strip()
        else:
            output("No suggestions found.")
            choice = prompt(
                "Enter 'c' for custom spelling, 'i' to ignore: ",
            ).strip()

        if choice == CUSTOM_CHOICE:
            replacement = prompt("Enter replacement: ").strip()
            if replacement:
                replacements[span.word] = replacement
        elif choice != IGNORE_CHOICE and suggestions and choice.isdecimal():
            index = int(choice)
            if index < len(suggestions):
                replacements[span.word] = suggestions[index]

        if span.word in replacements:
            logging.info(
                f"Replacing '{span.word}' with '{replacements[span.word]}'",
            )

    return replacements


def apply_replacements(
    text: str,
    spans: list[WordSpan],
    replacements: dict[str, str],
) -> str:
    """Rewrite every occurrence of the replaced words in `text`.

    Args:
        text (str): The original text the spans were taken from.
        spans (list[WordSpan]): The spans produced by `tokenize`.
        replacements (dict[str, str]): Word to replacement.

    Returns:
        str: The corrected text.

    """
    parts = []
    position = 0
    for span in spans:
        replacement = replacements.get(span.word)
        if replacement is None:
            continue
        parts.append(text[position : span.start])
        parts.append(replacement)
        position = span.end
    parts.append(text[position:])
    return "".join(parts)


class TextProcessor:
    """Load a text file, show its misspellings and save the fixes."""

    def __init__(self, dictionary: Dictionary, use_color: bool = True):
        self.dictionary = dictionary
        self.use_color = use_color
        self.original_text = ""
        self.spans: list[WordSpan] = []
        self.source_path: Optional[Path] = None

    def load(self, path: Path) -> None:
        """Read `path` and check all of its words.

        Raises:
            FileNotFoundError: If `path` does not exist.

        """
        try:
            self.original_text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise FileNotFoundError(f"File not found: {path}") from e

        self.source_path = path
        self.process_text(self.original_text)

    def process_text(self, text: str) -> None:
        """Check all the words of `text`."""
        self.original_text = text
        self.spans = tokenize(text, self.dictionary)
        logging.info(
            f"Checked {len(self.spans)} words, "
            f"{len(self.misspelled())} misspelled",
        )

    def misspelled(self) -> list[WordSpan]:
        """Return the spans that aren't in the dictionary."""
        return [span for span in self.spans if not span.is_correct]

    def render(self) -> str:
        """Return the text with misspelled words highlighted."""
        return highlight(
            self.original_text,
            self.spans,
            RED_COLOR if self.use_color else None,
        )

    def interactive_fix(
        self,
        prompt: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
    ) -> str:
        """Ask the user for corrections and return the corrected text."""
        replacements = collect_replacements(
            self.spans,
            self.dictionary,
            prompt,
            output,
        )
        return apply_replacements(self.original_text, self.spans, replacements)

    def save(self, text: str, path: Optional[Path] = None) -> Path:
        """Write `text` to `path`, or over the loaded file by default.

        Raises:
            ValueError: If no path is given and no file was loaded.

        """
        target = path or self.source_path
        if target is None:
            raise ValueError("No output path given and no file was loaded.")

        target.write_text(text, encoding="utf-8")
        logging.info(f"Corrected text saved to '{target}'")
        return target
