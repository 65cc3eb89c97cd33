"""This module provides the entry point for running the spell checker."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from src.spellchecker.config import (
    ConfigBoolParsingError,
    ConfigNotFoundError,
    ConfigValueError,
    load_config_file,
)
from src.spellchecker.dictionary import Dictionary, DictionaryLoadError
from src.spellchecker.logger import LOG_FILE_PATH, setup_logging
from src.spellchecker.text_processor import TextProcessor

CONFIG_PATH = Path(__file__).parent / "config.txt"
INPUT_PATH = Path("input.txt")


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description="Highlight and fix misspelled words in a text file.",
    )
    parser.add_argument(
        "--config_path",
        type=str,
        default=str(CONFIG_PATH),
        help="Optional path to the config file.",
        required=False,
    )
    parser.add_argument(
        "--input",
        type=str,
        default=str(INPUT_PATH),
        help="The text file to check (default: input.txt).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Where to save the corrected text (default: overwrite input).",
    )
    parser.add_argument(
        "--distance",
        type=int,
        default=None,
        choices=[0, 1, 2],
        help="Edit distance for suggestions (default: from the config).",
    )
    parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Only show the highlighted text, don't ask for fixes.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Don't color misspelled words.",
    )
    parser.add_argument(
        "--log_path",
        type=str,
        default=str(LOG_FILE_PATH),
        help="Where to write the log file.",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run the spell checker.

    Returns:
        int: The process exit code.

    """
    args = build_parser().parse_args(argv)

    setup_logging(Path(args.log_path))

    try:
        config = load_config_file(Path(args.config_path))
    except (
        FileNotFoundError,
        ConfigNotFoundError,
        ConfigBoolParsingError,
        ConfigValueError,
    ) as e:
        print(f"[CHECKER ERROR] {e}", file=sys.stderr)
        return 1

    if args.distance is not None:
        config.default_distance = args.distance

    try:
        dictionary = Dictionary.from_config(config)
    except DictionaryLoadError as e:
        print(f"[CHECKER ERROR] {e}", file=sys.stderr)
        return 1

    processor = TextProcessor(
        dictionary,
        use_color=config.use_color and not args.no_color,
    )
    try:
        processor.load(Path(args.input))
    except FileNotFoundError as e:
        print(f"[CHECKER ERROR] {e}", file=sys.stderr)
        return 1

    print(processor.render())

    if args.no_interactive:
        return 0

    try:
        corrected = processor.interactive_fix()
    except EOFError:
        # stdin closed mid-review, leave the text untouched
        print("\n[CHECKER] Input closed, no changes saved.", file=sys.stderr)
        return 0

    output_path = Path(args.output) if args.output else None
    saved_to = processor.save(corrected, output_path)
    print(f"\nCorrected text saved to {saved_to}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
