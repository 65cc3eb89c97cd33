"""Configuration parser for the spell checker."""

from pathlib import Path

from src.custom_data_structures.edit_distance.edit_distance import (
    LENGTH_GAP_THRESHOLD,
)
from src.custom_data_structures.Trie.Trie import DEFAULT_SUGGESTIONS_CAP

DEFAULT_DISTANCE = 1


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigNotFoundError(Exception):
    """Raised when any of the required configuration settings
    is not provided.
    """


class ConfigValueError(Exception):
    """Raised when a numeric setting can't be parsed or is out of range."""


class CheckerConfig:
    """A class to save spell checker configuration settings."""

    def __init__(
        self,
        dictionary_path: Path,
        max_suggestions: int = DEFAULT_SUGGESTIONS_CAP,
        default_distance: int = DEFAULT_DISTANCE,
        length_gap_threshold: int = LENGTH_GAP_THRESHOLD,
        use_color: bool = True,
        log_queries: bool = False,
    ) -> None:
        """Initialize the spell checker configuration.

        Args:
            dictionary_path (Path): The path to the vocabulary file.
            max_suggestions (int): Cap on the number of suggestions
            returned for one word.
            default_distance (int): Edit distance used when the caller
            doesn't pass one.
            length_gap_threshold (int): Length gap past which the edit
            distance is short-circuited.
            use_color (bool): Whether misspelled words are highlighted
            with ANSI colors.
            log_queries (bool): Whether every lookup is written to the log.

        """
        self.dictionary_path = dictionary_path
        self.max_suggestions = max_suggestions
        self.default_distance = default_distance
        self.length_gap_threshold = length_gap_threshold
        self.use_color = use_color
        self.log_queries = log_queries

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Spell checker configuration settings:
                Dictionary path: {self.dictionary_path}
                Max suggestions: {self.max_suggestions}
                Default distance: {self.default_distance}
                Length gap threshold: {self.length_gap_threshold}
                Colored output: {"YES" if self.use_color else "NO"}
                Log queries: {"YES" if self.log_queries else "NO"}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def parse_int(key: str, val: str, minimum: int) -> int:
    """Parse an integer setting and check its lower bound.

    Args:
        key (str): The key to parse the integer for.
        val (str): The value to be parsed.
        minimum (int): The smallest accepted value.

    Raises:
        ConfigValueError: If the value isn't an integer or is
        below `minimum`.

    Returns:
        int: The parsed value.

    """
    try:
        number = int(val.strip())
    except ValueError as e:
        raise ConfigValueError(
            f"Invalid integer value for key '{key}' in the configuration "
            f"file: '{val}'.",
        ) from e

    if number < minimum:
        raise ConfigValueError(
            f"Value for key '{key}' must be at least {minimum}, got {number}.",
        )
    return number


def load_config_file(config_file_path: Path) -> CheckerConfig:
    """Load and parse the configuration file.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If required settings are missing.
        ConfigBoolParsingError: If a boolean setting is invalid.
        ConfigValueError: If a numeric setting is invalid.
        FileNotFoundError: If the config file does not exist.

    Returns:
        CheckerConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    dictionary_path = None
    optional: dict[str, int | bool] = {}

    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "dictionary_path":
                dictionary_path = Path(value)
            elif key == "max_suggestions":
                optional[key] = parse_int(key, value, minimum=1)
            elif key in {"default_distance", "length_gap_threshold"}:
                optional[key] = parse_int(key, value, minimum=0)
            elif key in {"use_color", "log_queries"}:
                optional[key] = parse_bool(key, value)

    if dictionary_path is None:
        raise ConfigNotFoundError(
            "Missing required configuration: 'dictionary_path'. "
            "Please ensure the config file includes a valid line for "
            "'dictionary_path'.",
        )

    # Relative dictionary paths are resolved against the config file
    if not dictionary_path.is_absolute():
        dictionary_path = config_file_path.parent / dictionary_path

    return CheckerConfig(
        dictionary_path,
        **optional,  # type: ignore[arg-type]
    )
