"""Structured logging of dictionary loads and word lookups."""

import logging
import logging.handlers
from pathlib import Path

LOG_FILE_PATH = Path(__file__).parent.parent.parent / "logs/spellchecker.log"
_LOG_LEVEL = logging.INFO

LOG_FORMAT = (
    "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
    "module=%(module)s | funcName=%(funcName)s | "
    "lineno=%(lineno)d | message=%(message)s"
)


def setup_logging(
    log_file_path: Path = LOG_FILE_PATH,
    level: int = _LOG_LEVEL,
) -> logging.Handler:
    """Configure the root logger to write into a rotating log file.

    Existing root handlers are removed first, so calling this twice
    doesn't duplicate log lines.

    Args:
        log_file_path (Path): The file the log records are written to.
        level (int): The minimum level that gets recorded.

    Returns:
        logging.Handler: The installed file handler.

    """
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"),
    )
    root_logger.addHandler(file_handler)
    return file_handler


def log(
    word: str,
    is_correct: bool,
    suggestions: list[str],
    execution_time_ms: float,
) -> None:
    """Log the details of a single word lookup.

    Args:
        word (str): The normalized word that was looked up.
        is_correct (bool): Whether the word is in the dictionary.
        suggestions (list[str]): The suggestions produced for it.
        execution_time_ms (float): The lookup time in milliseconds.

    """
    logging.info(
        "Word: '%s', Correct: %s, Suggestions: %d, Execution Time: %.2f ms",
        word,
        "YES" if is_correct else "NO",
        len(suggestions),
        execution_time_ms,
    )
