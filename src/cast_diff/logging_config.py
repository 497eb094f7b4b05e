"""
Logging configuration for cast-diff.

Log records go to stderr through rich, so stdout stays reserved for the
comparison verdict. Only the ``cast_diff`` logger is configured; the root
logger is left to the host application.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "cast_diff"

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a rich stderr handler (and optionally a file handler) to the
    package logger.

    Handlers installed by an earlier call are closed and replaced.

    Args:
        verbosity: "quiet" (errors only), "normal" (warnings) or "verbose"
            (debug records, with source paths and tracebacks with locals)
        log_file: Optional file path to append log records to

    Returns:
        The configured ``cast_diff`` logger

    Raises:
        ValueError: If verbosity is not one of the known levels
    """
    try:
        level = _LEVELS[verbosity]
    except KeyError:
        raise ValueError(f"unknown verbosity {verbosity!r}") from None
    verbose = verbosity == "verbose"

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Cast data ends up in log messages; never interpret it as rich markup
    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.setLevel(level)
    return logger
