"""
Logging setup for the installer CLI.

Operator-facing messages go through InstallReporter, which mirrors them to
the stdlib ``ecc_installer`` logger. The logger only renders anything when
the CLI runs with --verbose; nothing is written to a log file.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "ecc_installer"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger below the ``ecc_installer`` namespace."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_cli_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Configure the package logger for one CLI invocation.

    Args:
        verbose: Render DEBUG records (file operations) with rich
        console: Console to render to (defaults to stderr)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = False

    if not verbose:
        # Reporter output already covers warnings and errors
        logger.setLevel(logging.WARNING)
        logger.addHandler(logging.NullHandler())
        return logger

    logger.setLevel(logging.DEBUG)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
