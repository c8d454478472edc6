"""Logging configuration for the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from ...config import config

console = Console(stderr=True)


def setup_logging(verbosity: int = 0) -> None:
    """Setup logging configuration.

    Args:
        verbosity: Verbosity level (0-2)
    """
    # Map verbosity to log level
    level = {
        0: logging.getLevelName(config.log_level),
        1: logging.INFO,
    }.get(verbosity, logging.DEBUG)
    if config.debug:
        level = logging.DEBUG

    # Remove all existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(level)

    # Create console handler with rich formatting
    console_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root_logger.addHandler(console_handler)

    logging.getLogger("event_discovery").setLevel(level)

    # Suppress some noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.debug(
        f"Logging configured (level: {logging.getLevelName(level)}, "
        f"environment: {config.environment})"
    )
