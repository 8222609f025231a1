"""Logging configuration for pdfa-validator.

Reports are written to stdout, so every log handler goes to stderr.
"""
import logging
import sys
from typing import Optional, Union


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None
) -> None:
    """Configure logging for pdfa-validator.

    Args:
        level: Logging level (e.g., logging.INFO, "DEBUG")
        format_string: Custom format string for log messages
        log_file: Optional file path to write logs to
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handlers = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=handlers,
        force=True
    )

