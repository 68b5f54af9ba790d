"""
Logging configuration for the digest renderer.

Uses rich for terminal output.
"""

import logging
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: LogLevel = "INFO") -> logging.Logger:
    """
    Configure logging with rich handler.

    Returns the package logger. Library code never calls this; scripts and
    applications embedding the renderer do.
    """
    console = Console(stderr=True)

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
    )

    # Template loading chatter
    logging.getLogger("jinja2").setLevel(logging.WARNING)

    return logging.getLogger("digest_renderer")


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module."""
    return logging.getLogger(f"digest_renderer.{name}")
