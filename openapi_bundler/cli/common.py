"""
Shared utilities for the OpenAPI bundler CLI.

Common functionality used across multiple CLI commands.
"""

from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from openapi_bundler.validation import validate_file

__all__ = ["console", "configure_logging", "report_validation"]


# Shared console instance for all CLI commands
console = Console()

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {module}:{function}:{line} - {message}"


def configure_logging(debug=False):
    # type: (bool) -> None
    """
    Route loguru output through rich's console for proper output coordination.

    :param debug: Log at DEBUG instead of INFO level
    """
    logger.remove()  # Remove default handler
    logger.add(
        RichHandler(
            console=console,
            rich_tracebacks=True,
            markup=False,
            show_time=False,  # Use custom time format
            show_level=False,  # Use custom level format
            show_path=False,  # Don't show file path on right
        ),
        format=LOG_FORMAT,
        level="DEBUG" if debug else "INFO",
    )


configure_logging()


def report_validation(path):
    # type: (Path) -> bool
    """
    Validate a file and print the outcome.

    :param path: OpenAPI file to validate
    :return: True if the file is valid
    """
    result = validate_file(path)
    if result.valid:
        console.print(f"[green]OpenAPI validation: {escape(result.message)}[/green]")
    else:
        console.print(f"[yellow]OpenAPI validation: {escape(result.message)}[/yellow]")
    return result.valid
