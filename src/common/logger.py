"""Rich-backed logging for bookgraph.

Every module asks for its logger the same way:

    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Built graph with 12 nodes")

CLI entry points call ``setup_logging()`` once so that messages from all
packages share one console handler.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# Log records go to stderr so command output on stdout stays machine-readable
console = Console()
err_console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=err_console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a logger that writes through the shared rich console.

    Args:
        name: Logger name, normally the calling module's ``__name__``
        level: Level name (DEBUG, INFO, ...). Falls back to ``LOG_LEVEL``
               from the environment, then INFO.
        show_time: Prefix records with a timestamp
        show_path: Suffix records with the emitting file and line

    Returns:
        Configured logger. Calling again with the same name returns the
        same logger without stacking another handler.
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")

    logger.setLevel(level.upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # pytest's caplog listens on the root logger
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger for a CLI run.

    Args:
        level: Default level; ``LOG_LEVEL`` in the environment wins
        log_file: Optional path that additionally receives plain-text records
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler())

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def progress(message: str) -> None:
    """Print a bare progress line."""
    console.print(message)


def success(message: str) -> None:
    """Print a message prefixed with a green check mark."""
    console.print(f"[green]✓[/green] {message}")


def warning(message: str) -> None:
    """Print a message prefixed with a yellow warning sign."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    """Print a message prefixed with a red cross on stderr."""
    err_console.print(f"[red]✗[/red] {message}")
