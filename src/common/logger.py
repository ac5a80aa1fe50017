"""Logging for commit sources, rendered through rich.

Every module obtains its logger the same way:

    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Read 42 commits")

The CLI calls setup_logging() once at startup; library code only ever calls
get_logger().
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# CLI output goes to stdout, log records to stderr
console = Console()
err_console = Console(stderr=True)

# Names of loggers handed out by get_logger(), adjusted by setup_logging()
_module_loggers: set[str] = set()


def _rich_handler() -> RichHandler:
    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get a logger that writes through rich.

    Args:
        name: Logger name, normally the calling module's __name__
        level: Explicit level name. Falls back to LOG_LEVEL, then INFO.

    Returns:
        The configured logger. Repeated calls with the same name return the
        same instance without stacking handlers.
    """
    logger = logging.getLogger(name)

    if name in _module_loggers:
        return logger
    _module_loggers.add(name)

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    logger.setLevel(level.upper())
    logger.addHandler(_rich_handler())

    # Keep propagation on so pytest's caplog sees records
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger for a CLI run.

    Loggers already obtained through get_logger() take the same level and
    lose their own handler, so each record is written once.

    Args:
        level: Root level, overridden by LOG_LEVEL when set
        log_file: Optional path that receives a plain-text copy of every record
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler())

    # Module loggers created at import time now defer to the root handlers
    for name in _module_loggers:
        module_logger = logging.getLogger(name)
        module_logger.setLevel(level)
        module_logger.handlers.clear()

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
    """Print a plain progress line."""
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def success(message: str) -> None:
    """Print a message prefixed with a green check mark."""
    console.print(f"[green]✓[/green] {escape(message)}", highlight=False, soft_wrap=True)


def warning(message: str) -> None:
    """Print a message prefixed with a yellow warning sign."""
    console.print(f"[yellow]⚠[/yellow] {escape(message)}", highlight=False, soft_wrap=True)


def error(message: str) -> None:
    """Print a message prefixed with a red cross, on stderr."""
    err_console.print(f"[red]✗[/red] {escape(message)}", highlight=False, soft_wrap=True)

