"""
Console reporting and logging setup for tolgee-puller.

User-facing status lines are printed through a shared rich console and
carry a bold, colored ``[tolgee-puller]`` tag. Diagnostics go through the
standard logging module, rendered by rich's handler.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

TOOL_TAG = "[tolgee-puller]"

console = Console()
error_console = Console(stderr=True)


def _tag(style: str) -> str:
    return f"[bold {style}]{escape(TOOL_TAG)}[/bold {style}]"


def _print_details(target: Console, details: tuple[object, ...]) -> None:
    # Details carry raw server bodies and validation output, never markup.
    for detail in details:
        if isinstance(detail, str):
            target.print(
                detail, markup=False, emoji=False, highlight=False, soft_wrap=True
            )
        else:
            target.print(detail)


def log_success(message: str, *details: object) -> None:
    """Print a success line followed by any extra details."""
    console.print(f"{_tag('green')} {escape(message)} [green]✔[/green]")
    _print_details(console, details)


def log_error(message: str, *details: object) -> None:
    """Print an error line to stderr followed by any extra details."""
    error_console.print(f"{_tag('red')} {escape(message)} [red]⚠[/red]")
    _print_details(error_console, details)


def log_info(message: str, *details: object) -> None:
    """Print an informational line followed by any extra details."""
    console.print(f"{_tag('blue')} {escape(message)}")
    _print_details(console, details)


def setup_logging(verbose: bool = False) -> None:
    """
    Configure the root logger with a rich handler.

    Args:
        verbose: Log at DEBUG level instead of INFO
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Clear any existing handlers
    root_logger.handlers.clear()

    handler = RichHandler(
        console=error_console,
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root_logger.addHandler(handler)

    # Set specific log levels for noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
