"""
Main entry point for tolgee-puller.

This module parses the command line, sets up logging, builds the options
record from flags and environment, runs the pull pipeline and reports the
outcome.
"""

import logging
from pathlib import Path

from .config.manager import build_options, load_environment_settings
from .pipeline import generate_translations
from .utils.cli.args import parse_arguments
from .utils.core.exceptions import TolgeePullerError
from .utils.core.logger import log_error, log_success, setup_logging

logger = logging.getLogger(__name__)


async def main(argv: list[str] | None = None) -> list[Path]:
    """
    Run one pull.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Paths of the written files

    Raises:
        TolgeePullerError: If the pull fails, after it has been reported
    """
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    try:
        options = build_options(args, load_environment_settings())
        written = await generate_translations(options)
    except TolgeePullerError as e:
        details = [e.user_message]
        if e.hint:
            details.append(e.hint)
        log_error("Failed pulling translation files from Tolgee.", *details)
        raise
    except Exception as e:
        log_error("Failed pulling translation files from Tolgee.", str(e))
        raise

    for path in written:
        logger.debug("Generated %s", path)
    log_success("Pulled translation files from Tolgee!")
    return written
