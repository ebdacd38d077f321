"""
tolgee-puller - Pull Tolgee translations into a generated TypeScript module.
"""

import asyncio
import logging
import sys

from .main import main as async_main
from .utils.core.exceptions import TolgeePullerError


def main() -> None:
    """Synchronous entry point that runs the async main function."""
    logger = logging.getLogger(__name__)
    try:
        _ = asyncio.run(async_main())
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(130)
    except TolgeePullerError:
        # Already reported by async_main
        sys.exit(1)
    except Exception as e:
        logger.debug("Unexpected error: %s", e, exc_info=True)
        sys.exit(1)


__all__ = ["main"]
