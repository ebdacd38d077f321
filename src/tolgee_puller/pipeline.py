"""
The pull pipeline.

validate languages -> export -> decompress -> merge -> consistency check -> write

Every stage needs the complete output of the previous one, so the stages are
awaited strictly one after another. Nothing touches the filesystem before
the final write, which means a failure anywhere leaves existing output alone.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from .api.client import TolgeeClient
from .config.schema import PullerOptions
from .translations.archive import extract_archive
from .translations.consistency import detect_inconsistent_variable_names, report_outliers
from .translations.merger import merge_translations
from .translations.validator import validate_languages
from .translations.writer import write_resources

logger = logging.getLogger(__name__)


async def generate_translations(
    options: PullerOptions,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Path]:
    """
    Pull translations from Tolgee and write the resource module(s).

    Args:
        options: Finished options record
        transport: Optional httpx transport, used by tests

    Returns:
        Paths of the written files

    Raises:
        TolgeePullerError: If any stage fails; nothing is written in that case
    """
    languages = list(options.languages)
    namespaces = list(options.namespaces)

    async with TolgeeClient(
        options.api_url, options.api_key, transport=transport
    ) as client:
        await validate_languages(languages, client)
        logger.debug("Requested languages are valid")

        archive = await client.fetch_translations_zip(languages, namespaces)

    files = extract_archive(archive)
    resources = merge_translations(languages, files, options.default_namespace)
    logger.info(
        "Merged %d file(s) into %d language(s)", len(files), len(resources)
    )

    # Without an explicit request the server decides which languages exist.
    checked_languages = languages or list(resources)
    outliers = detect_inconsistent_variable_names(checked_languages, resources)
    report_outliers(outliers)

    return await write_resources(
        resources, options.output_path, options.mode, options.pretty
    )
