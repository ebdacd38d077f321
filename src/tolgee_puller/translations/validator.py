"""Validation of requested languages against the Tolgee project."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..api.client import TolgeeClient
from ..utils.core.exceptions import NonexistentLanguageError

logger = logging.getLogger(__name__)


def find_unknown_languages(
    languages: Sequence[str], known_languages: Sequence[str]
) -> list[str]:
    """Return requested tags missing from the known ones, in request order."""
    known = set(known_languages)
    unknown: list[str] = []
    for language in languages:
        if language not in known and language not in unknown:
            unknown.append(language)
    return unknown


async def validate_languages(languages: Sequence[str], client: TolgeeClient) -> None:
    """
    Make sure every requested language exists in the project.

    Runs before the export so a doomed pull never downloads the archive.

    Args:
        languages: Requested language tags
        client: Open Tolgee client

    Raises:
        MalformedResponseError: If the language catalogue has an unexpected shape
        NonexistentLanguageError: If any requested tag is unknown
    """
    catalogue = await client.fetch_languages()
    known_languages = catalogue.tags
    logger.debug("Project languages: %s", ", ".join(known_languages))

    unknown = find_unknown_languages(languages, known_languages)
    if unknown:
        raise NonexistentLanguageError(unknown, known_languages)
