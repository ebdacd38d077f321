"""
Cross-language consistency check of interpolation variables.

A variable used by one language's translation of a key but missing from
another language's translation of the same key is an outlier. Keys a
language has not translated at all are skipped rather than reported.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ..utils.core.exceptions import ParseError
from ..utils.core.logger import log_info
from .icu import extract_variable_names
from .types import LanguageTag, Message, MessageKey, Outliers, ResourceTree

logger = logging.getLogger(__name__)


def flatten_messages(
    messages: Mapping[str, Message], prefix: str = ""
) -> dict[MessageKey, str]:
    """
    Flatten nested messages into dot-joined keys.

    ``{"a": {"b": {"c": "x"}}}`` becomes ``{"a.b.c": "x"}``. Non-string
    leaves such as numbers are converted to strings, ``None`` is dropped.
    """
    flat: dict[MessageKey, str] = {}
    for key, value in messages.items():
        full_key = f"{prefix}.{key}" if prefix else key
        match value:
            case dict():
                flat.update(flatten_messages(value, full_key))  # pyright: ignore[reportUnknownArgumentType]
            case None:
                continue
            case str():
                flat[full_key] = value
            case _:
                flat[full_key] = str(value)  # pyright: ignore[reportUnknownArgumentType]
    return flat


class _VariableCache:
    """Parses each (language, key) message once and remembers its variables."""

    def __init__(self) -> None:
        self._variables: dict[tuple[LanguageTag, MessageKey], set[str]] = {}

    def get(self, language: LanguageTag, key: MessageKey, message: str) -> set[str]:
        cache_key = (language, key)
        if cache_key not in self._variables:
            self._variables[cache_key] = self._extract(language, key, message)
        return self._variables[cache_key]

    @staticmethod
    def _extract(language: LanguageTag, key: MessageKey, message: str) -> set[str]:
        try:
            return extract_variable_names(message)
        except ParseError as e:
            logger.warning(
                "Caught an error while trying to parse an ICU message (%s: %s). Message: %r. Error: %s",
                language,
                key,
                message,
                e,
            )
            return set()


def detect_inconsistent_variable_names(
    languages: Sequence[LanguageTag], resources: ResourceTree
) -> Outliers:
    """
    Find variables that are not used consistently across languages.

    Args:
        languages: Languages to compare
        resources: Merged resource tree

    Returns:
        Mapping of flattened message key to the variables missing from at
        least one other language's translation of that key
    """
    flat_resources = {
        language: flatten_messages(resources.get(language, {}))
        for language in languages
    }
    cache = _VariableCache()
    outliers: Outliers = {}

    for language in languages:
        for key, value in flat_resources[language].items():
            variables = cache.get(language, key, value)
            if not variables:
                continue

            for compare_language in languages:
                if compare_language == language:
                    continue

                compare_value = flat_resources[compare_language].get(key)
                if not compare_value:
                    # Probably untranslated in this language.
                    continue

                compare_variables = cache.get(compare_language, key, compare_value)
                missing = variables - compare_variables
                if missing:
                    outliers.setdefault(key, set()).update(missing)

    return outliers


def report_outliers(outliers: Outliers) -> None:
    """Print a summary of the outliers, if there are any."""
    if not outliers:
        logger.debug("No inconsistent variable names found")
        return

    log_info(
        f"Found {len(outliers)} keys that have outlier variables in one or more languages:",
        {key: sorted(variables) for key, variables in sorted(outliers.items())},
    )
