"""
Tolgee REST API access.

This package contains the async API client and the response models it
decodes into.
"""

from .client import (
    TolgeeClient,
    build_export_query,
    build_languages_filter,
    build_multi_value_filter,
)
from .models import LanguageCatalogue, LanguageModel

__all__ = [
    "LanguageCatalogue",
    "LanguageModel",
    "TolgeeClient",
    "build_export_query",
    "build_languages_filter",
    "build_multi_value_filter",
]
