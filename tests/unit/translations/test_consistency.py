"""Tests for the cross-language variable consistency check."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from tolgee_puller.translations.consistency import (
    detect_inconsistent_variable_names,
    flatten_messages,
    report_outliers,
)
from tolgee_puller.translations.types import ResourceTree


class TestFlattenMessages:
    """Test cases for flatten_messages."""

    def test_dot_joined_keys(self) -> None:
        """Nested paths become dot-joined keys."""
        assert flatten_messages({"a": {"b": {"c": "x"}}, "d": "y"}) == {
            "a.b.c": "x",
            "d": "y",
        }

    def test_namespace_nesting(self) -> None:
        """Namespaces are just another nesting level."""
        assert flatten_messages({"hello": "Hi", "errors": {"notFound": "Nope"}}) == {
            "hello": "Hi",
            "errors.notFound": "Nope",
        }

    def test_non_string_leaves(self) -> None:
        """Numbers are stringified, None and empty groups disappear."""
        assert flatten_messages({"n": 1, "none": None, "empty": {}}) == {"n": "1"}  # pyright: ignore[reportArgumentType]


class TestDetectInconsistentVariableNames:
    """Test cases for detect_inconsistent_variable_names."""

    def test_missing_variable_is_outlier(self) -> None:
        """A variable absent from another translation is reported."""
        resources: ResourceTree = {
            "en": {"greet": "Hello {name}"},
            "de": {"greet": "Hallo"},
        }

        outliers = detect_inconsistent_variable_names(["en", "de"], resources)

        assert outliers == {"greet": {"name"}}

    def test_untranslated_key_is_skipped(self) -> None:
        """A language without the key is untranslated, not inconsistent."""
        resources: ResourceTree = {
            "en": {"greet": "Hello {name}"},
            "de": {},
        }

        assert detect_inconsistent_variable_names(["en", "de"], resources) == {}

    def test_empty_translation_is_skipped(self) -> None:
        """An empty string counts as untranslated."""
        resources: ResourceTree = {
            "en": {"greet": "Hello {name}"},
            "de": {"greet": ""},
        }

        assert detect_inconsistent_variable_names(["en", "de"], resources) == {}

    def test_consistent_translations(self) -> None:
        """Matching variables produce no outliers, whatever their order."""
        resources: ResourceTree = {
            "en": {"msg": "{a} and {b}"},
            "de": {"msg": "{b} und {a}"},
        }

        assert detect_inconsistent_variable_names(["en", "de"], resources) == {}

    def test_both_directions_are_collected(self) -> None:
        """Variables missing on either side land in the same entry."""
        resources: ResourceTree = {
            "en": {"msg": "{a} {shared}"},
            "de": {"msg": "{b} {shared}"},
        }

        outliers = detect_inconsistent_variable_names(["en", "de"], resources)

        assert outliers == {"msg": {"a", "b"}}

    def test_nested_keys_are_flattened(self) -> None:
        """Outlier keys are fully qualified."""
        resources: ResourceTree = {
            "en": {"errors": {"upload": {"tooLarge": "Max {size} MB"}}},
            "de": {"errors": {"upload": {"tooLarge": "Zu groß"}}},
            "fr": {"errors": {"upload": {"tooLarge": "Max {size} Mo"}}},
        }

        outliers = detect_inconsistent_variable_names(["en", "de", "fr"], resources)

        assert outliers == {"errors.upload.tooLarge": {"size"}}

    def test_plural_variables(self) -> None:
        """Plural selectors and nested arguments are compared."""
        resources: ResourceTree = {
            "en": {"files": "{count, plural, one {# file in {folder}} other {# files in {folder}}}"},
            "de": {"files": "{count, plural, one {# Datei} other {# Dateien}}"},
        }

        outliers = detect_inconsistent_variable_names(["en", "de"], resources)

        assert outliers == {"files": {"folder"}}

    def test_parse_error_does_not_abort(self, caplog: pytest.LogCaptureFixture) -> None:
        """A broken message is reported and treated as having no variables."""
        resources: ResourceTree = {
            "en": {"broken": "Hello {name", "greet": "Hi {name}"},
            "de": {"broken": "Hallo {name}", "greet": "Hallo"},
        }

        with caplog.at_level(logging.WARNING):
            outliers = detect_inconsistent_variable_names(["en", "de"], resources)

        assert outliers == {"broken": {"name"}, "greet": {"name"}}
        assert "Hello {name" in caplog.text
        assert "Unclosed argument" in caplog.text

    def test_each_message_parsed_once(self) -> None:
        """Repeated comparisons reuse the extracted variables."""
        resources: ResourceTree = {
            language: {"greet": "Hello {name}"} for language in ("en", "de", "fr", "cs")
        }

        with patch(
            "tolgee_puller.translations.consistency.extract_variable_names",
            return_value={"name"},
        ) as mock_extract:
            outliers = detect_inconsistent_variable_names(list(resources), resources)

        assert outliers == {}
        assert mock_extract.call_count == 4

    def test_language_missing_from_tree(self) -> None:
        """A requested language without any resources is fully untranslated."""
        resources: ResourceTree = {"en": {"greet": "Hello {name}"}}

        assert detect_inconsistent_variable_names(["en", "de"], resources) == {}


class TestReportOutliers:
    """Test cases for report_outliers."""

    def test_reports_summary(self) -> None:
        """The count and the sorted map are printed."""
        with patch("tolgee_puller.translations.consistency.log_info") as mock_log_info:
            report_outliers({"b": {"y", "x"}, "a": {"z"}})

        mock_log_info.assert_called_once()
        message, details = mock_log_info.call_args.args
        assert "Found 2 keys" in message
        assert details == {"a": ["z"], "b": ["x", "y"]}

    def test_silent_without_outliers(self) -> None:
        """Nothing is printed when everything is consistent."""
        with patch("tolgee_puller.translations.consistency.log_info") as mock_log_info:
            report_outliers({})

        mock_log_info.assert_not_called()
