"""Tests for language validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from tolgee_puller.api.client import TolgeeClient
from tolgee_puller.translations.validator import find_unknown_languages, validate_languages
from tolgee_puller.utils.core.exceptions import (
    MalformedResponseError,
    NonexistentLanguageError,
)

if TYPE_CHECKING:
    from conftest import FakeTolgeeServer


class TestFindUnknownLanguages:
    """Test cases for find_unknown_languages."""

    def test_all_known(self) -> None:
        """Known tags produce no result."""
        assert find_unknown_languages(["en"], ["en", "de"]) == []

    def test_unknown_in_request_order_without_duplicates(self) -> None:
        """Unknown tags keep their request order and appear once."""
        assert find_unknown_languages(["xx", "en", "yy", "xx"], ["en", "de"]) == ["xx", "yy"]

    def test_case_sensitive(self) -> None:
        """Tags are compared exactly."""
        assert find_unknown_languages(["EN"], ["en"]) == ["EN"]


class TestValidateLanguages:
    """Test cases for validate_languages."""

    @pytest.mark.asyncio
    async def test_known_languages_pass(self, fake_server: FakeTolgeeServer) -> None:
        """Requesting a subset of the project languages succeeds."""
        async with TolgeeClient(
            "https://tolgee.test", "key", transport=fake_server.transport
        ) as client:
            await validate_languages(["en"], client)

        assert fake_server.paths == ["/v2/projects/languages"]

    @pytest.mark.asyncio
    async def test_unknown_language_fails(self, fake_server: FakeTolgeeServer) -> None:
        """An unknown tag is named in the error."""
        async with TolgeeClient(
            "https://tolgee.test", "key", transport=fake_server.transport
        ) as client:
            with pytest.raises(NonexistentLanguageError) as exc_info:
                await validate_languages(["en", "xx"], client)

        assert exc_info.value.languages == ["xx"]
        assert exc_info.value.known_languages == ["en", "de"]
        assert "xx" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_empty_request_passes(self, fake_server: FakeTolgeeServer) -> None:
        """No requested languages means the server default, which is always valid."""
        async with TolgeeClient(
            "https://tolgee.test", "key", transport=fake_server.transport
        ) as client:
            await validate_languages([], client)

    @pytest.mark.asyncio
    async def test_missing_embedded_collection(self, fake_server: FakeTolgeeServer) -> None:
        """A catalogue without _embedded is malformed, not an HTTP error."""
        fake_server.languages_response = httpx.Response(
            200, json={"page": {"totalElements": 0}}
        )

        async with TolgeeClient(
            "https://tolgee.test", "key", transport=fake_server.transport
        ) as client:
            with pytest.raises(MalformedResponseError, match="Failed retrieving languages"):
                await validate_languages(["en"], client)
