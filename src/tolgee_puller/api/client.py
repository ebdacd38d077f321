"""
Async client for the Tolgee REST API.

This module builds authenticated requests against a Tolgee server, shapes
the export query string and classifies transport and HTTP failures into the
package's error taxonomy.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..utils.core.exceptions import HttpError, MalformedResponseError, NetworkError
from .models import LanguageCatalogue

if TYPE_CHECKING:
    from types import TracebackType

API_VERSION = "v2"

logger = logging.getLogger(__name__)


def _escape(value: str) -> str:
    return quote(value, safe="")


def build_multi_value_filter(name: str, values: Sequence[str]) -> str:
    """
    Serialize a multi-valued filter as repeated keys.

    Args:
        name: Query parameter name
        values: Parameter values

    Returns:
        Query fragment such as ``name=v1&name=v2``
    """
    return "&".join(f"{name}={_escape(value)}" for value in values)


def build_languages_filter(languages: Sequence[str]) -> str | None:
    """
    Serialize the language filter as one comma-joined value.

    The export endpoint takes ``languages=en,de`` rather than repeated keys.
    An empty sequence means "all languages" and produces no fragment.
    """
    if not languages:
        return None
    return "languages=" + ",".join(_escape(language) for language in languages)


def build_export_query(languages: Sequence[str], namespaces: Sequence[str]) -> str:
    """
    Build the query string of the export request.

    Args:
        languages: Requested language tags, empty for the server default
        namespaces: Requested namespaces

    Returns:
        Query string including the leading ``?``
    """
    parts = [
        build_languages_filter(languages),
        build_multi_value_filter("filterNamespace", namespaces) or None,
    ]
    return "?" + "&".join(part for part in parts if part)


class TolgeeClient:
    """Async Tolgee API client authenticated with an API key."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client with connection parameters.

        Args:
            api_url: Base URL of the Tolgee server
            api_key: Personal Access Token or Project API key
            timeout: Request timeout in seconds, None to wait indefinitely
            transport: Optional httpx transport, used by tests
        """
        self.api_url: str = api_url.rstrip("/")
        self.api_key: str = api_key
        self.timeout: float | None = timeout
        self._transport: httpx.AsyncBaseTransport | None = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> TolgeeClient:
        """Enter async context and initialize HTTP client."""
        self._client = httpx.AsyncClient(
            headers={
                "Content-Type": "application/json",
                "X-API-Key": self.api_key,
            },
            timeout=self.timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context and cleanup HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def build_url(self, path: str, query: str | None = None) -> str:
        """Join the base URL, the API version, the path and the query."""
        return f"{self.api_url}/{API_VERSION}{path}{query or ''}"

    async def request(self, path: str, query: str | None = None) -> httpx.Response:
        """
        Perform an authenticated GET request.

        Args:
            path: API path below the version segment, e.g. ``/projects/languages``
            query: Pre-built query string including the leading ``?``

        Returns:
            The successful HTTP response

        Raises:
            RuntimeError: If the client is used outside its async context
            NetworkError: If the request could not be sent or answered
            HttpError: If the response status is not in the 2xx range
        """
        if self._client is None:
            raise RuntimeError(
                "TolgeeClient not initialized. Use as async context manager."
            )

        url = self.build_url(path, query)
        logger.debug("GET %s", url)

        try:
            response = await self._client.get(url)
        except httpx.RequestError as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            # The error body may be HTML or plain text, keep it verbatim.
            raise HttpError(response.status_code, response.text, url=url)

        return response

    async def fetch_languages(self) -> LanguageCatalogue:
        """
        Fetch the languages configured in the project.

        Raises:
            MalformedResponseError: If the body is not a language catalogue
        """
        response = await self.request("/projects/languages")
        try:
            return LanguageCatalogue.model_validate_json(response.content)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Failed retrieving languages. {response.text}", body=response.text
            ) from e

    async def fetch_translations_zip(
        self, languages: Sequence[str], namespaces: Sequence[str]
    ) -> bytes:
        """
        Export translations as a zip archive in namespace folder structure.

        Args:
            languages: Requested language tags, empty for the server default
            namespaces: Requested namespaces

        Returns:
            Raw archive bytes
        """
        query = build_export_query(languages, namespaces)
        response = await self.request("/projects/export", query)
        logger.debug("Received export archive of %d bytes", len(response.content))
        return response.content
