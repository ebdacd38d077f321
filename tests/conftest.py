"""
Global test configuration fixtures for tolgee-puller tests.

This module provides a fake Tolgee server built on ``httpx.MockTransport``,
helpers for building export archives and a factory for PullerOptions.
"""

from __future__ import annotations

import io
import json
import zipfile
from collections.abc import Callable, Mapping
from pathlib import Path

import httpx
import pytest

from tolgee_puller.config.schema import PullerOptions

ArchiveBuilder = Callable[[Mapping[str, object]], bytes]
OptionsFactory = Callable[..., PullerOptions]


def build_archive(entries: Mapping[str, object]) -> bytes:
    """
    Build a zip archive in memory.

    Args:
        entries: Archive path to content; dicts are JSON-encoded, str and
            bytes are stored as-is

    Returns:
        Raw zip bytes
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for path, content in entries.items():
            match content:
                case bytes() | str():
                    archive.writestr(path, content)
                case _:
                    archive.writestr(path, json.dumps(content))
    return buffer.getvalue()


def language_catalogue(tags: list[str]) -> dict[str, object]:
    """Body of a ``GET /v2/projects/languages`` response."""
    return {
        "_embedded": {
            "languages": [
                {
                    "id": index + 1,
                    "tag": tag,
                    "name": tag.upper(),
                    "originalName": tag,
                    "flagEmoji": "",
                    "base": index == 0,
                }
                for index, tag in enumerate(tags)
            ]
        },
        "page": {"size": 1000, "totalElements": len(tags), "totalPages": 1, "number": 0},
    }


class FakeTolgeeServer:
    """In-memory stand-in for the Tolgee REST API."""

    def __init__(self) -> None:
        self.languages: list[str] = ["en", "de"]
        self.archive: bytes = build_archive({})
        self.languages_response: httpx.Response | None = None
        self.export_response: httpx.Response | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.endswith("/v2/projects/languages"):
            if self.languages_response is not None:
                return self.languages_response
            return httpx.Response(200, json=language_catalogue(self.languages))
        if path.endswith("/v2/projects/export"):
            if self.export_response is not None:
                return self.export_response
            return httpx.Response(
                200, content=self.archive, headers={"Content-Type": "application/zip"}
            )
        return httpx.Response(404, text="Not Found")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def fake_server() -> FakeTolgeeServer:
    """Create a fake Tolgee server knowing the languages en and de."""
    return FakeTolgeeServer()


@pytest.fixture
def make_archive() -> ArchiveBuilder:
    """Return the archive builder."""
    return build_archive


@pytest.fixture
def make_options(tmp_path: Path) -> OptionsFactory:
    """
    Return a factory for PullerOptions writing below tmp_path.

    Keyword arguments override the defaults.
    """

    def factory(**overrides: object) -> PullerOptions:
        values: dict[str, object] = {
            "api_key": "tgpak_test",
            "api_url": "https://tolgee.test",
            "languages": ("en", "de"),
            "namespaces": ("common", "errors"),
            "default_namespace": "common",
            "output_path": tmp_path / "out" / "messages.ts",
        }
        values.update(overrides)
        return PullerOptions.model_validate(values)

    return factory
