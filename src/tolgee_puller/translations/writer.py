"""
Generation of the TypeScript resource module.

The generated module looks like::

    // THIS FILE IS GENERATED, DO NOT EDIT!
    const resources = {"en":{"hello":"Hello"}};
    type Resources = typeof resources;
    export { resources, type Resources };

Existing files are overwritten without looking at their content.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from ..config.schema import OutputMode
from .types import LanguageTag, ResourceTree

logger = logging.getLogger(__name__)

GENERATED_HEADER = "// THIS FILE IS GENERATED, DO NOT EDIT!"
CONSTANT_NAME = "resources"
TYPE_NAME = "Resources"


def serialize_resources(data: object, pretty: bool = False) -> str:
    """Serialize resources as JSON, which is also a valid TypeScript literal."""
    if pretty:
        return json.dumps(data, ensure_ascii=False, indent=2)
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def render_resource_module(data: object, pretty: bool = False) -> str:
    """
    Render the source of a resource module.

    Args:
        data: JSON-serializable resources
        pretty: Indent the serialized resources

    Returns:
        TypeScript source exporting the constant and its type
    """
    body = serialize_resources(data, pretty)
    return (
        f"{GENERATED_HEADER}\n"
        f"const {CONSTANT_NAME} = {body};\n"
        f"type {TYPE_NAME} = typeof {CONSTANT_NAME};\n"
        f"export {{ {CONSTANT_NAME}, type {TYPE_NAME} }};\n"
    )


def _staging_path(path: Path) -> Path:
    return path.with_name(f".{path.name}.tmp")


def _write_files(files: list[tuple[Path, str]]) -> None:
    """
    Write every file or none of them.

    All contents are staged next to their destination first; destinations
    are only replaced once every staged file has been written.
    """
    staged: list[Path] = []
    try:
        for path, content in files:
            path.parent.mkdir(parents=True, exist_ok=True)
            staging_path = _staging_path(path)
            _ = staging_path.write_text(content, encoding="utf-8")
            staged.append(staging_path)
    except OSError:
        for staging_path in staged:
            staging_path.unlink(missing_ok=True)
        raise

    for path, _content in files:
        _ = _staging_path(path).replace(path)


async def write_resource_file(code: str, output_path: Path) -> Path:
    """Write a rendered module, replacing any previous file."""
    await asyncio.to_thread(_write_files, [(output_path, code)])
    logger.debug("Wrote %s", output_path)
    return output_path


def split_output_path(output_path: Path, language: LanguageTag) -> Path:
    """
    Path of the per-language module in split mode.

    ``locales/messages.ts`` and ``de`` give ``locales/de.ts``.
    """
    return output_path.parent / f"{language}{output_path.suffix}"


async def write_resources(
    resources: ResourceTree,
    output_path: Path,
    mode: OutputMode = OutputMode.SINGLE,
    pretty: bool = False,
) -> list[Path]:
    """
    Write the resource tree as one or more modules.

    Every module is rendered before anything is written, and in split mode
    no existing module is replaced unless all of them could be written.

    Args:
        resources: Merged resource tree
        output_path: Path of the module in single mode, directory and
            extension template in split mode
        mode: Single module or one module per language
        pretty: Indent the serialized resources

    Returns:
        Paths of the written files

    Raises:
        OSError: If a module cannot be written; earlier output is kept
    """
    if mode is OutputMode.SINGLE:
        files = [(output_path, render_resource_module(resources, pretty))]
    else:
        files = [
            (split_output_path(output_path, language), render_resource_module(messages, pretty))
            for language, messages in resources.items()
        ]

    await asyncio.to_thread(_write_files, files)
    for path, _code in files:
        logger.debug("Wrote %s", path)
    return [path for path, _code in files]
