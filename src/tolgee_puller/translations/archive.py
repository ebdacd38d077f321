"""Conversion of an exported zip archive into virtual files."""

from __future__ import annotations

import io
import logging
import zipfile
from dataclasses import dataclass

from ..utils.core.exceptions import ArchiveError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VirtualFile:
    """One archive entry: a relative path such as ``common/en.json`` and its raw content."""

    path: str
    data: bytes


def extract_archive(data: bytes) -> list[VirtualFile]:
    """
    Decompress an exported archive.

    Args:
        data: Raw zip bytes as returned by the export endpoint

    Returns:
        One VirtualFile per file entry, in archive order

    Raises:
        ArchiveError: If the buffer is not a readable zip archive
    """
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            files = [
                VirtualFile(path=info.filename, data=archive.read(info))
                for info in archive.infolist()
                if not info.is_dir()
            ]
    except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError) as e:
        raise ArchiveError(f"Failed reading the exported archive: {e}") from e

    logger.debug("Extracted %d file(s) from the export archive", len(files))
    return files
