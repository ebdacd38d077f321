"""
Merging of exported translation files into a single resource tree.

Files arrive as ``<namespace>/<language>.<ext>`` entries. Each one becomes
``tree[language][namespace]``, except for the default namespace, whose keys
are merged directly into ``tree[language]``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from typing import cast

from ..utils.core.exceptions import ArchiveError
from .archive import VirtualFile
from .types import LanguageTag, Message, Namespace, ResourceTree

logger = logging.getLogger(__name__)


def split_file_path(path: str) -> tuple[Namespace, LanguageTag]:
    """
    Split an archive path into namespace and language.

    ``"common/en.json"`` gives ``("common", "en")``.

    Raises:
        ArchiveError: If the path is not made of exactly two segments
    """
    segments = path.split("/")
    if len(segments) != 2 or not all(segments):
        raise ArchiveError(
            f"Unexpected archive entry {path!r}, expected <namespace>/<language>.<ext>"
        )

    namespace, filename = segments
    language = filename.split(".")[0]
    if not language:
        raise ArchiveError(f"Archive entry {path!r} has no language in its filename")
    return namespace, language


def load_messages(file: VirtualFile) -> dict[str, Message]:
    """
    Parse the JSON content of a translation file.

    Raises:
        ArchiveError: If the content is not a UTF-8 JSON object
    """
    try:
        content: object = json.loads(file.data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ArchiveError(f"Failed parsing {file.path}: {e}") from e

    if not isinstance(content, dict):
        raise ArchiveError(
            f"Failed parsing {file.path}: expected a JSON object, got {type(content).__name__}"
        )
    return cast(dict[str, Message], content)


def merge_translations(
    languages: Sequence[LanguageTag],
    files: Iterable[VirtualFile],
    default_namespace: Namespace | None,
) -> ResourceTree:
    """
    Merge translation files into a resource tree.

    Args:
        languages: Requested language tags, used to seed the tree
        files: Virtual files from the export archive
        default_namespace: Namespace flattened into the language root, if any

    Returns:
        The merged resource tree

    Raises:
        ArchiveError: If an entry path or its content cannot be interpreted
    """
    resources: ResourceTree = {language: {} for language in languages}
    has_default_namespace = bool(default_namespace)

    for file in files:
        namespace, language = split_file_path(file.path)
        messages = load_messages(file)

        if language not in resources:
            if languages:
                logger.warning(
                    "Archive entry %s belongs to language %r which was not requested",
                    file.path,
                    language,
                )
            resources[language] = {}

        if has_default_namespace and namespace == default_namespace:
            # Shallow merge, keys of the later file win.
            resources[language] = {**resources[language], **messages}
        else:
            resources[language][namespace] = messages

    return resources
