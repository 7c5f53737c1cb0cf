"""Discover source files and group them into table items."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from lintloop.constants.defaults import FILE_EXTENSION_DEFAULT
from lintloop.errors import CatalogError
from lintloop.models.file_record import (
    DirectoryItem,
    FileItem,
    FileRecord,
    TableItem,
)

logger = logging.getLogger(__name__)


def _walk(directory: Path, extension: str, found: list[FileRecord]) -> None:
    try:
        entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    except OSError as exc:
        raise CatalogError(f"cannot read directory {directory}: {exc}") from exc

    for entry in entries:
        entry_path = directory / entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = entry.is_file()
        except OSError as exc:
            raise CatalogError(f"cannot stat {entry_path}: {exc}") from exc
        if is_dir:
            _walk(entry_path, extension, found)
        elif is_file and entry.name.endswith(extension):
            found.append(FileRecord(path=entry_path))


def discover(root: Path | str, extension: str = FILE_EXTENSION_DEFAULT) -> list[FileRecord]:
    """Return one Pending record per matching file under ``root``.

    Entries are visited in name order at every level, so the result is
    deterministic for an unchanged tree.

    Raises:
        CatalogError: ``root`` is missing or not a directory, or any part of
            the walk fails. No partial result is returned.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise CatalogError(f"root is not a readable directory: {root_path}")

    found: list[FileRecord] = []
    _walk(root_path, extension, found)
    logger.info("Discovered %d %s files under %s", len(found), extension, root_path)
    return found


def group_items(records: Sequence[FileRecord]) -> list[TableItem]:
    """Directory headers in lexical order, each followed by its files."""
    by_directory: dict[str, list[FileRecord]] = {}
    for record in records:
        by_directory.setdefault(record.directory, []).append(record)

    items: list[TableItem] = []
    for directory in sorted(by_directory):
        items.append(DirectoryItem(path=directory))
        items.extend(FileItem(record=record) for record in by_directory[directory])
    return items


def count_files(items: Iterable[TableItem]) -> int:
    return sum(1 for item in items if isinstance(item, FileItem))


__all__ = [
    "count_files",
    "discover",
    "group_items",
]
