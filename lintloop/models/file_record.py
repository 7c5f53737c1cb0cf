"""File records and the table items that display them."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple

from lintloop.constants.enums import ItemKind
from lintloop.constants.values import STATUS_PENDING


class RecordSnapshot(NamedTuple):
    """Immutable view of a FileRecord taken under its lock."""

    status: str
    logs: tuple[str, ...]
    retries: int


@dataclass(eq=False)
class FileRecord:
    """Per-file processing state.

    ``status``, ``logs`` and ``retries`` are shared between the dashboard loop
    and anything rendering it, so every read-modify-write goes through ``lock``.
    """

    path: Path
    status: str = STATUS_PENDING
    logs: list[str] = field(default_factory=list)
    retries: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def directory(self) -> str:
        """Grouping key: the parent directory as a string."""
        return str(self.path.parent)

    @property
    def name(self) -> str:
        return self.path.name

    def snapshot(self) -> RecordSnapshot:
        """Copy the mutable fields for rendering."""
        with self.lock:
            return RecordSnapshot(self.status, tuple(self.logs), self.retries)


@dataclass(frozen=True, slots=True)
class DirectoryItem:
    """Directory header row. Carries no record."""

    path: str
    kind: ItemKind = field(default=ItemKind.DIRECTORY, init=False)
    indent: int = field(default=0, init=False)

    @property
    def label(self) -> str:
        return self.path if self.path.endswith(os.sep) else self.path + os.sep

    @property
    def record(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class FileItem:
    """File leaf row owning a reference to its FileRecord."""

    record: FileRecord
    kind: ItemKind = field(default=ItemKind.FILE, init=False)
    indent: int = field(default=2, init=False)

    @property
    def path(self) -> str:
        return str(self.record.path)

    @property
    def label(self) -> str:
        return " " * self.indent + self.record.name


TableItem = DirectoryItem | FileItem

__all__ = [
    "DirectoryItem",
    "FileItem",
    "FileRecord",
    "RecordSnapshot",
    "TableItem",
]
