"""Data models for lintloop."""

from lintloop.models.events import ProgressEvent
from lintloop.models.file_record import (
    DirectoryItem,
    FileItem,
    FileRecord,
    RecordSnapshot,
    TableItem,
)

__all__ = [
    "DirectoryItem",
    "FileItem",
    "FileRecord",
    "ProgressEvent",
    "RecordSnapshot",
    "TableItem",
]
