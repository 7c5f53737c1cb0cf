"""File reads and atomic writes for patched sources."""

from __future__ import annotations

import logging
import os
from contextlib import suppress
from pathlib import Path

logger = logging.getLogger(__name__)

_TMP_SUFFIX = ".tmp"


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def atomic_write_text(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` via a sibling temp file.

    The original is untouched if writing the temp file fails; the temp file
    is removed and the error propagates.
    """
    tmp_path = path.with_name(path.name + _TMP_SUFFIX)
    try:
        tmp_path.write_text(content, encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError:
        with suppress(OSError):
            tmp_path.unlink()
        raise
    logger.debug("Wrote %d characters to %s", len(content), path)


__all__ = [
    "atomic_write_text",
    "read_text",
]
