"""Text helpers: fenced code extraction, lint locations, path shortening."""

from __future__ import annotations

import re

from lintloop.constants.defaults import CODE_LANGUAGE_DEFAULT
from lintloop.constants.limits import SHORT_PATH_MAX

# path:line:col, with an optional drive letter. The path may not contain
# whitespace or a colon, which keeps "[linters_context] typechecking error:"
# style prefixes out of the match.
_LOCATION_RE = re.compile(r"((?:[A-Za-z]:)?[^\s:]+?\.\w+):\d+:\d+")


def extract_code_block(text: str, language: str = CODE_LANGUAGE_DEFAULT) -> str:
    """Return the body of the first ```<language> block, or ``text`` unchanged."""
    pattern = re.compile(r"```" + re.escape(language) + r"(.*?)```", re.DOTALL)
    match = pattern.search(text)
    if match is None:
        return text
    return match.group(1).strip()


def extract_file_path(output: str) -> str:
    """Return the first file named as ``path:line:col`` in lint output.

    Doubled backslashes (as printed in escaped Windows paths) collapse to one.
    Returns an empty string when no location is present.
    """
    match = _LOCATION_RE.search(output)
    if match is None:
        return ""
    return match.group(1).replace("\\\\", "\\")


def short_path(path: str, max_len: int = SHORT_PATH_MAX) -> str:
    if len(path) <= max_len:
        return path
    keep = max(max_len - 3, 0)
    return "..." + path[len(path) - keep:]


__all__ = [
    "extract_code_block",
    "extract_file_path",
    "short_path",
]
