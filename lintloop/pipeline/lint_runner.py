"""Run the external lint command against one file."""

from __future__ import annotations

import asyncio
import logging
import shlex
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path

from lintloop.constants.defaults import LINT_COMMAND_DEFAULT
from lintloop.constants.timeouts import LINT_COMMAND_TIMEOUT
from lintloop.constants.values import FILEPATH_PLACEHOLDER
from lintloop.pipeline.text_extract import extract_file_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LintResult:
    """Outcome of one lint invocation."""

    passed: bool
    output: str
    exit_code: int | None
    command: tuple[str, ...] = ()

    @property
    def reported_path(self) -> str:
        """First ``path:line:col`` location named in the output, or ``""``."""
        return extract_file_path(self.output)


def render_command(template: str, path: Path | str) -> list[str]:
    """Split ``template`` into argv, then substitute the first placeholder.

    Splitting first keeps the path a single argument whatever characters
    it contains.
    """
    argv = shlex.split(template)
    for index, arg in enumerate(argv):
        if FILEPATH_PLACEHOLDER in arg:
            argv[index] = arg.replace(FILEPATH_PLACEHOLDER, str(path), 1)
            break
    return argv


async def _kill(process: asyncio.subprocess.Process) -> None:
    with suppress(ProcessLookupError):
        process.kill()
    with suppress(ProcessLookupError):
        await process.wait()


class LintRunner:
    """Runs ``template`` with the file path substituted.

    A zero exit status means the file is clean. Invocation failures (missing
    binary, timeout) come back as failed results so the fix loop treats them
    like any other lint failure.
    """

    def __init__(
        self,
        template: str = LINT_COMMAND_DEFAULT,
        timeout: float = LINT_COMMAND_TIMEOUT,
    ) -> None:
        self._template = template
        self._timeout = timeout

    @property
    def template(self) -> str:
        return self._template

    async def run(self, path: Path | str) -> LintResult:
        try:
            argv = render_command(self._template, path)
        except ValueError as exc:
            return LintResult(False, f"invalid lint command: {exc}", None)
        if not argv:
            return LintResult(False, "lint command is empty", None)

        command = tuple(argv)
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            logger.debug("Lint command %s failed to start: %s", argv[0], exc)
            return LintResult(False, str(exc), None, command)

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self._timeout
            )
        except asyncio.TimeoutError:
            await _kill(process)
            return LintResult(
                False,
                f"lint command timed out after {self._timeout:g}s",
                None,
                command,
            )
        except asyncio.CancelledError:
            await _kill(process)
            raise

        output = (
            stderr.decode("utf-8", errors="replace")
            + stdout.decode("utf-8", errors="replace")
        ).strip()
        exit_code = process.returncode
        return LintResult(exit_code == 0, output, exit_code, command)


__all__ = [
    "LintResult",
    "LintRunner",
    "render_command",
]
