"""Lint-fix retry loop for a single file."""

from __future__ import annotations

import asyncio
import logging

from lintloop.constants.enums import Outcome
from lintloop.constants.values import (
    LOG_FIX_APPLIED,
    LOG_FIX_ERROR_PREFIX,
    LOG_LINT_ERRORS_PREFIX,
    LOG_LINT_PASSED,
)
from lintloop.errors import FixError, PatchGenerationError
from lintloop.models.events import ProgressEvent
from lintloop.models.file_record import FileRecord
from lintloop.pipeline.event_bus import EventBus
from lintloop.pipeline.file_io import atomic_write_text, read_text
from lintloop.pipeline.lint_runner import LintRunner
from lintloop.pipeline.patch_generator import PatchGenerator

logger = logging.getLogger(__name__)


class FixWorker:
    """Drives one file through up to ``max_retries`` lint/patch attempts.

    Every attempt emits ``attempt_started`` first. A passing lint ends the
    loop as FIXED; running out of attempts ends it as FAILED. Lint output and
    patch failures are reported as log lines, never raised.
    """

    def __init__(
        self,
        record: FileRecord,
        bus: EventBus,
        runner: LintRunner,
        generator: PatchGenerator,
        max_retries: int,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self._record = record
        self._bus = bus
        self._runner = runner
        self._generator = generator
        self._max_retries = max_retries
        self._key = str(record.path)

    @property
    def key(self) -> str:
        return self._key

    async def _emit(self, event: ProgressEvent) -> None:
        await self._bus.send(event)

    async def run(self) -> Outcome:
        for attempt in range(1, self._max_retries + 1):
            logger.debug("%s: attempt %d/%d", self._key, attempt, self._max_retries)
            await self._emit(
                ProgressEvent.attempt_started(self._key, attempt, self._max_retries)
            )

            result = await self._runner.run(self._record.path)
            if result.passed:
                logger.info("%s: fixed on attempt %d", self._key, attempt)
                await self._emit(
                    ProgressEvent.completed(self._key, Outcome.FIXED, LOG_LINT_PASSED)
                )
                return Outcome.FIXED

            if result.reported_path:
                logger.debug("%s: lint reported %s", self._key, result.reported_path)
            await self._emit(
                ProgressEvent.log_appended(
                    self._key, f"{LOG_LINT_ERRORS_PREFIX}\n{result.output}"
                )
            )

            try:
                await self._apply_fix(result.output)
            except (PatchGenerationError, FixError) as exc:
                logger.debug("%s: fix failed: %s", self._key, exc)
                await self._emit(
                    ProgressEvent.log_appended(self._key, f"{LOG_FIX_ERROR_PREFIX} {exc}")
                )
            else:
                await self._emit(ProgressEvent.log_appended(self._key, LOG_FIX_APPLIED))

        logger.info("%s: failed after %d attempts", self._key, self._max_retries)
        await self._emit(ProgressEvent.completed(self._key, Outcome.FAILED))
        return Outcome.FAILED

    async def _apply_fix(self, lint_output: str) -> None:
        path = self._record.path
        try:
            content = await asyncio.to_thread(read_text, path)
        except (OSError, UnicodeDecodeError) as exc:
            raise FixError(f"read file: {exc}") from exc

        fixed = await self._generator.generate(path, content, lint_output)

        try:
            await asyncio.to_thread(atomic_write_text, path, fixed)
        except OSError as exc:
            raise FixError(f"write file: {exc}") from exc


__all__ = ["FixWorker"]
