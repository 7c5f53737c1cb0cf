"""Run one FixWorker per file and close the event bus when all are done."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from lintloop.constants.enums import Outcome
from lintloop.constants.timeouts import WORKER_DEADLINE_SECONDS
from lintloop.errors import EventBusClosedError
from lintloop.models.events import ProgressEvent
from lintloop.models.file_record import FileRecord
from lintloop.pipeline.event_bus import EventBus
from lintloop.pipeline.fix_worker import FixWorker
from lintloop.pipeline.lint_runner import LintRunner
from lintloop.pipeline.patch_generator import PatchGenerator

logger = logging.getLogger(__name__)


class WorkerPool:
    """Unbounded fan-out of fix workers with per-worker deadlines.

    ``run`` returns after every worker has finished, been cancelled or hit its
    deadline. The bus is closed exactly once at that point, including when
    there are no files at all.
    """

    def __init__(
        self,
        records: Sequence[FileRecord],
        bus: EventBus,
        runner: LintRunner,
        generator: PatchGenerator,
        *,
        max_retries: int,
        deadline: float = WORKER_DEADLINE_SECONDS,
    ) -> None:
        self._records = list(records)
        self._bus = bus
        self._runner = runner
        self._generator = generator
        self._max_retries = max_retries
        self._deadline = deadline
        self._tasks: list[asyncio.Task[None]] = []
        self._outcomes: dict[str, Outcome] = {}
        self._cancelled = False

    @property
    def outcomes(self) -> dict[str, Outcome]:
        return dict(self._outcomes)

    @property
    def running(self) -> int:
        return sum(1 for task in self._tasks if not task.done())

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    async def run(self) -> dict[str, Outcome]:
        try:
            if self._cancelled:
                return self.outcomes
            self._tasks = [
                asyncio.create_task(self._supervise(record), name=f"fix:{record.path}")
                for record in self._records
            ]
            logger.info("Started %d fix workers", len(self._tasks))
            await asyncio.gather(*self._tasks, return_exceptions=True)
        finally:
            self._bus.close()
        return self.outcomes

    def cancel(self) -> None:
        """Cancel every outstanding worker."""
        self._cancelled = True
        pending = [task for task in self._tasks if not task.done()]
        if pending:
            logger.info("Cancelling %d fix workers", len(pending))
        for task in pending:
            task.cancel()

    async def _supervise(self, record: FileRecord) -> None:
        worker = FixWorker(
            record,
            self._bus,
            self._runner,
            self._generator,
            self._max_retries,
        )
        key = worker.key
        try:
            outcome = await asyncio.wait_for(worker.run(), timeout=self._deadline)
        except asyncio.TimeoutError:
            logger.warning("%s: deadline of %gs exceeded", key, self._deadline)
            await self._fail(key, f"Deadline of {self._deadline:g}s exceeded")
            return
        except (asyncio.CancelledError, EventBusClosedError):
            raise
        except Exception as exc:
            logger.exception("%s: worker crashed", key)
            await self._fail(key, f"Worker error: {exc}")
            return
        self._outcomes[key] = outcome

    async def _fail(self, key: str, message: str) -> None:
        self._outcomes[key] = Outcome.FAILED
        await self._bus.send(ProgressEvent.log_appended(key, message))
        await self._bus.send(ProgressEvent.completed(key, Outcome.FAILED))


__all__ = ["WorkerPool"]
