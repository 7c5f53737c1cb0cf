"""Progress events flowing from fix workers to the dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from lintloop.constants.enums import EventKind, Outcome
from lintloop.constants.values import (
    STATUS_ATTEMPT_TEMPLATE,
    STATUS_FAILED,
    STATUS_FIXED,
)

_OUTCOME_STATUS: dict[Outcome, str] = {
    Outcome.FIXED: STATUS_FIXED,
    Outcome.FAILED: STATUS_FAILED,
}


@dataclass(frozen=True, slots=True)
class ProgressEvent:
    """One update for one file.

    ``kind`` drives state transitions; ``status`` and ``log`` are display text
    only. Empty ``status`` means no status change and empty ``log`` means
    nothing to append, so an event with neither is a harmless no-op.
    """

    path: str
    kind: EventKind
    status: str = ""
    log: str = ""
    attempt: int = 0
    outcome: Outcome | None = None

    @classmethod
    def attempt_started(cls, path: str, attempt: int, max_attempts: int) -> ProgressEvent:
        return cls(
            path=path,
            kind=EventKind.ATTEMPT_STARTED,
            status=STATUS_ATTEMPT_TEMPLATE.format(attempt=attempt, total=max_attempts),
            attempt=attempt,
        )

    @classmethod
    def log_appended(cls, path: str, text: str) -> ProgressEvent:
        return cls(path=path, kind=EventKind.LOG_APPENDED, log=text)

    @classmethod
    def completed(cls, path: str, outcome: Outcome, log: str = "") -> ProgressEvent:
        return cls(
            path=path,
            kind=EventKind.COMPLETED,
            status=_OUTCOME_STATUS[outcome],
            log=log,
            outcome=outcome,
        )

    @property
    def starts_attempt(self) -> bool:
        return self.kind is EventKind.ATTEMPT_STARTED


__all__ = ["ProgressEvent"]
