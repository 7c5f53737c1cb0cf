"""Main application class for the lintloop TUI."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from textual.app import App

from lintloop.constants import APP_TITLE
from lintloop.keyboard.app import APP_BINDINGS
from lintloop.models.file_record import FileRecord
from lintloop.models.state.app_settings import FixerSettings
from lintloop.pipeline.catalog import group_items
from lintloop.pipeline.event_bus import EventBus
from lintloop.pipeline.lint_runner import LintRunner
from lintloop.pipeline.patch_generator import OllamaPatchGenerator, PatchGenerator
from lintloop.pipeline.worker_pool import WorkerPool
from lintloop.screens.dashboard import DashboardPresenter, DashboardScreen
from lintloop.screens.dashboard.config import DEFAULT_STYLE, DashboardStyle

logger = logging.getLogger(__name__)


class LintLoopApp(App[None]):
    """Runs the fix pool in the background and shows its progress."""

    CSS_PATH = "css/app.tcss"
    TITLE = APP_TITLE
    BINDINGS = APP_BINDINGS

    def __init__(
        self,
        settings: FixerSettings,
        records: Sequence[FileRecord],
        *,
        runner: LintRunner | None = None,
        generator: PatchGenerator | None = None,
        style: DashboardStyle = DEFAULT_STYLE,
    ) -> None:
        """Initialize the app.

        Args:
            settings: Validated run settings.
            records: Discovered files, in discovery order.
            runner: Lint runner; built from ``settings`` when omitted.
            generator: Patch generator; an Ollama client built from
                ``settings`` when omitted.
            style: Row styles for the dashboard.
        """
        super().__init__()
        self.settings = settings
        self.records = list(records)
        self.bus = EventBus(settings.event_queue_capacity)
        self.pool = WorkerPool(
            self.records,
            self.bus,
            runner or LintRunner(settings.lint_command, settings.lint_timeout_seconds),
            generator or OllamaPatchGenerator(
                settings.ollama_url,
                settings.model,
                language=settings.code_language,
                stream=settings.stream,
                timeout=settings.request_timeout_seconds,
            ),
            max_retries=settings.max_retries,
            deadline=settings.worker_deadline_seconds,
        )
        self.presenter = DashboardPresenter(group_items(self.records), settings, style)

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(DashboardScreen(self.presenter, self.bus))
        self.run_worker(self.pool.run, name="fix-pool", group="fix-pool", exit_on_error=False)

    def action_quit(self) -> None:  # type: ignore[override]
        """Cancel outstanding fix workers, then quit."""
        self.pool.cancel()
        self.exit()

    def on_unmount(self) -> None:
        self.pool.cancel()
        outcomes = self.pool.outcomes
        logger.info(
            "Exiting with %d of %d files finished",
            len(outcomes),
            len(self.records),
        )


__all__ = [
    "LintLoopApp",
]
