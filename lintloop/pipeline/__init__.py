"""Fix pipeline: discovery, lint, patch, workers and the event bus."""

from lintloop.pipeline.catalog import count_files, discover, group_items
from lintloop.pipeline.event_bus import EventBus
from lintloop.pipeline.fix_worker import FixWorker
from lintloop.pipeline.lint_runner import LintResult, LintRunner
from lintloop.pipeline.patch_generator import (
    OllamaPatchGenerator,
    PatchGenerator,
    build_fix_prompt,
)
from lintloop.pipeline.worker_pool import WorkerPool

__all__ = [
    "EventBus",
    "FixWorker",
    "LintResult",
    "LintRunner",
    "OllamaPatchGenerator",
    "PatchGenerator",
    "WorkerPool",
    "build_fix_prompt",
    "count_files",
    "discover",
    "group_items",
]
