"""Shared fixtures: scripted lint runner, fake patch generator, source trees."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

import pytest

from lintloop.errors import PatchGenerationError
from lintloop.models.state.app_settings import FixerSettings
from lintloop.pipeline.lint_runner import LintResult


class ScriptedLintRunner:
    """Returns pass/fail per path from a script; unscripted paths always fail.

    ``script`` maps a path string to a list of booleans consumed one per
    call; the last entry repeats once the list is exhausted.
    """

    def __init__(
        self,
        script: dict[str, list[bool]] | None = None,
        *,
        output: str = "x.go:1:1: undefined: y",
        delay: float = 0.0,
    ) -> None:
        self.script = {key: list(value) for key, value in (script or {}).items()}
        self.output = output
        self.delay = delay
        self.calls: list[str] = []

    async def run(self, path: Path | str) -> LintResult:
        key = str(path)
        self.calls.append(key)
        if self.delay:
            await asyncio.sleep(self.delay)
        results = self.script.get(key, [False])
        passed = results.pop(0) if len(results) > 1 else results[0]
        if passed:
            return LintResult(True, "", 0)
        return LintResult(False, self.output, 1)


class FakePatchGenerator:
    """Returns ``content`` (or raises ``error``) and records every request."""

    def __init__(self, content: str = "package main\n", error: str | None = None) -> None:
        self.content = content
        self.error = error
        self.requests: list[tuple[Path, str, str]] = []

    async def generate(self, path: Path, content: str, lint_output: str) -> str:
        self.requests.append((path, content, lint_output))
        if self.error is not None:
            raise PatchGenerationError(self.error)
        return self.content


@pytest.fixture
def scripted_runner() -> type[ScriptedLintRunner]:
    return ScriptedLintRunner


@pytest.fixture
def fake_generator() -> type[FakePatchGenerator]:
    return FakePatchGenerator


@pytest.fixture
def settings() -> FixerSettings:
    return FixerSettings(max_retries=2)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Create files under tmp_path from a {relative path: content} mapping."""

    def _make(files: dict[str, str]) -> Path:
        for relative, content in files.items():
            target = tmp_path / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return tmp_path

    return _make
