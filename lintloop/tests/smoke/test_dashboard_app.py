"""Smoke tests for LintLoopApp driven through Textual's pilot.

Scenario: two files in two directories, MaxRetries=2.
- a/x.go lints clean on the first attempt.
- b/y.go never lints clean; both patch attempts are applied.

The lint runner and patch generator are in-process fakes, so the tests
exercise the real pool, bus, receive loop and dashboard rendering.
"""

from __future__ import annotations

import asyncio

import pytest

from lintloop.app import LintLoopApp
from lintloop.constants.enums import InputMode
from lintloop.models.file_record import FileItem
from lintloop.models.state.app_settings import FixerSettings
from lintloop.pipeline.catalog import discover
from lintloop.screens.dashboard import DashboardScreen
from lintloop.widgets import ItemTable, LogView, StatusBar

FIXED_CONTENT = "package b\n\nfunc y() {}\n"


@pytest.fixture
def two_file_app(make_tree, scripted_runner, fake_generator) -> LintLoopApp:
    root = make_tree({"a/x.go": "package a\n", "b/y.go": "package b\nfunc y() { z }\n"})
    settings = FixerSettings(root_dir=str(root), max_retries=2)
    records = discover(root)
    runner = scripted_runner({str(root / "a" / "x.go"): [True]})
    return LintLoopApp(settings, records, runner=runner, generator=fake_generator(FIXED_CONTENT))


async def _wait_for_stream_close(pilot, screen: DashboardScreen) -> None:
    for _ in range(100):
        if screen.stream_closed:
            return
        await pilot.pause(0.05)
    raise AssertionError("event stream never closed")


class TestTwoFileScenario:
    """Drive the two-file scenario end to end."""

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_final_state(self, two_file_app: LintLoopApp) -> None:
        app = two_file_app
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, DashboardScreen)
            await _wait_for_stream_close(pilot, screen)

            presenter = screen.presenter
            assert len(presenter.items) == 4
            files = {item.record.name: item.record for item in presenter.items if isinstance(item, FileItem)}
            assert files["x.go"].status == "Fixed"
            assert files["x.go"].retries == 1
            assert files["x.go"].logs == ["Lint passed"]
            assert files["y.go"].status == "Failed"
            assert files["y.go"].retries == 2
            assert files["y.go"].logs.count("Applied AI fix") == 2

            assert app.bus.closed
            assert files["y.go"].path.read_text(encoding="utf-8") == FIXED_CONTENT

            status = screen.query_one("#status-bar", StatusBar)
            assert "Done: 1 fixed, 1 failed" in status.text
            table = screen.query_one("#item-table", ItemTable)
            assert table.row_count == 4

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_navigation_and_log_mode(self, two_file_app: LintLoopApp) -> None:
        app = two_file_app
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            screen = app.screen
            await _wait_for_stream_close(pilot, screen)
            presenter = screen.presenter

            await pilot.press("down", "down", "down")
            assert presenter.cursor == 3
            assert presenter.log_title() == "golangci-lint run y.go"
            log_view = screen.query_one("#log-view", LogView)
            assert log_view.lines[-1] == "   4 │ Applied AI fix"

            await pilot.press("enter")
            await pilot.pause()
            assert presenter.mode is InputMode.LOG
            await pilot.press("g")
            assert presenter.state.viewport.offset == 0

            await pilot.press("q")
            await pilot.pause()
            assert presenter.mode is InputMode.TABLE
            assert app.is_running

            await pilot.press("k")
            assert presenter.cursor == 2

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_q_quits_and_cancels_pool(self, make_tree, scripted_runner, fake_generator) -> None:
        root = make_tree({"slow.go": "package main\n"})
        app = LintLoopApp(
            FixerSettings(root_dir=str(root), max_retries=1),
            discover(root),
            runner=scripted_runner(delay=30),
            generator=fake_generator(),
        )
        async with app.run_test() as pilot:
            await pilot.pause(0.05)
            assert app.pool.running == 1
            await pilot.press("q")
            assert app.pool.cancelled
        for _ in range(50):
            if app.pool.running == 0:
                break
            await asyncio.sleep(0.01)
        assert app.pool.running == 0

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_ctrl_c_quits_from_log_mode(self, two_file_app: LintLoopApp) -> None:
        app = two_file_app
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("enter")
            assert app.screen.presenter.mode is InputMode.LOG
            await pilot.press("ctrl+c")
            assert app.pool.cancelled

    @pytest.mark.asyncio
    @pytest.mark.smoke
    async def test_no_files(self, tmp_path) -> None:
        app = LintLoopApp(FixerSettings(root_dir=str(tmp_path)), [])
        async with app.run_test() as pilot:
            await pilot.pause()
            screen = app.screen
            await _wait_for_stream_close(pilot, screen)
            status = screen.query_one("#status-bar", StatusBar)
            assert "No files processed" in status.text
