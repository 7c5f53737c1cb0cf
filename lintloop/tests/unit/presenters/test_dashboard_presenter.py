"""Unit tests for DashboardPresenter - event application, navigation and rendering.

This module tests:
- apply_event() field updates, retry counting and unknown paths
- Log viewport follow-to-bottom behavior for the selected row
- Cursor clamping and mode transitions for every key action
- Resize handling
- Rendering helpers (rows, log lines, title, footer, status text)

The presenter has no Textual dependency, so no app is started here.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from lintloop.constants.enums import EventKind, InputMode, Outcome
from lintloop.models.events import ProgressEvent
from lintloop.models.file_record import FileRecord
from lintloop.models.state.app_settings import FixerSettings
from lintloop.pipeline.catalog import group_items
from lintloop.screens.dashboard.config import DashboardStyle
from lintloop.screens.dashboard.presenter import DashboardPresenter

X_PATH = Path("/w/a/x.go")
Y_PATH = Path("/w/b/y.go")

# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def records() -> list[FileRecord]:
    return [FileRecord(path=X_PATH), FileRecord(path=Y_PATH)]


@pytest.fixture
def presenter(records, settings) -> DashboardPresenter:
    """Rows: 0 = /w/a/, 1 = x.go, 2 = /w/b/, 3 = y.go."""
    presenter = DashboardPresenter(group_items(records), settings)
    presenter.resize(120, 40)
    return presenter


def _select_x(presenter: DashboardPresenter) -> None:
    presenter.cursor_down()
    assert presenter.cursor == 1


# =============================================================================
# apply_event
# =============================================================================


class TestApplyEvent:
    """Test DashboardPresenter.apply_event()."""

    def test_attempt_started_sets_status_and_counts_retry(self, presenter, records) -> None:
        index = presenter.apply_event(ProgressEvent.attempt_started(str(X_PATH), 1, 2))
        assert index == 1
        assert records[0].status == "Attempt 1/2"
        assert records[0].retries == 1

    def test_log_appended_keeps_status(self, presenter, records) -> None:
        presenter.apply_event(ProgressEvent.attempt_started(str(Y_PATH), 1, 2))
        index = presenter.apply_event(ProgressEvent.log_appended(str(Y_PATH), "Applied AI fix"))
        assert index == 3
        assert records[1].status == "Attempt 1/2"
        assert records[1].logs == ["Applied AI fix"]
        assert records[1].retries == 1

    def test_only_attempt_started_counts_retries(self, presenter, records) -> None:
        presenter.apply_event(
            ProgressEvent(path=str(X_PATH), kind=EventKind.LOG_APPENDED, status="Attempt 9/9")
        )
        presenter.apply_event(ProgressEvent.completed(str(X_PATH), Outcome.FAILED))
        assert records[0].retries == 0
        assert records[0].status == "Failed"

    def test_noop_event(self, presenter, records) -> None:
        index = presenter.apply_event(ProgressEvent(path=str(X_PATH), kind=EventKind.LOG_APPENDED))
        assert index == 1
        assert records[0].status == "Pending"
        assert records[0].logs == []

    def test_unknown_path_changes_nothing(self, presenter, records) -> None:
        assert presenter.apply_event(ProgressEvent.log_appended("/elsewhere.go", "x")) is None
        assert all(record.logs == [] for record in records)

    def test_completed_with_log(self, presenter, records) -> None:
        presenter.apply_event(ProgressEvent.completed(str(X_PATH), Outcome.FIXED, "Lint passed"))
        assert records[0].status == "Fixed"
        assert records[0].logs == ["Lint passed"]


class TestLogFollow:
    """Test that the selected log follows new entries only from the bottom."""

    def test_follows_when_at_bottom(self, presenter) -> None:
        presenter.resize(120, 8)  # log height 3
        _select_x(presenter)
        for n in range(5):
            presenter.apply_event(ProgressEvent.log_appended(str(X_PATH), f"entry {n}"))
        viewport = presenter.state.viewport
        assert viewport.offset == 2
        assert presenter.visible_log_lines()[-1] == "   5 │ entry 4"

    def test_stays_put_when_scrolled_up(self, presenter) -> None:
        presenter.resize(120, 8)
        _select_x(presenter)
        for n in range(5):
            presenter.apply_event(ProgressEvent.log_appended(str(X_PATH), f"entry {n}"))
        presenter.enter_log()
        presenter.move_up()
        assert presenter.state.viewport.offset == 1

        presenter.apply_event(ProgressEvent.log_appended(str(X_PATH), "entry 5"))
        assert presenter.state.viewport.offset == 1
        assert len(presenter.state.viewport.lines) == 6

    def test_other_row_events_leave_viewport_alone(self, presenter) -> None:
        _select_x(presenter)
        presenter.apply_event(ProgressEvent.log_appended(str(Y_PATH), "y only"))
        assert presenter.state.viewport.lines == []

    def test_selection_change_jumps_to_end(self, presenter) -> None:
        presenter.resize(120, 8)
        for n in range(6):
            presenter.apply_event(ProgressEvent.log_appended(str(Y_PATH), f"entry {n}"))
        presenter.cursor_down()
        presenter.cursor_down()
        presenter.cursor_down()
        assert presenter.cursor == 3
        assert presenter.state.viewport.at_bottom
        assert presenter.state.viewport.offset == 3


# =============================================================================
# Navigation
# =============================================================================


class TestNavigation:
    """Test key-driven transitions."""

    def test_cursor_clamps(self, presenter) -> None:
        assert presenter.cursor_up() is False
        assert presenter.cursor == 0
        for _ in range(10):
            presenter.cursor_down()
        assert presenter.cursor == 3
        assert presenter.cursor_down() is False

    def test_directory_rows_are_selectable(self, presenter) -> None:
        presenter.cursor_down()
        presenter.cursor_down()
        assert presenter.cursor == 2
        assert presenter.selected_record is None

    def test_enter_and_leave_log(self, presenter) -> None:
        assert presenter.enter_log() is True
        assert presenter.mode is InputMode.LOG
        assert presenter.back() is True
        assert presenter.mode is InputMode.TABLE
        assert presenter.back() is False

    def test_q_quits_from_table(self, presenter) -> None:
        assert presenter.quit_or_back() is True

    def test_q_leaves_log_without_quitting(self, presenter) -> None:
        presenter.enter_log()
        assert presenter.quit_or_back() is False
        assert presenter.mode is InputMode.TABLE

    def test_up_down_scroll_log_in_log_mode(self, presenter) -> None:
        presenter.resize(120, 8)
        _select_x(presenter)
        for n in range(5):
            presenter.apply_event(ProgressEvent.log_appended(str(X_PATH), f"entry {n}"))
        presenter.enter_log()

        assert presenter.move_up() is True
        assert presenter.cursor == 1
        assert presenter.log_top() is True
        assert presenter.state.viewport.offset == 0
        assert presenter.move_down() is True
        assert presenter.log_bottom() is True
        assert presenter.state.viewport.offset == 2

    def test_log_scrolling_ignored_in_table_mode(self, presenter) -> None:
        assert presenter.half_page_down() is False
        assert presenter.half_page_up() is False
        assert presenter.log_top() is False
        assert presenter.log_bottom() is False
        assert presenter.scroll_log(3) is False

    def test_mouse_scroll_in_log_mode(self, presenter) -> None:
        presenter.resize(120, 8)
        _select_x(presenter)
        for n in range(10):
            presenter.apply_event(ProgressEvent.log_appended(str(X_PATH), f"entry {n}"))
        presenter.enter_log()
        assert presenter.scroll_log(-2) is True
        assert presenter.state.viewport.offset == 5
        assert presenter.scroll_log(1) is True
        assert presenter.state.viewport.offset == 6

    def test_empty_presenter(self, settings) -> None:
        presenter = DashboardPresenter([], settings)
        assert presenter.cursor_down() is False
        assert presenter.enter_log() is False
        assert presenter.selected_item is None


# =============================================================================
# Resize
# =============================================================================


class TestResize:
    """Test DashboardPresenter.resize()."""

    def test_layout_and_viewport_height(self, presenter) -> None:
        layout = presenter.resize(100, 30)
        assert layout.table_width == 46
        assert layout.log_height == 25
        assert presenter.state.viewport.height == 25
        assert presenter.state.width == 100

    def test_keeps_cursor_and_mode(self, presenter) -> None:
        _select_x(presenter)
        presenter.enter_log()
        presenter.resize(60, 20)
        assert presenter.cursor == 1
        assert presenter.mode is InputMode.LOG


# =============================================================================
# Rendering
# =============================================================================


class TestRendering:
    """Test pure rendering helpers."""

    def test_row_cells(self, presenter) -> None:
        presenter.apply_event(ProgressEvent.attempt_started(str(X_PATH), 1, 2))
        path, status, attempts = presenter.row_cells(1)
        assert path.plain == "  x.go"
        assert status.plain == "Attempt 1/2"
        assert attempts.plain == "1/2"

        directory, empty_status, empty_attempts = presenter.row_cells(0)
        assert directory.plain == str(Path("/w/a")) + os.sep
        assert empty_status.plain == ""
        assert empty_attempts.plain == ""

    def test_selected_row_highlighted(self, records, settings) -> None:
        style = DashboardStyle(selected="on blue")
        presenter = DashboardPresenter(group_items(records), settings, style)
        selected = presenter.row_cells(0)[0]
        other = presenter.row_cells(1)[0]
        assert any(str(span.style) == "on blue" for span in selected.spans)
        assert not any(str(span.style) == "on blue" for span in other.spans)

    def test_rendering_does_not_mutate_records(self, presenter, records) -> None:
        presenter.apply_event(ProgressEvent.log_appended(str(X_PATH), "a"))
        before = records[0].snapshot()
        presenter.all_rows()
        presenter.log_lines()
        presenter.status_text()
        assert records[0].snapshot() == before

    def test_log_lines_numbered_per_entry(self, presenter) -> None:
        _select_x(presenter)
        presenter.apply_event(ProgressEvent.log_appended(str(X_PATH), "Lint errors:\nx.go:1:1: bad"))
        presenter.apply_event(ProgressEvent.log_appended(str(X_PATH), "Applied AI fix"))
        assert presenter.log_lines() == [
            "   1 │ Lint errors:",
            "     │ x.go:1:1: bad",
            "   2 │ Applied AI fix",
        ]

    def test_log_title(self, presenter) -> None:
        assert presenter.log_title() == "No file selected"
        _select_x(presenter)
        assert presenter.log_title() == "golangci-lint run x.go"

    def test_log_footer(self, presenter) -> None:
        assert presenter.log_footer() == " 100% "
        presenter.enter_log()
        assert "ESC: back" in presenter.log_footer()

    def test_status_text_progress(self, presenter) -> None:
        assert presenter.status_text().startswith(" 4 items | OK | ")
        presenter.apply_event(ProgressEvent.completed(str(X_PATH), Outcome.FIXED))
        assert "1/2 done" in presenter.status_text()
        presenter.apply_event(ProgressEvent.completed(str(Y_PATH), Outcome.FAILED))
        presenter.mark_stream_closed()
        assert "Done: 1 fixed, 1 failed" in presenter.status_text()

    def test_status_text_without_files(self, settings) -> None:
        presenter = DashboardPresenter([], settings)
        assert presenter.status_text().startswith(" 0 items | No files processed | ")

    def test_custom_lint_command_in_title(self, records) -> None:
        settings = FixerSettings(lint_command="go vet {{filepath}}")
        presenter = DashboardPresenter(group_items(records), settings)
        presenter.cursor_down()
        assert presenter.log_title() == "go vet x.go"

    def test_long_title_keeps_file_name(self, records) -> None:
        command = "golangci-lint run --config /very/long/path/to/some/.golangci.yml {{filepath}}"
        presenter = DashboardPresenter(group_items(records), FixerSettings(lint_command=command))
        presenter.cursor_down()
        title = presenter.log_title()
        assert len(title) == 50
        assert title.startswith("...")
        assert title.endswith(".golangci.yml x.go")
