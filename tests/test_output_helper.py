"""Tests for output_helper.py - Task rendering."""

from datetime import datetime, timezone

import pytest
from rich.console import Console

from task_cli.models import Task
from task_cli.output_helper import (
    OutputHelper,
    format_local_time,
    get_output_helper,
    format_summary,
    format_task_line,
    truncate_text,
)


@pytest.fixture
def recorder():
    """Console that records instead of printing to a terminal."""
    return Console(record=True, width=100, color_system=None)


class TestTruncateText:
    """Tests for truncate_text function."""

    def test_short_text_unchanged(self):
        """Test short text is not truncated."""
        assert truncate_text("hello", 10) == "hello"

    def test_long_text_truncated(self):
        """Test long text is truncated with suffix."""
        result = truncate_text("hello world this is long", 10)
        assert result == "hello w..."
        assert len(result) == 10

    def test_trailing_space_before_ellipsis_dropped(self):
        """Test a cut at a word boundary does not leave a dangling space."""
        assert truncate_text("Buy milk and eggs", 8) == "Buy m..."
        assert truncate_text("Buy milk and eggs", 7) == "Buy..."

    def test_zero_disables(self):
        """Test a limit of 0 means unlimited."""
        assert truncate_text("x" * 200, 0) == "x" * 200


class TestFormatting:
    """Tests for line and summary formatting."""

    def test_pending_line(self):
        """Test markup for a pending task."""
        line = format_task_line(Task(id=3, title="Walk dog"))
        assert "[red]○[/red]" in line
        assert "Walk dog" in line

    def test_completed_line_is_dimmed(self):
        """Test completed titles are greyed out."""
        line = format_task_line(Task(id=1, title="Buy milk", completed=True))
        assert "[green]✓[/green]" in line
        assert "[bright_black]Buy milk[/bright_black]" in line

    def test_summary(self):
        """Test completion summary."""
        tasks = [Task(id=1, title="a", completed=True), Task(id=2, title="b")]
        assert format_summary(tasks) == "Completed: 1/2"

    def test_local_time_none(self):
        """Test missing timestamps render as a dash."""
        assert format_local_time(None) == "-"

    def test_local_time_format(self):
        """Test timestamps render as date and minutes."""
        text = format_local_time(datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc))
        assert len(text) == len("2025-01-01 12:00")


class TestOutputHelper:
    """Tests for OutputHelper class."""

    def test_show_tasks(self, recorder):
        """Test list rendering."""
        helper = OutputHelper(out=recorder)
        helper.show_tasks([Task(id=1, title="Buy milk"), Task(id=2, title="Walk dog", completed=True)])

        text = recorder.export_text()
        assert "[1] Buy milk" in text
        assert "[2] Walk dog" in text
        assert "Completed: 1/2" in text

    def test_show_tasks_empty(self, recorder):
        """Test empty list message."""
        OutputHelper(out=recorder).show_tasks([])
        assert "No tasks found." in recorder.export_text()

    def test_show_task_truncates(self, recorder):
        """Test long titles are cut to max_title."""
        OutputHelper(max_title=10, out=recorder).show_task(Task(id=1, title="a" * 50))
        text = recorder.export_text()
        assert "aaaaaaa..." in text
        assert "a" * 11 not in text

    def test_show_detail(self, recorder):
        """Test detail view for a completed task."""
        task = Task(
            id=4,
            title="Done",
            completed=True,
            completed_at=datetime(2025, 1, 2, tzinfo=timezone.utc),
        )
        OutputHelper(out=recorder).show_detail(task)

        text = recorder.export_text()
        assert "[4] Done" in text
        assert "completed" in text
        assert "Completed:" in text

    def test_error_escapes_markup(self, recorder):
        """Test error text is printed literally."""
        OutputHelper(out=recorder).error("bad [red]thing[/red]")
        assert "Error: bad [red]thing[/red]" in recorder.export_text()

    def test_get_output_helper(self):
        """Test the factory applies the title limit and default console."""
        helper = get_output_helper(12)
        assert helper.max_title == 12
        assert isinstance(helper.console, Console)
