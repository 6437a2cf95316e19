"""Output helper for Task CLI.

Renders tasks for the terminal with rich:
- one line per task (status mark, id, title)
- task lists with a completion summary
- a detail view with timestamps
"""

from datetime import datetime
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .models import Task


console = Console()


def truncate_text(text: str, max_length: int = 60, ellipsis: str = "...") -> str:
    """Shorten a title for one-line display; max_length <= 0 disables it."""
    overflow = len(text) - max_length
    if max_length <= 0 or overflow <= 0:
        return text
    keep = max(max_length - len(ellipsis), 0)
    return f"{text[:keep].rstrip()}{ellipsis}"


def format_local_time(value: Optional[datetime]) -> str:
    """Format an aware timestamp in local time for display."""
    if value is None:
        return "-"
    return value.astimezone().strftime("%Y-%m-%d %H:%M")


def format_task_line(task: Task, max_title: int = 60) -> str:
    """Format a task as a single rich-markup line."""
    status = "[green]✓[/green]" if task.completed else "[red]○[/red]"
    title = escape(truncate_text(task.title, max_title))
    if task.completed:
        title = f"[bright_black]{title}[/bright_black]"
    return f"{status} [cyan]\\[{task.id}][/cyan] {title}"


def format_summary(tasks: List[Task]) -> str:
    """Return the 'Completed: X/Y' footer for a task list."""
    done = sum(1 for t in tasks if t.completed)
    return f"Completed: {done}/{len(tasks)}"


class OutputHelper:
    """Prints tasks to a rich console."""

    def __init__(self, max_title: int = 60, out: Optional[Console] = None):
        self.max_title = max_title
        self.console = out or console

    def show_task(self, task: Task):
        self.console.print(format_task_line(task, self.max_title))

    def show_tasks(self, tasks: List[Task]):
        """Display a task list with its completion summary."""
        if not tasks:
            self.console.print("[yellow]No tasks found.[/yellow]")
            return

        self.console.print("\n[bold]Tasks:[/bold]\n")
        for task in tasks:
            self.show_task(task)
        self.console.print(f"\n[dim]{format_summary(tasks)}[/dim]")

    def show_detail(self, task: Task):
        """Display one task with its timestamps."""
        state = "[green]completed[/green]" if task.completed else "[blue]pending[/blue]"

        self.console.print()
        self.console.print(f"[bold]\\[{task.id}][/bold] {escape(task.title)}")
        self.console.print(f"  Status: {state}")
        self.console.print(f"  Created: {format_local_time(task.created_at)}")
        if task.completed_at:
            self.console.print(f"  Completed: {format_local_time(task.completed_at)}")
        self.console.print()

    def success(self, message: str):
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def warning(self, message: str):
        self.console.print(f"[yellow]{escape(message)}[/yellow]")

    def error(self, message: str):
        self.console.print(f"[red]✗ Error: {escape(message)}[/red]")


def get_output_helper(max_title: int = 60) -> OutputHelper:
    """Get an output helper instance."""
    return OutputHelper(max_title=max_title)
