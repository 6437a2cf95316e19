"""CLI interface for Task CLI.

Commands:
- add: Add a task
- list / ls: List tasks (all, completed, or pending)
- toggle / done: Flip a task between completed and pending
- delete / rm: Delete a task
- clear: Remove all completed tasks
- show: Show one task in detail
- serve: Run the HTTP API

Running `task` with no command lists every task.
"""

import logging
import sys

import click

from . import __version__
from .config import load_config
from .logging_setup import setup_logging
from .models import TaskFilter
from .output_helper import OutputHelper, get_output_helper
from .storage import FileTaskStorage
from .task_manager import TaskManager


logger = logging.getLogger(__name__)


def _manager(ctx) -> TaskManager:
    return ctx.obj["manager"]


def _output(ctx) -> OutputHelper:
    return ctx.obj["output"]


def _fail(ctx, message: str):
    """Print an error and exit non-zero."""
    _output(ctx).error(message)
    sys.exit(1)


def _parse_id(ctx, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        _fail(ctx, f"Invalid task ID: {raw}")


def _show_list(ctx, task_filter: TaskFilter):
    result = _manager(ctx).get_all_tasks(task_filter)
    if not result.is_ok:
        _fail(ctx, result.message)
    _output(ctx).show_tasks(result.value)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="task")
@click.option(
    "--data-dir",
    "-d",
    type=click.Path(file_okay=False),
    envvar="TASK_CLI_HOME",
    help="Directory holding tasks.json (default: ~/.task-cli)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx, data_dir: str, verbose: bool):
    """Task CLI - simple personal task tracking.

    Run without a command to list all tasks.
    """
    config = load_config(data_dir)
    setup_logging(logging.DEBUG if verbose else config.log_level)
    logger.debug("Using data directory %s", config.data_dir)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["manager"] = TaskManager(FileTaskStorage(config.data_dir))
    ctx.obj["output"] = get_output_helper(config.max_title_display)

    if ctx.invoked_subcommand is None:
        _show_list(ctx, TaskFilter.ALL)


@main.command("add")
@click.argument("title", nargs=-1, required=True)
@click.pass_context
def add(ctx, title: tuple):
    """Add a new task.

    Examples:
        task add Buy milk
        task add "Write the quarterly report"
    """
    result = _manager(ctx).add_task(" ".join(title))
    if not result.is_ok:
        _fail(ctx, result.message)

    out = _output(ctx)
    out.success("Task added:")
    out.show_task(result.value)


@click.command("list")
@click.option("--all", "-a", "show_all", is_flag=True, help="Show every task (default)")
@click.option("--completed", "-c", is_flag=True, help="Show only completed tasks")
@click.option("--pending", "-p", is_flag=True, help="Show only pending tasks")
@click.pass_context
def list_tasks(ctx, show_all: bool, completed: bool, pending: bool):
    """List tasks.

    Examples:
        task list
        task ls --pending
    """
    if completed and pending:
        raise click.UsageError("--completed and --pending cannot be combined")

    if completed and not show_all:
        task_filter = TaskFilter.COMPLETED
    elif pending and not show_all:
        task_filter = TaskFilter.PENDING
    else:
        task_filter = TaskFilter.ALL

    _show_list(ctx, task_filter)


@click.command("toggle")
@click.argument("task_id")
@click.pass_context
def toggle(ctx, task_id: str):
    """Toggle a task between completed and pending."""
    tid = _parse_id(ctx, task_id)
    result = _manager(ctx).toggle_task(tid)
    if not result.is_ok:
        _fail(ctx, result.message)

    task = result.value
    out = _output(ctx)
    out.success(f"Task marked as {'completed' if task.completed else 'pending'}:")
    out.show_task(task)


@click.command("delete")
@click.argument("task_id")
@click.pass_context
def delete(ctx, task_id: str):
    """Delete a task."""
    tid = _parse_id(ctx, task_id)
    result = _manager(ctx).delete_task(tid)
    if not result.is_ok:
        _fail(ctx, result.message)

    _output(ctx).success(f"Deleted task {tid}")


@main.command("clear")
@click.pass_context
def clear(ctx):
    """Remove all completed tasks."""
    result = _manager(ctx).clear_completed()
    if not result.is_ok:
        _fail(ctx, result.message)

    count = result.value
    if count:
        _output(ctx).success(f"Cleared {count} completed task(s)")
    else:
        _output(ctx).warning("No completed tasks to clear")


@main.command("show")
@click.argument("task_id")
@click.pass_context
def show(ctx, task_id: str):
    """Show details of a task."""
    tid = _parse_id(ctx, task_id)
    result = _manager(ctx).get_task(tid)
    if not result.is_ok:
        _fail(ctx, result.message)

    _output(ctx).show_detail(result.value)


@main.command("serve")
@click.option("--host", "-h", default=None, help="Interface to bind (default: 127.0.0.1)")
@click.option("--port", "-p", type=int, default=None, help="Port to listen on (default: 3000)")
@click.option("--debug", is_flag=True, help="Run Flask in debug mode")
@click.pass_context
def serve(ctx, host: str, port: int, debug: bool):
    """Run the HTTP API."""
    from .server import create_app

    config = ctx.obj["config"]
    host = host or config.host
    port = port or config.port

    # Request logging goes through the task_cli logger
    if logging.getLogger("task_cli").getEffectiveLevel() > logging.INFO:
        setup_logging(logging.INFO)

    app = create_app(manager=_manager(ctx), config=config)
    _output(ctx).console.print(f"[green]Serving tasks on http://{host}:{port}[/green]")
    app.run(host=host, port=port, debug=debug, threaded=False, use_reloader=False)


# Command aliases
main.add_command(list_tasks, "list")
main.add_command(list_tasks, "ls")
main.add_command(toggle, "toggle")
main.add_command(toggle, "done")
main.add_command(delete, "delete")
main.add_command(delete, "rm")


if __name__ == "__main__":
    main()
