"""Task CLI: create, edit, remove and list tasks in the backing file."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from tasklist.cli import output
from tasklist.cli.errors import error_feedback
from tasklist.format import format_task_detail, format_task_list
from tasklist.lib import config, paths
from tasklist.models import TaskStatus
from tasklist.store import TaskStore

logger = logging.getLogger(__name__)

DEMO_TASKS = ("Add TUI to manage tasks", "Add error handling")

main_app = typer.Typer(
    invoke_without_command=True,
    add_completion=False,
    help="""Personal task list. One task per line in ~/todo/list.txt.""",
)


def _setup_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else str(config.load_config()["logging_level"]).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _store(ctx: typer.Context) -> TaskStore:
    path = paths.list_file(ctx.obj.get("list_file"))
    logger.debug("Using task list %s", path)
    return TaskStore(path)


@main_app.callback(context_settings={"help_option_names": ["-h", "--help"]})
@error_feedback
def main_callback(
    ctx: typer.Context,
    list_file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Task list file (default: ~/todo/list.txt)."),
    ] = None,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    quiet_output: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    output.init_context(ctx, json_output, quiet_output)
    ctx.obj["list_file"] = list_file

    if ctx.resilient_parsing:
        return

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        return

    _setup_logging(verbose)


@main_app.command("create")
@error_feedback
def create(
    ctx: typer.Context,
    description: Annotated[list[str], typer.Argument(help="Task description")],
):
    """Create new task."""
    task = _store(ctx).create(" ".join(description))
    if output.echo_json(task.to_dict(), ctx):
        return
    output.echo_text(f"Created: {task.id}", ctx)


@main_app.command("edit")
@error_feedback
def edit(
    ctx: typer.Context,
    task_id: Annotated[int, typer.Argument(min=0, help="Task ID")],
    status: Annotated[TaskStatus, typer.Argument(case_sensitive=False, help="New status")],
    description: Annotated[list[str], typer.Argument(help="New description")],
):
    """Set status and description of a task. Creates it if missing."""
    task = _store(ctx).edit(task_id, status, " ".join(description))
    if output.echo_json(task.to_dict(), ctx):
        return
    output.echo_text(f"Updated: {task.id}", ctx)


@main_app.command("remove")
@error_feedback
def remove(
    ctx: typer.Context,
    task_id: Annotated[int, typer.Argument(help="Task ID")],
):
    """Remove a task. Missing IDs are not an error."""
    removed = _store(ctx).remove(task_id)
    if output.echo_json({"id": task_id, "removed": removed}, ctx):
        return
    output.echo_text(f"Removed: {task_id}" if removed else f"No task {task_id}", ctx)


@main_app.command("list")
@error_feedback
def list_cmd(
    ctx: typer.Context,
    status: Annotated[
        TaskStatus | None,
        typer.Option("--status", "-s", case_sensitive=False, help="Filter by status"),
    ] = None,
):
    """List tasks."""
    tasks = list(_store(ctx).load().values())
    if status is not None:
        tasks = [t for t in tasks if t.status is status]
    tasks.sort(key=lambda t: t.id)

    if output.echo_json([t.to_dict() for t in tasks], ctx):
        return
    typer.echo(format_task_list(tasks))


@main_app.command("show")
@error_feedback
def show(
    ctx: typer.Context,
    task_id: Annotated[int, typer.Argument(help="Task ID")],
):
    """Show one task."""
    task = _store(ctx).get(task_id)
    if task is None:
        typer.echo(f"No task {task_id}", err=True)
        raise typer.Exit(1)

    if output.echo_json(task.to_dict(), ctx):
        return
    typer.echo(format_task_detail(task))


@main_app.command("demo")
@error_feedback
def demo(ctx: typer.Context):
    """Create two tasks, complete the first, then list everything."""
    store = _store(ctx)
    first = store.create(DEMO_TASKS[0])
    store.create(DEMO_TASKS[1])
    store.edit(first.id, TaskStatus.COMPLETE, first.description)
    typer.echo(format_task_list(list(store.load().values())))


def main() -> None:
    """Entry point for the todo command."""
    try:
        main_app()
    except SystemExit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e


app = main_app

__all__ = ["app", "main"]
