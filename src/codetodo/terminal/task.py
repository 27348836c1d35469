# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from codetodo.model.entity_id import EntityId
from codetodo.model.filter import ALL
from codetodo.model.task import TaskPriority, TaskStatus, TaskType
from codetodo.query.filter import filter_tasks, tasks_by_status
from codetodo.repository.task import TaskStore
from codetodo.terminal.completion import complete_tag, complete_task_id
from codetodo.terminal.custom_typer import AliasedTyperGroup
from codetodo.terminal.parse import resolve_task_id
from codetodo.terminal.session import open_task_store
from codetodo.terminal.validate import validate_priority_filter, validate_type_filter
from codetodo.view.util import STATUS_TITLES
from codetodo.view.views import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

console = Console()


def __require_task_id(store: TaskStore, id_param: str) -> EntityId:
    task_id = resolve_task_id(store, id_param)
    if task_id is None:
        console.print(f"[red]No task matches '{escape(id_param)}'[/red]")
        raise typer.Exit(code=1)
    return task_id


def __set_status(id_param: str, status: TaskStatus, reopen: bool = False) -> None:
    store = open_task_store()
    task_id = __require_task_id(store, id_param)

    current = store.get_task(task_id)
    is_completed = current is not None and current["status"] == TaskStatus.COMPLETED
    if is_completed and not reopen:
        console.print(
            "[yellow]Task is already completed, use `task status` to reopen it[/yellow]"
        )
        return

    store.set_status(task_id, status)

    task = store.get_task(task_id)
    if task is not None:
        task_report.single_task_view(task)


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    task_type: Annotated[
        TaskType, typer.Option("--type", "-y", case_sensitive=False)
    ] = TaskType.FEATURE,
    priority: Annotated[
        TaskPriority, typer.Option("--priority", "-pr", case_sensitive=False)
    ] = TaskPriority.MEDIUM,
    status: Annotated[
        TaskStatus, typer.Option("--status", "-s", case_sensitive=False)
    ] = TaskStatus.PENDING,
    deadline: Annotated[
        Optional[str],
        typer.Option("--deadline", "-u", help="free form, e.g. YYYY-MM-DD"),
    ] = None,
    estimate: Annotated[
        Optional[str],
        typer.Option("--estimate", "-e", help="estimated hours"),
    ] = None,
    tags: Annotated[
        Optional[str],
        typer.Option(
            "--tags",
            "-t",
            help="comma separated, e.g. 'ui, perf'",
            autocompletion=complete_tag,
        ),
    ] = None,
    description: Annotated[
        Optional[str], typer.Option("--description", "-d")
    ] = None,
) -> None:
    """Create a task."""
    store = open_task_store()

    id = store.create(
        {
            "title": title,
            "type": task_type,
            "priority": priority,
            "status": status,
            "deadline": deadline,
            "estimated_time": estimate,
            "tags": tags,
            "description": description,
        }
    )
    if id is None:
        console.print("[yellow]Task title cannot be blank, nothing added[/yellow]")
        return

    new_task = store.get_task(id)
    if new_task is not None:
        task_report.single_task_view(new_task)


@app.command("start, st", no_args_is_help=True)
def start(
    id: Annotated[str, typer.Argument(autocompletion=complete_task_id)],
) -> None:
    """Move a task to in-progress."""
    __set_status(id, TaskStatus.IN_PROGRESS)


@app.command("complete, c", no_args_is_help=True)
def complete(
    id: Annotated[str, typer.Argument(autocompletion=complete_task_id)],
) -> None:
    """Mark a task as completed."""
    __set_status(id, TaskStatus.COMPLETED)


@app.command("status, s", no_args_is_help=True)
def status(
    id: Annotated[str, typer.Argument(autocompletion=complete_task_id)],
    new_status: Annotated[TaskStatus, typer.Argument(case_sensitive=False)],
) -> None:
    """Set any status, including reopening a completed task."""
    __set_status(id, new_status, reopen=True)


@app.command("delete, del", no_args_is_help=True)
def delete(
    id: Annotated[str, typer.Argument(autocompletion=complete_task_id)],
) -> None:
    """Delete a task permanently."""
    store = open_task_store()
    task_id = __require_task_id(store, id)
    store.delete(task_id)
    console.print(f"Deleted task {task_id}")


@app.command("show, sh", no_args_is_help=True)
def show(
    id: Annotated[str, typer.Argument(autocompletion=complete_task_id)],
) -> None:
    """Show every field of a task."""
    store = open_task_store()
    task_id = __require_task_id(store, id)
    task = store.get_task(task_id)
    if task is not None:
        task_report.single_task_view(task)


@app.command("list, l")
def list_tasks(
    task_status: Annotated[
        Optional[TaskStatus],
        typer.Option("--status", "-s", case_sensitive=False),
    ] = None,
    query: Annotated[str, typer.Option("--query", "-q")] = "",
    type_filter: Annotated[
        str, typer.Option("--type", "-y", callback=validate_type_filter)
    ] = ALL,
    priority_filter: Annotated[
        str, typer.Option("--priority", "-pr", callback=validate_priority_filter)
    ] = ALL,
    no_wrap: Annotated[
        bool,
        typer.Option("--no-wrap", help="Disable text wrapping in table columns"),
    ] = False,
) -> None:
    """List tasks in creation order."""
    store = open_task_store()
    tasks = store.get_all_tasks()
    if task_status is not None:
        tasks = tasks_by_status(tasks, task_status)
    tasks = filter_tasks(tasks, query, type_filter, priority_filter)

    report_name = "tasks" if task_status is None else STATUS_TITLES[task_status]
    task_report.tasks_view(report_name, tasks, no_wrap=no_wrap)
