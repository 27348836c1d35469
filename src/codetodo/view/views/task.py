# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from codetodo.color import COMPLETED_TASK_COLOR
from codetodo.model.entity_id import short_entity_id
from codetodo.model.task import Task
from codetodo.time import datetime_to_display_local_datetime_str
from codetodo.view.util import (
    format_priority,
    format_tags,
    format_type,
    is_task_completed,
    render_estimate,
    task_age,
    task_state,
)
from codetodo.view.views.header import header

COLUMNS = [
    "id",
    "state",
    "age",
    "type",
    "priority",
    "title",
    "deadline",
    "estimate",
    "tags",
]


def task_table(
    title: str,
    tasks: list[Task],
    no_wrap: bool = False,
) -> Table:
    tasks_table = Table(title=title, title_justify="left", box=box.SIMPLE)
    for column in COLUMNS:
        if no_wrap and column not in ("id", "state"):
            tasks_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            tasks_table.add_column(column)

    for task in tasks:
        row = []
        for column in COLUMNS:
            column_value = ""
            if column == "id":
                column_value = short_entity_id(task["id"])
            elif column == "state":
                column_value = task_state(task)
            elif column == "age":
                column_value = task_age(task)
            elif column == "type":
                column_value = format_type(task["type"])
            elif column == "priority":
                column_value = format_priority(task["priority"])
            elif column == "estimate":
                column_value = render_estimate(task["estimated_time"])
            elif column == "tags":
                column_value = format_tags(task["tags"])
            elif task[column] is not None:  # type: ignore[literal-required]
                column_value = escape(str(task[column]))  # type: ignore[literal-required]

            # Dim completed tasks
            if is_task_completed(task) and column_value:
                column_value = f"[{COMPLETED_TASK_COLOR}]{column_value}[/{COMPLETED_TASK_COLOR}]"

            row.append(column_value)
        tasks_table.add_row(*row)

    return tasks_table


def tasks_view(
    report_name: str,
    tasks: list[Task],
    no_wrap: bool = False,
) -> None:
    header(report_name)

    console = Console()
    console.print(
        task_table(
            f"{report_name} ({len(tasks)})",
            tasks,
            no_wrap=no_wrap,
        )
    )


def single_task_view(task: Task) -> None:
    header("task")

    property_table = Table(box=box.SIMPLE)
    property_table.add_column("property")
    property_table.add_column("value")

    property_table.add_row("id", task["id"])
    property_table.add_row("title", escape(task["title"]))
    property_table.add_row("description", escape(task["description"]))
    property_table.add_row("type", format_type(task["type"]))
    property_table.add_row("priority", format_priority(task["priority"]))
    property_table.add_row("status", str(task["status"]))
    property_table.add_row("deadline", escape(task["deadline"] or ""))
    property_table.add_row("estimate", render_estimate(task["estimated_time"]))
    property_table.add_row("tags", format_tags(task["tags"]))
    property_table.add_row(
        "created", datetime_to_display_local_datetime_str(task["created_at"])
    )
    property_table.add_row("age", task_age(task))

    console = Console()
    console.print(property_table)
