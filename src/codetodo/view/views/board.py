# SPDX-License-Identifier: MIT

from rich.console import Console

from codetodo.model.filter import TaskFilter
from codetodo.model.task import Task
from codetodo.query.filter import filter_tasks, partition_by_status
from codetodo.service.statistics import task_statistics
from codetodo.view.state import get_show_statistics
from codetodo.view.util import STATUS_TITLES
from codetodo.view.views.header import header
from codetodo.view.views.statistics import statistics_table
from codetodo.view.views.task import task_table


def board_view(
    tasks: list[Task], task_filter: TaskFilter, no_wrap: bool = False
) -> None:
    """
    Render statistics for the whole collection plus one table per status.

    Statistics always cover every task. Each status bucket is passed
    through the filter independently and titled with its filtered count.
    """
    header("board")

    console = Console()
    if get_show_statistics():
        console.print(statistics_table(task_statistics(tasks)))

    for status, bucket in partition_by_status(tasks).items():
        filtered = filter_tasks(
            bucket,
            task_filter["query"],
            task_filter["type"],
            task_filter["priority"],
        )
        console.print(
            task_table(
                f"{STATUS_TITLES[status]} ({len(filtered)})",
                filtered,
                no_wrap=no_wrap,
            )
        )
