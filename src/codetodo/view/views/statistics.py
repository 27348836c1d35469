# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from codetodo.color import STATUS_COLORS, TYPE_COLORS
from codetodo.model.statistics import TaskStatistics
from codetodo.model.task import TaskStatus, TaskType
from codetodo.view.views.header import header


def statistics_table(statistics: TaskStatistics) -> Table:
    table = Table(title="statistics", title_justify="left", box=box.SIMPLE)
    table.add_column("total")
    table.add_column("completed", style=STATUS_COLORS[TaskStatus.COMPLETED])
    table.add_column("in progress", style=STATUS_COLORS[TaskStatus.IN_PROGRESS])
    table.add_column("pending", style=STATUS_COLORS[TaskStatus.PENDING])
    for task_type in TaskType:
        table.add_column(str(task_type), style=TYPE_COLORS[task_type])

    table.add_row(
        str(statistics["total"]),
        str(statistics["completed"]),
        str(statistics["in_progress"]),
        str(statistics["pending"]),
        str(statistics["by_type"]["feature"]),
        str(statistics["by_type"]["bug"]),
        str(statistics["by_type"]["refactor"]),
    )
    return table


def statistics_view(statistics: TaskStatistics) -> None:
    header("statistics")

    console = Console()
    console.print(statistics_table(statistics))
