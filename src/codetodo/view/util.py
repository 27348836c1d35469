# SPDX-License-Identifier: MIT

from typing import Optional

from rich.markup import escape

from codetodo.color import PRIORITY_COLORS, TAG_COLOR, TYPE_COLORS
from codetodo.model.task import Task, TaskPriority, TaskStatus, TaskType
from codetodo.time import datetime_age

STATUS_TITLES: dict[TaskStatus, str] = {
    TaskStatus.PENDING: "Pending",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}


def task_state(task: Task) -> str:
    """
    Get the state symbol for a task.

    Returns:
        "X" if completed, ">" if in progress, " " if pending
    """
    if task["status"] == TaskStatus.COMPLETED:
        return "X"
    elif task["status"] == TaskStatus.IN_PROGRESS:
        return ">"
    return " "


def is_task_completed(task: Task) -> bool:
    return task["status"] == TaskStatus.COMPLETED


def task_age(task: Task) -> str:
    return datetime_age(task["created_at"])


def format_type(task_type: TaskType) -> str:
    color = TYPE_COLORS.get(task_type, "white")
    return f"[{color}]{task_type}[/{color}]"


def format_priority(priority: TaskPriority) -> str:
    color = PRIORITY_COLORS.get(priority, "white")
    return f"[{color}]{priority}[/{color}]"


def format_tags(tags: Optional[list[str]]) -> str:
    if not tags:
        return ""
    return " ".join(f"[{TAG_COLOR}]#{escape(tag)}[/{TAG_COLOR}]" for tag in tags)


def render_estimate(estimated_time: Optional[str]) -> str:
    if estimated_time is None:
        return ""
    return f"{escape(estimated_time)}h"
