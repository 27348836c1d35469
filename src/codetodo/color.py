# SPDX-License-Identifier: MIT

from codetodo.model.task import TaskPriority, TaskStatus, TaskType

# Color constant for completed tasks
COMPLETED_TASK_COLOR = "bright_black"

TYPE_COLORS: dict[TaskType, str] = {
    TaskType.FEATURE: "blue",
    TaskType.BUG: "red",
    TaskType.REFACTOR: "purple",
}

PRIORITY_COLORS: dict[TaskPriority, str] = {
    TaskPriority.HIGH: "red",
    TaskPriority.MEDIUM: "yellow",
    TaskPriority.LOW: "green",
}

STATUS_COLORS: dict[TaskStatus, str] = {
    TaskStatus.PENDING: "grey62",
    TaskStatus.IN_PROGRESS: "blue",
    TaskStatus.COMPLETED: "green",
}

TAG_COLOR = "cyan"
