# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import Optional, Sequence, TypedDict

import pendulum

from codetodo.model.entity_id import EntityId


class TaskType(StrEnum):
    FEATURE = "feature"
    BUG = "bug"
    REFACTOR = "refactor"


class TaskPriority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskStatus(StrEnum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


DEFAULT_TASK_TYPE = TaskType.FEATURE
DEFAULT_TASK_PRIORITY = TaskPriority.MEDIUM
DEFAULT_TASK_STATUS = TaskStatus.PENDING

# Workflow order used for display grouping
STATUS_ORDER: tuple[TaskStatus, ...] = (
    TaskStatus.PENDING,
    TaskStatus.IN_PROGRESS,
    TaskStatus.COMPLETED,
)


class Task(TypedDict):
    id: EntityId
    title: str
    type: TaskType
    priority: TaskPriority
    status: TaskStatus
    deadline: Optional[str]
    estimated_time: Optional[str]
    tags: list[str]
    description: str
    created_at: pendulum.DateTime


class TaskDraft(TypedDict, total=False):
    """
    Caller input for creating a task.

    Only ``title`` is required. ``tags`` may be the raw comma separated
    string typed by a user or an already split sequence; either way it is
    normalized before the task is stored.
    """

    title: str
    type: TaskType | str
    priority: TaskPriority | str
    status: TaskStatus | str
    deadline: Optional[str]
    estimated_time: Optional[str]
    tags: str | Sequence[str] | None
    description: Optional[str]
