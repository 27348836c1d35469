# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias, TypedDict

from codetodo.model.task import TaskPriority, TaskType

ALL: Literal["all"] = "all"

TypeFilter: TypeAlias = TaskType | Literal["all"] | str
PriorityFilter: TypeAlias = TaskPriority | Literal["all"] | str


class TaskFilter(TypedDict):
    query: str
    type: TypeFilter
    priority: PriorityFilter
