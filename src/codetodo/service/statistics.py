# SPDX-License-Identifier: MIT

from collections import Counter
from typing import Iterable

from codetodo.model.statistics import TaskStatistics
from codetodo.model.task import Task, TaskStatus, TaskType


def task_statistics(tasks: Iterable[Task]) -> TaskStatistics:
    """
    Aggregate counts over a task collection.

    Status counts and type counts each sum to ``total`` because every task
    carries exactly one status and one type.
    """
    status_counts: Counter[TaskStatus] = Counter()
    type_counts: Counter[TaskType] = Counter()
    total = 0
    for task in tasks:
        total += 1
        status_counts[task["status"]] += 1
        type_counts[task["type"]] += 1

    return {
        "total": total,
        "completed": status_counts[TaskStatus.COMPLETED],
        "in_progress": status_counts[TaskStatus.IN_PROGRESS],
        "pending": status_counts[TaskStatus.PENDING],
        "by_type": {
            "feature": type_counts[TaskType.FEATURE],
            "bug": type_counts[TaskType.BUG],
            "refactor": type_counts[TaskType.REFACTOR],
        },
    }
