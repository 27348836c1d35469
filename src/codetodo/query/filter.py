# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from codetodo.model.filter import ALL, PriorityFilter, TaskFilter, TypeFilter
from codetodo.model.task import STATUS_ORDER, Task, TaskStatus


def generate_filter(task_filter: TaskFilter) -> "Predicate":
    return And(
        Search(task_filter["query"]),
        PropertyEquals("type", task_filter["type"]),
        PropertyEquals("priority", task_filter["priority"]),
    )


def filter_tasks(
    tasks: list[Task],
    query: str = "",
    type_filter: TypeFilter = ALL,
    priority_filter: PriorityFilter = ALL,
) -> list[Task]:
    """
    Order preserving subsequence of ``tasks`` matching the search and filters.

    A task matches when ``query`` is a case-insensitive substring of its
    title, its description or one of its tags, and the type and priority
    filters are either "all" or equal to the task's values. An empty
    query matches every task.
    """
    predicate = generate_filter(
        {"query": query, "type": type_filter, "priority": priority_filter}
    )
    return predicate.filter(tasks)


def tasks_by_status(tasks: list[Task], status: TaskStatus | str) -> list[Task]:
    return PropertyEquals("status", status).filter(tasks)


def partition_by_status(tasks: list[Task]) -> dict[TaskStatus, list[Task]]:
    """Split tasks into the status buckets, in workflow order."""
    return {status: tasks_by_status(tasks, status) for status in STATUS_ORDER}


class Predicate(ABC):
    @abstractmethod
    def matches(self, item: Task) -> bool: ...

    def filter(self, items: Iterable[Task]) -> list[Task]:
        return [item for item in items if self.matches(item)]


class And(Predicate):
    def __init__(self, *predicates: Predicate) -> None:
        self.predicates: list[Predicate] = list(predicates)

    def add_predicate(self, predicate: Predicate) -> None:
        self.predicates.append(predicate)

    def matches(self, item: Task) -> bool:
        return all(predicate.matches(item) for predicate in self.predicates)


class Search(Predicate):
    """Case-insensitive substring search over title, description and tags."""

    def __init__(self, query: Optional[str]) -> None:
        self.query = (query or "").lower()

    def matches(self, item: Task) -> bool:
        if not self.query:
            return True
        if self.query in item["title"].lower():
            return True
        if self.query in (item["description"] or "").lower():
            return True
        return any(self.query in tag.lower() for tag in item["tags"])


class PropertyEquals(Predicate):
    """Matches when ``property`` equals ``value``; the value "all" matches anything."""

    def __init__(self, property: str, value: Optional[str]) -> None:
        self.property = property
        self.value = value

    def matches(self, item: Task) -> bool:
        if self.value is None or self.value == ALL:
            return True
        return item[self.property] == self.value  # type: ignore[literal-required]
