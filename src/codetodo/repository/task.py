# SPDX-License-Identifier: MIT

import json
import logging
from copy import deepcopy
from enum import Enum
from typing import Any, Optional

import pendulum

from codetodo import time
from codetodo.model.entity_id import EntityId, generate_entity_id
from codetodo.model.task import (
    DEFAULT_TASK_PRIORITY,
    DEFAULT_TASK_STATUS,
    DEFAULT_TASK_TYPE,
    Task,
    TaskDraft,
    TaskPriority,
    TaskStatus,
    TaskType,
)
from codetodo.repository.storage import TaskPersistence
from codetodo.service.tag import normalize_tags
from codetodo.service.task import coerce_enum, optional_text, parse_enum, task_from_draft

logger = logging.getLogger(__name__)


class StoreState(Enum):
    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"


def serialize_tasks(tasks: list[Task]) -> str:
    return json.dumps(
        [__convert_task_for_serialization(task) for task in tasks],
        ensure_ascii=False,
    )


def deserialize_tasks(serialized: str) -> list[Task]:
    """
    Parse a stored payload into tasks.

    Raises ValueError when the payload is not a JSON array of task
    objects with distinct ids. Individual fields are normalized rather
    than rejected.
    """
    raw_tasks = json.loads(serialized)
    if not isinstance(raw_tasks, list):
        raise ValueError(f"expected a JSON array, got {type(raw_tasks).__name__}")
    tasks = [__convert_task_for_deserialization(raw_task) for raw_task in raw_tasks]

    seen_ids: set[EntityId] = set()
    for task in tasks:
        if task["id"] in seen_ids:
            raise ValueError(f"duplicate task id {task['id']}")
        seen_ids.add(task["id"])
    return tasks


def __convert_task_for_serialization(task: Task) -> dict[str, Any]:
    return {
        "id": task["id"],
        "title": task["title"],
        "type": str(task["type"]),
        "priority": str(task["priority"]),
        "status": str(task["status"]),
        "deadline": task["deadline"],
        "estimatedTime": task["estimated_time"],
        "tags": list(task["tags"]),
        "description": task["description"],
        "createdAt": time.datetime_to_iso_str(task["created_at"]),
    }


def __convert_task_for_deserialization(raw_task: Any) -> Task:
    if not isinstance(raw_task, dict):
        raise ValueError(f"expected a task object, got {type(raw_task).__name__}")
    task_id = raw_task.get("id")
    title = raw_task.get("title")
    if not isinstance(task_id, str) or not task_id:
        raise ValueError(f"task without a valid id: {raw_task!r}")
    if not isinstance(title, str) or not title.strip():
        raise ValueError(f"task {task_id} without a valid title")

    tags = raw_task.get("tags")
    if not isinstance(tags, (str, list)):
        tags = None
    description = raw_task.get("description")

    return {
        "id": task_id,
        "title": title,
        "type": coerce_enum(TaskType, raw_task.get("type"), DEFAULT_TASK_TYPE),
        "priority": coerce_enum(
            TaskPriority, raw_task.get("priority"), DEFAULT_TASK_PRIORITY
        ),
        "status": coerce_enum(TaskStatus, raw_task.get("status"), DEFAULT_TASK_STATUS),
        "deadline": optional_text(raw_task.get("deadline")),
        "estimated_time": optional_text(raw_task.get("estimatedTime")),
        "tags": normalize_tags(
            [str(tag) for tag in tags] if isinstance(tags, list) else tags
        ),
        "description": description if isinstance(description, str) else "",
        "created_at": __created_at_from_raw(raw_task.get("createdAt")),
    }


def __created_at_from_raw(raw_created_at: Any) -> pendulum.DateTime:
    if isinstance(raw_created_at, str):
        try:
            return time.datetime_from_str(raw_created_at)
        except ValueError:
            logger.warning("unparsable createdAt %r, using now", raw_created_at)
    return time.now_utc()


class TaskStore:
    """
    Owner of the ordered task collection.

    The store is the only mutation surface for tasks. Every mutation is
    followed by a write of the whole collection through ``persistence``.
    Writes are held back until ``load`` has run, so an empty startup
    collection can never overwrite stored tasks.
    """

    def __init__(self, persistence: TaskPersistence) -> None:
        self.persistence = persistence
        self.state = StoreState.UNINITIALIZED
        self._tasks: list[Task] = []

    @property
    def is_loaded(self) -> bool:
        return self.state is StoreState.LOADED

    def load(self) -> None:
        serialized = self.persistence.read_all()
        tasks: list[Task] = []
        if serialized is not None:
            try:
                tasks = deserialize_tasks(serialized)
            except (ValueError, TypeError, RecursionError) as e:
                logger.warning("error loading tasks, starting empty: %s", e)
                tasks = []
        self._tasks = tasks
        self.state = StoreState.LOADED
        logger.debug("loaded %d tasks", len(self._tasks))
        self.save()

    def save(self) -> bool:
        if not self.is_loaded:
            logger.debug("skipping save before initial load")
            return False
        self.persistence.write_all(serialize_tasks(self._tasks))
        return True

    def create(self, draft: TaskDraft) -> Optional[EntityId]:
        task = task_from_draft(draft)
        if task is None:
            logger.info("rejected task draft with blank title")
            return None

        # Ids are random; regenerate on the off chance of a collision
        existing_ids = {existing["id"] for existing in self._tasks}
        while task["id"] in existing_ids:
            task["id"] = generate_entity_id()

        self._tasks.append(task)
        logger.debug("created task %s", task["id"])
        self.save()
        return task["id"]

    def set_status(self, id: EntityId, status: TaskStatus | str) -> bool:
        new_status = parse_enum(TaskStatus, status)
        if new_status is None:
            logger.warning("ignoring invalid status %r for task %s", status, id)
            return False

        for index, task in enumerate(self._tasks):
            if task["id"] == id:
                self._tasks[index] = {**task, "status": new_status}
                logger.debug("task %s status %s -> %s", id, task["status"], new_status)
                self.save()
                return True

        logger.debug("set_status: no task %s", id)
        return False

    def delete(self, id: EntityId) -> bool:
        remaining = [task for task in self._tasks if task["id"] != id]
        if len(remaining) == len(self._tasks):
            logger.debug("delete: no task %s", id)
            return False
        self._tasks = remaining
        logger.debug("deleted task %s", id)
        self.save()
        return True

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self._tasks)

    def get_task(self, id: EntityId) -> Optional[Task]:
        for task in self._tasks:
            if task["id"] == id:
                return deepcopy(task)
        return None

    def find_task_ids(self, prefix: str) -> list[EntityId]:
        """Ids starting with ``prefix``, with or without the ``task-`` part."""
        return [
            task["id"]
            for task in self._tasks
            if task["id"].startswith(prefix) or task["id"].startswith(f"task-{prefix}")
        ]

    def __len__(self) -> int:
        return len(self._tasks)
