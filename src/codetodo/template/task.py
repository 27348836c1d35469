# SPDX-License-Identifier: MIT

from codetodo.model.entity_id import generate_entity_id
from codetodo.model.task import (
    DEFAULT_TASK_PRIORITY,
    DEFAULT_TASK_STATUS,
    DEFAULT_TASK_TYPE,
    Task,
)
from codetodo.time import now_utc


def get_task_template(title: str) -> Task:
    return {
        "id": generate_entity_id(),
        "title": title,
        "type": DEFAULT_TASK_TYPE,
        "priority": DEFAULT_TASK_PRIORITY,
        "status": DEFAULT_TASK_STATUS,
        "deadline": None,
        "estimated_time": None,
        "tags": [],
        "description": "",
        "created_at": now_utc(),
    }
