# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

EntityId: TypeAlias = str

TASK_ID_PREFIX = "task-"


def generate_entity_id() -> EntityId:
    return f"{TASK_ID_PREFIX}{uuid.uuid4().hex}"


def short_entity_id(entity_id: EntityId, length: int = 8) -> str:
    """Abbreviated form of an id for display, without the ``task-`` prefix."""
    return entity_id.removeprefix(TASK_ID_PREFIX)[:length]
