# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from codetodo.model.entity_id import EntityId
from codetodo.repository.task import TaskStore


def resolve_task_id(store: TaskStore, id_param: str) -> Optional[EntityId]:
    """
    Resolve a full id or a unique id prefix to a task id.

    Args:
        store: The loaded task store
        id_param: Full id such as "task-3fa2...", or a prefix such as "3fa2"

    Returns:
        The matching task id, or None when no task matches

    Raises:
        typer.BadParameter: If the prefix is empty or matches more than one task
    """
    id_param = id_param.strip()
    if not id_param:
        raise typer.BadParameter("Task id cannot be empty")

    if store.get_task(id_param) is not None:
        return id_param

    matches = store.find_task_ids(id_param)
    if len(matches) > 1:
        raise typer.BadParameter(
            f"Task id '{id_param}' is ambiguous, matches {len(matches)} tasks"
        )
    if len(matches) == 1:
        return matches[0]
    return None
