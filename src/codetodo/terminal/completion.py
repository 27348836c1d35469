# SPDX-License-Identifier: MIT

from codetodo.model.entity_id import short_entity_id
from codetodo.service.tag import collect_tags
from codetodo.terminal.session import open_task_store


def complete_tag(incomplete: str) -> list[str]:
    """Return list of available tags for shell completion."""
    store = open_task_store()
    return collect_tags(store.get_all_tasks(), prefix=incomplete)


def complete_task_id(incomplete: str) -> list[str]:
    """Return short ids of tasks for shell completion."""
    store = open_task_store()
    short_ids = [short_entity_id(task["id"]) for task in store.get_all_tasks()]
    return [short_id for short_id in short_ids if short_id.startswith(incomplete)]
