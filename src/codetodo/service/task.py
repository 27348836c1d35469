# SPDX-License-Identifier: MIT

import logging
from enum import StrEnum
from typing import Any, Optional, TypeVar

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
from codetodo.service.tag import normalize_tags
from codetodo.template.task import get_task_template

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=StrEnum)


def parse_enum(enum_type: type[E], value: Any) -> Optional[E]:
    """
    Map a raw value onto a member of ``enum_type``.

    Matching ignores case and surrounding whitespace. Returns None when
    the value is not one of the enum's spellings.
    """
    if isinstance(value, enum_type):
        return value
    if not isinstance(value, str):
        return None
    try:
        return enum_type(value.strip().lower())
    except ValueError:
        return None


def coerce_enum(enum_type: type[E], value: Any, default: E) -> E:
    """Like parse_enum, but unknown or missing values fall back to ``default``."""
    if value is None:
        return default
    parsed = parse_enum(enum_type, value)
    if parsed is None:
        logger.warning(
            "unknown %s value %r, using %r", enum_type.__name__, value, str(default)
        )
        return default
    return parsed


def optional_text(value: Any) -> Optional[str]:
    """Blank strings become None, everything else is kept as its string form."""
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None


def task_from_draft(draft: TaskDraft) -> Optional[Task]:
    """
    Build a complete task from caller input.

    Returns None when the title is blank after trimming. The title itself
    is stored as typed.
    """
    title = draft.get("title")
    if not isinstance(title, str) or not title.strip():
        return None

    task = get_task_template(title)
    task["type"] = coerce_enum(TaskType, draft.get("type"), DEFAULT_TASK_TYPE)
    task["priority"] = coerce_enum(
        TaskPriority, draft.get("priority"), DEFAULT_TASK_PRIORITY
    )
    task["status"] = coerce_enum(TaskStatus, draft.get("status"), DEFAULT_TASK_STATUS)
    task["deadline"] = optional_text(draft.get("deadline"))
    task["estimated_time"] = optional_text(draft.get("estimated_time"))
    task["tags"] = normalize_tags(draft.get("tags"))
    task["description"] = draft.get("description") or ""
    return task
