# SPDX-License-Identifier: MIT

from typing import Iterable, Optional, Sequence

from codetodo.model.task import Task


def normalize_tags(tags: str | Sequence[str] | None) -> list[str]:
    """
    Turn user tag input into the stored tag list.

    A string is split on commas. Every entry is stripped of surrounding
    whitespace and empty entries are dropped. Duplicates and input order
    are kept as given.

    Example:
        normalize_tags("  ui, , perf ,ui") == ["ui", "perf", "ui"]
    """
    if tags is None:
        return []
    raw_tags: Iterable[str] = tags.split(",") if isinstance(tags, str) else tags
    return [tag.strip() for tag in raw_tags if tag.strip()]


def collect_tags(tasks: Iterable[Task], prefix: Optional[str] = None) -> list[str]:
    """Return the sorted distinct tags used across tasks."""
    tags = {tag for task in tasks for tag in task["tags"]}
    if prefix is not None:
        tags = {tag for tag in tags if tag.startswith(prefix)}
    return sorted(tags)
