# SPDX-License-Identifier: MIT

import logging
from enum import StrEnum
from typing import Optional, TypeVar

import typer

from codetodo.model.filter import ALL
from codetodo.model.task import TaskPriority, TaskType
from codetodo.repository.storage import validate_storage_key
from codetodo.service.task import parse_enum

E = TypeVar("E", bound=StrEnum)


def __validate_choice_filter(enum_type: type[E], value: Optional[str]) -> str:
    if value is None or value.strip().lower() == ALL:
        return ALL
    parsed = parse_enum(enum_type, value)
    if parsed is None:
        choices = ", ".join([ALL, *(str(member) for member in enum_type)])
        raise typer.BadParameter(f"'{value}' is not one of: {choices}")
    return parsed


def validate_type_filter(type_filter: Optional[str]) -> str:
    return __validate_choice_filter(TaskType, type_filter)


def validate_priority_filter(priority_filter: Optional[str]) -> str:
    return __validate_choice_filter(TaskPriority, priority_filter)


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if not isinstance(logging.getLevelName(log_level.strip().upper()), int):
        raise typer.BadParameter(
            "Log level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )
    return log_level.strip().upper()


def validate_storage_key_option(storage_key: Optional[str]) -> Optional[str]:
    if storage_key is None:
        return None
    try:
        return validate_storage_key(storage_key.strip())
    except ValueError:
        raise typer.BadParameter(
            "Storage key must be a non-empty name other than '.' or '..' "
            "without '/' or '\\'"
        )
