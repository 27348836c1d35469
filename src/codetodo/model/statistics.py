# SPDX-License-Identifier: MIT

from typing import TypedDict


class TypeCounts(TypedDict):
    feature: int
    bug: int
    refactor: int


class TaskStatistics(TypedDict):
    total: int
    completed: int
    in_progress: int
    pending: int
    by_type: TypeCounts
