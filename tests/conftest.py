# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator

import pendulum
import pytest

from codetodo import configuration
from codetodo.model.task import Task, TaskPriority, TaskStatus, TaskType
from codetodo.repository.configuration import CONFIGURATION_REPO
from codetodo.repository.task import TaskStore
from codetodo.view import state as view_state

from .fakes import MemorySlot

FIXED_NOW = pendulum.datetime(2024, 5, 1, 9, 30, 0, tz="UTC")


@pytest.fixture()
def slot() -> MemorySlot:
    return MemorySlot()


@pytest.fixture()
def store(slot: MemorySlot) -> TaskStore:
    """A loaded store over an empty in-memory slot."""
    task_store = TaskStore(slot)
    task_store.load()
    return task_store


@pytest.fixture()
def fixed_now(monkeypatch: pytest.MonkeyPatch) -> pendulum.DateTime:
    monkeypatch.setattr("codetodo.template.task.now_utc", lambda: FIXED_NOW)
    return FIXED_NOW


def make_task(**overrides: Any) -> Task:
    task: Task = {
        "id": "task-0",
        "title": "Untitled",
        "type": TaskType.FEATURE,
        "priority": TaskPriority.MEDIUM,
        "status": TaskStatus.PENDING,
        "deadline": None,
        "estimated_time": None,
        "tags": [],
        "description": "",
        "created_at": FIXED_NOW,
    }
    task.update(overrides)  # type: ignore[typeddict-item]
    return task


@pytest.fixture()
def app_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """
    Point configuration and data at a temporary directory.

    Yields the data directory. The configuration repository cache is reset
    on both sides so no state leaks between tests.
    """
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(configuration, "DATA_STORAGE_DIR", data_dir / "storage")
    monkeypatch.setattr(
        configuration, "LOG_FILE_PATH", tmp_path / "log" / "codetodo.log"
    )
    CONFIGURATION_REPO.reset()
    yield data_dir
    CONFIGURATION_REPO.reset()
    view_state.set_show_header(True)
    view_state.set_show_statistics(True)
