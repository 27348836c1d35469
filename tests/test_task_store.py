# tests/test_task_store.py

from __future__ import annotations

import json
import logging

import pendulum
import pytest

from codetodo.model.task import TaskPriority, TaskStatus, TaskType
from codetodo.repository.task import StoreState, TaskStore, serialize_tasks
from codetodo.service.statistics import task_statistics

from .conftest import make_task
from .fakes import MemorySlot


def test_new_store_is_uninitialized_and_does_not_write() -> None:
    slot = MemorySlot()
    store = TaskStore(slot)

    assert store.state is StoreState.UNINITIALIZED
    assert store.save() is False
    assert slot.writes == []


def test_load_marks_store_loaded_and_writes_once() -> None:
    slot = MemorySlot()
    store = TaskStore(slot)

    store.load()

    assert store.state is StoreState.LOADED
    assert slot.reads == 1
    assert slot.writes == ["[]"]


def test_mutation_before_load_is_not_persisted() -> None:
    existing = serialize_tasks([make_task(id="task-kept", title="Stored")])
    slot = MemorySlot(existing)
    store = TaskStore(slot)

    store.create({"title": "Too early"})

    assert slot.writes == []
    assert slot.value == existing


def test_create_appends_task_with_defaults(store: TaskStore, fixed_now) -> None:
    task_id = store.create({"title": "Write docs"})

    assert task_id is not None
    assert task_id.startswith("task-")
    task = store.get_task(task_id)
    assert task == {
        "id": task_id,
        "title": "Write docs",
        "type": TaskType.FEATURE,
        "priority": TaskPriority.MEDIUM,
        "status": TaskStatus.PENDING,
        "deadline": None,
        "estimated_time": None,
        "tags": [],
        "description": "",
        "created_at": fixed_now,
    }


def test_create_grows_collection_by_one_with_fresh_id(store: TaskStore) -> None:
    ids = {store.create({"title": f"task {n}"}) for n in range(20)}

    assert len(store) == 20
    assert len(ids) == 20
    assert None not in ids


def test_create_keeps_insertion_order(store: TaskStore) -> None:
    for title in ("first", "second", "third"):
        store.create({"title": title})

    assert [task["title"] for task in store.get_all_tasks()] == [
        "first",
        "second",
        "third",
    ]


def test_create_persists_full_collection(store: TaskStore, slot: MemorySlot) -> None:
    store.create({"title": "one"})
    store.create({"title": "two"})

    stored = json.loads(slot.writes[-1])
    assert [task["title"] for task in stored] == ["one", "two"]


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_create_with_blank_title_is_rejected(
    store: TaskStore, slot: MemorySlot, title: str
) -> None:
    writes_before = list(slot.writes)

    assert store.create({"title": title}) is None
    assert len(store) == 0
    assert slot.writes == writes_before


def test_create_without_title_is_rejected(store: TaskStore) -> None:
    assert store.create({"description": "no title"}) is None
    assert len(store) == 0


def test_create_normalizes_tags(store: TaskStore) -> None:
    task_id = store.create({"title": "Tagged", "tags": "  ui, , perf ,ui"})

    task = store.get_task(task_id)
    assert task is not None
    assert task["tags"] == ["ui", "perf", "ui"]


def test_create_normalizes_enum_input(store: TaskStore) -> None:
    task_id = store.create(
        {
            "title": "Crash on save",
            "type": " BUG ",
            "priority": "High",
            "status": "in-progress",
            "deadline": "2024-06-01",
            "estimated_time": "3",
            "description": "happens on every save",
        }
    )

    task = store.get_task(task_id)
    assert task is not None
    assert task["type"] is TaskType.BUG
    assert task["priority"] is TaskPriority.HIGH
    assert task["status"] is TaskStatus.IN_PROGRESS
    assert task["deadline"] == "2024-06-01"
    assert task["estimated_time"] == "3"
    assert task["description"] == "happens on every save"


def test_create_with_unknown_enum_values_uses_defaults(
    store: TaskStore, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="codetodo"):
        task_id = store.create(
            {"title": "Odd", "type": "chore", "priority": "urgent", "status": "blocked"}
        )

    task = store.get_task(task_id)
    assert task is not None
    assert task["type"] is TaskType.FEATURE
    assert task["priority"] is TaskPriority.MEDIUM
    assert task["status"] is TaskStatus.PENDING
    assert "chore" in caplog.text


def test_create_treats_blank_optional_text_as_absent(store: TaskStore) -> None:
    task_id = store.create({"title": "x", "deadline": "", "estimated_time": "  "})

    task = store.get_task(task_id)
    assert task is not None
    assert task["deadline"] is None
    assert task["estimated_time"] is None


def test_set_status_changes_only_that_field(store: TaskStore) -> None:
    first = store.create({"title": "first", "tags": "a"})
    second = store.create({"title": "second", "type": "bug"})
    before = store.get_all_tasks()

    assert store.set_status(first, TaskStatus.IN_PROGRESS) is True

    after = store.get_all_tasks()
    expected_first = dict(before[0], status=TaskStatus.IN_PROGRESS)
    assert after[0] == expected_first
    assert after[1] == before[1]
    assert store.get_task(second) == before[1]


def test_set_status_accepts_raw_status_strings(store: TaskStore) -> None:
    task_id = store.create({"title": "x"})

    assert store.set_status(task_id, "completed") is True

    task = store.get_task(task_id)
    assert task is not None
    assert task["status"] is TaskStatus.COMPLETED


def test_set_status_allows_reopening_completed_task(store: TaskStore) -> None:
    task_id = store.create({"title": "x", "status": "completed"})

    assert store.set_status(task_id, TaskStatus.PENDING) is True

    task = store.get_task(task_id)
    assert task is not None
    assert task["status"] is TaskStatus.PENDING


def test_set_status_unknown_id_is_noop(store: TaskStore, slot: MemorySlot) -> None:
    store.create({"title": "x"})
    snapshot = slot.value
    writes = len(slot.writes)

    assert store.set_status("task-missing", TaskStatus.COMPLETED) is False

    assert slot.value == snapshot
    assert len(slot.writes) == writes


def test_set_status_rejects_invalid_status(store: TaskStore, slot: MemorySlot) -> None:
    task_id = store.create({"title": "x"})
    writes = len(slot.writes)

    assert store.set_status(task_id, "archived") is False

    task = store.get_task(task_id)
    assert task is not None
    assert task["status"] is TaskStatus.PENDING
    assert len(slot.writes) == writes


def test_delete_removes_exactly_one_and_keeps_order(store: TaskStore) -> None:
    ids = [store.create({"title": title}) for title in ("a", "b", "c", "d")]

    assert store.delete(ids[1]) is True

    assert [task["id"] for task in store.get_all_tasks()] == [ids[0], ids[2], ids[3]]
    assert store.get_task(ids[1]) is None


def test_delete_unknown_id_is_noop(store: TaskStore, slot: MemorySlot) -> None:
    store.create({"title": "x"})
    before = store.get_all_tasks()
    writes = len(slot.writes)

    assert store.delete("task-missing") is False

    assert store.get_all_tasks() == before
    assert len(slot.writes) == writes


def test_delete_persists(store: TaskStore, slot: MemorySlot) -> None:
    task_id = store.create({"title": "x"})

    store.delete(task_id)

    assert json.loads(slot.writes[-1]) == []


def test_snapshots_are_read_only_copies(store: TaskStore) -> None:
    task_id = store.create({"title": "x", "tags": "a"})

    snapshot = store.get_all_tasks()
    snapshot[0]["title"] = "changed"
    snapshot[0]["tags"].append("b")
    single = store.get_task(task_id)
    assert single is not None
    single["status"] = TaskStatus.COMPLETED

    task = store.get_task(task_id)
    assert task is not None
    assert task["title"] == "x"
    assert task["tags"] == ["a"]
    assert task["status"] is TaskStatus.PENDING


def test_load_restores_persisted_collection(store: TaskStore, slot: MemorySlot) -> None:
    store.create({"title": "one", "tags": "a, b", "type": "refactor"})
    store.create({"title": "two", "deadline": "2024-07-01", "estimated_time": "2"})
    store.set_status(store.get_all_tasks()[1]["id"], TaskStatus.COMPLETED)

    reloaded = TaskStore(MemorySlot(slot.value))
    reloaded.load()

    assert reloaded.get_all_tasks() == store.get_all_tasks()


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        '{"id": "task-1"}',
        '[{"title": "no id"}]',
        '[{"id": "task-1", "title": ""}]',
        '[{"id": "task-1", "title": "first"}, {"id": "task-1", "title": "second"}]',
        "[1, 2, 3]",
        "null",
    ],
)
def test_load_corrupt_payload_falls_back_to_empty(
    payload: str, caplog: pytest.LogCaptureFixture
) -> None:
    slot = MemorySlot(payload)
    store = TaskStore(slot)

    with caplog.at_level(logging.WARNING, logger="codetodo"):
        store.load()

    assert store.state is StoreState.LOADED
    assert store.get_all_tasks() == []
    assert "error loading tasks" in caplog.text


def test_load_deeply_nested_payload_falls_back_to_empty() -> None:
    store = TaskStore(MemorySlot("[" * 100_000 + "]" * 100_000))

    store.load()

    assert store.is_loaded
    assert store.get_all_tasks() == []


def test_load_duplicate_ids_does_not_let_delete_remove_twice() -> None:
    slot = MemorySlot(
        json.dumps(
            [
                {"id": "task-1", "title": "first"},
                {"id": "task-2", "title": "other"},
                {"id": "task-1", "title": "second"},
            ]
        )
    )
    store = TaskStore(slot)
    store.load()

    assert store.get_all_tasks() == []
    assert store.delete("task-1") is False
    assert json.loads(slot.value) == []


def test_load_missing_payload_starts_empty() -> None:
    store = TaskStore(MemorySlot(None))

    store.load()

    assert store.get_all_tasks() == []


def test_find_task_ids_matches_prefix_with_or_without_task_part() -> None:
    payload = serialize_tasks(
        [
            make_task(id="task-abc123", title="one"),
            make_task(id="task-abd456", title="two"),
        ]
    )
    store = TaskStore(MemorySlot(payload))
    store.load()

    assert store.find_task_ids("abc") == ["task-abc123"]
    assert store.find_task_ids("task-ab") == ["task-abc123", "task-abd456"]
    assert store.find_task_ids("zzz") == []


def test_statistics_after_creating_one_task_per_status(store: TaskStore) -> None:
    store.create({"title": "a", "status": "pending"})
    store.create({"title": "b", "status": "in-progress", "type": "bug"})
    store.create({"title": "c", "status": "completed", "type": "refactor"})

    statistics = task_statistics(store.get_all_tasks())

    assert statistics["total"] == 3
    assert statistics["pending"] == 1
    assert statistics["in_progress"] == 1
    assert statistics["completed"] == 1
    assert statistics["by_type"] == {"feature": 1, "bug": 1, "refactor": 1}


def test_created_at_is_utc_timestamp(store: TaskStore, fixed_now) -> None:
    task_id = store.create({"title": "x"})

    task = store.get_task(task_id)
    assert task is not None
    assert task["created_at"] == fixed_now
    assert isinstance(task["created_at"], pendulum.DateTime)
