# SPDX-License-Identifier: MIT

from codetodo import configuration
from codetodo.repository.configuration import CONFIGURATION_REPO
from codetodo.repository.storage import LocalStorage, StorageSlot
from codetodo.repository.task import TaskStore


def open_task_store() -> TaskStore:
    """Open and load the task store backing the configured storage slot."""
    config = CONFIGURATION_REPO.get_config()
    storage = LocalStorage(configuration.DATA_STORAGE_DIR)
    store = TaskStore(StorageSlot(storage, config["storage_key"]))
    store.load()
    return store
