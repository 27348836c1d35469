# SPDX-License-Identifier: MIT

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

SLOT_SUFFIX = ".json"


def validate_storage_key(key: str) -> str:
    """
    Return ``key`` if it can name a slot file inside the storage directory.

    Raises:
        ValueError: If the key is empty, "." or "..", or contains a path separator
    """
    if not key or "/" in key or "\\" in key or key in (".", ".."):
        raise ValueError(f"invalid storage key: {key!r}")
    return key


class TaskPersistence(Protocol):
    """
    The persistence boundary of a task store.

    ``read_all`` returns the previously written payload, or None when
    nothing was stored or the medium is unavailable. ``write_all`` is
    best effort and never raises for I/O problems.
    """

    def read_all(self) -> Optional[str]: ...

    def write_all(self, serialized: str) -> None: ...


class LocalStorage:
    """
    Flat key-value storage on disk, one file per key.

    Keys map to ``<directory>/<key>.json``. The directory is created on
    first write.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def __path_for(self, key: str) -> Path:
        return self.directory / f"{validate_storage_key(key)}{SLOT_SUFFIX}"

    def get_item(self, key: str) -> Optional[str]:
        path = self.__path_for(key)
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("could not read storage slot %s: %s", path, e)
            return None

    def set_item(self, key: str, value: str) -> None:
        path = self.__path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            # Write to a sibling temp file first so the slot is never half written
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{key}.", suffix=".tmp", dir=self.directory
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                    tmp_file.write(value)
                os.replace(tmp_name, path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("could not write storage slot %s: %s", path, e)

    def remove_item(self, key: str) -> None:
        path = self.__path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error("could not remove storage slot %s: %s", path, e)

    def keys(self) -> list[str]:
        if not self.directory.is_dir():
            return []
        return sorted(
            file_path.name.removesuffix(SLOT_SUFFIX)
            for file_path in self.directory.iterdir()
            if file_path.suffix == SLOT_SUFFIX and not file_path.name.startswith(".")
        )


class StorageSlot:
    """A single key of a LocalStorage exposed as a TaskPersistence."""

    def __init__(self, storage: LocalStorage, key: str) -> None:
        self.storage = storage
        self.key = key

    def read_all(self) -> Optional[str]:
        return self.storage.get_item(self.key)

    def write_all(self, serialized: str) -> None:
        self.storage.set_item(self.key, serialized)
