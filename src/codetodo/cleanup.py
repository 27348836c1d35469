# SPDX-License-Identifier: MIT

import atexit

from codetodo.repository.configuration import CONFIGURATION_REPO


def flush() -> None:
    # Task stores write through on every mutation; only config is deferred
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
