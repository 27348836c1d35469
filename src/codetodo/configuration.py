# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "codetodo"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

LOG_PATH: Path = platformdirs.user_log_path(APP_NAME)
LOG_FILE_PATH: Path = LOG_PATH / f"{APP_NAME}.log"

DEFAULT_STORAGE_KEY = "programmerTasks"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_STORAGE_DIR: Path = DATA_PATH / "storage"


class Configuration(TypedDict):
    data_path: Optional[str]
    storage_key: str
    show_header: bool
    show_statistics: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "storage_key": DEFAULT_STORAGE_KEY,
        "show_header": True,
        "show_statistics": True,
        "log_level": "WARNING",
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    task store is opened.
    """
    global DATA_PATH, DATA_STORAGE_DIR

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    # Resolve the data path
    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting).expanduser()
        DATA_STORAGE_DIR = DATA_PATH / "storage"
