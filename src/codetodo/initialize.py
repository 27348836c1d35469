# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from codetodo import configuration
from codetodo.logging_setup import resolve_level, setup_logging
from codetodo.repository.configuration import CONFIGURATION_REPO
from codetodo.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    setup_logging(
        log_file=configuration.LOG_FILE_PATH,
        console_level=resolve_level(config["log_level"]),
    )
    view_state.set_show_header(config["show_header"])
    view_state.set_show_statistics(config["show_statistics"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))
