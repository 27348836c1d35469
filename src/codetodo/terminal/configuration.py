# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from codetodo import configuration
from codetodo.repository.configuration import CONFIGURATION_REPO
from codetodo.terminal.custom_typer import AliasedTyperGroup
from codetodo.terminal.validate import validate_log_level, validate_storage_key_option

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("storage_key", config["storage_key"])
    table.add_row("show_header", __enabled(config["show_header"]))
    table.add_row("show_statistics", __enabled(config["show_statistics"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("log_file", str(configuration.LOG_FILE_PATH))

    console.print(table)


@app.command("set, s")
def set_config(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory for stored tasks"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
    storage_key: Annotated[
        Optional[str],
        typer.Option(
            "--storage-key",
            callback=validate_storage_key_option,
            help="Name of the storage slot holding tasks",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header"),
    ] = None,
    show_statistics: Annotated[
        Optional[bool],
        typer.Option("--show-statistics/--hide-statistics"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", callback=validate_log_level),
    ] = None,
) -> None:
    """Change configuration settings."""
    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        storage_key=storage_key,
        show_header=show_header,
        show_statistics=show_statistics,
        log_level=log_level,
    )
    CONFIGURATION_REPO.flush()

    view()
