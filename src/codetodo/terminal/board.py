# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from codetodo.model.filter import ALL
from codetodo.service.statistics import task_statistics
from codetodo.terminal.session import open_task_store
from codetodo.terminal.validate import validate_priority_filter, validate_type_filter
from codetodo.view.views.board import board_view
from codetodo.view.views.statistics import statistics_view


def board(
    query: Annotated[
        str,
        typer.Option("--query", "-q", help="Match title, description or tags"),
    ] = "",
    type_filter: Annotated[
        str,
        typer.Option(
            "--type",
            "-y",
            callback=validate_type_filter,
            help="all, feature, bug or refactor",
        ),
    ] = ALL,
    priority_filter: Annotated[
        str,
        typer.Option(
            "--priority",
            "-pr",
            callback=validate_priority_filter,
            help="all, high, medium or low",
        ),
    ] = ALL,
    no_wrap: Annotated[
        bool,
        typer.Option("--no-wrap", help="Disable text wrapping in table columns"),
    ] = False,
) -> None:
    """Show statistics and the pending, in-progress and completed buckets."""
    store = open_task_store()
    board_view(
        store.get_all_tasks(),
        {"query": query, "type": type_filter, "priority": priority_filter},
        no_wrap=no_wrap,
    )


def search(
    query: Annotated[str, typer.Argument(help="Search query string")],
    no_wrap: Annotated[
        bool,
        typer.Option("--no-wrap", help="Disable text wrapping in table columns"),
    ] = False,
) -> None:
    """Show the board filtered by a search query."""
    store = open_task_store()
    board_view(
        store.get_all_tasks(),
        {"query": query, "type": ALL, "priority": ALL},
        no_wrap=no_wrap,
    )


def stats() -> None:
    """Show task counts by status and type."""
    store = open_task_store()
    statistics_view(task_statistics(store.get_all_tasks()))
