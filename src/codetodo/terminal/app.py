# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from codetodo.terminal import configuration, task
from codetodo.terminal.board import board, search, stats
from codetodo.terminal.custom_typer import OrderedAliasedTyperGroup
from codetodo.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="codetodo - A task board for programmers in the CLI",
    no_args_is_help=True,
)
app.command(name="board, b")(board)
app.add_typer(task.app, name="task, t")
app.command(name="search, s")(search)
app.command(name="stats, st")(stats)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    codetodo - A task board for programmers in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
