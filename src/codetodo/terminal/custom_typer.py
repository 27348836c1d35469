# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Group whose command names may list aliases, e.g. ``"add, a"``.

    Any of the comma separated spellings invokes the command.
    """

    _ALIAS_SEPARATOR = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self._registered_name(cmd_name))

    def _registered_name(self, alias: str) -> str:
        for registered in self.commands:
            if alias in self._ALIAS_SEPARATOR.split(registered):
                return registered
        return alias

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name if name is not None else cmd.name
        registered = self._registered_name(name or "")
        # An alias of a command that is already registered
        if registered in self.commands and registered != name:
            return
        super().add_command(cmd, name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Top level group that lists commands board first, config last."""

    command_order = [
        "board, b",
        "task, t",
        "search, s",
        "stats, st",
        "config, c",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.command_order if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
