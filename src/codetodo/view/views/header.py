# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from codetodo.view.state import get_show_header


def header(report_name: Optional[str] = None) -> None:
    """Print the banner and the report name, unless headers are switched off."""
    if not get_show_header():
        return

    print(Padding("[dark_orange]codetodo[/dark_orange]", (1, 0, 0, 1)))
    if report_name is not None:
        print(Padding(f"[sandy_brown]{report_name}[/sandy_brown]", (0, 1)))
