# SPDX-License-Identifier: MIT

"""Per-invocation display switches, seeded from config and CLI flags."""

from contextvars import ContextVar

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Statistics table above the board buckets
_show_statistics_var: ContextVar[bool] = ContextVar("show_statistics", default=True)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    """Whether reports start with the codetodo banner."""
    return _show_header_var.get()


def set_show_statistics(value: bool) -> None:
    _show_statistics_var.set(value)


def get_show_statistics() -> bool:
    return _show_statistics_var.get()
