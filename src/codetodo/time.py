# SPDX-License-Identifier: MIT

from typing import cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    parsed = pendulum.parse(datetime)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"not a datetime: {datetime!r}")
    return cast(pendulum.DateTime, parsed.in_tz("UTC"))


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_age(datetime: pendulum.DateTime) -> str:
    now = pendulum.now()
    return now.diff_for_humans(datetime, absolute=True)
