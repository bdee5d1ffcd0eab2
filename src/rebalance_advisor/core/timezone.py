"""Timezone utilities for advisor-local timestamps."""

from datetime import datetime
from typing import Optional

import pytz
from dateutil import parser as date_parser

from rebalance_advisor.config.settings import get_settings


def local_tz() -> pytz.BaseTzInfo:
    """Return the configured advisor timezone."""
    return pytz.timezone(get_settings().timezone)


def now_local() -> datetime:
    """Return current time in the advisor timezone."""
    return datetime.now(local_tz())


def to_local(dt: datetime) -> datetime:
    """Convert a datetime to the advisor timezone."""
    tz = local_tz()
    if dt.tzinfo is None:
        # Naive datetimes are taken as already local
        return tz.localize(dt)
    return dt.astimezone(tz)


def parse_datetime_local(value: str, default_tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Parse a datetime string and return it in the advisor timezone.

    If no timezone is provided in the string, assumes the advisor timezone.
    """
    dt = date_parser.parse(value)
    if dt.tzinfo is None:
        tz = default_tz or local_tz()
        dt = tz.localize(dt)
    return to_local(dt)
