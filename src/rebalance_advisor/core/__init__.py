"""Core utilities and shared functionality."""

from rebalance_advisor.core.timezone import (
    now_local,
    to_local,
    parse_datetime_local,
    local_tz,
)
from rebalance_advisor.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    InvalidPortfolioError,
    UnsupportedFileError,
    ImportFailedError,
)

__all__ = [
    "now_local",
    "to_local",
    "parse_datetime_local",
    "local_tz",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "InvalidPortfolioError",
    "UnsupportedFileError",
    "ImportFailedError",
]
