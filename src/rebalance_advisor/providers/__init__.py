"""Profile providers module."""

from rebalance_advisor.providers.profile_provider import ProfileProvider
from rebalance_advisor.providers.builtin_provider import BuiltinProfileProvider

__all__ = [
    "ProfileProvider",
    "BuiltinProfileProvider",
]
