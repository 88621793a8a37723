"""Local account cache for awsid."""

from .account_cache import (
    read_account_cache,
    refresh_account_cache,
    write_account_cache,
)

__all__ = [
    "read_account_cache",
    "refresh_account_cache",
    "write_account_cache",
]
