"""Error types for awsid."""

from typing import Optional


class AccountLookupError(Exception):
    """Base exception for account lookup errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class CacheIOError(AccountLookupError):
    """The account cache file or its directory could not be accessed."""

    pass


class CacheParseError(AccountLookupError):
    """The account cache file is not well-formed CSV."""

    pass


class ConfigurationError(AccountLookupError):
    """Conflicting or invalid output/sort selection."""

    pass


class AccountNotFoundError(AccountLookupError):
    """No cached account matches the search term."""

    def __init__(self, term: str):
        super().__init__(f"No account found with alias name: {term}")
        self.term = term


class RemoteListingError(AccountLookupError):
    """The remote account directory could not be listed."""

    pass
