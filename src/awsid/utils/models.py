"""Data models for cached AWS account records."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

# Column order of the extended cache shape and of every rendered output.
EXTENDED_FIELDS = (
    "id",
    "arn",
    "email",
    "name",
    "status",
    "joined_method",
    "joined_timestamp",
)

# Accepted sort keys, as exposed on the command line.
SORT_FIELDS = ("id", "name", "email", "status", "joinedMethod", "joinedTimestamp")

# Snake_case spellings accepted for the two camelCase sort keys.
SORT_FIELD_ALIASES = {
    "joined_method": "joinedMethod",
    "joined_timestamp": "joinedTimestamp",
}


class OutputFormat(str, Enum):
    """Enumeration for output formats."""

    JSON = "json"
    TABLE = "table"
    CSV = "csv"
    DEFAULT = "default"


def format_joined_timestamp(value: Optional[datetime]) -> str:
    """
    Serialize a join timestamp for the cache file.

    The result is fixed width with microsecond precision and a numeric UTC
    offset, so string order equals chronological order for equal offsets.
    Naive datetimes are treated as UTC.
    """
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="microseconds")


@dataclass(frozen=True)
class AccountRecord:
    """
    A single AWS account as known to the local cache.

    Records are built only through the ``from_*`` constructors below, which
    hold all knowledge of the legacy (alias, id) and extended (seven field)
    cache shapes. ``alias_name`` mirrors ``name`` and ``account_id`` mirrors
    ``id``.
    """

    id: str
    arn: str = ""
    email: str = ""
    name: str = ""
    status: str = ""
    joined_method: str = ""
    joined_timestamp: str = ""
    alias_name: str = ""
    account_id: str = ""

    @classmethod
    def from_legacy_row(cls, alias: str, account_id: str) -> "AccountRecord":
        """Build a record from a legacy ``alias,id`` cache row."""
        return cls(id=account_id, name=alias, alias_name=alias, account_id=account_id)

    @classmethod
    def from_extended_row(
        cls,
        id: str,
        arn: str,
        email: str,
        name: str,
        status: str,
        joined_method: str,
        joined_timestamp: str,
    ) -> "AccountRecord":
        """Build a record from an extended seven-field cache row."""
        return cls(
            id=id,
            arn=arn,
            email=email,
            name=name,
            status=status,
            joined_method=joined_method,
            joined_timestamp=joined_timestamp,
            alias_name=name,
            account_id=id,
        )

    @classmethod
    def from_remote_entry(cls, entry: Mapping[str, Any]) -> Optional["AccountRecord"]:
        """
        Build a record from an AWS Organizations ``Account`` structure.

        Args:
            entry: One item of the ``Accounts`` list returned by ListAccounts

        Returns:
            The record, or None if the entry has no Id or no Name
        """
        account_id = entry.get("Id") or ""
        name = entry.get("Name") or ""
        if not account_id or not name:
            return None

        joined = entry.get("JoinedTimestamp")
        if isinstance(joined, datetime):
            joined = format_joined_timestamp(joined)

        return cls.from_extended_row(
            id=account_id,
            arn=entry.get("Arn") or "",
            email=entry.get("Email") or "",
            name=name,
            status=entry.get("Status") or "",
            joined_method=entry.get("JoinedMethod") or "",
            joined_timestamp=joined or "",
        )

    def to_cache_row(self) -> List[str]:
        """Return the extended-shape field list in cache column order."""
        return [getattr(self, field_name) for field_name in EXTENDED_FIELDS]

    def to_dict(self) -> Dict[str, str]:
        """Return all fields, extended ones first, for JSON output."""
        data = {field_name: getattr(self, field_name) for field_name in EXTENDED_FIELDS}
        data["alias_name"] = self.alias_name
        data["account_id"] = self.account_id
        return data


@dataclass(frozen=True)
class SortSpec:
    """Requested ordering of the output; an empty field keeps input order."""

    field: str = ""
    descending: bool = False

    def is_empty(self) -> bool:
        """Check whether any sorting was requested."""
        return not self.field
