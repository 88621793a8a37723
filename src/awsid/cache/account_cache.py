"""Local account cache file: reading, writing and refreshing from AWS."""

import csv
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Sequence, TextIO, Union

from ..errors import CacheIOError, CacheParseError, RemoteListingError
from ..utils.models import EXTENDED_FIELDS, AccountRecord

logger = logging.getLogger(__name__)

# First-field values that mark the first data row as a header.
HEADER_MARKERS = ("alias_name", "AliasName", "id")

COMMENT_PREFIX = "#"

LEGACY_FIELD_COUNT = 2

CACHE_DIR_MODE = 0o700

PathLike = Union[str, Path]


class AccountDirectory(Protocol):
    """Anything that can list the accounts of an organization."""

    def list_accounts(self) -> List[Dict[str, Any]]: ...


class _CacheLines:
    """
    Line source for the CSV reader that drops comment lines.

    A line starting with ``#`` is only a comment when it begins a new
    record; inside a quoted multi-line field it is data. The caller marks
    the end of each record with :meth:`record_done`.
    """

    def __init__(self, handle: TextIO):
        self._handle = handle
        self.line_num = 0
        self._record_start = 0

    def __iter__(self) -> "_CacheLines":
        return self

    def __next__(self) -> str:
        while True:
            at_boundary = self.line_num == self._record_start
            line = next(self._handle)
            self.line_num += 1
            if at_boundary and line.startswith(COMMENT_PREFIX):
                self._record_start = self.line_num
                continue
            return line

    def record_done(self) -> None:
        self._record_start = self.line_num


def _is_header(row: Sequence[str]) -> bool:
    return bool(row) and row[0].strip() in HEADER_MARKERS


def _record_from_row(row: Sequence[str]) -> Optional[AccountRecord]:
    """
    Decode one CSV row into a record.

    Seven or more fields are read as the extended shape, two to six as the
    legacy ``alias,id`` shape (extra fields ignored). Anything else, and
    any row whose leading field or id is empty, yields None. Field values
    are kept as parsed; the reader already drops leading spaces.
    """
    fields = list(row)

    if len(fields) >= len(EXTENDED_FIELDS):
        if not fields[0]:
            return None
        return AccountRecord.from_extended_row(*fields[: len(EXTENDED_FIELDS)])

    if len(fields) >= LEGACY_FIELD_COUNT:
        alias, account_id = fields[0], fields[1]
        if not alias or not account_id:
            return None
        return AccountRecord.from_legacy_row(alias, account_id)

    return None


def read_account_cache(path: PathLike) -> List[AccountRecord]:
    """
    Read the account cache file.

    Args:
        path: Location of the cache file

    Returns:
        List of records in file order

    Raises:
        CacheIOError: If the file cannot be opened or read
        CacheParseError: If the CSV structure is malformed
    """
    cache_path = Path(path)
    records: List[AccountRecord] = []
    dropped = 0

    try:
        with open(cache_path, "r", encoding="utf-8-sig", newline="") as handle:
            lines = _CacheLines(handle)
            reader = csv.reader(lines, skipinitialspace=True, strict=True)
            first_row = True
            try:
                for row in reader:
                    lines.record_done()
                    if not row:
                        continue
                    if first_row:
                        first_row = False
                        if _is_header(row):
                            continue
                    record = _record_from_row(row)
                    if record is None:
                        dropped += 1
                        continue
                    records.append(record)
            except csv.Error as e:
                raise CacheParseError(
                    f"Malformed account cache {cache_path} near line {lines.line_num}: {e}",
                    cause=e,
                )
    except UnicodeDecodeError as e:
        raise CacheParseError(f"Account cache {cache_path} is not valid UTF-8: {e}", cause=e)
    except OSError as e:
        raise CacheIOError(f"Cannot read account cache {cache_path}: {e}", cause=e)

    if dropped:
        logger.debug(f"Skipped {dropped} malformed row(s) in {cache_path}")
    logger.debug(f"Loaded {len(records)} account(s) from {cache_path}")
    return records


def write_account_cache(path: PathLike, records: Sequence[AccountRecord]) -> None:
    """
    Replace the cache file with a header row and one extended row per record.

    Raises:
        CacheIOError: If the file cannot be created or written
    """
    cache_path = Path(path)
    try:
        with open(cache_path, "w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(EXTENDED_FIELDS)
            for record in records:
                writer.writerow(record.to_cache_row())
    except OSError as e:
        raise CacheIOError(f"Cannot write account cache {cache_path}: {e}", cause=e)


def ensure_cache_dir(path: PathLike) -> None:
    """Create the parent directory of the cache file if it is missing."""
    cache_dir = Path(path).parent
    try:
        cache_dir.mkdir(parents=True, exist_ok=True, mode=CACHE_DIR_MODE)
    except OSError as e:
        raise CacheIOError(f"Cannot create cache directory {cache_dir}: {e}", cause=e)


def refresh_account_cache(path: PathLike, directory: AccountDirectory) -> int:
    """
    Rebuild the cache file from the remote account directory.

    The whole file is rewritten; nothing from the previous contents is kept.
    Entries without an Id or Name are left out.

    Args:
        path: Location of the cache file
        directory: Source of account entries

    Returns:
        Number of records written

    Raises:
        CacheIOError: If the directory or file cannot be written
        RemoteListingError: If listing the accounts fails
    """
    ensure_cache_dir(path)

    try:
        entries = directory.list_accounts()
    except Exception as e:
        raise RemoteListingError(f"Failed to list accounts: {e}", cause=e)

    records = []
    for entry in entries:
        record = AccountRecord.from_remote_entry(entry)
        if record is None:
            logger.debug(f"Skipping directory entry without Id or Name: {entry!r}")
            continue
        records.append(record)

    write_account_cache(path, records)
    logger.info(f"Refreshed account cache {path} with {len(records)} account(s)")
    return len(records)
