"""Search and ordering of cached account records."""

import logging
from typing import Any, Callable, Dict, List, Tuple

from .models import AccountRecord, SortSpec

logger = logging.getLogger(__name__)


def _case_insensitive(attribute: str) -> Callable[[AccountRecord], str]:
    return lambda record: getattr(record, attribute).lower()


def _exact(attribute: str) -> Callable[[AccountRecord], str]:
    return lambda record: getattr(record, attribute)


# Sort key per accepted field name. Name and email ignore case; the rest
# compare the stored strings as-is.
SORT_KEYS: Dict[str, Callable[[AccountRecord], Any]] = {
    "id": _exact("id"),
    "name": _case_insensitive("name"),
    "email": _case_insensitive("email"),
    "status": _exact("status"),
    "joinedMethod": _exact("joined_method"),
    "joinedTimestamp": _exact("joined_timestamp"),
}


def search_accounts(
    records: List[AccountRecord], term: str
) -> Tuple[List[AccountRecord], bool]:
    """
    Find accounts whose alias contains the search term.

    Matching is a case-sensitive substring test on ``alias_name``. If any
    match equals the term exactly, only the first such record is returned
    and the other matches are discarded.

    Args:
        records: Records to search, in cache order
        term: Non-empty search term

    Returns:
        Tuple of (matching records, whether the result is an exact match)

    Raises:
        ValueError: If term is empty
    """
    if not term:
        raise ValueError("Search term must not be empty")

    matches = [record for record in records if term in record.alias_name]

    for record in matches:
        if record.alias_name == term:
            return [record], True

    logger.debug(f"Found {len(matches)} partial match(es) for '{term}'")
    return matches, False


def sort_accounts(records: List[AccountRecord], spec: SortSpec) -> None:
    """
    Sort records in place according to spec.

    The sort is stable in both directions. An empty spec leaves the order
    untouched; an unrecognized field compares every record as equal.
    """
    if spec.is_empty():
        return

    key = SORT_KEYS.get(spec.field)
    if key is None:
        logger.debug(f"Unrecognized sort field '{spec.field}', keeping input order")
        return

    records.sort(key=key, reverse=spec.descending)
