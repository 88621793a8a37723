"""AWS account test fixtures and data for awsid tests."""

from datetime import datetime, timezone

import pytest

from awsid.utils.models import AccountRecord

LEGACY_CACHE = """# alias_name,account_id
alice,111111111111
bob,222222222222
"""

EXTENDED_CACHE = """id,arn,email,name,status,joined_method,joined_timestamp
333333333333,arn:aws:organizations::999999999999:account/o-abc/333333333333,team-a@example.com,team-a,ACTIVE,CREATED,2023-01-01T00:00:00.000000+00:00
444444444444,arn:aws:organizations::999999999999:account/o-abc/444444444444,team-a-dev@example.com,team-a-dev,ACTIVE,INVITED,2023-02-01T00:00:00.000000+00:00
"""


@pytest.fixture
def legacy_cache_file(tmp_path):
    """Cache file containing only legacy alias,id rows."""
    path = tmp_path / "account_info"
    path.write_text(LEGACY_CACHE, encoding="utf-8")
    return path


@pytest.fixture
def extended_cache_file(tmp_path):
    """Cache file in the extended seven-field shape."""
    path = tmp_path / "account_info"
    path.write_text(EXTENDED_CACHE, encoding="utf-8")
    return path


@pytest.fixture
def sample_remote_accounts():
    """Account entries as returned by organizations.list_accounts."""
    return [
        {
            "Id": "123456789012",
            "Arn": "arn:aws:organizations::123456789012:account/o-1234567890/123456789012",
            "Email": "prod@company.com",
            "Name": "Production",
            "Status": "ACTIVE",
            "JoinedMethod": "CREATED",
            "JoinedTimestamp": datetime(2023, 1, 1, 12, 30, 0, 123456, tzinfo=timezone.utc),
        },
        {
            "Id": "098765432109",
            "Arn": "arn:aws:organizations::123456789012:account/o-1234567890/098765432109",
            "Email": "dev@company.com",
            "Name": "Development",
            "Status": "ACTIVE",
            "JoinedMethod": "INVITED",
            "JoinedTimestamp": datetime(2023, 1, 2, 0, 0, 0, tzinfo=timezone.utc),
        },
        {
            "Id": "112233445566",
            "Arn": "arn:aws:organizations::123456789012:account/o-1234567890/112233445566",
            "Email": "staging@company.com",
            "Name": "Staging",
            "Status": "SUSPENDED",
            "JoinedMethod": "INVITED",
        },
    ]


@pytest.fixture
def sample_records():
    """A mixed set of cached records, in cache order."""
    return [
        AccountRecord.from_extended_row(
            "300000000000", "arn:c", "Carol@example.com", "carol", "ACTIVE", "INVITED",
            "2023-03-01T00:00:00.000000+00:00",
        ),
        AccountRecord.from_extended_row(
            "100000000000", "arn:a", "alice@example.com", "Alice", "SUSPENDED", "CREATED",
            "2023-01-01T00:00:00.000000+00:00",
        ),
        AccountRecord.from_extended_row(
            "200000000000", "arn:b", "bob@example.com", "bob", "ACTIVE", "CREATED",
            "2023-02-01T00:00:00.000000+00:00",
        ),
    ]
