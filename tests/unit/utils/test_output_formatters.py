"""Tests for account output formatters."""

import csv
import json
from io import StringIO

import pytest

from awsid.utils.models import AccountRecord, OutputFormat
from awsid.utils.output_formatters import (
    CSVFormatter,
    DefaultFormatter,
    JSONFormatter,
    OutputFormatError,
    OutputFormatterFactory,
    TableFormatter,
    render_accounts,
)

from tests.fixtures.accounts import sample_records  # noqa: F401


@pytest.fixture
def team_records():
    return [
        AccountRecord.from_extended_row(
            "333333333333", "arn:a", "team-a@example.com", "team-a", "ACTIVE", "CREATED", "t1"
        ),
        AccountRecord.from_extended_row(
            "444444444444", "arn:b", "dev@example.com", "team-a-dev", "ACTIVE", "INVITED", "t2"
        ),
    ]


class TestJSONFormatter:
    def test_wraps_accounts(self, team_records):
        data = json.loads(JSONFormatter().format(team_records))

        assert list(data.keys()) == ["account_info"]
        assert [a["id"] for a in data["account_info"]] == ["333333333333", "444444444444"]
        assert data["account_info"][1]["joined_method"] == "INVITED"

    def test_legacy_record_has_empty_extended_fields(self):
        output = JSONFormatter().format([AccountRecord.from_legacy_row("alice", "111111111111")])
        account = json.loads(output)["account_info"][0]

        assert account == {
            "id": "111111111111",
            "arn": "",
            "email": "",
            "name": "alice",
            "status": "",
            "joined_method": "",
            "joined_timestamp": "",
            "alias_name": "alice",
            "account_id": "111111111111",
        }

    def test_pretty_printed(self, team_records):
        output = JSONFormatter().format(team_records)

        assert output.startswith('{\n    "account_info": [')

    def test_empty(self):
        assert json.loads(JSONFormatter().format([])) == {"account_info": []}


class TestTableFormatter:
    def test_headers_and_rows(self, team_records):
        output = TableFormatter().format(team_records)

        for header in ("ID", "ARN", "Email", "Name", "Status", "Joined Method", "Joined Timestamp"):
            assert header in output
        assert "team-a-dev" in output
        assert output.index("333333333333") < output.index("444444444444")

    def test_bordered(self, team_records):
        lines = TableFormatter().format(team_records).splitlines()

        assert lines[0].startswith("+")
        assert lines[-1].startswith("+")

    def test_values_are_not_styled(self):
        record = AccountRecord.from_legacy_row("[bold]x[/bold]", "1")

        assert "[bold]x[/bold]" in TableFormatter().format([record])


class TestCSVFormatter:
    def test_header_and_rows(self, team_records):
        output = CSVFormatter().format(team_records)
        rows = list(csv.reader(StringIO(output)))

        assert rows[0] == [
            "id",
            "arn",
            "email",
            "name",
            "status",
            "joined_method",
            "joined_timestamp",
        ]
        assert [row[3] for row in rows[1:]] == ["team-a", "team-a-dev"]

    def test_quotes_embedded_delimiters(self):
        record = AccountRecord.from_extended_row("1", "", "", "a,b", "", "", "")

        output = CSVFormatter().format([record])

        assert output.splitlines()[1] == '1,,,"a,b",,,'


class TestDefaultFormatter:
    def test_exact_match_prints_bare_id(self):
        record = AccountRecord.from_legacy_row("alice", "111111111111")

        assert DefaultFormatter().format([record], exact_match=True) == "111111111111"

    def test_partial_matches_are_itemized(self, team_records):
        output = DefaultFormatter().format(team_records)

        assert output.splitlines() == [
            "ID: 333333333333 | ARN: arn:a | Email: team-a@example.com | Name: team-a | "
            "Status: ACTIVE | Method: CREATED | Joined: t1",
            "ID: 444444444444 | ARN: arn:b | Email: dev@example.com | Name: team-a-dev | "
            "Status: ACTIVE | Method: INVITED | Joined: t2",
        ]

    def test_single_non_exact_result_is_itemized(self, team_records):
        output = DefaultFormatter().format(team_records[:1], exact_match=False)

        assert output.startswith("ID: 333333333333 |")


class TestRenderAccounts:
    @pytest.mark.parametrize("format_type", list(OutputFormat))
    def test_every_format_supported(self, sample_records, format_type):
        assert render_accounts(sample_records, format_type)

    def test_factory_rejects_unknown(self):
        with pytest.raises(OutputFormatError):
            OutputFormatterFactory.create_formatter("xml")

    def test_csv_scenario(self, team_records):
        output = render_accounts(team_records, OutputFormat.CSV)

        assert len(output.splitlines()) == 3
