"""Output formatters for account lookup results."""

import csv
import json
from io import StringIO
from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .models import EXTENDED_FIELDS, AccountRecord, OutputFormat

TABLE_HEADERS = (
    "ID",
    "ARN",
    "Email",
    "Name",
    "Status",
    "Joined Method",
    "Joined Timestamp",
)

# Rendering width for tables; wide enough that ARNs and timestamps stay on one line.
TABLE_RENDER_WIDTH = 240

JSON_ROOT_KEY = "account_info"


class OutputFormatError(Exception):
    """Exception raised for output formatting errors."""

    pass


class BaseFormatter:
    """Base class for all output formatters."""

    def format(self, accounts: Sequence[AccountRecord], exact_match: bool = False) -> str:
        """Format a list of accounts. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement format method")


class JSONFormatter(BaseFormatter):
    """Formatter for JSON output wrapped in an ``account_info`` array."""

    def format(self, accounts: Sequence[AccountRecord], exact_match: bool = False) -> str:
        data = {JSON_ROOT_KEY: [account.to_dict() for account in accounts]}
        return json.dumps(data, indent=4)


class TableFormatter(BaseFormatter):
    """Formatter for a bordered table with one row per account."""

    def format(self, accounts: Sequence[AccountRecord], exact_match: bool = False) -> str:
        table = Table(box=box.ASCII, show_lines=True)
        for header in TABLE_HEADERS:
            table.add_column(header, overflow="fold")

        for account in accounts:
            table.add_row(*(Text(value) for value in account.to_cache_row()))

        buffer = StringIO()
        console = Console(
            file=buffer,
            width=TABLE_RENDER_WIDTH,
            force_terminal=False,
            color_system=None,
            highlight=False,
        )
        console.print(table)
        return buffer.getvalue().rstrip("\n")


class CSVFormatter(BaseFormatter):
    """Formatter for CSV output with a snake_case header row."""

    def format(self, accounts: Sequence[AccountRecord], exact_match: bool = False) -> str:
        output = StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(EXTENDED_FIELDS)
        for account in accounts:
            writer.writerow(account.to_cache_row())
        return output.getvalue().rstrip("\n")


class DefaultFormatter(BaseFormatter):
    """Bare account ID for an exact match, otherwise one labeled line per account."""

    def format(self, accounts: Sequence[AccountRecord], exact_match: bool = False) -> str:
        if exact_match and len(accounts) == 1:
            return accounts[0].account_id

        lines = [
            f"ID: {a.id} | ARN: {a.arn} | Email: {a.email} | Name: {a.name} | "
            f"Status: {a.status} | Method: {a.joined_method} | Joined: {a.joined_timestamp}"
            for a in accounts
        ]
        return "\n".join(lines)


class OutputFormatterFactory:
    """Factory class for creating output formatters."""

    _formatters = {
        OutputFormat.JSON: JSONFormatter,
        OutputFormat.TABLE: TableFormatter,
        OutputFormat.CSV: CSVFormatter,
        OutputFormat.DEFAULT: DefaultFormatter,
    }

    @classmethod
    def create_formatter(cls, format_type: OutputFormat) -> BaseFormatter:
        """Create a formatter instance for the specified format type."""
        if format_type not in cls._formatters:
            raise OutputFormatError(f"Unsupported output format: {format_type}")

        formatter_class = cls._formatters[format_type]
        return formatter_class()


def render_accounts(
    accounts: Sequence[AccountRecord], format_type: OutputFormat, exact_match: bool = False
) -> str:
    """
    Render accounts in the requested format.

    Args:
        accounts: Accounts to render, already filtered and sorted
        format_type: The desired output format
        exact_match: Whether the accounts are the result of an exact alias match

    Returns:
        The rendered text, without a trailing newline

    Raises:
        OutputFormatError: If the format is unsupported
    """
    formatter = OutputFormatterFactory.create_formatter(format_type)
    return formatter.format(accounts, exact_match=exact_match)
