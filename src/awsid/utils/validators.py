"""Input validation utilities for awsid."""

from typing import Optional

from ..errors import ConfigurationError
from .models import SORT_FIELD_ALIASES, SORT_FIELDS, OutputFormat, SortSpec

# Values accepted by --format. "default" is selected only by giving no flag.
SELECTABLE_FORMATS = (OutputFormat.JSON, OutputFormat.TABLE, OutputFormat.CSV)


def resolve_output_format(
    format_option: Optional[str] = None,
    json_flag: bool = False,
    table_flag: bool = False,
    csv_flag: bool = False,
) -> OutputFormat:
    """
    Resolve the output format from --format and the individual format flags.

    More than one of --json/--table/--csv is always an error. Otherwise a
    non-empty --format wins over the individual flag.

    Args:
        format_option: Value of --format, if given
        json_flag: Whether --json was given
        table_flag: Whether --table was given
        csv_flag: Whether --csv was given

    Returns:
        The selected OutputFormat

    Raises:
        ConfigurationError: If several flags are set or --format is unknown
    """
    flagged = [
        fmt
        for fmt, is_set in (
            (OutputFormat.JSON, json_flag),
            (OutputFormat.TABLE, table_flag),
            (OutputFormat.CSV, csv_flag),
        )
        if is_set
    ]

    if len(flagged) > 1:
        raise ConfigurationError(
            "multiple output format flags specified. Please use only one of --json, --table, --csv"
        )

    if format_option:
        for fmt in SELECTABLE_FORMATS:
            if format_option == fmt.value:
                return fmt
        valid = ", ".join(fmt.value for fmt in SELECTABLE_FORMATS)
        raise ConfigurationError(f"invalid format '{format_option}'. Valid formats are: {valid}")

    if flagged:
        return flagged[0]

    return OutputFormat.DEFAULT


def normalize_sort_field(field_name: str) -> str:
    """Map accepted snake_case spellings onto the canonical sort field name."""
    return SORT_FIELD_ALIASES.get(field_name, field_name)


def resolve_sort_spec(
    sort_field: Optional[str] = None, sort_desc_field: Optional[str] = None
) -> SortSpec:
    """
    Resolve --sort and --sort-desc into a single SortSpec.

    Raises:
        ConfigurationError: If both are given or the field is not sortable
    """
    if sort_field and sort_desc_field:
        raise ConfigurationError("cannot specify both --sort and --sort-desc")

    if sort_field:
        field_name, descending = sort_field, False
    elif sort_desc_field:
        field_name, descending = sort_desc_field, True
    else:
        return SortSpec()

    field_name = normalize_sort_field(field_name)
    if field_name not in SORT_FIELDS:
        raise ConfigurationError(
            f"invalid sort field '{field_name}'. Valid fields are: {', '.join(SORT_FIELDS)}"
        )

    return SortSpec(field=field_name, descending=descending)
