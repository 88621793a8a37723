"""Account alias lookup command for awsid."""

import logging
from typing import List, Optional, Tuple

import typer

from .. import __version__
from ..aws_clients.manager import AWSClientManager, OrganizationsAccountDirectory
from ..cache.account_cache import read_account_cache, refresh_account_cache
from ..errors import AccountLookupError, AccountNotFoundError, RemoteListingError
from ..utils.account_filter import search_accounts, sort_accounts
from ..utils.config import Config, LookupSettings
from ..utils.logging_config import LoggingConfig, setup_logging
from ..utils.models import AccountRecord
from ..utils.output_formatters import render_accounts
from ..utils.validators import resolve_output_format, resolve_sort_spec
from .common import (
    handle_lookup_error,
    profile_option,
    region_option,
    verbose_option,
    version_option,
)

logger = logging.getLogger(__name__)


def refresh_cache(settings: LookupSettings) -> None:
    """
    Try to rebuild the account cache from AWS Organizations.

    Any failure is logged as a warning and the existing cache is used as is.
    """
    try:
        try:
            client_manager = AWSClientManager(profile=settings.profile, region=settings.region)
        except Exception as e:
            raise RemoteListingError(f"Cannot create AWS session: {e}", cause=e)
        directory = OrganizationsAccountDirectory(client_manager)
        refresh_account_cache(settings.cache_path, directory)
    except AccountLookupError as e:
        logger.warning(f"Could not refresh account cache, using cached data: {e}")


def select_accounts(
    records: List[AccountRecord], term: Optional[str]
) -> Tuple[List[AccountRecord], bool]:
    """
    Pick the accounts to show for a search term, or all of them without one.

    Raises:
        AccountNotFoundError: If a term is given and nothing matches
    """
    if not term:
        return list(records), False

    matches, exact_match = search_accounts(records, term)
    if not matches:
        raise AccountNotFoundError(term)
    return matches, exact_match


def lookup(
    alias_name: Optional[str] = typer.Argument(
        None, help="Account alias (or part of it) to look up; lists all accounts if omitted"
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: json, table, csv"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
    table_output: bool = typer.Option(False, "--table", help="Output as a table"),
    csv_output: bool = typer.Option(False, "--csv", help="Output in CSV format"),
    sort: Optional[str] = typer.Option(
        None,
        "--sort",
        help="Sort ascending by field: id, name, email, status, joinedMethod, joinedTimestamp",
    ),
    sort_desc: Optional[str] = typer.Option(
        None, "--sort-desc", help="Sort descending by field (same fields as --sort)"
    ),
    cache_file: Optional[str] = typer.Option(
        None, "--cache-file", help="Path of the account cache (default: ~/.aws/account_info)"
    ),
    profile: Optional[str] = profile_option(),
    region: Optional[str] = region_option(),
    verbose: bool = verbose_option(),
    version: Optional[bool] = version_option(),
):
    """Get the AWS account ID for an account alias.

    The local account cache is refreshed from AWS Organizations first. If the
    refresh fails the existing cache is used. An exact alias match prints only
    the account ID; otherwise every account containing the alias is listed.
    """
    settings = Config().build_settings(
        profile=profile, region=region, cache_file=cache_file, version=__version__
    )
    setup_logging(LoggingConfig.from_level_name(settings.log_level, verbose=verbose))
    logger.debug(f"awsid {settings.version} using account cache {settings.cache_path}")

    try:
        format_type = resolve_output_format(output_format, json_output, table_output, csv_output)
        sort_spec = resolve_sort_spec(sort, sort_desc)

        refresh_cache(settings)
        records = read_account_cache(settings.cache_path)

        accounts, exact_match = select_accounts(records, alias_name)
        sort_accounts(accounts, sort_spec)

        content = render_accounts(accounts, format_type, exact_match=exact_match)
    except AccountLookupError as e:
        handle_lookup_error(e, verbose=verbose)
        raise typer.Exit(1)

    if content:
        typer.echo(content)
