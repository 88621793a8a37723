"""Common command infrastructure for awsid CLI commands.

This module provides shared functionality for the CLI:
- Standard profile, region and verbose options
- Consistent error reporting on stderr
"""

from typing import Any

import typer
from rich.console import Console

from .. import __version__
from ..errors import AccountLookupError, AccountNotFoundError

# Shared instance
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def profile_option() -> Any:
    """
    Create a standardized --profile option for commands.

    Returns:
        Typer option for AWS profile selection
    """
    return typer.Option(
        None, "--profile", "-p", help="AWS profile to use (uses default profile if not specified)"
    )


def region_option() -> Any:
    """
    Create a standardized --region option for commands.

    Returns:
        Typer option for AWS region selection
    """
    return typer.Option(
        None, "--region", "-r", help="AWS region to use (uses profile default if not specified)"
    )


def verbose_option() -> Any:
    """Create a verbose option for CLI commands."""
    return typer.Option(False, "--verbose", "-v", help="Show detailed output")


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"awsid version: {__version__}")
        raise typer.Exit()


def version_option() -> Any:
    """Create an eager --version option that prints the version and exits."""
    return typer.Option(
        None,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show the application version and exit.",
    )


def handle_lookup_error(error: AccountLookupError, verbose: bool = False) -> None:
    """
    Report a fatal lookup error on stderr.

    A missing account is reported with its own message; everything else is
    prefixed with "Error:".

    Args:
        error: The error that ended the lookup
        verbose: Whether to show the underlying cause
    """
    if isinstance(error, AccountNotFoundError):
        err_console.print(str(error), markup=False)
    else:
        err_console.print(f"Error: {error}", markup=False)

    if verbose and error.cause is not None:
        err_console.print(f"Caused by: {error.cause!r}", markup=False)
