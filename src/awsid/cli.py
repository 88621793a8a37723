#!/usr/bin/env python3
"""
awsid - AWS account ID lookup

A CLI tool to get an AWS account ID from its alias name.
"""
import typer

from .commands import lookup

app = typer.Typer(
    help="Get AWS account IDs from account alias names using a locally cached account list.",
    add_completion=False,
)

# A single command, so it runs as "awsid [ALIAS]" without a subcommand name.
app.command()(lookup.lookup)


if __name__ == "__main__":
    app()
