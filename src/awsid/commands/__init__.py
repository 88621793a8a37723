"""Command implementations for the awsid CLI."""
