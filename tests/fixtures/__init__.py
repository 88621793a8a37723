"""Shared test fixtures for awsid tests."""
