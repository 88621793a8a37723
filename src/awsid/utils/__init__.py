"""Utility modules for awsid."""
